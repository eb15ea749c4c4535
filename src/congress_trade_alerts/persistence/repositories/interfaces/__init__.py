# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/, rest/, null/."""

from congress_trade_alerts.persistence.repositories.interfaces.seen_trade_repository import (
    ISeenTradeRepository,
)

__all__ = ["ISeenTradeRepository"]
