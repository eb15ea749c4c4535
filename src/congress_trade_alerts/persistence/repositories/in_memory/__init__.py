# -*- coding: utf-8 -*-
"""In-memory repository implementations."""

from congress_trade_alerts.persistence.repositories.in_memory.seen_trade_repository import (
    InMemorySeenTradeRepository,
)

__all__ = ["InMemorySeenTradeRepository"]
