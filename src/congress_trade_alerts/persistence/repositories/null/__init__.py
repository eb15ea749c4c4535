# -*- coding: utf-8 -*-
"""Unconfigured-store repository."""

from congress_trade_alerts.persistence.repositories.null.seen_trade_repository import (
    NullSeenTradeRepository,
)

__all__ = ["NullSeenTradeRepository"]
