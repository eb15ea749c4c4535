# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (rest, in_memory, null)."""

from congress_trade_alerts.persistence.repositories.interfaces import ISeenTradeRepository
from congress_trade_alerts.persistence.repositories.in_memory import InMemorySeenTradeRepository
from congress_trade_alerts.persistence.repositories.null import NullSeenTradeRepository
from congress_trade_alerts.persistence.repositories.rest import RestSeenTradeRepository

__all__ = [
    "ISeenTradeRepository",
    "InMemorySeenTradeRepository",
    "NullSeenTradeRepository",
    "RestSeenTradeRepository",
]
