"""Persistence layer (repositories)."""

from congress_trade_alerts.persistence.repositories import (
    InMemorySeenTradeRepository,
    ISeenTradeRepository,
    NullSeenTradeRepository,
    RestSeenTradeRepository,
)

__all__ = [
    "ISeenTradeRepository",
    "InMemorySeenTradeRepository",
    "NullSeenTradeRepository",
    "RestSeenTradeRepository",
]
