"""Abstract interface for seen trade storage (REST store, in-memory, unconfigured)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from congress_trade_alerts.models.result import Result
from congress_trade_alerts.models.seen_trade import SeenTrade


class ISeenTradeRepository(ABC):
    """Interface for the persisted set of notified trade identities.

    Calls return Result instead of raising: a store failure must never halt
    a run, and the caller decides the fallback from the ErrorKind.
    """

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def exists(self, identity: str) -> Result[bool]:
        """Return Result(True) if identity has been recorded."""
        ...

    @abstractmethod
    async def record(self, seen_trade: SeenTrade) -> Result[None]:
        """Record that a trade has been notified. Append-only."""
        ...
