# -*- coding: utf-8 -*-
"""In-memory seen trade repository (keyed by trade identity)."""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

from congress_trade_alerts.models.result import Result
from congress_trade_alerts.models.seen_trade import SeenTrade
from congress_trade_alerts.persistence.repositories.interfaces.seen_trade_repository import (
    ISeenTradeRepository,
)


class InMemorySeenTradeRepository(ISeenTradeRepository):
    """Process-local implementation of ISeenTradeRepository."""

    def __init__(self, seen: list[SeenTrade] | None = None) -> None:
        """Initialize the store, optionally pre-seeded."""
        self._store: dict[str, SeenTrade] = {}
        for st in seen or []:
            self._store[st.id.strip()] = st

    async def exists(self, identity: str) -> Result[bool]:
        return Result.success(identity.strip() in self._store)

    async def record(self, seen_trade: SeenTrade) -> Result[None]:
        """Record a trade. Re-recording an identity keeps the first entry."""
        key = seen_trade.id.strip()
        if key not in self._store:
            if seen_trade.seen_at is None:
                seen_trade = replace(seen_trade, seen_at=datetime.now(UTC))
            self._store[key] = seen_trade
        return Result.success()

    def get(self, identity: str) -> SeenTrade | None:
        return self._store.get(identity.strip())

    def __len__(self) -> int:
        return len(self._store)
