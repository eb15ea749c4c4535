# -*- coding: utf-8 -*-
"""Seen trade repository used when no store is configured."""

from __future__ import annotations

from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.models.seen_trade import SeenTrade
from congress_trade_alerts.persistence.repositories.interfaces.seen_trade_repository import (
    ISeenTradeRepository,
)

_MESSAGE = "seen-trade store is not configured"


class NullSeenTradeRepository(ISeenTradeRepository):
    """Every call reports NOT_CONFIGURED: nothing is ever seen, nothing is stored."""

    @property
    def is_configured(self) -> bool:
        return False

    async def exists(self, identity: str) -> Result[bool]:
        return Result.failure(ErrorKind.NOT_CONFIGURED, _MESSAGE)

    async def record(self, seen_trade: SeenTrade) -> Result[None]:
        return Result.failure(ErrorKind.NOT_CONFIGURED, _MESSAGE)
