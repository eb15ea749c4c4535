# -*- coding: utf-8 -*-
"""REST (PostgREST) repository implementations."""

from congress_trade_alerts.persistence.repositories.rest.seen_trade_repository import (
    RestSeenTradeRepository,
)

__all__ = ["RestSeenTradeRepository"]
