# -*- coding: utf-8 -*-
"""Domain models."""

from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.models.seen_trade import SeenTrade
from congress_trade_alerts.models.trade import UNKNOWN_AMOUNT, CanonicalTrade

__all__ = [
    "CanonicalTrade",
    "ErrorKind",
    "Result",
    "SeenTrade",
    "UNKNOWN_AMOUNT",
]
