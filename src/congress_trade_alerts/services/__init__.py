# -*- coding: utf-8 -*-
"""Application services."""

from congress_trade_alerts.services.fetching import FetchOutcome, TradeFetcher
from congress_trade_alerts.services.normalization import normalize_trade
from congress_trade_alerts.services.reconciler import DedupReconciler, RunReport

__all__ = [
    "DedupReconciler",
    "FetchOutcome",
    "RunReport",
    "TradeFetcher",
    "normalize_trade",
]
