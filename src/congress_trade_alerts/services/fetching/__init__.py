# -*- coding: utf-8 -*-
"""Trade fetching across a fallback chain of sources."""

from congress_trade_alerts.services.fetching.trade_fetcher import FetchOutcome, TradeFetcher

__all__ = ["FetchOutcome", "TradeFetcher"]
