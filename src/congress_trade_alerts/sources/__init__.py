"""Trade source adapters (JSON feeds, HTML tables)."""

from congress_trade_alerts.sources.base import HttpTradeSource, ITradeSource
from congress_trade_alerts.sources.html_source import HtmlTableTradeSource
from congress_trade_alerts.sources.json_source import JsonTradeSource
from congress_trade_alerts.sources.schema import (
    HouseTradeSchema,
    RawRecord,
    SenateTradeSchema,
)

__all__ = [
    "HouseTradeSchema",
    "HtmlTableTradeSource",
    "HttpTradeSource",
    "ITradeSource",
    "JsonTradeSource",
    "RawRecord",
    "SenateTradeSchema",
]
