"""Congressional trade alerts: fetch new disclosures, email a digest, remember what was sent."""

from congress_trade_alerts.clients import AsyncHttpClient
from congress_trade_alerts.config import get_settings
from congress_trade_alerts.DI import Container
from congress_trade_alerts.services import DedupReconciler, RunReport

__version__ = "0.1.0"
__all__ = [
    "AsyncHttpClient",
    "Container",
    "DedupReconciler",
    "RunReport",
    "get_settings",
]
