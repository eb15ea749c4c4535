"""HTTP client."""

from congress_trade_alerts.clients.http import AsyncHttpClient, HttpResponse

__all__ = [
    "AsyncHttpClient",
    "HttpResponse",
]
