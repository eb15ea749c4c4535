"""Exceptions subpackage."""

from congress_trade_alerts.exceptions.exceptions import (
    CongressAlertsError,
    HttpRequestError,
)

__all__ = [
    "CongressAlertsError",
    "HttpRequestError",
]
