"""Notification stylers."""

from congress_trade_alerts.notifications.stylers.digest_styler import (
    DIGEST_EVENT_TYPE,
    DigestStyler,
)

__all__ = ["DIGEST_EVENT_TYPE", "DigestStyler"]
