"""Notification subsystem."""

from congress_trade_alerts.notifications.notification_manager import (
    NotificationService,
)
from congress_trade_alerts.notifications.strategies import (
    BaseNotificationStrategy,
    ConsoleNotifier,
    EmailNotifier,
)
from congress_trade_alerts.notifications.stylers import DigestStyler
from congress_trade_alerts.notifications.types import (
    NotificationMessage,
    NotificationStyler,
)

__all__ = [
    "BaseNotificationStrategy",
    "ConsoleNotifier",
    "DigestStyler",
    "EmailNotifier",
    "NotificationMessage",
    "NotificationService",
    "NotificationStyler",
]
