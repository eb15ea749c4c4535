"""Notification strategies."""

from congress_trade_alerts.notifications.strategies.base import (
    BaseNotificationStrategy,
)
from congress_trade_alerts.notifications.strategies.console import ConsoleNotifier
from congress_trade_alerts.notifications.strategies.email import EmailNotifier

__all__ = [
    "BaseNotificationStrategy",
    "ConsoleNotifier",
    "EmailNotifier",
]
