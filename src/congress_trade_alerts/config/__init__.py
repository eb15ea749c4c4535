"""Configuration subpackage."""

from congress_trade_alerts.config.config import (
    ApiSettings,
    AppSettings,
    ConsoleNotificationSettings,
    EmailNotificationSettings,
    LoggingSettings,
    NotificationSettings,
    Settings,
    SourceSettings,
    StoreSettings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "ConsoleNotificationSettings",
    "EmailNotificationSettings",
    "LoggingSettings",
    "NotificationSettings",
    "Settings",
    "SourceSettings",
    "StoreSettings",
    "get_settings",
]
