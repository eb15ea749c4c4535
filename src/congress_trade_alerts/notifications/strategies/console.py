# -*- coding: utf-8 -*-
"""Console notifier (print-based)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from congress_trade_alerts.models.result import Result
from congress_trade_alerts.notifications.types import NotificationMessage
from congress_trade_alerts.notifications.strategies.base import BaseNotificationStrategy

if TYPE_CHECKING:  # pragma: no cover
    from congress_trade_alerts.config import Settings
    from congress_trade_alerts.notifications.types import NotificationStyler


class ConsoleNotifier(BaseNotificationStrategy):
    """Print notifications to stdout. Used when email is not configured."""

    channel = "console"

    def __init__(
        self,
        settings: "Settings",
        styler: "NotificationStyler",
    ) -> None:
        super().__init__(settings)
        self._running = False
        self._styler = styler

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send_notification(self, message: NotificationMessage) -> Result[None]:
        """Print the rendered message."""
        if not self.is_running:
            return Result.success()
        body = self._styler.render(message) if self._styler else message.message
        print(body)
        return Result.success()
