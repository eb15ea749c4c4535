"""Notification service: one digest per batch, dispatched to every configured channel."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.models.trade import CanonicalTrade
from congress_trade_alerts.notifications.strategies import BaseNotificationStrategy
from congress_trade_alerts.notifications.stylers.digest_styler import DigestStyler


@dataclass
class NotificationService:
    """Render a digest for a batch of trades and send it through all notifiers.

    Sending is awaited in-line: the caller learns whether delivery succeeded.
    """

    notifiers: list[BaseNotificationStrategy]
    styler: DigestStyler
    get_logger: Callable[[str], Any] = field(default=structlog.get_logger)
    _logger: Any = field(init=False)
    _initialized: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self._logger = self.get_logger("NotificationService")

    async def initialize(self) -> None:
        """Initialize all notifiers."""
        self._logger.debug(
            "notification_init_started",
            notification_notifiers_count=len(self.notifiers),
            notification_channels=[n.channel for n in self.notifiers],
        )
        for notifier in self.notifiers:
            await notifier.initialize()
        self._initialized = True

    async def shutdown(self) -> None:
        """Shutdown all notifiers."""
        for notifier in self.notifiers:
            await notifier.shutdown()
        self._initialized = False
        self._logger.debug("notification_shutdown_complete")

    async def notify(self, trades: Sequence[CanonicalTrade]) -> Result[None]:
        """Send one digest covering every trade in the batch.

        Returns:
            Success if every channel accepted the digest, otherwise
            NOTIFIER_FAILURE naming the failed channels.
        """
        if not self._initialized:
            raise RuntimeError("NotificationService not initialized")
        if not trades:
            return Result.success()

        message = self.styler.digest(trades)
        self._logger.debug(
            "notification_dispatch",
            notification_event_type=message.event_type,
            notification_trade_count=len(trades),
            notification_notifiers_count=len(self.notifiers),
        )

        failures: list[str] = []
        for notifier in self.notifiers:
            result = await notifier.send_notification(message)
            if not result.ok:
                failures.append(f"{notifier.channel}: {result.message or result.error}")

        if failures:
            return Result.failure(ErrorKind.NOTIFIER_FAILURE, "; ".join(failures))
        return Result.success()
