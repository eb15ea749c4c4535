# -*- coding: utf-8 -*-
"""Base notification strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from congress_trade_alerts.models.result import Result
from congress_trade_alerts.notifications.types import NotificationMessage

if TYPE_CHECKING:  # pragma: no cover
    from congress_trade_alerts.config.config import Settings


class BaseNotificationStrategy(ABC):
    """Abstract base class for notification channels."""

    channel: str = "base"

    def __init__(self, settings: "Settings"):
        """
        Initialize the base strategy.

        Args:
            settings: Global configuration (Settings).
        """
        self.settings = settings

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether the strategy has been initialized and not shut down."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the channel."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Release the channel."""
        pass

    @abstractmethod
    async def send_notification(
        self,
        message: NotificationMessage,
    ) -> Result[None]:
        """
        Send a notification.

        Args:
            message: Message to send.

        Returns:
            Success, or NOTIFIER_FAILURE when the channel rejected or errored.
        """
        pass
