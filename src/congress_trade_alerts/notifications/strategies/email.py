# -*- coding: utf-8 -*-
"""Email notification strategy (Resend API, POST /emails)."""

from __future__ import annotations

import structlog
from typing import Any, Callable, Optional, TYPE_CHECKING

from congress_trade_alerts.exceptions import HttpRequestError
from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.notifications.types import NotificationMessage
from congress_trade_alerts.notifications.strategies.base import BaseNotificationStrategy
from congress_trade_alerts.utils.validation import mask_email, payload_preview

if TYPE_CHECKING:
    from congress_trade_alerts.clients.http import AsyncHttpClient
    from congress_trade_alerts.config.config import Settings


class EmailNotifier(BaseNotificationStrategy):
    """Send one email per notification. No retry: a rejected send is reported as a failure."""

    channel = "email"

    def __init__(
        self,
        settings: "Settings",
        http_client: "AsyncHttpClient",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._http = http_client

        cfg = self.settings.email
        if not cfg.is_configured:
            raise ValueError("EmailNotifier requires api_key and recipient.")

        self.api_key: str = str(cfg.api_key).strip()
        self.recipient: str = str(cfg.recipient).strip()
        self.sender: str = cfg.sender
        self.endpoint: str = f"{cfg.api_base.rstrip('/')}/emails"
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        if self._running:
            self._logger.warning("email_already_running")
            return
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send_notification(self, message: NotificationMessage) -> Result[None]:
        if not self._running:
            self._logger.warning("email_not_running_cannot_send")
            return Result.failure(ErrorKind.NOTIFIER_FAILURE, "email notifier not initialized")

        body = {
            "from": self.sender,
            "to": self.recipient,
            "subject": message.title or message.event_type,
            "text": message.message,
        }
        try:
            response = await self._http.post(
                self.endpoint,
                json=body,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except HttpRequestError as exc:
            self._logger.error(
                "email_send_failed",
                error_type=type(exc.cause).__name__ if exc.cause else type(exc).__name__,
                error_message=str(exc),
            )
            return Result.failure(ErrorKind.NOTIFIER_FAILURE, str(exc))

        if not response.is_success:
            self._logger.error(
                "email_rejected",
                http_status_code=response.status,
                payload_preview=payload_preview(response.text),
            )
            return Result.failure(
                ErrorKind.NOTIFIER_FAILURE,
                f"Email failed: {response.status} - {payload_preview(response.text)}",
            )

        self._logger.info(
            "email_sent",
            email_recipient_masked=mask_email(self.recipient),
            email_subject=body["subject"],
        )
        return Result.success()
