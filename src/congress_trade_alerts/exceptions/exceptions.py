"""Custom exceptions for trade sources, store and notification clients."""

from __future__ import annotations


class CongressAlertsError(Exception):
    """Base exception for congress-trade-alerts errors."""

    pass


class HttpRequestError(CongressAlertsError):
    """Raised when an outbound HTTP request fails at the network level (connect, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause
