"""Notification message types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class NotificationMessage:
    """Message to be sent via one or more notification channels."""

    event_type: str
    message: str
    """Plain-text body."""
    title: str | None = None
    """Subject line for channels that have one."""
    payload: dict[str, Any] | None = None


class NotificationStyler(Protocol):
    """Render a message into a formatted string for delivery."""

    def render(self, message: NotificationMessage) -> str:
        """Return the message formatted as a single block of text."""
        ...
