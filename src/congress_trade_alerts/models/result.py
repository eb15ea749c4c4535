"""Result type returned by every boundary call (source, store, notifier).

Boundary failures that the run is allowed to absorb are returned as values
tagged with an ErrorKind instead of being raised; the reconciler matches on the
kind to pick the fallback. Anything unexpected is still raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Failure categories a run degrades through instead of aborting."""

    SOURCE_UNAVAILABLE = "source_unavailable"
    """Network or HTTP failure fetching trades."""
    PARSE_FAILURE = "parse_failure"
    """Payload did not match any expected shape."""
    STORE_UNAVAILABLE = "store_unavailable"
    """Seen-trade store unreachable."""
    STORE_ERROR = "store_error"
    """Store answered with an error status or malformed body."""
    NOTIFIER_FAILURE = "notifier_failure"
    """Notification channel rejected or errored."""
    NOT_CONFIGURED = "not_configured"
    """Optional collaborator has no configuration."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an (ErrorKind, message) pair."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str | None = None) -> Result[T]:
        return cls(error=error, message=message)
