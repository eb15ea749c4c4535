"""Fallback chain over trade sources."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

from congress_trade_alerts.models.result import ErrorKind
from congress_trade_alerts.services.normalization.rules import normalize_trade
from congress_trade_alerts.sources.base import ITradeSource
from congress_trade_alerts.sources.schema import RawRecord


@dataclass(frozen=True)
class FetchOutcome:
    """Records from the first source with an eligible trade, plus per-source failures."""

    records: list[RawRecord]
    source_name: str | None = None
    """Source that produced the records; None when every source was exhausted."""
    failures: dict[str, ErrorKind] = field(default_factory=dict)


class TradeFetcher:
    """Tries each source in order.

    The first well-formed batch holding at least one eligible record wins. A
    batch whose rows all fail normalization (e.g. an HTML page whose first
    table is navigation) falls through like an empty one.
    """

    def __init__(
        self,
        sources: Sequence[ITradeSource],
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            sources: Sources in priority order (primary first).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._sources = list(sources)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def fetch(self) -> FetchOutcome:
        """Fetch from the chain. Exhaustion yields an empty outcome, never an error."""
        failures: dict[str, ErrorKind] = {}
        for source in self._sources:
            result = await source.fetch()
            if not result.ok:
                failures[source.name] = result.error or ErrorKind.SOURCE_UNAVAILABLE
                self._logger.info(
                    "fetch_source_failed_trying_next",
                    source_name=source.name,
                    error_kind=str(result.error),
                    error_message=result.message,
                )
                continue
            records = result.value or []
            if not records:
                self._logger.info("fetch_source_empty_trying_next", source_name=source.name)
                continue
            if not any(normalize_trade(r) is not None for r in records):
                self._logger.info(
                    "fetch_source_no_eligible_trying_next",
                    source_name=source.name,
                    source_records=len(records),
                )
                continue
            self._logger.info(
                "fetch_source_selected",
                source_name=source.name,
                source_records=len(records),
                sources_failed=len(failures),
            )
            return FetchOutcome(records=records, source_name=source.name, failures=failures)

        self._logger.warning(
            "fetch_sources_exhausted",
            sources_tried=len(self._sources),
            failures={name: str(kind) for name, kind in failures.items()},
        )
        return FetchOutcome(records=[], failures=failures)
