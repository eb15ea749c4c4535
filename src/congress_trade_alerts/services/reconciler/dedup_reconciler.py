"""Dedup reconciler: fetch -> identify -> filter seen -> notify once -> persist.

Ordering and failure policy of one run:

- store and source failures degrade; only unexpected errors propagate.
- an `exists` failure counts as "not seen".
- the notifier is called at most once, with the whole new batch.
- persistence is attempted for every new trade whatever the notifier returned.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from congress_trade_alerts.models.result import ErrorKind
from congress_trade_alerts.models.seen_trade import SeenTrade
from congress_trade_alerts.models.trade import CanonicalTrade
from congress_trade_alerts.services.normalization.rules import normalize_trade
from congress_trade_alerts.utils.dedupe import trade_identity

if TYPE_CHECKING:
    from congress_trade_alerts.notifications.notification_manager import NotificationService
    from congress_trade_alerts.persistence.repositories.interfaces.seen_trade_repository import (
        ISeenTradeRepository,
    )
    from congress_trade_alerts.services.fetching.trade_fetcher import TradeFetcher


@dataclass(frozen=True)
class IdentifiedTrade:
    """A canonical trade with its identity."""

    identity: str
    trade: CanonicalTrade


@dataclass(frozen=True)
class RunReport:
    """What one run did."""

    source_name: str | None = None
    fetched: int = 0
    eligible: int = 0
    new: int = 0
    notified: bool = False
    """Whether the notifier was invoked."""
    notify_ok: bool | None = None
    """Notifier outcome; None when it was not invoked."""
    persisted: int = 0
    persist_failures: int = 0
    new_trades: tuple[CanonicalTrade, ...] = field(default_factory=tuple)


class DedupReconciler:
    """Runs one fetch/notify/persist cycle against the seen-trade store."""

    def __init__(
        self,
        fetcher: TradeFetcher,
        seen_trade_repository: ISeenTradeRepository,
        notification_service: NotificationService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the reconciler.

        Args:
            fetcher: Fallback chain over trade sources (injected).
            seen_trade_repository: Store of notified identities (injected).
            notification_service: Digest notifier (injected, initialized by the caller).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._fetcher = fetcher
        self._seen_repo = seen_trade_repository
        self._notifier = notification_service
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def run(self) -> RunReport:
        """Execute one run. Raises only on unexpected errors."""
        with bound_contextvars(run_id=uuid.uuid4().hex[:12]):
            self._logger.info(
                "reconciler_run_started",
                store_configured=self._seen_repo.is_configured,
            )

            outcome = await self._fetcher.fetch()
            candidates = self.identify(outcome.records, source=outcome.source_name or "")
            new_trades = await self._filter_unseen(candidates)

            report = RunReport(
                source_name=outcome.source_name,
                fetched=len(outcome.records),
                eligible=len(candidates),
                new=len(new_trades),
            )
            if not new_trades:
                self._logger.info(
                    "reconciler_no_new_trades",
                    source_name=outcome.source_name,
                    trades_fetched=report.fetched,
                    trades_eligible=report.eligible,
                )
                return report

            self._logger.info("reconciler_new_trades_found", trades_new=len(new_trades))

            notify_result = await self._notifier.notify([c.trade for c in new_trades])
            match notify_result.error:
                case None:
                    self._logger.info("reconciler_digest_sent", trades_new=len(new_trades))
                case ErrorKind.NOTIFIER_FAILURE:
                    self._logger.error(
                        "reconciler_digest_failed",
                        error_message=notify_result.message,
                        trades_new=len(new_trades),
                    )
                case other:
                    self._logger.error(
                        "reconciler_digest_failed",
                        error_kind=str(other),
                        error_message=notify_result.message,
                    )

            persisted, persist_failures = await self._persist(new_trades)

            report = RunReport(
                source_name=outcome.source_name,
                fetched=report.fetched,
                eligible=report.eligible,
                new=report.new,
                notified=True,
                notify_ok=notify_result.ok,
                persisted=persisted,
                persist_failures=persist_failures,
                new_trades=tuple(c.trade for c in new_trades),
            )
            self._logger.info(
                "reconciler_run_completed",
                source_name=report.source_name,
                trades_fetched=report.fetched,
                trades_eligible=report.eligible,
                trades_new=report.new,
                notify_ok=report.notify_ok,
                trades_persisted=report.persisted,
                persist_failures=report.persist_failures,
            )
            return report

    def identify(self, records: list[dict[str, Any]], *, source: str = "") -> list[IdentifiedTrade]:
        """Normalize records and attach identities, in fetch order.

        Ineligible records (no person, ticker or date) are dropped. A second
        record with an identity already in the batch is dropped too.
        """
        identified: list[IdentifiedTrade] = []
        batch_ids: set[str] = set()
        dropped = 0
        duplicates = 0
        for raw in records:
            trade = normalize_trade(raw, source=source)
            if trade is None:
                dropped += 1
                continue
            identity = trade_identity(trade)
            if identity in batch_ids:
                duplicates += 1
                continue
            batch_ids.add(identity)
            identified.append(IdentifiedTrade(identity=identity, trade=trade))
        if dropped or duplicates:
            self._logger.debug(
                "reconciler_records_dropped",
                records_ineligible=dropped,
                records_duplicate_in_batch=duplicates,
            )
        return identified

    async def _filter_unseen(self, candidates: list[IdentifiedTrade]) -> list[IdentifiedTrade]:
        """Sequential exists() per candidate; keep the ones not seen."""
        unseen: list[IdentifiedTrade] = []
        for candidate in candidates:
            result = await self._seen_repo.exists(candidate.identity)
            match result.error:
                case None:
                    if result.value:
                        continue
                case ErrorKind.NOT_CONFIGURED:
                    pass
                case other:
                    self._logger.warning(
                        "reconciler_exists_failed_treating_as_new",
                        trade_id=candidate.identity,
                        error_kind=str(other),
                        error_message=result.message,
                    )
            unseen.append(candidate)
        return unseen

    async def _persist(self, new_trades: list[IdentifiedTrade]) -> tuple[int, int]:
        """Record every new trade, best-effort. Returns (persisted, failures)."""
        persisted = 0
        failures = 0
        for candidate in new_trades:
            result = await self._seen_repo.record(SeenTrade.from_trade(candidate.trade))
            match result.error:
                case None:
                    persisted += 1
                case ErrorKind.NOT_CONFIGURED:
                    pass
                case other:
                    failures += 1
                    self._logger.warning(
                        "reconciler_record_failed",
                        trade_id=candidate.identity,
                        error_kind=str(other),
                        error_message=result.message,
                    )
        if not self._seen_repo.is_configured:
            self._logger.info("reconciler_store_not_configured_nothing_persisted")
        return persisted, failures
