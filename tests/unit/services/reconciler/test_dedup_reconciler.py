# -*- coding: utf-8 -*-
"""Unit tests for DedupReconciler run ordering and failure handling."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import AsyncMock

from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.models.seen_trade import SeenTrade
from congress_trade_alerts.persistence.repositories.in_memory import (
    InMemorySeenTradeRepository,
)
from congress_trade_alerts.persistence.repositories.null import NullSeenTradeRepository
from congress_trade_alerts.services.fetching import FetchOutcome
from congress_trade_alerts.services.reconciler import DedupReconciler


def _records() -> list[dict[str, Any]]:
    """Three eligible House-style records, most recent first."""
    return [
        {"representative": "Nancy Pelosi", "ticker": "NVDA", "type": "purchase",
         "amount": "$1,001 - $15,000", "disclosure_date": "2024-01-15"},
        {"representative": "Dan Crenshaw", "ticker": "AAPL", "type": "sale_full",
         "amount": "$15,001 - $50,000", "disclosure_date": "2024-01-14"},
        {"senator": "Tommy Tuberville", "ticker": "MSFT", "type": "Purchase",
         "amount": "$50,001 - $100,000", "transaction_date": "2024-01-10"},
    ]


def _fetcher(records: list[dict[str, Any]], source_name: str | None = "house") -> SimpleNamespace:
    return SimpleNamespace(
        fetch=AsyncMock(return_value=FetchOutcome(records=records, source_name=source_name))
    )


def _notifier(result: Result[None] | None = None) -> SimpleNamespace:
    return SimpleNamespace(notify=AsyncMock(return_value=result or Result.success()))


def _store(
    *,
    exists: Result[bool] | None = None,
    record: Result[None] | None = None,
    configured: bool = True,
) -> SimpleNamespace:
    return SimpleNamespace(
        is_configured=configured,
        exists=AsyncMock(return_value=exists or Result.success(False)),
        record=AsyncMock(return_value=record or Result.success()),
    )


def _reconciler(fetcher: Any, store: Any, notifier: Any) -> DedupReconciler:
    return DedupReconciler(
        fetcher=cast(Any, fetcher),
        seen_trade_repository=cast(Any, store),
        notification_service=cast(Any, notifier),
    )


async def test_all_unseen_notifies_once_and_persists_each() -> None:
    store = _store()
    notifier = _notifier()

    report = await _reconciler(_fetcher(_records()), store, notifier).run()

    notifier.notify.assert_awaited_once()
    sent = notifier.notify.await_args.args[0]
    assert [t.ticker for t in sent] == ["NVDA", "AAPL", "MSFT"]
    assert store.exists.await_count == 3
    assert store.record.await_count == 3
    assert report.new == 3
    assert report.notified is True
    assert report.notify_ok is True
    assert report.persisted == 3


async def test_all_seen_skips_notify_and_persist() -> None:
    store = _store(exists=Result.success(True))
    notifier = _notifier()

    report = await _reconciler(_fetcher(_records()), store, notifier).run()

    notifier.notify.assert_not_called()
    store.record.assert_not_called()
    assert report.fetched == 3
    assert report.new == 0
    assert report.notified is False
    assert report.notify_ok is None


async def test_unconfigured_store_treats_everything_as_new_every_run() -> None:
    store = NullSeenTradeRepository()
    notifier = _notifier()
    reconciler = _reconciler(_fetcher(_records()), store, notifier)

    first = await reconciler.run()
    second = await reconciler.run()

    assert notifier.notify.await_count == 2
    for call in notifier.notify.await_args_list:
        assert len(call.args[0]) == 3
    assert first.new == second.new == 3
    assert first.persisted == 0
    assert first.persist_failures == 0


async def test_malformed_payload_makes_no_store_or_notifier_calls() -> None:
    store = _store()
    notifier = _notifier()

    report = await _reconciler(_fetcher([], source_name=None), store, notifier).run()

    store.exists.assert_not_called()
    store.record.assert_not_called()
    notifier.notify.assert_not_called()
    assert report.source_name is None
    assert report.fetched == 0


async def test_only_unseen_trades_are_notified_and_persisted() -> None:
    records = _records()
    repo = InMemorySeenTradeRepository([
        SeenTrade(id="2024-01-14-Dan Crenshaw-AAPL", politician="Dan Crenshaw",
                  ticker="AAPL", filed_date="2024-01-14"),
    ])
    notifier = _notifier()

    report = await _reconciler(_fetcher(records), repo, notifier).run()

    sent = notifier.notify.await_args.args[0]
    assert [t.ticker for t in sent] == ["NVDA", "MSFT"]
    assert report.new == 2
    assert report.persisted == 2
    assert len(repo) == 3


async def test_exists_failure_counts_as_unseen() -> None:
    store = _store(exists=Result.failure(ErrorKind.STORE_UNAVAILABLE, "timeout"))
    notifier = _notifier()

    report = await _reconciler(_fetcher(_records()), store, notifier).run()

    assert len(notifier.notify.await_args.args[0]) == 3
    assert report.new == 3
    assert store.record.await_count == 3


async def test_notifier_failure_still_persists_every_new_trade() -> None:
    store = _store()
    notifier = _notifier(Result.failure(ErrorKind.NOTIFIER_FAILURE, "Email failed: 500"))

    report = await _reconciler(_fetcher(_records()), store, notifier).run()

    notifier.notify.assert_awaited_once()
    assert store.record.await_count == 3
    assert report.notified is True
    assert report.notify_ok is False
    assert report.persisted == 3


async def test_record_failures_are_counted_not_raised() -> None:
    store = _store(record=Result.failure(ErrorKind.STORE_ERROR, "HTTP 409 from store"))
    notifier = _notifier()

    report = await _reconciler(_fetcher(_records()), store, notifier).run()

    assert store.record.await_count == 3
    assert report.persisted == 0
    assert report.persist_failures == 3


async def test_persisted_rows_use_trade_identity() -> None:
    repo = InMemorySeenTradeRepository()

    await _reconciler(_fetcher(_records()), repo, _notifier()).run()

    assert repo.get("2024-01-15-Nancy Pelosi-NVDA") is not None
    assert repo.get("2024-01-10-Tommy Tuberville-MSFT") is not None


async def test_second_run_against_same_store_is_quiet() -> None:
    repo = InMemorySeenTradeRepository()
    notifier = _notifier()
    reconciler = _reconciler(_fetcher(_records()), repo, notifier)

    await reconciler.run()
    second = await reconciler.run()

    notifier.notify.assert_awaited_once()
    assert second.new == 0


async def test_ineligible_and_duplicate_records_are_dropped() -> None:
    records = _records()
    records.append({"representative": "No Ticker", "ticker": "--", "disclosure_date": "2024-01-09"})
    records.append({**records[0], "amount": "$15,001 - $50,000"})
    store = _store()
    notifier = _notifier()

    report = await _reconciler(_fetcher(records), store, notifier).run()

    assert report.fetched == 5
    assert report.eligible == 3
    assert store.exists.await_count == 3
    assert len(notifier.notify.await_args.args[0]) == 3


def test_identify_attaches_source_and_identity() -> None:
    reconciler = _reconciler(_fetcher([]), _store(), _notifier())

    identified = reconciler.identify(_records()[:1], source="house")

    assert identified[0].identity == "2024-01-15-Nancy Pelosi-NVDA"
    assert identified[0].trade.source == "house"
