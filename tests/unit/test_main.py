# -*- coding: utf-8 -*-
"""Unit tests for the entry point and container wiring."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from dependency_injector import providers

from congress_trade_alerts import main as main_module
from congress_trade_alerts.config import Settings
from congress_trade_alerts.DI import Container
from congress_trade_alerts.DI.container import source_name_for
from congress_trade_alerts.notifications import ConsoleNotifier, EmailNotifier
from congress_trade_alerts.persistence.repositories.null import NullSeenTradeRepository
from congress_trade_alerts.persistence.repositories.rest import RestSeenTradeRepository
from congress_trade_alerts.services.reconciler import RunReport
from congress_trade_alerts.sources import HtmlTableTradeSource, JsonTradeSource


def _container(settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    return container


def test_main_returns_zero_when_run_completes(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _run(settings: Settings | None = None) -> RunReport:
        return RunReport()

    monkeypatch.setattr(main_module, "run", _run)

    assert main_module.main() == main_module.EXIT_OK


def test_main_returns_one_on_unexpected_error(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _run(settings: Settings | None = None) -> Any:
        raise RuntimeError("boom")

    monkeypatch.setattr(main_module, "run", _run)

    assert main_module.main() == main_module.EXIT_FAILURE


def test_source_name_for_uses_first_host_label() -> None:
    url = "https://senate-stock-watcher-data.s3-us-west-2.amazonaws.com/aggregate/all_transactions.json"
    assert source_name_for(url) == "senate-stock-watcher-data"


def test_container_builds_sources_in_order(settings_factory: Callable[..., Settings]) -> None:
    settings = settings_factory(
        source={"json_urls": "https://a.test/x.json", "html_urls": "https://b.test/trades"}
    )

    sources = _container(settings).trade_sources()

    assert [type(s) for s in sources] == [JsonTradeSource, HtmlTableTradeSource]
    assert [s.name for s in sources] == ["a", "b"]


def test_container_without_credentials_uses_null_store_and_console(
    settings_factory: Callable[..., Settings],
) -> None:
    container = _container(settings_factory())

    assert isinstance(container.seen_trade_repository(), NullSeenTradeRepository)
    notifiers = container.notification_service().notifiers
    assert [type(n) for n in notifiers] == [ConsoleNotifier]


def test_container_with_credentials_uses_rest_store_and_email(settings: Settings) -> None:
    container = _container(settings)

    assert isinstance(container.seen_trade_repository(), RestSeenTradeRepository)
    notifiers = container.notification_service().notifiers
    assert [type(n) for n in notifiers] == [EmailNotifier]
    assert container.dedup_reconciler() is container.dedup_reconciler()
