# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from congress_trade_alerts.clients.http import HttpResponse
from congress_trade_alerts.config import Settings
from congress_trade_alerts.models.trade import CanonicalTrade
from congress_trade_alerts.persistence.repositories.in_memory import (
    InMemorySeenTradeRepository,
)

_ENV_PREFIXES = (
    "APP__", "LOGGING__", "STORE__", "EMAIL__", "SOURCE__", "NOTIFICATIONS__", "CONSOLE__", "API__"
)
_LEGACY_ENV = ("YOUR_EMAIL", "RESEND_API_KEY", "SUPABASE_URL", "SUPABASE_KEY")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep credentials from the developer shell out of Settings built in tests."""
    for name in list(os.environ):
        if name.upper().startswith(_ENV_PREFIXES) or name.upper() in _LEGACY_ENV:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings without reading .env; nested sections as dicts."""

    def _build(**overrides: Any) -> Settings:
        return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    """Settings with store and email configured."""
    return settings_factory(
        store={"url": "https://abc.supabase.co", "api_key": "service-key"},
        email={"api_key": "re_test", "recipient": "alerts@example.com"},
    )


@pytest.fixture
def trade_factory() -> Callable[..., CanonicalTrade]:
    """Build CanonicalTrade with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> CanonicalTrade:
        return CanonicalTrade(
            person=overrides.pop("person", "Nancy Pelosi"),
            ticker=overrides.pop("ticker", "NVDA"),
            transaction_type=overrides.pop("transaction_type", "purchase"),
            amount=overrides.pop("amount", "$1,001 - $15,000"),
            date=overrides.pop("date", "2024-01-15"),
            source=overrides.pop("source", ""),
        )

    return _build


@pytest.fixture
def house_record() -> dict[str, Any]:
    """Raw record shaped like the House Stock Watcher feed."""
    return {
        "disclosure_year": 2024,
        "disclosure_date": "01/15/2024",
        "transaction_date": "2024-01-02",
        "owner": "spouse",
        "ticker": "NVDA",
        "asset_description": "NVIDIA Corporation",
        "type": "purchase",
        "amount": "$1,001 - $15,000",
        "representative": "Hon. Nancy Pelosi",
        "district": "CA11",
    }


@pytest.fixture
def senate_record() -> dict[str, Any]:
    """Raw record shaped like the Senate Stock Watcher feed."""
    return {
        "transaction_date": "12/28/2023",
        "owner": "Self",
        "ticker": "MSFT",
        "asset_description": "Microsoft Corp",
        "asset_type": "Stock",
        "type": "Sale (Full)",
        "amount": "$15,001 - $50,000",
        "senator": "Tommy Tuberville",
        "ptr_link": "https://efdsearch.senate.gov/search/view/ptr/abc/",
    }


@pytest.fixture
def seen_repo() -> InMemorySeenTradeRepository:
    """Fresh in-memory seen-trade repository per test."""
    return InMemorySeenTradeRepository()


@pytest.fixture
def response_factory() -> Callable[..., HttpResponse]:
    """Build HttpResponse from a status and raw bytes, text or a JSON body."""

    def _build(
        status: int = 200,
        *,
        content: bytes | None = None,
        text: str | None = None,
        json_body: Any = None,
        url: str = "https://example.test/",
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        if content is None:
            if text is None:
                text = json.dumps(json_body) if json_body is not None else ""
            content = text.encode("utf-8")
        return HttpResponse(url=url, status=status, content=content, headers=headers or {})

    return _build


@pytest.fixture
def fake_http() -> SimpleNamespace:
    """HTTP client double; set get/post return_value or side_effect per test."""
    return SimpleNamespace(get=AsyncMock(), post=AsyncMock(), aclose=AsyncMock())
