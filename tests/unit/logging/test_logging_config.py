# -*- coding: utf-8 -*-
"""Unit tests for configure_logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog

from congress_trade_alerts.config import Settings
from congress_trade_alerts.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def _flush() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def _json_lines(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


def test_file_gets_json_while_console_stays_human_readable(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    settings_factory: Callable[..., Settings],
) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(settings_factory(logging={"file_path": str(log_file)}))

    structlog.get_logger("reconciler").info("run_finished", new_trades=2)
    _flush()

    [record] = _json_lines(log_file)
    assert record["event"] == "run_finished"
    assert record["new_trades"] == 2
    assert record["level"] == "info"
    assert record["logger"] == "reconciler"
    assert record["app_name"] == "congress-trade-alerts"
    err = capsys.readouterr().err
    assert "run_finished" in err
    assert not err.lstrip().startswith("{")


def test_json_format_applies_to_console(
    capsys: pytest.CaptureFixture[str],
    settings_factory: Callable[..., Settings],
) -> None:
    configure_logging(settings_factory(logging={"json_format": True}))

    structlog.get_logger("fetcher").warning("fetch_source_failed", source_name="house")
    _flush()

    lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    record = json.loads(lines[-1])
    assert record["event"] == "fetch_source_failed"
    assert record["source_name"] == "house"


def test_level_filters_events_and_stdlib_records_are_rendered(
    tmp_path: Path,
    settings_factory: Callable[..., Settings],
) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(settings_factory(logging={"level": "WARNING", "file_path": str(log_file)}))

    structlog.get_logger("fetcher").info("fetch_source_succeeded")
    logging.getLogger("aiohttp.client").warning("connection pool full")
    _flush()

    records = _json_lines(log_file)
    assert [r["event"] for r in records] == ["connection pool full"]
    assert records[0]["logger"] == "aiohttp.client"
    assert records[0]["level"] == "warning"
