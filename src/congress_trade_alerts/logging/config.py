# -*- coding: utf-8 -*-
"""Logging for one run: structlog events rendered by stdlib handlers.

stderr gets ConsoleRenderer output, or JSON when LOGGING__JSON_FORMAT is set.
LOGGING__FILE_PATH adds a second handler that appends JSON lines regardless
of the console format. Records from third-party stdlib loggers (aiohttp, ...)
go through the same formatters.
"""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any
from structlog.types import EventDict, Processor
from pathlib import Path

from congress_trade_alerts.config import Settings, get_settings

LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}


def _run_context_processor(settings: Settings) -> Processor:
    app_settings = settings.app

    def _add_run_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app_name"] = app_settings.app_name
        event_dict["environment"] = app_settings.environment
        return event_dict

    return _add_run_context


def _formatter(pre_chain: list[Processor], *final: Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib handlers, structlog and (optionally) Logfire."""
    settings = settings or get_settings()
    app_settings = settings.app
    logging_settings = settings.logging

    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _run_context_processor(settings),
    ]

    console_handler = logging.StreamHandler()
    if logging_settings.json_format:
        console_handler.setFormatter(
            _formatter(shared, structlog.processors.format_exc_info, structlog.processors.JSONRenderer())
        )
    else:
        console_handler.setFormatter(_formatter(shared, structlog.dev.ConsoleRenderer()))
    handlers: list[logging.Handler] = [console_handler]

    if logging_settings.file_path:
        log_file_path = Path(logging_settings.file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(
            _formatter(shared, structlog.processors.format_exc_info, structlog.processors.JSONRenderer())
        )
        handlers.append(file_handler)

    logging.basicConfig(level=logging_settings.level, handlers=handlers, force=True)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        *shared,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    # Runs once per event, before the per-handler formatters.
    if logging_settings.logfire_enabled:
        logfire.configure(
            token=logging_settings.logfire_token,
            service_name=app_settings.service_name or app_settings.app_name,
            service_version=app_settings.service_version,
            min_level=LOG_LEVEL_TO_LOGFIRE[logging_settings.level],  # type: ignore[arg-type]
            environment=app_settings.environment,
        )
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    processors.append(structlog.stdlib.ProcessorFormatter.wrap_for_formatter)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
