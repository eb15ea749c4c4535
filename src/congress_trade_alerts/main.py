# -*- coding: utf-8 -*-
"""
Entry point for one congressional-trade alert run.

Orchestrates: settings, logging, container, notifier lifecycle, one reconciler run, cleanup.
Meant to be triggered by a scheduler (cron, CI workflow); each invocation is a single run.

Run with: python -m congress_trade_alerts.main
      or: congress-trade-alerts

Exit status: 0 when the run completes (including "no new trades" and "nothing
configured"), 1 when an unexpected error aborts it.

Notebook usage:
    from congress_trade_alerts.main import run
    report = await run()
"""
from __future__ import annotations

import asyncio
import sys
import structlog
from dependency_injector import providers

from congress_trade_alerts.DI import Container
from congress_trade_alerts.config import Settings, get_settings
from congress_trade_alerts.logging.config import configure_logging
from congress_trade_alerts.services.reconciler import RunReport
from congress_trade_alerts.utils import mask_email

EXIT_OK = 0
EXIT_FAILURE = 1


async def run(settings: Settings | None = None) -> RunReport:
    settings = settings or get_settings()
    configure_logging(settings)
    logger = structlog.get_logger("main")

    container = Container()
    container.config.override(providers.Object(settings))
    http_client = container.http_client()
    notification_service = container.notification_service()
    reconciler = container.dedup_reconciler()

    logger.info(
        "main_run_starting",
        sources=[s.name for s in container.trade_sources()],
        store_configured=settings.store.is_configured,
        email_configured=settings.email.is_configured,
        email_recipient_masked=mask_email(settings.email.recipient),
    )

    await notification_service.initialize()
    try:
        return await reconciler.run()
    finally:
        await notification_service.shutdown()
        await http_client.aclose()


def main() -> int:
    try:
        asyncio.run(run())
    except Exception as e:
        structlog.get_logger("main").exception(
            "main_run_failed",
            error_type=type(e).__name__,
            error_message=str(e),
        )
        return EXIT_FAILURE
    return EXIT_OK


__all__ = ["run", "main", "EXIT_OK", "EXIT_FAILURE"]

if __name__ == "__main__":
    sys.exit(main())
