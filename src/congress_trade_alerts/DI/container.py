# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from urllib.parse import urlparse

from dependency_injector import containers, providers

from congress_trade_alerts.config import Settings, get_settings
from congress_trade_alerts.clients.http import AsyncHttpClient
from congress_trade_alerts.notifications.notification_manager import NotificationService
from congress_trade_alerts.notifications.strategies.base import BaseNotificationStrategy
from congress_trade_alerts.notifications.strategies.console import ConsoleNotifier
from congress_trade_alerts.notifications.strategies.email import EmailNotifier
from congress_trade_alerts.notifications.stylers.digest_styler import DigestStyler
from congress_trade_alerts.persistence.repositories.interfaces import ISeenTradeRepository
from congress_trade_alerts.persistence.repositories.null import NullSeenTradeRepository
from congress_trade_alerts.persistence.repositories.rest import RestSeenTradeRepository
from congress_trade_alerts.services.fetching import TradeFetcher
from congress_trade_alerts.services.reconciler import DedupReconciler
from congress_trade_alerts.sources import HtmlTableTradeSource, ITradeSource, JsonTradeSource


def source_name_for(url: str) -> str:
    """Short source name from a URL host ('house-stock-watcher-data.s3...' -> 'house-stock-watcher-data')."""
    host = urlparse(url).netloc or url
    return host.split(".", 1)[0] or host


def _build_sources(settings: Settings, http_client: AsyncHttpClient) -> list[ITradeSource]:
    """JSON feeds first, then HTML pages, each in configured order."""
    sources: list[ITradeSource] = []
    for url in settings.source.json_urls:
        sources.append(JsonTradeSource(source_name_for(url), url, http_client, settings))
    for url in settings.source.html_urls:
        sources.append(HtmlTableTradeSource(source_name_for(url), url, http_client, settings))
    return sources


def _build_seen_trade_repository(
    settings: Settings,
    http_client: AsyncHttpClient,
) -> ISeenTradeRepository:
    if settings.store.is_configured:
        return RestSeenTradeRepository(http_client, settings)
    return NullSeenTradeRepository()


def _build_styler(settings: Settings) -> DigestStyler:
    return DigestStyler(
        max_items=settings.notifications.max_items,
        site_url=settings.notifications.site_url,
    )


def _build_notification_notifiers(
    settings: Settings,
    http_client: AsyncHttpClient,
    styler: DigestStyler,
) -> list[BaseNotificationStrategy]:
    notifiers: list[BaseNotificationStrategy] = []
    if settings.email.is_configured:
        notifiers.append(EmailNotifier(settings=settings, http_client=http_client))
    # Without an email channel the digest goes to the console.
    if settings.console.enabled or not notifiers:
        notifiers.append(ConsoleNotifier(settings=settings, styler=styler))
    return notifiers


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, sources, store, notifiers, reconciler."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    trade_sources = providers.Singleton(_build_sources, config, http_client)

    trade_fetcher = providers.Singleton(
        TradeFetcher,
        sources=trade_sources,
    )

    seen_trade_repository = providers.Singleton(
        _build_seen_trade_repository,
        config,
        http_client,
    )

    digest_styler = providers.Singleton(_build_styler, config)

    notification_service = providers.Singleton(
        NotificationService,
        notifiers=providers.Callable(
            _build_notification_notifiers, config, http_client, digest_styler
        ),
        styler=digest_styler,
    )

    dedup_reconciler = providers.Singleton(
        DedupReconciler,
        fetcher=trade_fetcher,
        seen_trade_repository=seen_trade_repository,
        notification_service=notification_service,
    )
