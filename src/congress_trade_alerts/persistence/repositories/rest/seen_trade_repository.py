# -*- coding: utf-8 -*-
"""Seen trade repository backed by a PostgREST table (Supabase)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from structlog.contextvars import bound_contextvars

from congress_trade_alerts.exceptions import HttpRequestError
from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.models.seen_trade import SeenTrade
from congress_trade_alerts.persistence.repositories.interfaces.seen_trade_repository import (
    ISeenTradeRepository,
)
from congress_trade_alerts.utils.validation import payload_preview

if TYPE_CHECKING:
    from congress_trade_alerts.clients.http import AsyncHttpClient
    from congress_trade_alerts.config import Settings


class RestSeenTradeRepository(ISeenTradeRepository):
    """ISeenTradeRepository over `GET/POST {url}{rest_path}/{table}`.

    exists: GET ?id=eq.<identity>; an empty JSON array means unseen.
    record: POST {id, politician, ticker, filed_date} with Prefer: return=minimal.
    """

    def __init__(
        self,
        http_client: AsyncHttpClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the repository.

        Args:
            http_client: Async HTTP client (injected).
            settings: Application settings (uses settings.store).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        store = settings.store
        if not store.is_configured:
            raise ValueError("RestSeenTradeRepository requires store url and api_key.")
        self._http = http_client
        self._api_key = str(store.api_key).strip()
        parts = [str(store.url).strip().rstrip("/")]
        if store.rest_path.strip("/"):
            parts.append(store.rest_path.strip("/"))
        parts.append(store.table.strip("/"))
        self._table_url = "/".join(parts)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def table_url(self) -> str:
        return self._table_url

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
        }

    async def exists(self, identity: str) -> Result[bool]:
        with bound_contextvars(store_trade_id=identity):
            try:
                response = await self._http.get(
                    self._table_url,
                    params={"id": f"eq.{identity}"},
                    headers=self._headers(),
                )
            except HttpRequestError as e:
                self._logger.warning("store_exists_unavailable", error_message=str(e))
                return Result.failure(ErrorKind.STORE_UNAVAILABLE, str(e))

            # e.g. 404 while the table is not provisioned yet
            if not response.is_success:
                self._logger.warning(
                    "store_exists_http_error",
                    http_status_code=response.status,
                    payload_preview=payload_preview(response.text),
                )
                return Result.failure(
                    ErrorKind.STORE_ERROR, f"HTTP {response.status} from store"
                )

            try:
                rows = response.json()
            except ValueError:
                rows = None
            if not isinstance(rows, list):
                self._logger.warning(
                    "store_exists_malformed_response",
                    payload_preview=payload_preview(response.text),
                )
                return Result.failure(ErrorKind.STORE_ERROR, "store response is not a JSON array")
            return Result.success(len(rows) > 0)

    async def record(self, seen_trade: SeenTrade) -> Result[None]:
        with bound_contextvars(store_trade_id=seen_trade.id):
            headers = self._headers()
            headers["Prefer"] = "return=minimal"
            try:
                response = await self._http.post(
                    self._table_url,
                    json=seen_trade.to_row(),
                    headers=headers,
                )
            except HttpRequestError as e:
                self._logger.warning("store_record_unavailable", error_message=str(e))
                return Result.failure(ErrorKind.STORE_UNAVAILABLE, str(e))

            if not response.is_success:
                self._logger.warning(
                    "store_record_http_error",
                    http_status_code=response.status,
                    payload_preview=payload_preview(response.text),
                )
                return Result.failure(
                    ErrorKind.STORE_ERROR, f"HTTP {response.status} from store"
                )
            return Result.success()
