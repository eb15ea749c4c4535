# -*- coding: utf-8 -*-
"""Async HTTP client with a bounded timeout on every request."""

from __future__ import annotations

import asyncio
import codecs
import json as jsonlib
import uuid
import aiohttp
import structlog
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from congress_trade_alerts.config import Settings
from congress_trade_alerts.exceptions import HttpRequestError


def _known_encoding(charset: Optional[str]) -> str:
    """Return charset if Python has a codec for it, else utf-8."""
    if not charset:
        return "utf-8"
    try:
        return codecs.lookup(charset).name
    except LookupError:
        return "utf-8"


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and raw body of a completed request."""

    url: str
    status: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    encoding: str = "utf-8"
    """Charset declared by the response, or utf-8."""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body decoded leniently; undecodable bytes become U+FFFD."""
        return self.content.decode(self.encoding, errors="replace")

    def json(self) -> Any:
        """Decode the body strictly as JSON.

        Raises:
            ValueError: If the body is not valid text in its encoding
                (UnicodeDecodeError) or not valid JSON.
        """
        return jsonlib.loads(self.content.decode(self.encoding))


class AsyncHttpClient:
    """Async HTTP client shared by sources, store and notifier.

    One attempt per call: a failed request is reported to the caller, which
    degrades, and the next scheduled run is the retry. Non-2xx responses are
    returned, not raised; only network-level failures raise HttpRequestError.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (timeout, user agent).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.api.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """Perform a GET request.

        Args:
            url: Full URL to request.
            params: Optional query parameters.
            headers: Optional request headers.

        Returns:
            HttpResponse with status and raw body (any status).

        Raises:
            HttpRequestError: On connection errors or timeout.
        """
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """Perform a POST request with a JSON body.

        Args:
            url: Full URL to request.
            json: Optional JSON-serializable body.
            headers: Optional request headers.

        Returns:
            HttpResponse with status and raw body (any status).

        Raises:
            HttpRequestError: On connection errors or timeout.
        """
        return await self._request("POST", url, json=json or {}, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        request_id = uuid.uuid4().hex[:12]
        with bound_contextvars(
            http_method=method,
            http_url=url,
            http_request_id=request_id,
        ):
            try:
                session = await self._get_session()
                async with session.request(
                    method,
                    url,
                    params=params or None,
                    json=json,
                    headers=headers,
                ) as response:
                    # Kept as bytes; HttpResponse.json() decodes strictly.
                    content = await response.read()
                    self._logger.debug(
                        "http_request_completed",
                        http_status_code=response.status,
                        http_body_length=len(content),
                    )
                    return HttpResponse(
                        url=url,
                        status=response.status,
                        content=content,
                        headers=dict(response.headers),
                        encoding=_known_encoding(response.charset),
                    )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.warning(
                    "http_request_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise HttpRequestError(
                    f"{method} failed: {url}",
                    url=url,
                    cause=e,
                ) from e
