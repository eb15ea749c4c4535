"""Trade source interface and the shared HTTP fetch step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from congress_trade_alerts.exceptions import HttpRequestError
from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.sources.schema import RawRecord

if TYPE_CHECKING:
    from congress_trade_alerts.clients.http import AsyncHttpClient, HttpResponse
    from congress_trade_alerts.config import Settings


class ITradeSource(ABC):
    """A provider of recent raw trade records."""

    name: str

    @abstractmethod
    async def fetch(self) -> Result[list[RawRecord]]:
        """Return at most `limit` most recent raw records, in provider order.

        Unavailability and unparseable payloads are returned as failures
        (SOURCE_UNAVAILABLE, PARSE_FAILURE), never raised.
        """
        ...


class HttpTradeSource(ITradeSource):
    """Source backed by a single HTTP GET. Subclasses parse the body."""

    accept: str = "*/*"

    def __init__(
        self,
        name: str,
        url: str,
        http_client: AsyncHttpClient,
        settings: Settings,
        *,
        limit: int | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            name: Source name used in logs and on canonical records.
            url: URL to GET.
            http_client: Async HTTP client (injected).
            settings: Application settings (uses api.user_agent, source.trades_limit).
            limit: Max records per fetch; default from settings.source.trades_limit.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self.name = name
        self.url = url
        self._http = http_client
        self._settings = settings
        self._limit = limit if limit is not None else settings.source.trades_limit
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def fetch(self) -> Result[list[RawRecord]]:
        with bound_contextvars(source_name=self.name, source_url=self.url):
            try:
                response = await self._http.get(
                    self.url,
                    headers={
                        "User-Agent": self._settings.api.user_agent,
                        "Accept": self.accept,
                    },
                )
            except HttpRequestError as e:
                self._logger.warning(
                    "source_unavailable",
                    error_type=type(e.cause).__name__ if e.cause else type(e).__name__,
                    error_message=str(e),
                )
                return Result.failure(ErrorKind.SOURCE_UNAVAILABLE, str(e))

            if not response.is_success:
                self._logger.warning(
                    "source_http_error",
                    http_status_code=response.status,
                )
                return Result.failure(
                    ErrorKind.SOURCE_UNAVAILABLE, f"HTTP {response.status} from {self.url}"
                )

            result = self._parse(response)
            if result.ok:
                records = (result.value or [])[: self._limit]
                self._logger.debug("source_fetched", source_records=len(records))
                return Result.success(records)
            return result

    @abstractmethod
    def _parse(self, response: HttpResponse) -> Result[list[RawRecord]]:
        """Turn a 2xx response into raw records, or a PARSE_FAILURE."""
        ...
