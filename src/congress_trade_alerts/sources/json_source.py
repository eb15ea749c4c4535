"""JSON feed source (e.g. House/Senate Stock Watcher all_transactions.json)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.sources.base import HttpTradeSource
from congress_trade_alerts.sources.schema import RawRecord
from congress_trade_alerts.utils.validation import payload_preview

if TYPE_CHECKING:
    from congress_trade_alerts.clients.http import HttpResponse

# Keys under which some providers wrap the trade list.
_WRAPPER_KEYS = ("data", "trades", "results", "transactions")


def _extract_items(data: Any) -> list[Any] | None:
    """Return the trade list from a bare array or a single-level wrapper object."""
    if isinstance(data, list):
        return cast(list[Any], data)
    if isinstance(data, dict):
        obj = cast(dict[str, Any], data)
        for key in _WRAPPER_KEYS:
            value = obj.get(key)
            if isinstance(value, list):
                return cast(list[Any], value)
    return None


class JsonTradeSource(HttpTradeSource):
    """GETs a JSON array of trade objects, most recent first."""

    accept = "application/json"

    def _parse(self, response: HttpResponse) -> Result[list[RawRecord]]:
        try:
            data = response.json()
        except ValueError as e:
            self._logger.warning(
                "source_parse_failed",
                error_type=type(e).__name__,
                error_message=str(e),
                payload_preview=payload_preview(response.text),
            )
            return Result.failure(ErrorKind.PARSE_FAILURE, f"invalid JSON: {e}")

        items = _extract_items(data)
        if items is None:
            self._logger.warning(
                "source_parse_failed",
                source_response_type=type(data).__name__,
                payload_preview=payload_preview(response.text),
            )
            return Result.failure(
                ErrorKind.PARSE_FAILURE, f"expected a JSON array, got {type(data).__name__}"
            )

        records: list[RawRecord] = [
            cast(RawRecord, x) for x in items if isinstance(x, dict)
        ]
        skipped = len(items) - len(records)
        if skipped:
            self._logger.debug("source_non_object_items_skipped", skipped=skipped)
        return Result.success(records)
