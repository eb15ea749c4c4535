"""HTML table source: one trade per table row, keyed by column header."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from bs4 import BeautifulSoup

from congress_trade_alerts.models.result import ErrorKind, Result
from congress_trade_alerts.sources.base import HttpTradeSource
from congress_trade_alerts.sources.schema import RawRecord
from congress_trade_alerts.utils.validation import payload_preview

if TYPE_CHECKING:
    from congress_trade_alerts.clients.http import HttpResponse

_NON_WORD = re.compile(r"[^0-9a-z]+")


def header_key(text: str) -> str:
    """Normalize a column header to a record key ('Disclosure Date' -> 'disclosure_date')."""
    return _NON_WORD.sub("_", text.strip().lower()).strip("_")


def parse_trade_table(html: str) -> list[RawRecord] | None:
    """Parse the first <table> into row dicts. None if there is no usable table."""
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table")
    if table is None:
        return None

    rows: list[Any] = table.find_all("tr")
    if not rows:
        return None

    header_cells = rows[0].find_all(["th", "td"])
    headers = [header_key(c.get_text(" ", strip=True)) for c in header_cells]
    if not any(headers):
        return None

    records: list[RawRecord] = []
    for row in rows[1:]:
        cells = row.find_all("td")
        if not cells:
            continue
        record: RawRecord = {}
        for key, cell in zip(headers, cells):
            if key:
                record[key] = cell.get_text(" ", strip=True)
        if record:
            records.append(record)
    return records


class HtmlTableTradeSource(HttpTradeSource):
    """GETs an HTML page and reads trades from its first table."""

    accept = "text/html,application/xhtml+xml"

    def _parse(self, response: HttpResponse) -> Result[list[RawRecord]]:
        records = parse_trade_table(response.text)
        if records is None:
            self._logger.warning(
                "source_parse_failed",
                source_reason="no_trade_table",
                payload_preview=payload_preview(response.text),
            )
            return Result.failure(ErrorKind.PARSE_FAILURE, "no trade table with a header row")
        return Result.success(records)
