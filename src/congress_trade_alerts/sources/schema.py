"""Known raw trade shapes (documentation of provider responses).

Nothing relies on these keys being present; normalization looks fields up
through ordered extraction rules instead.
"""

from __future__ import annotations

from typing import Any, TypedDict

RawRecord = dict[str, Any]
"""One trade as produced by a source, before normalization."""


class HouseTradeSchema(TypedDict, total=False):
    """House Stock Watcher all_transactions.json item."""

    disclosure_year: int
    disclosure_date: str
    transaction_date: str
    owner: str
    ticker: str
    asset_description: str
    type: str
    amount: str
    representative: str
    district: str
    ptr_link: str
    cap_gains_over_200_usd: bool


class SenateTradeSchema(TypedDict, total=False):
    """Senate Stock Watcher aggregate all_transactions.json item."""

    transaction_date: str
    owner: str
    ticker: str
    asset_description: str
    asset_type: str
    type: str
    amount: str
    comment: str
    senator: str
    ptr_link: str
    disclosure_date: str
