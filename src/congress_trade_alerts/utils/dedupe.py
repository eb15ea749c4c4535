"""Deduplication key for trades."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from congress_trade_alerts.models.trade import CanonicalTrade

IDENTITY_SEPARATOR = "-"


def trade_identity(trade: CanonicalTrade) -> str:
    """Return the stable key identifying a trade: date-person-ticker.

    Depends only on (date, person, ticker), so two records of the same trade
    from different sources, or with a different amount or type, share a key.
    Used for both the seen check and the persisted row id.

    Raises:
        ValueError: if date, person or ticker is empty.
    """
    date = (trade.date or "").strip()
    person = (trade.person or "").strip()
    ticker = (trade.ticker or "").strip()
    if not date or not person or not ticker:
        raise ValueError("trade identity requires non-empty date, person and ticker")
    return IDENTITY_SEPARATOR.join((date, person, ticker))
