"""SeenTrade: persisted record that a trade identity has been notified.

Identity is the trade key from utils.dedupe.trade_identity() (date-person-ticker).
Created once per identity after the notify step; never updated or deleted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from congress_trade_alerts.models.trade import CanonicalTrade
from congress_trade_alerts.utils.dedupe import trade_identity


@dataclass(frozen=True, slots=True)
class SeenTrade:
    """Row of the seen_trades table."""

    id: str
    """Trade identity from utils.dedupe.trade_identity()."""
    politician: str
    ticker: str
    filed_date: str
    seen_at: datetime | None = None
    """Processing timestamp; assigned by the store when None."""

    @classmethod
    def from_trade(cls, trade: CanonicalTrade) -> SeenTrade:
        """Build the entry for a canonical trade using the shared identity function."""
        return cls(
            id=trade_identity(trade),
            politician=trade.person,
            ticker=trade.ticker,
            filed_date=trade.date,
        )

    def to_row(self) -> dict[str, Any]:
        """Body for POST /seen_trades. seen_at is left to the store."""
        return {
            "id": self.id,
            "politician": self.politician,
            "ticker": self.ticker,
            "filed_date": self.filed_date,
        }
