# -*- coding: utf-8 -*-
"""Digest styler: one plain-text message for a batch of new trades."""

from __future__ import annotations

from collections.abc import Sequence

from congress_trade_alerts.models.trade import CanonicalTrade
from congress_trade_alerts.notifications.types import NotificationMessage, NotificationStyler

DIGEST_EVENT_TYPE = "trades_digest"
DEFAULT_MAX_ITEMS = 10


class DigestStyler(NotificationStyler):
    """Build and render the new-trades digest."""

    def __init__(
        self,
        *,
        max_items: int = DEFAULT_MAX_ITEMS,
        site_url: str | None = None,
    ) -> None:
        """Initialize the styler.

        Args:
            max_items: Trades listed before the '... and N more' line.
            site_url: Optional link shown in the footer.
        """
        self.max_items = max(1, max_items)
        self.site_url = site_url

    def digest(self, trades: Sequence[CanonicalTrade]) -> NotificationMessage:
        """Build the digest message for a batch of trades."""
        return NotificationMessage(
            event_type=DIGEST_EVENT_TYPE,
            title=self.subject(len(trades)),
            message=self.body(trades),
            payload={"trade_count": len(trades)},
        )

    @staticmethod
    def subject(count: int) -> str:
        plural = "s" if count != 1 else ""
        return f"🚨 {count} New Congressional Trade{plural} Filed"

    @staticmethod
    def format_trade(trade: CanonicalTrade) -> str:
        """One bullet line: '• person: type TICKER (amount) - Filed: date'."""
        action = f"{trade.transaction_type} {trade.ticker}".strip()
        return f"• {trade.person}: {action} ({trade.amount}) - Filed: {trade.date}"

    def body(self, trades: Sequence[CanonicalTrade]) -> str:
        shown = trades[: self.max_items]
        lines = ["🚨 New Congressional Stock Trades Filed!", ""]
        lines.extend(self.format_trade(t) for t in shown)
        hidden = len(trades) - len(shown)
        if hidden > 0:
            lines.append(f"... and {hidden} more")
        lines.append("")
        if self.site_url:
            lines.append(f"View all trades at: {self.site_url}")
            lines.append("")
        lines.append("---")
        lines.append("This is an automated alert from your Congressional Trade Tracker.")
        return "\n".join(lines)

    def render(self, message: NotificationMessage) -> str:
        """Subject line, blank line, body."""
        if message.title:
            return f"{message.title}\n\n{message.message}"
        return message.message
