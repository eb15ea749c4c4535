"""Raw record -> CanonicalTrade, driven by ordered extraction rules.

Each canonical field has one ExtractionRule listing the source keys that may
carry it, most specific first. The first key holding a non-empty value wins,
so a record carrying both `senator` and `name` gets the senator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from congress_trade_alerts.models.trade import UNKNOWN_AMOUNT, CanonicalTrade

# Values some feeds use when an asset has no ticker.
PLACEHOLDER_VALUES = frozenset({"--", "-", "n/a", "na", "none", "null", "unknown"})


@dataclass(frozen=True, slots=True)
class ExtractionRule:
    """Ordered candidate keys for one canonical field."""

    field: str
    keys: tuple[str, ...]
    default: str | None = None
    reject_placeholders: bool = False

    def extract(self, raw: dict[str, Any]) -> str | None:
        """Return the first non-empty candidate value, else the default."""
        for key in self.keys:
            value = raw.get(key)
            if value is None:
                continue
            text = str(value).strip()
            if not text:
                continue
            if self.reject_placeholders and text.lower() in PLACEHOLDER_VALUES:
                continue
            return text
        return self.default


PERSON_RULE = ExtractionRule(
    "person",
    (
        "senator",
        "representative",
        "politician",
        "Senator",
        "Representative",
        "Politician",
        "name",
        "Name",
        "member",
        "office",
    ),
)
TICKER_RULE = ExtractionRule(
    "ticker",
    ("ticker", "Ticker", "symbol", "Symbol"),
    reject_placeholders=True,
)
TRANSACTION_TYPE_RULE = ExtractionRule(
    "transaction_type",
    ("type", "transaction_type", "transaction", "Transaction", "TransactionType", "Type"),
    default="",
)
AMOUNT_RULE = ExtractionRule(
    "amount",
    ("amount", "Amount", "range", "Range"),
    default=UNKNOWN_AMOUNT,
)
# Filed/disclosure date first; transaction date only when no filed date exists.
DATE_RULE = ExtractionRule(
    "date",
    (
        "disclosure_date",
        "disclosureDate",
        "ReportDate",
        "filed",
        "filed_date",
        "filing_date",
        "filingDate",
        "transaction_date",
        "transactionDate",
        "TransactionDate",
        "date",
    ),
)

FIELD_RULES: tuple[ExtractionRule, ...] = (
    PERSON_RULE,
    TICKER_RULE,
    TRANSACTION_TYPE_RULE,
    AMOUNT_RULE,
    DATE_RULE,
)
REQUIRED_FIELDS = frozenset({"person", "ticker", "date"})


def extract_fields(
    raw: dict[str, Any],
    rules: tuple[ExtractionRule, ...] = FIELD_RULES,
) -> dict[str, str | None]:
    """Apply every rule to raw, keyed by canonical field name."""
    return {rule.field: rule.extract(raw) for rule in rules}


def normalize_trade(raw: dict[str, Any], *, source: str = "") -> CanonicalTrade | None:
    """Map a raw record to a CanonicalTrade.

    Returns None (record ineligible) when person, ticker or a date-like field
    is missing; such records never get an identity.
    """
    fields = extract_fields(raw)
    if any(not fields.get(name) for name in REQUIRED_FIELDS):
        return None
    return CanonicalTrade(
        person=fields["person"] or "",
        ticker=(fields["ticker"] or "").upper(),
        transaction_type=fields["transaction_type"] or "",
        amount=fields["amount"] or UNKNOWN_AMOUNT,
        date=fields["date"] or "",
        source=source,
    )
