# -*- coding: utf-8 -*-
"""Trade-related models."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_AMOUNT = "Unknown"


@dataclass(frozen=True, slots=True)
class CanonicalTrade:
    """A disclosed trade, independent of the source schema it came from."""

    person: str
    """Politician name (senator, representative, ...)."""
    ticker: str
    transaction_type: str
    amount: str
    """Free-text range, e.g. '$1,001 - $15,000', or 'Unknown'."""
    date: str
    """Filed date, or transaction date when the source has no filed date."""
    source: str = ""
    """Name of the source that produced the record. Not part of identity."""
