# -*- coding: utf-8 -*-
"""Normalization of heterogeneous raw records into CanonicalTrade."""

from congress_trade_alerts.services.normalization.rules import (
    FIELD_RULES,
    ExtractionRule,
    extract_fields,
    normalize_trade,
)

__all__ = ["ExtractionRule", "FIELD_RULES", "extract_fields", "normalize_trade"]
