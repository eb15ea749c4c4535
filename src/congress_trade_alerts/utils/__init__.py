# -*- coding: utf-8 -*-
"""Utility modules."""

from congress_trade_alerts.utils.dedupe import trade_identity
from congress_trade_alerts.utils.validation import mask_email, payload_preview

__all__ = ["mask_email", "payload_preview", "trade_identity"]
