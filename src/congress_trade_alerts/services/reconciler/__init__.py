# -*- coding: utf-8 -*-
"""Dedup reconciliation (the job's core)."""

from congress_trade_alerts.services.reconciler.dedup_reconciler import (
    DedupReconciler,
    IdentifiedTrade,
    RunReport,
)

__all__ = ["DedupReconciler", "IdentifiedTrade", "RunReport"]
