"""Dependency injection."""

from congress_trade_alerts.DI.container import Container

__all__ = ["Container"]
