"""Helpers for masking and previewing values in logs."""

from __future__ import annotations

from typing import Any

PREVIEW_CHARS = 200


def mask_email(addr: str | None) -> str:
    """Return a masked email address for logging (e.g. jo***@example.com)."""
    if not addr or "@" not in addr:
        return "***"
    local, _, domain = addr.strip().partition("@")
    return f"{local[:2]}***@{domain}"


def payload_preview(payload: Any, limit: int = PREVIEW_CHARS) -> str:
    """Return the first characters of a payload on one line, for parse-failure logs."""
    if payload is None:
        return ""
    if isinstance(payload, bytes):
        text = payload.decode("utf-8", errors="replace")
    else:
        text = str(payload)
    text = " ".join(text.split())
    if len(text) > limit:
        return text[:limit] + "..."
    return text
