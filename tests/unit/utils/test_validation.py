# -*- coding: utf-8 -*-
"""Unit tests for log masking and preview helpers."""

from __future__ import annotations

from congress_trade_alerts.utils.validation import mask_email, payload_preview


def test_mask_email_keeps_two_chars_and_domain() -> None:
    assert mask_email("johndoe@example.com") == "jo***@example.com"


def test_mask_email_handles_missing_or_invalid() -> None:
    assert mask_email(None) == "***"
    assert mask_email("") == "***"
    assert mask_email("not-an-email") == "***"


def test_payload_preview_collapses_whitespace() -> None:
    assert payload_preview("<html>\n  <body>\n\tx</body>") == "<html> <body> x</body>"


def test_payload_preview_truncates_long_payloads() -> None:
    preview = payload_preview("a" * 300, limit=10)
    assert preview == "a" * 10 + "..."


def test_payload_preview_decodes_bytes_and_none() -> None:
    assert payload_preview(b"ok") == "ok"
    assert payload_preview(None) == ""
