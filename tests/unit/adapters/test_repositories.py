"""Tests for repository query helpers (no database)."""

from floodhelp.adapters.persistence.repositories import escape_like


def test_escape_like_wildcards():
    assert escape_like("100%") == "100\\%"
    assert escape_like("a_b") == "a\\_b"


def test_escape_like_backslash_first():
    assert escape_like("c:\\%") == "c:\\\\\\%"


def test_escape_like_plain_text_unchanged():
    assert escape_like("เรือ อาหาร") == "เรือ อาหาร"
