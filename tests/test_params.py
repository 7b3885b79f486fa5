"""Unit tests for path id parsing."""

from __future__ import annotations

import pytest

from app.routers.params import parse_row_id


class TestParseRowId:

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", 1), ("0042", 42), ("-3", -3), ("9" * 18, int("9" * 18))],
    )
    def test_integers(self, raw: str, expected: int) -> None:
        assert parse_row_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "12abc", " 7", "+7", "1_000", "9" * 19])
    def test_non_integers(self, raw: str) -> None:
        assert parse_row_id(raw) is None
