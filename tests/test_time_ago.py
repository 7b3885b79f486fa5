"""Unit tests for the relative-time formatter."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.services.time_ago import format_time_ago

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _ago(**delta: float) -> str:
    return format_time_ago(NOW - timedelta(**delta), now=NOW)


class TestFormatTimeAgo:
    """Largest fitting unit, singular for one, plural above one."""

    def test_ninety_seconds_is_one_minute(self) -> None:
        assert _ago(seconds=90) == "1 minute ago"

    def test_under_a_minute_is_just_now(self) -> None:
        assert _ago(seconds=59) == "just now"
        assert _ago(seconds=0) == "just now"

    def test_two_days(self) -> None:
        assert _ago(days=2) == "2 days ago"

    def test_four_hundred_days_is_one_year(self) -> None:
        assert _ago(days=400) == "1 year ago"

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=23, minutes=59), "23 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=30), "1 month ago"),
            (timedelta(days=29), "29 days ago"),
            (timedelta(days=90), "3 months ago"),
            (timedelta(days=730), "2 years ago"),
        ],
    )
    def test_unit_boundaries(self, delta: timedelta, expected: str) -> None:
        """A month is a fixed 30 days and a year a fixed 365 days."""
        assert format_time_ago(NOW - delta, now=NOW) == expected

    def test_future_timestamp_is_just_now(self) -> None:
        assert format_time_ago(NOW + timedelta(hours=2), now=NOW) == "just now"

    def test_naive_timestamp_treated_as_utc(self) -> None:
        """Naive values as read back from the database are UTC."""
        naive = (NOW - timedelta(hours=3)).replace(tzinfo=None)
        assert format_time_ago(naive, now=NOW) == "3 hours ago"

    def test_defaults_to_current_time(self) -> None:
        recent = datetime.now(timezone.utc) - timedelta(seconds=5)
        assert format_time_ago(recent) == "just now"
