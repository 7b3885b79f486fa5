"""Relative-age formatting for notification timestamps."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from app.core.constants import TIME_UNITS


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as stored by the database) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_time_ago(then: datetime, now: datetime | None = None) -> str:
    """Return a coarse relative age such as ``"2 days ago"``.

    Uses the largest unit among years, months, days, hours and minutes that
    fits at least once.  Anything under a minute, including timestamps in
    the future, is ``"just now"``.

    Parameters
    ----------
    then:
        The past timestamp.
    now:
        Reference time; defaults to the current UTC time.
    """
    reference = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    seconds = math.floor((reference - _as_utc(then)).total_seconds())

    for unit, length in TIME_UNITS:
        interval = seconds // length
        if interval > 1:
            return f"{interval} {unit}s ago"
        if interval == 1:
            return f"1 {unit} ago"

    return "just now"
