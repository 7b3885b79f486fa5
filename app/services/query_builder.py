"""Filtered candidate listing query.

Builds the SELECT behind ``GET /api/candidates``.  Filter values only ever
reach the database as bound parameters.
"""

from __future__ import annotations

from sqlalchemy import Select, func, or_, select

from app.core.constants import STATUS_FILTER_ALL
from app.db.schema import candidates


def build_candidate_query(
    status: str | None = None,
    search: str | None = None,
) -> Select:
    """Return a candidate SELECT restricted by the given filters.

    Parameters
    ----------
    status:
        Exact status to match.  ``None``, empty, or ``"all"`` disables the
        filter.
    search:
        Case-insensitive substring matched against name, email or position.

    Returns
    -------
    A ``Select`` ordered newest first, without a limit.
    """
    stmt = select(candidates)

    if status and status != STATUS_FILTER_ALL:
        stmt = stmt.where(candidates.c.status == status)

    if search:
        pattern = f"%{search.lower()}%"
        stmt = stmt.where(
            or_(
                func.lower(candidates.c.name).like(pattern),
                func.lower(candidates.c.email).like(pattern),
                func.lower(candidates.c.position).like(pattern),
            )
        )

    # id breaks ties between rows created within the same clock tick
    return stmt.order_by(candidates.c.created_at.desc(), candidates.c.id.desc())
