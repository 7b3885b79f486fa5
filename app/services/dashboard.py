"""Dashboard aggregation: candidate counts by status in a single query."""

from __future__ import annotations

from sqlalchemy import case, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.sql.elements import Label

from app.db.engine import store_errors
from app.db.schema import candidates
from app.models.dashboard import DashboardStats
from app.models.enums import CandidateStatus


def _status_count(status: CandidateStatus) -> Label[int]:
    # SUM over zero rows is NULL
    return func.coalesce(
        func.sum(case((candidates.c.status == status.value, 1), else_=0)),
        0,
    ).label(status.value)


def get_dashboard_stats(engine: Engine) -> DashboardStats:
    """Return total and per-status candidate counts."""
    stmt = select(
        func.count().label("total"),
        *(_status_count(status) for status in CandidateStatus),
    ).select_from(candidates)

    with store_errors("Failed to fetch statistics"), engine.connect() as conn:
        row = conn.execute(stmt).mappings().one()

    return DashboardStats(**{key: int(value) for key, value in row.items()})
