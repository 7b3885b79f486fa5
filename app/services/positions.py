"""Open job positions."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.db.engine import store_errors
from app.db.schema import positions
from app.models.position import Position


def list_active_positions(engine: Engine) -> list[Position]:
    """Return active positions ordered by title."""
    stmt = (
        select(positions)
        .where(positions.c.is_active)
        .order_by(positions.c.title.asc())
    )
    with store_errors("Failed to fetch positions"), engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()
    return [Position(**row) for row in rows]
