"""Dashboard statistics endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.models.dashboard import DashboardStats
from app.services.dashboard import get_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(engine: Engine = Depends(get_engine)) -> DashboardStats:
    """Return total and per-status candidate counts."""
    return get_dashboard_stats(engine)
