"""Open positions endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.models.position import Position
from app.services.positions import list_active_positions

router = APIRouter()


@router.get("", response_model=list[Position])
def positions_list(engine: Engine = Depends(get_engine)) -> list[Position]:
    return list_active_positions(engine)
