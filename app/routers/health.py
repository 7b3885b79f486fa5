"""Health check endpoint.

Reports whether the relational store currently answers queries.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine
from starlette.responses import JSONResponse

from app.db.engine import check_connection, get_engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(engine: Engine = Depends(get_engine)) -> Any:
    """Return 200 when the store is reachable, 503 otherwise."""
    connected = check_connection(engine)

    payload: dict[str, str] = {
        "status": "ok" if connected else "degraded",
        "database": "connected" if connected else "disconnected",
    }

    if not connected:
        return JSONResponse(status_code=503, content=payload)

    return payload
