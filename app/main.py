"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events (store connectivity
check), error handlers, and router registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from app.core.config import settings
from app.core.constants import GENERIC_ERROR_MESSAGE, INVALID_REQUEST_MESSAGE
from app.core.errors import AppError
from app.core.logging import setup_logging
from app.db.engine import check_connection, dispose_engine, get_engine, init_schema
from app.routers import candidates, dashboard, health, notifications, positions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    A failed connectivity check is logged and startup continues; requests
    then fail individually until the store comes back.
    """
    setup_logging()
    logger.info("Application starting up")
    engine = get_engine()
    if check_connection(engine) and settings.CDB_CREATE_SCHEMA:
        init_schema(engine)
    yield
    dispose_engine()
    logger.info("Application shutting down")


app = FastAPI(
    title="Candidate Tracker API",
    description="Backend for tracking job candidates, their status history and notifications",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(
        "request_rejected",
        extra={"path": request.url.path, "errors": exc.errors()},
    )
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error",
        extra={"path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})


# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api/candidates", tags=["Candidates"])
app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(positions.router, prefix="/api/positions", tags=["Positions"])


def run() -> None:
    """Serve the application with uvicorn on ``settings.HOST:PORT``."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
