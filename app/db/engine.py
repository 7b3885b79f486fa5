"""SQLAlchemy engine and connection pool.

Provides ``get_engine()`` which returns a lazily-initialized, process-wide
engine built from ``settings``.  Routes receive it through
``Depends(get_engine)``; services take it as an explicit argument.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, settings
from app.core.errors import InternalError
from app.db.schema import metadata

logger = logging.getLogger(__name__)

_engine: Engine | None = None


def build_database_url(config: Settings) -> URL:
    """Return the store URL, preferring ``DATABASE_URL`` when it is set."""
    if config.DATABASE_URL:
        return make_url(config.DATABASE_URL)
    return URL.create(
        "mysql+pymysql",
        username=config.CDB_USER,
        password=config.CDB_PASSWORD or None,
        host=config.CDB_HOST,
        port=config.CDB_PORT,
        database=config.CDB_NAME,
    )


def create_store_engine(config: Settings) -> Engine:
    """Create an engine with a bounded connection pool.

    At most ``CDB_CONNECTION_LIMIT`` connections are open at once; further
    callers wait up to ``CDB_POOL_TIMEOUT`` seconds for one to be returned.
    """
    url = build_database_url(config)
    if url.get_backend_name() == "sqlite":
        # SQLite uses its own single-file pool implementation
        return create_engine(url)
    return create_engine(
        url,
        pool_size=config.CDB_CONNECTION_LIMIT,
        max_overflow=0,
        pool_timeout=config.CDB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


def get_engine() -> Engine:
    """Return the singleton engine, creating it on first call."""
    global _engine
    if _engine is None:
        _engine = create_store_engine(settings)
    return _engine


def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def check_connection(engine: Engine) -> bool:
    """Run one trivial query against the store.

    Never raises: the outcome is logged and returned so that startup can
    continue with the store unavailable.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(
            "database_connection_failed",
            extra={"error_message": str(exc)},
        )
        return False
    logger.info("database_connected")
    return True


def init_schema(engine: Engine) -> None:
    """Create any missing tables."""
    metadata.create_all(engine)
    logger.info("database_schema_ready")


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Translate store failures inside the block into ``InternalError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(message, exc_info=True)
        raise InternalError(message) from exc
