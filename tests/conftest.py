"""Shared test fixtures.

Provides an in-memory SQLite ``engine`` with the schema created, a
``test_client`` wired to that engine, and a ``seed_candidate`` helper for
inserting rows with controlled timestamps.
"""

import os
from collections.abc import Callable, Generator
from datetime import date, datetime, timedelta, timezone
from typing import Any

# Keep the lazily created process engine away from MySQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.db.schema import candidates, metadata


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """Provide a fresh in-memory store shared across threads."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def test_client(engine: Engine) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient whose routes use ``engine``."""
    import app.db.engine as engine_mod
    from app.main import app

    engine_mod._engine = engine
    with TestClient(app) as client:
        yield client
    engine_mod._engine = None


@pytest.fixture()
def seed_candidate(engine: Engine) -> Callable[..., int]:
    """Return a helper inserting a candidate row and returning its id.

    Successive calls default to increasing ``created_at`` values so that
    later seeds sort first in newest-first listings.
    """
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _seed(**overrides: Any) -> int:
        counter["n"] += 1
        n = counter["n"]
        values: dict[str, Any] = {
            "name": f"Candidate {n}",
            "email": f"candidate{n}@example.com",
            "phone": "555-0100",
            "position": "Engineer",
            "status": "pending",
            "applied_date": date(2024, 1, 1),
            "created_at": base + timedelta(minutes=n),
        }
        values.update(overrides)
        with engine.begin() as conn:
            result = conn.execute(insert(candidates).values(**values))
        return result.inserted_primary_key[0]

    return _seed
