"""Table definitions for the candidate store (SQLAlchemy Core).

``candidate_id`` columns on ``application_history`` and ``notifications``
are plain indexed integers: deleting a candidate leaves those rows in place.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

from app.models.enums import CandidateStatus

metadata = MetaData()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


candidates = Table(
    "candidates",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("phone", String(50), nullable=False),
    Column("position", String(255), nullable=False),
    Column("resume", String(500)),
    Column("cover_letter", Text),
    Column(
        "status",
        Enum(*[s.value for s in CandidateStatus], name="candidate_status"),
        nullable=False,
        default=CandidateStatus.pending.value,
    ),
    Column("applied_date", Date, nullable=False),
    Column("created_at", DateTime, nullable=False, default=_utcnow),
)

application_history = Table(
    "application_history",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("candidate_id", Integer, nullable=False, index=True),
    Column("status", String(20), nullable=False),
    Column("changed_by", String(255), nullable=False),
    Column("notes", Text),
    Column("created_at", DateTime, nullable=False, default=_utcnow),
)

notifications = Table(
    "notifications",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("candidate_id", Integer, index=True),
    Column("message", String(500), nullable=False),
    Column("is_read", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False, default=_utcnow),
)

positions = Table(
    "positions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("is_active", Boolean, nullable=False, default=True),
)
