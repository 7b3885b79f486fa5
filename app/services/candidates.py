"""Candidate registration, status transitions, and candidate reads.

Both write workflows run inside a single store transaction: a candidate
row is never left without its notification, and a status change is never
left without its history record and notification.
"""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from app.core.constants import (
    REGISTRATION_MESSAGE,
    STATUS_CHANGE_MESSAGE,
    STATUS_CHANGE_NOTE,
    STATUS_CHANGED_BY,
)
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.db.engine import store_errors
from app.db.schema import application_history, candidates, notifications
from app.models.candidate import (
    Candidate,
    CandidateCreate,
    DeleteResponse,
    StatusUpdateResponse,
)
from app.models.enums import CandidateStatus
from app.models.history import ApplicationHistory
from app.services.query_builder import build_candidate_query

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def list_candidates(
    engine: Engine,
    status: str | None = None,
    search: str | None = None,
) -> list[Candidate]:
    """Return all candidates matching the optional filters, newest first."""
    stmt = build_candidate_query(status=status, search=search)
    with store_errors("Failed to fetch candidates"), engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()
    return [Candidate(**row) for row in rows]


def get_candidate(engine: Engine, candidate_id: int | None) -> Candidate:
    """Return one candidate or raise ``NotFoundError``."""
    if candidate_id is None:
        raise NotFoundError("Candidate not found")

    stmt = select(candidates).where(candidates.c.id == candidate_id)
    with store_errors("Failed to fetch candidate"), engine.connect() as conn:
        row = conn.execute(stmt).mappings().first()
    if row is None:
        raise NotFoundError("Candidate not found")
    return Candidate(**row)


def list_candidate_history(
    engine: Engine,
    candidate_id: int | None,
) -> list[ApplicationHistory]:
    """Return the status history of a candidate, newest first.

    An unknown id yields an empty list rather than an error.
    """
    if candidate_id is None:
        return []

    stmt = (
        select(application_history)
        .where(application_history.c.candidate_id == candidate_id)
        .order_by(
            application_history.c.created_at.desc(),
            application_history.c.id.desc(),
        )
    )
    with store_errors("Failed to fetch history"), engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()
    return [ApplicationHistory(**row) for row in rows]


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def _email_taken(conn: Connection, email: str) -> bool:
    stmt = select(candidates.c.id).where(candidates.c.email == email)
    return conn.execute(stmt).first() is not None


def is_duplicate_email(exc: IntegrityError) -> bool:
    """Tell a unique-email violation apart from other integrity failures.

    Matches the driver messages of MySQL (``Duplicate entry ... for key
    'candidates.email'``) and SQLite (``UNIQUE constraint failed:
    candidates.email``).
    """
    message = str(exc.orig)
    duplicate = "Duplicate entry" in message or "UNIQUE constraint failed" in message
    return duplicate and "email" in message


def register_candidate(engine: Engine, payload: CandidateCreate) -> Candidate:
    """Create a pending candidate and announce it with a notification.

    Raises
    ------
    ValidationError
        When name, email, phone or position is missing or empty.
    ConflictError
        When another candidate already uses the email.
    InternalError
        On any store failure; nothing is written in that case.
    """
    required = (payload.name, payload.email, payload.phone, payload.position)
    if not all(required):
        raise ValidationError("Missing required fields")

    with store_errors("Failed to create candidate"):
        try:
            with engine.begin() as conn:
                if _email_taken(conn, payload.email):
                    raise ConflictError("Email already exists")

                result = conn.execute(
                    insert(candidates).values(
                        name=payload.name,
                        email=payload.email,
                        phone=payload.phone,
                        position=payload.position,
                        resume=payload.resume or None,
                        cover_letter=payload.cover_letter or None,
                        status=CandidateStatus.pending.value,
                        applied_date=date.today(),
                    )
                )
                candidate_id = result.inserted_primary_key[0]

                conn.execute(
                    insert(notifications).values(
                        candidate_id=candidate_id,
                        message=REGISTRATION_MESSAGE.format(
                            name=payload.name,
                            position=payload.position,
                        ),
                    )
                )

                row = conn.execute(
                    select(candidates).where(candidates.c.id == candidate_id)
                ).mappings().one()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same email
            if not is_duplicate_email(exc):
                raise
            raise ConflictError("Email already exists") from exc

    logger.info(
        "candidate_registered",
        extra={"candidate_id": candidate_id, "position": payload.position},
    )
    return Candidate(**row)


# ---------------------------------------------------------------------------
# Status transition
# ---------------------------------------------------------------------------

def update_candidate_status(
    engine: Engine,
    candidate_id: int | None,
    status: str | None,
) -> StatusUpdateResponse:
    """Move a candidate to ``status`` and record the change.

    Any status may follow any other, including itself.  The update, the
    history record and the notification commit together or not at all.

    Raises
    ------
    ValidationError
        When ``status`` is not one of pending, approved, rejected.
    NotFoundError
        When the candidate does not exist.
    InternalError
        On any store failure; the candidate is left unchanged.
    """
    try:
        new_status = CandidateStatus(status)
    except ValueError as exc:
        raise ValidationError("Invalid status") from exc

    if candidate_id is None:
        raise NotFoundError("Candidate not found")

    with store_errors("Failed to update status"), engine.begin() as conn:
        current = conn.execute(
            select(candidates.c.name, candidates.c.position)
            .where(candidates.c.id == candidate_id)
        ).first()
        if current is None:
            raise NotFoundError("Candidate not found")

        conn.execute(
            update(candidates)
            .where(candidates.c.id == candidate_id)
            .values(status=new_status.value)
        )
        conn.execute(
            insert(application_history).values(
                candidate_id=candidate_id,
                status=new_status.value,
                changed_by=STATUS_CHANGED_BY,
                notes=STATUS_CHANGE_NOTE.format(status=new_status.value),
            )
        )
        conn.execute(
            insert(notifications).values(
                candidate_id=candidate_id,
                message=STATUS_CHANGE_MESSAGE.format(
                    status=new_status.value,
                    name=current.name,
                    position=current.position,
                ),
            )
        )

    logger.info(
        "candidate_status_changed",
        extra={"candidate_id": candidate_id, "status": new_status.value},
    )
    return StatusUpdateResponse(status=new_status)


# ---------------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------------

def delete_candidate(engine: Engine, candidate_id: int | None) -> DeleteResponse:
    """Delete a candidate.  History and notifications are kept."""
    if candidate_id is None:
        raise NotFoundError("Candidate not found")

    stmt = delete(candidates).where(candidates.c.id == candidate_id)
    with store_errors("Failed to delete candidate"), engine.begin() as conn:
        deleted = conn.execute(stmt).rowcount

    if deleted == 0:
        raise NotFoundError("Candidate not found")

    logger.info("candidate_deleted", extra={"candidate_id": candidate_id})
    return DeleteResponse(message="Candidate deleted")
