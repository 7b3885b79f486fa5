"""Candidate endpoints.

GET/POST /api/candidates, GET/DELETE /api/candidates/{id},
PATCH /api/candidates/{id}/status and GET /api/candidates/{id}/history.

Handlers are plain ``def`` functions: FastAPI runs them in its threadpool,
where they block on the connection pool when it is exhausted.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.models.candidate import (
    Candidate,
    CandidateCreate,
    DeleteResponse,
    StatusUpdate,
    StatusUpdateResponse,
)
from app.models.history import ApplicationHistory
from app.routers.params import parse_row_id
from app.services.candidates import (
    delete_candidate,
    get_candidate,
    list_candidate_history,
    list_candidates,
    register_candidate,
    update_candidate_status,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[Candidate])
def candidates_list(
    status: str | None = Query(
        default=None,
        description="pending, approved, rejected, or 'all' for no filter",
    ),
    search: str | None = Query(
        default=None,
        description="Case-insensitive match on name, email or position",
    ),
    engine: Engine = Depends(get_engine),
) -> list[Candidate]:
    """Return candidates, newest first, optionally filtered."""
    return list_candidates(engine, status=status, search=search)


@router.post("", response_model=Candidate, status_code=201)
def candidates_create(
    payload: CandidateCreate,
    engine: Engine = Depends(get_engine),
) -> Candidate:
    """Register a new candidate with status ``pending``."""
    return register_candidate(engine, payload)


@router.get("/{candidate_id}", response_model=Candidate)
def candidates_detail(
    candidate_id: str,
    engine: Engine = Depends(get_engine),
) -> Candidate:
    return get_candidate(engine, parse_row_id(candidate_id))


@router.patch("/{candidate_id}/status", response_model=StatusUpdateResponse)
def candidates_update_status(
    candidate_id: str,
    body: StatusUpdate,
    engine: Engine = Depends(get_engine),
) -> StatusUpdateResponse:
    """Change a candidate's status, recording history and a notification."""
    return update_candidate_status(engine, parse_row_id(candidate_id), body.status)


@router.delete("/{candidate_id}", response_model=DeleteResponse)
def candidates_delete(
    candidate_id: str,
    engine: Engine = Depends(get_engine),
) -> DeleteResponse:
    return delete_candidate(engine, parse_row_id(candidate_id))


@router.get("/{candidate_id}/history", response_model=list[ApplicationHistory])
def candidates_history(
    candidate_id: str,
    engine: Engine = Depends(get_engine),
) -> list[ApplicationHistory]:
    """Return the candidate's status changes, newest first."""
    return list_candidate_history(engine, parse_row_id(candidate_id))
