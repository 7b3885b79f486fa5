"""Pydantic models for the ``candidates`` table and its endpoints.

``status`` and ``applied_date`` are assigned by the server and are therefore
absent from the create payload.  Required fields are optional at the schema
level so that a missing field yields the workflow's own 400 response.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import CandidateStatus


class CandidateCreate(BaseModel):
    """Payload for registering a candidate."""
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    resume: str | None = None
    cover_letter: str | None = Field(default=None, alias="coverLetter")


class Candidate(BaseModel):
    """Full candidate record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    position: str
    resume: str | None = None
    cover_letter: str | None = None
    status: CandidateStatus = CandidateStatus.pending
    applied_date: date
    created_at: datetime


class StatusUpdate(BaseModel):
    """Payload for ``PATCH /candidates/{id}/status``.

    Kept as a plain string so that unknown values reach the workflow.
    """
    status: str | None = None


class StatusUpdateResponse(BaseModel):
    """Confirmation of a status change."""
    success: bool = True
    status: CandidateStatus


class DeleteResponse(BaseModel):
    """Confirmation of a candidate deletion."""
    success: bool = True
    message: str
