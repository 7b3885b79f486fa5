"""Pydantic models for the ``notifications`` table."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Notification(BaseModel):
    """Notification row joined with its candidate's name.

    ``candidate_name`` is None when the candidate has been deleted.
    ``time`` is a relative age such as ``"3 hours ago"``.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    candidate_id: int | None = None
    message: str
    is_read: bool = False
    created_at: datetime
    candidate_name: str | None = None
    time: str


class SuccessResponse(BaseModel):
    """Bare acknowledgement for updates that return no data."""
    success: bool = True
