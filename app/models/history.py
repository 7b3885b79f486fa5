"""Pydantic model for the append-only ``application_history`` table."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ApplicationHistory(BaseModel):
    """One recorded status transition."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    candidate_id: int
    status: str
    changed_by: str
    notes: str | None = None
    created_at: datetime
