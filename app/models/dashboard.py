"""Response model for the dashboard statistics endpoint."""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Candidate counts, overall and per status."""
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
