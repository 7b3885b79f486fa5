"""Enum types mirroring the store's enumerated columns."""

from enum import Enum


class CandidateStatus(str, Enum):
    """Lifecycle status of a candidate's application."""
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
