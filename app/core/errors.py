"""Error taxonomy shared by services and the HTTP layer.

Services raise these; ``app.main`` turns them into ``{"error": message}``
responses carrying ``status_code``.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input."""
    status_code = 400


class NotFoundError(AppError):
    """Referenced entity does not exist."""
    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation."""
    status_code = 409


class InternalError(AppError):
    """Store failure or other unexpected condition."""
    status_code = 500
