"""Pydantic model for the read-only ``positions`` table."""

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """An open job position."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    is_active: bool = True
