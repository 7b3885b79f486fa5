"""Notification endpoints: the latest feed and mark-as-read."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.models.notification import Notification, SuccessResponse
from app.routers.params import parse_row_id
from app.services.notifications import list_notifications, mark_notification_read

router = APIRouter()


@router.get("", response_model=list[Notification])
def notifications_list(engine: Engine = Depends(get_engine)) -> list[Notification]:
    """Return the 50 most recent notifications with relative times."""
    return list_notifications(engine)


@router.patch("/{notification_id}/read", response_model=SuccessResponse)
def notifications_mark_read(
    notification_id: str,
    engine: Engine = Depends(get_engine),
) -> SuccessResponse:
    """Mark a notification as read.  Unknown ids still succeed."""
    return mark_notification_read(engine, parse_row_id(notification_id))
