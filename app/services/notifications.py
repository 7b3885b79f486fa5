"""Notification feed and read-state updates."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.engine import Engine

from app.core.constants import NOTIFICATIONS_LIMIT
from app.db.engine import store_errors
from app.db.schema import candidates, notifications
from app.models.notification import Notification, SuccessResponse
from app.services.time_ago import format_time_ago

logger = logging.getLogger(__name__)


def list_notifications(
    engine: Engine,
    now: datetime | None = None,
) -> list[Notification]:
    """Return the most recent notifications with their candidate's name.

    The candidate join is an outer join: notifications whose candidate was
    deleted are still listed, with ``candidate_name`` set to None.  Each
    entry carries a ``time`` string relative to ``now``.
    """
    stmt = (
        select(notifications, candidates.c.name.label("candidate_name"))
        .select_from(
            notifications.outerjoin(
                candidates,
                notifications.c.candidate_id == candidates.c.id,
            )
        )
        .order_by(notifications.c.created_at.desc(), notifications.c.id.desc())
        .limit(NOTIFICATIONS_LIMIT)
    )
    with store_errors("Failed to fetch notifications"), engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [
        Notification(**row, time=format_time_ago(row["created_at"], now))
        for row in rows
    ]


def mark_notification_read(
    engine: Engine,
    notification_id: int | None,
) -> SuccessResponse:
    """Flag a notification as read.

    Unknown ids are not an error: the update simply matches nothing.
    """
    if notification_id is None:
        return SuccessResponse()

    stmt = (
        update(notifications)
        .where(notifications.c.id == notification_id)
        .values(is_read=True)
    )
    with store_errors("Failed to update notification"), engine.begin() as conn:
        updated = conn.execute(stmt).rowcount

    if updated == 0:
        logger.debug(
            "notification_not_found",
            extra={"notification_id": notification_id},
        )
    return SuccessResponse()
