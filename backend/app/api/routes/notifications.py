"""notifications.py — The current user's notification feed.

Called by: Frontend header notification menu
Depends on: deps.py (CurrentUser, Portal)
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from app.api.deps import CurrentUser, Portal
from app.models.schemas import Notification, OperationResult

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])


@router.get("", response_model=list[Notification])
async def list_notifications(user: CurrentUser, portal: Portal) -> list[Notification]:
    return await portal.get_notifications(user.id)


@router.post("/{notification_id}/read", response_model=OperationResult)
async def mark_read(notification_id: int, user: CurrentUser, portal: Portal) -> OperationResult:
    """Mark one of the current user's notifications as read.

    Raises:
        HTTPException: 404 when the id is unknown or belongs to someone else.
    """
    owned = {n.id for n in await portal.get_notifications(user.id)}
    if notification_id not in owned:
        raise HTTPException(status_code=404, detail="Notification not found")
    return await portal.mark_notification_read(notification_id)
