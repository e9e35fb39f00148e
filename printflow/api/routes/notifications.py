"""Notification inbox API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from printflow.api.dependencies.workflow import get_notification_dispatcher
from printflow.api.models.notifications import (
    MarkReadResponse,
    NotificationListResponse,
    NotificationResponse,
)
from printflow.application.services.notification_dispatcher import (
    NotificationDispatcher,
)

router = APIRouter(prefix="/v1/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    recipient_id: str | None = Query(None, description="Only this user's notifications"),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> NotificationListResponse:
    """List notifications, most recent first."""
    items = dispatcher.list_notifications(recipient_id)
    unread = (
        dispatcher.unread_count
        if recipient_id is None
        else dispatcher.unread_count_for(recipient_id)
    )
    return NotificationListResponse(
        items=[NotificationResponse.from_domain(n) for n in items],
        unread_count=unread,
    )


@router.post("/read-all", response_model=MarkReadResponse)
async def mark_all_read(
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> MarkReadResponse:
    """Mark every notification read."""
    await dispatcher.mark_all_read()
    return MarkReadResponse(updated=True, unread_count=dispatcher.unread_count)


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: UUID,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> MarkReadResponse:
    """Mark one notification read. Unknown or already-read ids are a no-op."""
    updated = await dispatcher.mark_read(notification_id)
    return MarkReadResponse(updated=updated, unread_count=dispatcher.unread_count)


@router.delete("", status_code=204)
async def clear_notifications(
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> Response:
    """Drop every stored notification."""
    await dispatcher.clear()
    return Response(status_code=204)
