"""API models for notification endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from printflow.domain.models.notification import (
    Notification,
    NotificationKind,
    NotificationPriority,
)


class NotificationResponse(BaseModel):
    """A stored notification."""

    id: UUID
    recipient_id: str
    title: str
    message: str
    kind: NotificationKind
    priority: NotificationPriority
    task_id: UUID | None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> NotificationResponse:
        return cls(
            id=notification.id,
            recipient_id=notification.recipient_id,
            title=notification.title,
            message=notification.message,
            kind=notification.kind,
            priority=notification.priority,
            task_id=notification.task_id,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class NotificationListResponse(BaseModel):
    """Notifications, most recent first, with the matching unread count."""

    items: list[NotificationResponse]
    unread_count: int


class MarkReadResponse(BaseModel):
    """Result of marking a notification read."""

    updated: bool
    unread_count: int
