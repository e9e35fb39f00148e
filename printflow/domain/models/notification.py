"""Notification domain model.

Notifications are recipient-addressed, templated messages produced in
response to task events. They are created only by the notification
dispatcher; the read flag is the one field that changes afterwards, and
it does so by replacement (``mark_read``), never in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class NotificationKind(StrEnum):
    """Task events that produce notifications."""

    TASK_ASSIGNED = "task-assigned"
    TASK_UPDATED = "task-updated"
    APPROVAL_NEEDED = "approval-needed"
    TASK_APPROVED = "task-approved"
    TASK_REJECTED = "task-rejected"
    TASK_COMPLETED = "task-completed"


class NotificationPriority(StrEnum):
    """Delivery urgency, fixed per template."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, eq=True)
class Notification:
    """A notification addressed to one user.

    Attributes:
        id: Unique notification identifier.
        recipient_id: User the notification is addressed to.
        title: Short title from the template.
        message: Rendered body.
        kind: Event kind that produced it.
        priority: Priority from the template.
        created_at: Creation timestamp.
        task_id: Related task, if any.
        is_read: Read flag, unread on creation.
    """

    id: UUID
    recipient_id: str
    title: str
    message: str
    kind: NotificationKind
    priority: NotificationPriority
    created_at: datetime
    task_id: UUID | None = None
    is_read: bool = False

    def mark_read(self) -> Notification:
        """Return a read copy of this notification."""
        if self.is_read:
            return self
        return replace(self, is_read=True)


@dataclass(frozen=True, eq=True)
class DeliveryEffect:
    """Out-of-band side effects requested for one stored notification.

    The delivery channel (browser push, sound, SMS) decides how to honor
    these flags. Effects are computed after the notification is stored
    and have no bearing on whether the triggering operation succeeded.

    Attributes:
        notification: The stored notification to deliver.
        tag: Grouping tag for the channel; task id or "general".
        require_interaction: Keep the alert on screen until dismissed.
        silent: Deliver without sound or vibration.
        play_sound: Play the alert sound.
    """

    notification: Notification
    tag: str
    require_interaction: bool
    silent: bool
    play_sound: bool

    @classmethod
    def for_notification(cls, notification: Notification) -> DeliveryEffect:
        """Derive the channel effects from the notification priority."""
        high = notification.priority == NotificationPriority.HIGH
        return cls(
            notification=notification,
            tag=str(notification.task_id) if notification.task_id else "general",
            require_interaction=high,
            silent=notification.priority == NotificationPriority.LOW,
            play_sound=high,
        )
