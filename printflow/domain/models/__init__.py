"""Domain models for PrintFlow."""

from printflow.domain.models.actor import Actor, Role, Team
from printflow.domain.models.notification import (
    DeliveryEffect,
    Notification,
    NotificationKind,
    NotificationPriority,
)
from printflow.domain.models.task import (
    EDITABLE_FIELDS,
    STATUS_LABELS,
    Attachment,
    JobSpecifications,
    Note,
    NoteKind,
    Task,
    TaskDraft,
    TaskPriority,
    TaskStatus,
)

__all__: list[str] = [
    "Actor",
    "Attachment",
    "DeliveryEffect",
    "EDITABLE_FIELDS",
    "JobSpecifications",
    "Note",
    "NoteKind",
    "Notification",
    "NotificationKind",
    "NotificationPriority",
    "Role",
    "STATUS_LABELS",
    "Task",
    "TaskDraft",
    "TaskPriority",
    "TaskStatus",
    "Team",
]
