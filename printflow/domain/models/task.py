"""Print job (task) domain model.

A Task is a single print job tracked from design through delivery. Tasks
are frozen: every change produces a new instance which the workflow
engine saves back through the task repository. Notes are an append-only
tuple, so insertion order is the audit order.

Developer Golden Rules:
1. Status changes ONLY through the workflow engine
2. Notes are appended, never edited or removed
3. Identifier and creation timestamp never change after creation
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4

from printflow.domain.models.actor import Team


class TaskStatus(StrEnum):
    """Production lifecycle stages of a print job.

    DELIVERED and CANCELLED are terminal.
    """

    PENDING_DESIGN = "pending-design"
    IN_DESIGN = "in-design"
    DESIGN_REVIEW = "design-review"
    PENDING_APPROVAL = "pending-approval"
    APPROVED = "approved"
    IN_PRODUCTION = "in-production"
    READY_DELIVERY = "ready-delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Human-readable name used in notification messages."""
        return STATUS_LABELS[self]


STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.PENDING_DESIGN: "Pending design",
    TaskStatus.IN_DESIGN: "In design",
    TaskStatus.DESIGN_REVIEW: "Design review",
    TaskStatus.PENDING_APPROVAL: "Pending approval",
    TaskStatus.APPROVED: "Approved",
    TaskStatus.IN_PRODUCTION: "In production",
    TaskStatus.READY_DELIVERY: "Ready for delivery",
    TaskStatus.DELIVERED: "Delivered",
    TaskStatus.CANCELLED: "Cancelled",
}


class TaskPriority(StrEnum):
    """Business priority of a print job."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class NoteKind(StrEnum):
    """Kind of audit trail entry."""

    COMMENT = "comment"
    STATUS_CHANGE = "status-change"


@dataclass(frozen=True, eq=True)
class Note:
    """Immutable audit trail entry attached to a task.

    Attributes:
        id: Unique note identifier.
        author_id: User who wrote the note (or triggered the transition).
        author_name: Display name of the author at the time of writing.
        message: Note text.
        created_at: When the note was appended.
        kind: COMMENT for free-form notes, STATUS_CHANGE for transitions.
    """

    id: UUID
    author_id: str
    author_name: str
    message: str
    created_at: datetime
    kind: NoteKind

    @classmethod
    def create(
        cls,
        *,
        author_id: str,
        author_name: str,
        message: str,
        created_at: datetime,
        kind: NoteKind,
    ) -> Note:
        """Create a note with a fresh identifier."""
        return cls(
            id=uuid4(),
            author_id=author_id,
            author_name=author_name,
            message=message,
            created_at=created_at,
            kind=kind,
        )


@dataclass(frozen=True, eq=True)
class Attachment:
    """A file attached to a print job (artwork, proofs, briefs)."""

    id: UUID
    file_name: str
    url: str
    uploaded_by: str
    uploaded_at: datetime


@dataclass(frozen=True, eq=True)
class JobSpecifications:
    """Physical specification of the printed product.

    Attributes:
        quantity: Number of units to print.
        size: Finished size, free text ("9x5 cm", "A4 folded").
        material: Stock or substrate.
        colors: Color profile ("4-color CMYK", "full color").
        finishes: Post-press finishes in the order they are applied.
        special_instructions: Anything the production floor must know.
    """

    quantity: int
    size: str
    material: str
    colors: str
    finishes: tuple[str, ...] = ()
    special_instructions: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"quantity must be positive, got {self.quantity}")


@dataclass(frozen=True, eq=True)
class TaskDraft:
    """Everything the caller supplies when opening a new print job."""

    title: str
    description: str
    client_name: str
    client_contact: str
    priority: TaskPriority
    assigned_team: Team
    due_date: datetime | None
    estimated_value: float
    specifications: JobSpecifications
    attachments: tuple[Attachment, ...] = ()

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("title is required")
        if self.estimated_value < 0:
            raise ValueError("estimated_value cannot be negative")


# Fields that update_task may change. Status, notes, identity and
# timestamps are owned by the workflow engine.
EDITABLE_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "description",
        "client_name",
        "client_contact",
        "priority",
        "assigned_team",
        "due_date",
        "estimated_value",
        "specifications",
        "attachments",
    }
)


@dataclass(frozen=True, eq=True)
class Task:
    """A print job.

    Attributes:
        id: Unique, immutable identifier.
        title: Short job title shown on the board.
        description: Longer job brief.
        client_name: Ordering client.
        client_contact: Client e-mail or phone.
        priority: Business priority.
        status: Current lifecycle stage.
        assigned_team: Team currently responsible.
        created_by: User id of the creator (usually sales).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        due_date: Promised delivery date, if any.
        estimated_value: Quoted job value.
        specifications: Physical job specification.
        notes: Append-only audit trail, oldest first.
        attachments: Attached files.
    """

    id: UUID
    title: str
    description: str
    client_name: str
    client_contact: str
    priority: TaskPriority
    status: TaskStatus
    assigned_team: Team
    created_by: str
    created_at: datetime
    updated_at: datetime
    due_date: datetime | None
    estimated_value: float
    specifications: JobSpecifications
    notes: tuple[Note, ...] = field(default=())
    attachments: tuple[Attachment, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("title is required")
        if isinstance(self.estimated_value, bool) or not isinstance(
            self.estimated_value, (int, float)
        ):
            raise TypeError(
                f"estimated_value must be a number, got {type(self.estimated_value).__name__}"
            )
        if self.estimated_value < 0:
            raise ValueError("estimated_value cannot be negative")
        for name, expected in _TYPED_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise TypeError(
                    f"{name} must be a {expected.__name__}, got {type(value).__name__}"
                )
        if not all(isinstance(a, Attachment) for a in self.attachments):
            raise TypeError("attachments must contain Attachment instances")

    @classmethod
    def from_draft(
        cls,
        draft: TaskDraft,
        *,
        created_by: str,
        created_at: datetime,
        task_id: UUID | None = None,
    ) -> Task:
        """Open a new task in PENDING_DESIGN from a draft."""
        return cls(
            id=task_id or uuid4(),
            title=draft.title.strip(),
            description=draft.description,
            client_name=draft.client_name,
            client_contact=draft.client_contact,
            priority=draft.priority,
            status=TaskStatus.PENDING_DESIGN,
            assigned_team=draft.assigned_team,
            created_by=created_by,
            created_at=created_at,
            updated_at=created_at,
            due_date=draft.due_date,
            estimated_value=draft.estimated_value,
            specifications=draft.specifications,
            notes=(),
            attachments=draft.attachments,
        )

    def with_status(self, status: TaskStatus, updated_at: datetime) -> Task:
        """Return a copy in ``status``. Callers must have checked the policy."""
        return replace(self, status=status, updated_at=updated_at)

    def with_note(self, note: Note, updated_at: datetime) -> Task:
        """Return a copy with ``note`` appended to the audit trail."""
        return replace(self, notes=(*self.notes, note), updated_at=updated_at)

    def with_changes(self, changes: dict[str, Any], updated_at: datetime) -> Task:
        """Return a copy with editable fields replaced.

        The title is stripped as in ``from_draft``; the copy is validated
        like any other Task.

        Raises:
            ValueError: If ``changes`` touches a field outside EDITABLE_FIELDS,
                blanks the title or makes the value negative.
            TypeError: If a value has the wrong type.
        """
        forbidden = set(changes) - EDITABLE_FIELDS
        if forbidden:
            raise ValueError(
                f"Fields cannot be edited directly: {sorted(forbidden)}"
            )
        if isinstance(changes.get("title"), str):
            changes = {**changes, "title": changes["title"].strip()}
        return replace(self, **changes, updated_at=updated_at)


_TYPED_FIELDS: tuple[tuple[str, type], ...] = (
    ("priority", TaskPriority),
    ("status", TaskStatus),
    ("assigned_team", Team),
    ("specifications", JobSpecifications),
    ("notes", tuple),
    ("attachments", tuple),
)
