"""API models for task endpoints.

Pydantic models for request/response payloads of the task workflow API.
Domain enums are used directly so the wire values match the workflow
values ("pending-design", "design-team", ...).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from printflow.application.services.workflow_engine import TransitionResult
from printflow.domain.models.actor import Role, Team
from printflow.domain.models.task import (
    Attachment,
    JobSpecifications,
    Note,
    NoteKind,
    Task,
    TaskDraft,
    TaskPriority,
    TaskStatus,
)


class JobSpecificationsModel(BaseModel):
    """Physical specification of the printed product."""

    quantity: int = Field(..., ge=1, description="Number of units to print")
    size: str = Field(..., description="Finished size, e.g. '9x5 cm'")
    material: str = Field(..., description="Stock or substrate")
    colors: str = Field(..., description="Color profile, e.g. '4-color CMYK'")
    finishes: list[str] = Field(default_factory=list)
    special_instructions: str | None = None

    def to_domain(self) -> JobSpecifications:
        return JobSpecifications(
            quantity=self.quantity,
            size=self.size,
            material=self.material,
            colors=self.colors,
            finishes=tuple(self.finishes),
            special_instructions=self.special_instructions,
        )

    @classmethod
    def from_domain(cls, specs: JobSpecifications) -> JobSpecificationsModel:
        return cls(
            quantity=specs.quantity,
            size=specs.size,
            material=specs.material,
            colors=specs.colors,
            finishes=list(specs.finishes),
            special_instructions=specs.special_instructions,
        )


class AttachmentModel(BaseModel):
    """A file attached to a print job. The id is generated when omitted."""

    id: UUID = Field(default_factory=uuid4)
    file_name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1)
    uploaded_by: str = Field(..., min_length=1)
    uploaded_at: datetime

    def to_domain(self) -> Attachment:
        return Attachment(
            id=self.id,
            file_name=self.file_name,
            url=self.url,
            uploaded_by=self.uploaded_by,
            uploaded_at=self.uploaded_at,
        )

    @classmethod
    def from_domain(cls, attachment: Attachment) -> AttachmentModel:
        return cls(
            id=attachment.id,
            file_name=attachment.file_name,
            url=attachment.url,
            uploaded_by=attachment.uploaded_by,
            uploaded_at=attachment.uploaded_at,
        )


class CreateTaskRequest(BaseModel):
    """Request body for opening a print job."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    client_name: str = Field(..., min_length=1)
    client_contact: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_team: Team = Team.DESIGN
    due_date: datetime | None = None
    estimated_value: float = Field(0.0, ge=0)
    specifications: JobSpecificationsModel
    attachments: list[AttachmentModel] = Field(default_factory=list)

    def to_draft(self) -> TaskDraft:
        return TaskDraft(
            title=self.title,
            description=self.description,
            client_name=self.client_name,
            client_contact=self.client_contact,
            priority=self.priority,
            assigned_team=self.assigned_team,
            due_date=self.due_date,
            estimated_value=self.estimated_value,
            specifications=self.specifications.to_domain(),
            attachments=tuple(a.to_domain() for a in self.attachments),
        )


class UpdateTaskRequest(BaseModel):
    """Request body for editing job details. Only fields sent are changed."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    client_name: str | None = Field(None, min_length=1)
    client_contact: str | None = None
    priority: TaskPriority | None = None
    assigned_team: Team | None = None
    due_date: datetime | None = None
    estimated_value: float | None = Field(None, ge=0)
    specifications: JobSpecificationsModel | None = None
    attachments: list[AttachmentModel] | None = None

    def to_changes(self) -> dict[str, Any]:
        """Domain field changes for the fields present in the request."""
        changes: dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None and name != "due_date":
                continue
            if name == "specifications" and value is not None:
                value = value.to_domain()
            if name == "attachments" and value is not None:
                value = tuple(a.to_domain() for a in value)
            changes[name] = value
        return changes


class StatusChangeRequest(BaseModel):
    """Request body for a status transition."""

    status: TaskStatus = Field(..., description="Requested next status")
    reason: str | None = Field(None, max_length=1000, description="Justification")


class CommentRequest(BaseModel):
    """Request body for adding a comment."""

    message: str = Field(..., min_length=1, max_length=5000)


class NoteResponse(BaseModel):
    """An audit trail entry."""

    id: UUID
    author_id: str
    author_name: str
    message: str
    created_at: datetime
    kind: NoteKind

    @classmethod
    def from_domain(cls, note: Note) -> NoteResponse:
        return cls(
            id=note.id,
            author_id=note.author_id,
            author_name=note.author_name,
            message=note.message,
            created_at=note.created_at,
            kind=note.kind,
        )


class TaskResponse(BaseModel):
    """A print job."""

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
    specifications: JobSpecificationsModel
    notes: list[NoteResponse]
    attachments: list[AttachmentModel]

    @classmethod
    def from_domain(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            client_name=task.client_name,
            client_contact=task.client_contact,
            priority=task.priority,
            status=task.status,
            assigned_team=task.assigned_team,
            created_by=task.created_by,
            created_at=task.created_at,
            updated_at=task.updated_at,
            due_date=task.due_date,
            estimated_value=task.estimated_value,
            specifications=JobSpecificationsModel.from_domain(task.specifications),
            notes=[NoteResponse.from_domain(n) for n in task.notes],
            attachments=[AttachmentModel.from_domain(a) for a in task.attachments],
        )


class TaskListResponse(BaseModel):
    """Filtered task board."""

    items: list[TaskResponse]
    total: int


class TransitionResponse(BaseModel):
    """Outcome of an accepted status change."""

    task: TaskResponse
    previous_status: TaskStatus
    new_status: TaskStatus
    note: NoteResponse
    notified_recipients: list[str]

    @classmethod
    def from_result(cls, result: TransitionResult) -> TransitionResponse:
        return cls(
            task=TaskResponse.from_domain(result.task),
            previous_status=result.previous_status,
            new_status=result.new_status,
            note=NoteResponse.from_domain(result.note),
            notified_recipients=[n.recipient_id for n in result.notifications],
        )


class NextStatusesResponse(BaseModel):
    """Statuses a role may pick from a status."""

    status: TaskStatus
    role: Role
    next_statuses: list[TaskStatus]


class ProblemResponse(BaseModel):
    """RFC 7807 problem details."""

    type: str
    title: str
    status: int
    detail: str
    instance: str
