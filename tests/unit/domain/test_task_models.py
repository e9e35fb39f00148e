"""Unit tests for task, note, actor and notification value objects."""

from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from printflow.domain.models.actor import Actor, Role, Team
from printflow.domain.models.notification import (
    DeliveryEffect,
    Notification,
    NotificationKind,
    NotificationPriority,
)
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

NOW = datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)


class TestActor:
    def test_blank_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="actor id"):
            Actor(id="  ", name="Nobody", role=Role.MANAGER)

    def test_role_must_be_enum(self) -> None:
        with pytest.raises(TypeError):
            Actor(id="u-1", name="Someone", role="manager")  # type: ignore[arg-type]

    def test_team_and_role_wire_values_line_up(self) -> None:
        assert Team.DESIGN.value == Role.DESIGN_TEAM.value
        assert Team.MANAGER.value == Role.MANAGER.value


class TestTaskFromDraft:
    def test_new_task_is_pending_design(self, draft: TaskDraft) -> None:
        task = Task.from_draft(draft, created_by="sales-1", created_at=NOW)

        assert task.status == TaskStatus.PENDING_DESIGN
        assert task.created_by == "sales-1"
        assert task.created_at == task.updated_at == NOW
        assert task.notes == ()
        assert task.assigned_team == Team.DESIGN

    def test_explicit_id(self, draft: TaskDraft) -> None:
        task_id = uuid4()
        task = Task.from_draft(draft, created_by="sales-1", created_at=NOW, task_id=task_id)
        assert task.id == task_id

    def test_blank_title_rejected(self, draft: TaskDraft) -> None:
        with pytest.raises(ValueError, match="title"):
            replace(draft, title="   ")

    def test_negative_value_rejected(self, draft: TaskDraft) -> None:
        with pytest.raises(ValueError, match="estimated_value"):
            replace(draft, estimated_value=-1)

    def test_zero_quantity_rejected(self) -> None:
        with pytest.raises(ValueError, match="quantity"):
            JobSpecifications(quantity=0, size="A4", material="Paper", colors="1/0")


class TestTaskCopies:
    @pytest.fixture
    def task(self, draft: TaskDraft) -> Task:
        return Task.from_draft(draft, created_by="sales-1", created_at=NOW)

    def test_task_is_frozen(self, task: Task) -> None:
        with pytest.raises(FrozenInstanceError):
            task.status = TaskStatus.DELIVERED  # type: ignore[misc]

    def test_with_status(self, task: Task) -> None:
        later = NOW + timedelta(hours=1)
        moved = task.with_status(TaskStatus.IN_DESIGN, later)

        assert moved.status == TaskStatus.IN_DESIGN
        assert moved.updated_at == later
        assert moved.id == task.id
        assert moved.created_at == task.created_at
        assert task.status == TaskStatus.PENDING_DESIGN

    def test_with_note_appends(self, task: Task) -> None:
        first = Note.create(
            author_id="design-1",
            author_name="Designer",
            message="first",
            created_at=NOW,
            kind=NoteKind.COMMENT,
        )
        second = Note.create(
            author_id="manager-1",
            author_name="Manager",
            message="second",
            created_at=NOW,
            kind=NoteKind.COMMENT,
        )
        updated = task.with_note(first, NOW).with_note(second, NOW)
        assert [n.message for n in updated.notes] == ["first", "second"]

    def test_with_changes(self, task: Task) -> None:
        later = NOW + timedelta(minutes=5)
        changed = task.with_changes(
            {"title": "Business cards v2", "priority": TaskPriority.URGENT}, later
        )
        assert changed.title == "Business cards v2"
        assert changed.priority == TaskPriority.URGENT
        assert changed.updated_at == later

    @pytest.mark.parametrize("field_name", ["status", "notes", "id", "created_at", "created_by"])
    def test_with_changes_rejects_owned_fields(self, task: Task, field_name: str) -> None:
        with pytest.raises(ValueError, match=field_name):
            task.with_changes({field_name: None}, NOW)

    def test_with_changes_strips_title(self, task: Task) -> None:
        assert task.with_changes({"title": "  Flyers "}, NOW).title == "Flyers"

    @pytest.mark.parametrize(
        ("changes", "error"),
        [
            ({"title": "   "}, ValueError),
            ({"estimated_value": -5.0}, ValueError),
            ({"estimated_value": True}, TypeError),
            ({"priority": "high"}, TypeError),
            ({"attachments": ["logo.pdf"]}, TypeError),
        ],
    )
    def test_with_changes_validates_result(
        self, task: Task, changes: dict, error: type[Exception]
    ) -> None:
        with pytest.raises(error):
            task.with_changes(changes, NOW)

    def test_with_changes_replaces_attachments(self, task: Task) -> None:
        attachment = Attachment(
            id=uuid4(),
            file_name="proof.pdf",
            url="https://files.example/proof.pdf",
            uploaded_by="design-1",
            uploaded_at=NOW,
        )
        changed = task.with_changes({"attachments": (attachment,)}, NOW)
        assert changed.attachments == (attachment,)


class TestStatusLabels:
    def test_every_status_has_label(self) -> None:
        for status in TaskStatus:
            assert status.label

    def test_label(self) -> None:
        assert TaskStatus.READY_DELIVERY.label == "Ready for delivery"


class TestDeliveryEffect:
    def _notification(self, priority: NotificationPriority, task_id=None) -> Notification:
        return Notification(
            id=uuid4(),
            recipient_id="manager-1",
            title="t",
            message="m",
            kind=NotificationKind.APPROVAL_NEEDED,
            priority=priority,
            created_at=NOW,
            task_id=task_id,
        )

    def test_high_priority(self) -> None:
        task_id = uuid4()
        effect = DeliveryEffect.for_notification(
            self._notification(NotificationPriority.HIGH, task_id)
        )
        assert effect.require_interaction is True
        assert effect.play_sound is True
        assert effect.silent is False
        assert effect.tag == str(task_id)

    def test_low_priority_is_silent(self) -> None:
        effect = DeliveryEffect.for_notification(self._notification(NotificationPriority.LOW))
        assert effect.silent is True
        assert effect.require_interaction is False
        assert effect.play_sound is False
        assert effect.tag == "general"

    def test_mark_read_returns_copy(self) -> None:
        notification = self._notification(NotificationPriority.MEDIUM)
        read = notification.mark_read()
        assert read.is_read is True
        assert notification.is_read is False
        assert read.mark_read() is read
