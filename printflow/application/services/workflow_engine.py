"""Workflow engine for print jobs.

The engine is the only component allowed to change a task's status. A
status change is all-or-nothing:

1. Fetch the task (TaskNotFoundError if absent)
2. Check the status policy (TransitionForbiddenError if refused)
3. Set the new status and append a status-change note, saved together
4. Store notifications for the teams affected by the new status
5. After the task lock is released, deliver the notifications

Steps 1-4 run under a per-task asyncio lock, so concurrent requests on
the same task are serialized and notes append in acceptance order.
Requests on different tasks do not contend. A task lock is dropped as
soon as no caller holds or waits on it. Failures in step 1 or 2 leave
the task, its notes and the notification inbox untouched.

Delivery in step 5 is shielded from cancellation of the caller: a
cancelled request still sees CancelledError, but the committed change
keeps its notifications and delivery runs to completion.

Developer Golden Rules:
1. Validate before mutate - no partial transitions
2. One status-change note per accepted transition
3. One dispatch per accepted transition, none on refusal
4. Delivery failures never undo a committed transition
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

import structlog

from printflow.application.ports.task_repository import TaskRepositoryProtocol
from printflow.application.ports.team_directory import TeamDirectoryProtocol
from printflow.application.ports.time_authority import TimeAuthorityProtocol
from printflow.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from printflow.domain.errors.task import TaskNotFoundError, TransitionForbiddenError
from printflow.domain.models.actor import Actor, Role, Team
from printflow.domain.models.notification import (
    DeliveryEffect,
    Notification,
    NotificationKind,
)
from printflow.domain.models.task import (
    Note,
    NoteKind,
    Task,
    TaskDraft,
    TaskPriority,
    TaskStatus,
)
from printflow.domain.services.status_policy import StatusPolicy

log = structlog.get_logger()


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of an accepted status change.

    Attributes:
        task: Task snapshot after the change.
        previous_status: Status before the change.
        new_status: Status after the change.
        note: The status-change note that was appended.
        notifications: Notifications stored for this change.
        effects: Post-commit delivery effects for those notifications.
    """

    task: Task
    previous_status: TaskStatus
    new_status: TaskStatus
    note: Note
    notifications: tuple[Notification, ...]
    effects: tuple[DeliveryEffect, ...]


@dataclass(frozen=True)
class TaskFilters:
    """Task board filters. None means "any".

    Attributes:
        status: Only tasks in this status.
        priority: Only tasks with this priority.
        assigned_team: Only tasks assigned to this team.
        due_from: Only tasks due on or after this time.
        due_to: Only tasks due on or before this time.
        search: Case-insensitive substring of title or client name.
    """

    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_team: Team | None = None
    due_from: datetime | None = None
    due_to: datetime | None = None
    search: str | None = None

    def matches(self, task: Task) -> bool:
        """Check whether ``task`` passes every active filter."""
        if self.status is not None and task.status != self.status:
            return False
        if self.priority is not None and task.priority != self.priority:
            return False
        if self.assigned_team is not None and task.assigned_team != self.assigned_team:
            return False
        if self.due_from is not None or self.due_to is not None:
            if task.due_date is None:
                return False
            if self.due_from is not None and task.due_date < self.due_from:
                return False
            if self.due_to is not None and task.due_date > self.due_to:
                return False
        if self.search:
            needle = self.search.lower()
            if needle not in task.title.lower() and needle not in task.client_name.lower():
                return False
        return True


@dataclass
class _TaskLock:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    users: int = 0


@dataclass(frozen=True)
class _Route:
    kind: NotificationKind
    recipients: list[str]
    new_status: str | None = None
    reason: str | None = None


def _unique(ids: Iterable[str]) -> list[str]:
    """Deduplicate user ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


def status_change_message(
    old_status: TaskStatus,
    new_status: TaskStatus,
    reason: str | None = None,
) -> str:
    """Build the audit note text for a status change."""
    message = f"Status changed from {old_status.value} to {new_status.value}"
    if reason:
        message += f" - reason: {reason}"
    return message


class WorkflowEngine:
    """Orchestrates task creation, status transitions, comments and deletion.

    All collaborators are injected; see printflow.bootstrap.workflow for
    the production wiring.
    """

    def __init__(
        self,
        repository: TaskRepositoryProtocol,
        team_directory: TeamDirectoryProtocol,
        dispatcher: NotificationDispatcher,
        time_authority: TimeAuthorityProtocol,
        policy: StatusPolicy | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            repository: Task store.
            team_directory: Team membership lookup for notifications.
            dispatcher: Notification dispatcher.
            time_authority: Clock for timestamps.
            policy: Status policy; defaults to the shop workflow.
        """
        self._repository = repository
        self._teams = team_directory
        self._dispatcher = dispatcher
        self._time = time_authority
        self._policy = policy or StatusPolicy()
        self._task_locks: dict[UUID, _TaskLock] = {}
        self._pending_deliveries: set[asyncio.Task[int]] = set()
        self._selected_task_id: UUID | None = None

    @property
    def policy(self) -> StatusPolicy:
        return self._policy

    @asynccontextmanager
    async def _task_lock(self, task_id: UUID) -> AsyncIterator[None]:
        """Hold the lock for ``task_id``, creating it on first use."""
        entry = self._task_locks.get(task_id)
        if entry is None:
            entry = self._task_locks[task_id] = _TaskLock()
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0:
                del self._task_locks[task_id]

    async def _deliver_after_commit(self, effects: list[DeliveryEffect]) -> None:
        """Deliver the effects of a committed change.

        Delivery is shielded: if the caller is cancelled meanwhile, the
        change stays committed, delivery finishes in the background and
        the cancellation is re-raised to the caller.
        """
        if not effects:
            return
        delivery = asyncio.ensure_future(self._dispatcher.deliver(effects))
        self._pending_deliveries.add(delivery)
        delivery.add_done_callback(self._pending_deliveries.discard)
        try:
            await asyncio.shield(delivery)
        except asyncio.CancelledError:
            log.warning("post_commit_delivery_detached", effects=len(effects))
            raise

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    async def get_task(self, task_id: UUID) -> Task:
        """Fetch a task.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        task = await self._repository.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def list_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        """List tasks matching ``filters``, in repository order."""
        tasks = await self._repository.list_all()
        if filters is None:
            return tasks
        return [task for task in tasks if filters.matches(task)]

    def list_available_next_statuses(
        self,
        current_status: TaskStatus,
        role: Role,
    ) -> frozenset[TaskStatus]:
        """Statuses ``role`` may move a task to from ``current_status``."""
        return self._policy.available_next_statuses(current_status, role)

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    @property
    def selected_task_id(self) -> UUID | None:
        """Task currently open in the caller's detail view, if any."""
        return self._selected_task_id

    def select_task(self, task_id: UUID | None) -> None:
        """Open (or with None, close) a task in the detail view."""
        self._selected_task_id = task_id

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    async def create_task(self, draft: TaskDraft, actor: Actor) -> Task:
        """Open a new print job in PENDING_DESIGN.

        Any actor may create a task. Every member of the draft's assigned
        team gets a task-assigned notification.

        Args:
            draft: Job details.
            actor: Creator; becomes task.created_by.

        Returns:
            The stored task.
        """
        task = Task.from_draft(draft, created_by=actor.id, created_at=self._time.now())
        async with self._task_lock(task.id):
            await self._repository.save(task)
            recipients = await self._team_members(task.assigned_team)
            effects = await self._dispatcher.enqueue(
                NotificationKind.TASK_ASSIGNED,
                recipients,
                task.title,
                task.id,
            )

        log.info(
            "task_created",
            task_id=str(task.id),
            actor_id=actor.id,
            assigned_team=task.assigned_team.value,
            notified=len(effects),
        )
        await self._deliver_after_commit(effects)
        return task

    async def request_status_change(
        self,
        task_id: UUID,
        requested_status: TaskStatus,
        actor: Actor,
        reason: str | None = None,
    ) -> TransitionResult:
        """Move a task to ``requested_status`` if the actor's role allows it.

        Args:
            task_id: Task to move.
            requested_status: Target status.
            actor: Acting user; its role is checked against the policy.
            reason: Optional justification, recorded on the note and, for a
                rejection, in the notification.

        Returns:
            TransitionResult describing the committed change.

        Raises:
            TaskNotFoundError: If the task does not exist.
            TransitionForbiddenError: If the policy refuses the transition.
        """
        reason = reason.strip() if reason and reason.strip() else None
        bound = log.bind(
            task_id=str(task_id),
            actor_id=actor.id,
            role=actor.role.value,
            requested_status=requested_status.value,
        )

        async with self._task_lock(task_id):
            task = await self._repository.get(task_id)
            if task is None:
                bound.info("status_change_task_not_found")
                raise TaskNotFoundError(task_id)

            previous_status = task.status
            if not self._policy.can_transition(previous_status, requested_status, actor.role):
                allowed = self._policy.available_next_statuses(previous_status, actor.role)
                bound.warning(
                    "transition_forbidden",
                    current_status=previous_status.value,
                )
                raise TransitionForbiddenError(
                    task_id=task_id,
                    current_status=previous_status,
                    requested_status=requested_status,
                    role=actor.role,
                    allowed_transitions=sorted(allowed),
                )

            now = self._time.now()
            note = Note.create(
                author_id=actor.id,
                author_name=actor.name,
                message=status_change_message(previous_status, requested_status, reason),
                created_at=now,
                kind=NoteKind.STATUS_CHANGE,
            )
            updated = task.with_status(requested_status, now).with_note(note, now)
            await self._repository.save(updated)

            effects = await self._enqueue_status_notifications(
                updated, previous_status, requested_status, reason
            )

        bound.info(
            "task_status_changed",
            previous_status=previous_status.value,
            new_status=requested_status.value,
            notified=len(effects),
        )
        await self._deliver_after_commit(effects)

        return TransitionResult(
            task=updated,
            previous_status=previous_status,
            new_status=requested_status,
            note=note,
            notifications=tuple(e.notification for e in effects),
            effects=tuple(effects),
        )

    async def update_task(
        self,
        task_id: UUID,
        changes: dict[str, Any],
        actor: Actor,
    ) -> Task:
        """Edit job details outside the workflow.

        Status and notes cannot be changed here; use request_status_change
        and add_comment.

        The edited task is validated like a new one: the title is stripped
        and must not be blank, the value must not be negative and enum
        fields must carry their enum types.

        Raises:
            TaskNotFoundError: If the task does not exist.
            ValueError: If ``changes`` touches a non-editable field or
                breaks a task invariant.
            TypeError: If a changed value has the wrong type.
        """
        if "status" in changes:
            raise ValueError("status can only be changed through request_status_change")

        async with self._task_lock(task_id):
            task = await self._repository.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            updated = task.with_changes(changes, self._time.now())
            await self._repository.save(updated)

        log.info(
            "task_updated",
            task_id=str(task_id),
            actor_id=actor.id,
            fields=sorted(changes),
        )
        return updated

    async def add_comment(self, task_id: UUID, actor: Actor, message: str) -> Note:
        """Append a comment note. Any actor may comment; nobody is notified.

        Raises:
            TaskNotFoundError: If the task does not exist.
            ValueError: If ``message`` is blank.
        """
        if not message or not message.strip():
            raise ValueError("comment message is required")

        async with self._task_lock(task_id):
            task = await self._repository.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            now = self._time.now()
            note = Note.create(
                author_id=actor.id,
                author_name=actor.name,
                message=message.strip(),
                created_at=now,
                kind=NoteKind.COMMENT,
            )
            await self._repository.save(task.with_note(note, now))

        log.debug("task_comment_added", task_id=str(task_id), actor_id=actor.id)
        return note

    async def delete_task(self, task_id: UUID) -> bool:
        """Remove a task regardless of status.

        Administrative operation: no policy check, no note, no
        notification. Clears the selection if it points at the task.

        Returns:
            True if a task was removed.
        """
        async with self._task_lock(task_id):
            deleted = await self._repository.delete(task_id)
            if self._selected_task_id == task_id:
                self._selected_task_id = None

        log.info("task_deleted", task_id=str(task_id), deleted=deleted)
        return deleted

    # -------------------------------------------------------------------------
    # Notification routing
    # -------------------------------------------------------------------------

    async def _team_members(self, team: Team) -> list[str]:
        return sorted(await self._teams.members_of(team.value))

    async def _route(
        self,
        task: Task,
        previous_status: TaskStatus,
        new_status: TaskStatus,
        reason: str | None,
    ) -> _Route | None:
        label = new_status.label

        if new_status == TaskStatus.PENDING_APPROVAL:
            return _Route(
                NotificationKind.APPROVAL_NEEDED,
                await self._team_members(Team.MANAGER),
            )
        if new_status == TaskStatus.APPROVED:
            return _Route(
                NotificationKind.TASK_APPROVED,
                [*await self._team_members(Team.PRODUCTION), task.created_by],
            )
        if new_status == TaskStatus.DESIGN_REVIEW:
            designers = await self._team_members(Team.DESIGN)
            if previous_status == TaskStatus.PENDING_APPROVAL:
                return _Route(NotificationKind.TASK_REJECTED, designers, reason=reason)
            return _Route(NotificationKind.TASK_UPDATED, designers, new_status=label)
        if new_status == TaskStatus.IN_PRODUCTION:
            return _Route(
                NotificationKind.TASK_UPDATED,
                await self._team_members(Team.PRODUCTION),
                new_status=label,
            )
        if new_status == TaskStatus.READY_DELIVERY:
            return _Route(
                NotificationKind.TASK_UPDATED,
                [
                    *await self._team_members(Team.SALES),
                    *await self._team_members(Team.SALES_MANAGER),
                ],
                new_status=label,
            )
        if new_status == TaskStatus.DELIVERED:
            return _Route(
                NotificationKind.TASK_COMPLETED,
                [task.created_by, *await self._team_members(Team.MANAGER)],
            )

        team = self._policy.target_team_for_status(new_status)
        if team is None:
            return None
        return _Route(
            NotificationKind.TASK_UPDATED,
            await self._team_members(team),
            new_status=label,
        )

    async def _enqueue_status_notifications(
        self,
        task: Task,
        previous_status: TaskStatus,
        new_status: TaskStatus,
        reason: str | None,
    ) -> list[DeliveryEffect]:
        route = await self._route(task, previous_status, new_status, reason)
        if route is None:
            return []
        recipients = _unique(route.recipients)
        if not recipients:
            return []
        return await self._dispatcher.enqueue(
            route.kind,
            recipients,
            task.title,
            task.id,
            new_status=route.new_status,
            reason=route.reason,
        )
