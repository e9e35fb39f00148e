"""Task workflow errors.

NotFound and Forbidden are expected, recoverable conditions. They are
raised before any mutation, so a caller that catches them can rely on
the task being exactly as it was.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from printflow.domain.exceptions import PrintFlowError

if TYPE_CHECKING:
    from printflow.domain.models.actor import Role
    from printflow.domain.models.task import TaskStatus


class TaskNotFoundError(PrintFlowError):
    """Raised when a referenced task does not exist.

    Attributes:
        task_id: Identifier that was looked up.
    """

    def __init__(self, task_id: UUID) -> None:
        """Initialize task not found error.

        Args:
            task_id: Identifier that was looked up.
        """
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class TransitionForbiddenError(PrintFlowError):
    """Raised when a role may not move a task to the requested status.

    Covers both "role may not act on this status" and "requested status
    is not a permitted next status"; the status policy does not tell the
    two apart and neither does the caller-facing message.

    Attributes:
        task_id: Task the transition was requested on.
        current_status: Status the task is in.
        requested_status: Status that was requested.
        role: Role the actor acted under.
        allowed_transitions: Statuses this role may move the task to.
    """

    def __init__(
        self,
        task_id: UUID,
        current_status: TaskStatus,
        requested_status: TaskStatus,
        role: Role,
        allowed_transitions: list[TaskStatus] | None = None,
    ) -> None:
        """Initialize transition forbidden error.

        Args:
            task_id: Task the transition was requested on.
            current_status: Status the task is in.
            requested_status: Status that was requested.
            role: Role the actor acted under.
            allowed_transitions: Statuses this role may move the task to.
        """
        self.task_id = task_id
        self.current_status = current_status
        self.requested_status = requested_status
        self.role = role
        self.allowed_transitions = allowed_transitions or []

        allowed_str = (
            f" Allowed for {role.value}: {[s.value for s in self.allowed_transitions]}"
            if self.allowed_transitions
            else ""
        )
        super().__init__(
            f"Role {role.value} may not move task {task_id} from "
            f"{current_status.value} to {requested_status.value}.{allowed_str}"
        )
