"""Status policy for the print job workflow.

Static table of who may act on a task in each status and where the task
may go next. This encodes the shop's operating procedure:

    pending-design -> in-design -> design-review -> pending-approval
    pending-approval -> approved | design-review (rejection)
    approved -> in-production -> ready-delivery -> delivered

DELIVERED and CANCELLED are terminal. A status missing from the table
means "no permitted transitions", so every check is total.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from printflow.domain.models.actor import Role, Team
from printflow.domain.models.task import TaskStatus


@dataclass(frozen=True)
class StatusRule:
    """Permissions attached to one status.

    Attributes:
        allowed_roles: Roles that may move a task out of this status.
        next_statuses: Statuses a task in this status may move to.
    """

    allowed_roles: frozenset[Role]
    next_statuses: frozenset[TaskStatus]


_NO_TRANSITIONS = StatusRule(allowed_roles=frozenset(), next_statuses=frozenset())

STATUS_WORKFLOW: Mapping[TaskStatus, StatusRule] = MappingProxyType(
    {
        TaskStatus.PENDING_DESIGN: StatusRule(
            allowed_roles=frozenset({Role.DESIGN_TEAM}),
            next_statuses=frozenset({TaskStatus.IN_DESIGN}),
        ),
        TaskStatus.IN_DESIGN: StatusRule(
            allowed_roles=frozenset({Role.DESIGN_TEAM}),
            next_statuses=frozenset({TaskStatus.DESIGN_REVIEW}),
        ),
        TaskStatus.DESIGN_REVIEW: StatusRule(
            allowed_roles=frozenset({Role.DESIGN_TEAM, Role.SALES_MANAGER}),
            next_statuses=frozenset({TaskStatus.PENDING_APPROVAL}),
        ),
        TaskStatus.PENDING_APPROVAL: StatusRule(
            allowed_roles=frozenset({Role.MANAGER}),
            next_statuses=frozenset({TaskStatus.APPROVED, TaskStatus.DESIGN_REVIEW}),
        ),
        TaskStatus.APPROVED: StatusRule(
            allowed_roles=frozenset({Role.PRODUCTION_TEAM}),
            next_statuses=frozenset({TaskStatus.IN_PRODUCTION}),
        ),
        TaskStatus.IN_PRODUCTION: StatusRule(
            allowed_roles=frozenset({Role.PRODUCTION_TEAM}),
            next_statuses=frozenset({TaskStatus.READY_DELIVERY}),
        ),
        TaskStatus.READY_DELIVERY: StatusRule(
            allowed_roles=frozenset({Role.SALES_TEAM, Role.SALES_MANAGER}),
            next_statuses=frozenset({TaskStatus.DELIVERED}),
        ),
        TaskStatus.DELIVERED: _NO_TRANSITIONS,
        TaskStatus.CANCELLED: _NO_TRANSITIONS,
    }
)

# Team responsible for a task while it sits in a status. Used for the
# generic "task updated" notification when no specific routing applies.
TARGET_TEAM_FOR_STATUS: Mapping[TaskStatus, Team | None] = MappingProxyType(
    {
        TaskStatus.PENDING_DESIGN: Team.DESIGN,
        TaskStatus.IN_DESIGN: Team.DESIGN,
        TaskStatus.DESIGN_REVIEW: Team.DESIGN,
        TaskStatus.PENDING_APPROVAL: Team.MANAGER,
        TaskStatus.APPROVED: Team.PRODUCTION,
        TaskStatus.IN_PRODUCTION: Team.PRODUCTION,
        TaskStatus.READY_DELIVERY: Team.SALES,
        TaskStatus.DELIVERED: None,
        TaskStatus.CANCELLED: None,
    }
)


class StatusPolicy:
    """Read-only view over a status workflow table.

    Every method is a pure function of the table; calling any of them
    twice with the same arguments returns equal results.

    Example:
        >>> policy = StatusPolicy()
        >>> policy.can_transition(
        ...     TaskStatus.PENDING_APPROVAL, TaskStatus.APPROVED, Role.MANAGER
        ... )
        True
    """

    def __init__(
        self,
        workflow: Mapping[TaskStatus, StatusRule] = STATUS_WORKFLOW,
        target_teams: Mapping[TaskStatus, Team | None] = TARGET_TEAM_FOR_STATUS,
    ) -> None:
        """Initialize the policy.

        Args:
            workflow: Status table; defaults to the shop workflow.
            target_teams: Status to responsible team lookup.
        """
        self._workflow = workflow
        self._target_teams = target_teams

    def _rule(self, status: TaskStatus) -> StatusRule:
        return self._workflow.get(status, _NO_TRANSITIONS)

    def allowed_roles(self, status: TaskStatus) -> frozenset[Role]:
        """Roles that may move a task out of ``status``."""
        return self._rule(status).allowed_roles

    def next_statuses(self, status: TaskStatus) -> frozenset[TaskStatus]:
        """Statuses a task in ``status`` may move to."""
        return self._rule(status).next_statuses

    def can_transition(
        self,
        current: TaskStatus,
        requested: TaskStatus,
        role: Role,
    ) -> bool:
        """Check whether ``role`` may move a task from ``current`` to ``requested``.

        Args:
            current: Status the task is in.
            requested: Status being requested.
            role: Role of the acting user.

        Returns:
            True iff role is allowed on ``current`` and ``requested`` is a
            permitted next status.
        """
        rule = self._rule(current)
        return role in rule.allowed_roles and requested in rule.next_statuses

    def available_next_statuses(
        self,
        current: TaskStatus,
        role: Role,
    ) -> frozenset[TaskStatus]:
        """Next statuses ``role`` may pick from ``current``; empty if not permitted."""
        rule = self._rule(current)
        if role not in rule.allowed_roles:
            return frozenset()
        return rule.next_statuses

    def is_terminal(self, status: TaskStatus) -> bool:
        """Check whether ``status`` admits no outgoing transitions."""
        return not self._rule(status).next_statuses

    def target_team_for_status(self, status: TaskStatus) -> Team | None:
        """Team responsible for a task in ``status``, if any."""
        return self._target_teams.get(status)
