"""Notification template registry.

Maps each notification kind to a title, a message builder and a
priority. Rendering is a pure function of (kind, context).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from printflow.domain.errors.notification import InvalidTemplateError
from printflow.domain.models.notification import NotificationKind, NotificationPriority


@dataclass(frozen=True)
class TemplateContext:
    """Values a template may interpolate.

    Attributes:
        task_title: Title of the task the event concerns.
        new_status: Human-readable status label, for status updates.
        reason: Rejection reason, if the actor supplied one.
    """

    task_title: str
    new_status: str | None = None
    reason: str | None = None


@dataclass(frozen=True)
class RenderedNotification:
    """Output of rendering a template."""

    title: str
    message: str
    priority: NotificationPriority


MessageBuilder = Callable[[TemplateContext], str]


@dataclass(frozen=True)
class NotificationTemplate:
    """Template for one notification kind."""

    title: str
    message: MessageBuilder
    priority: NotificationPriority


def _updated_message(ctx: TemplateContext) -> str:
    if ctx.new_status:
        return f'Task "{ctx.task_title}" moved to {ctx.new_status}'
    return f'Task "{ctx.task_title}" was updated'


def _rejected_message(ctx: TemplateContext) -> str:
    message = f'Task "{ctx.task_title}" was rejected and returned to design review'
    if ctx.reason:
        message += f". Reason: {ctx.reason}"
    return message


DEFAULT_TEMPLATES: Mapping[NotificationKind, NotificationTemplate] = MappingProxyType(
    {
        NotificationKind.TASK_ASSIGNED: NotificationTemplate(
            title="New task assigned",
            message=lambda ctx: f'You have been assigned a new task: "{ctx.task_title}"',
            priority=NotificationPriority.MEDIUM,
        ),
        NotificationKind.TASK_UPDATED: NotificationTemplate(
            title="Task updated",
            message=_updated_message,
            priority=NotificationPriority.LOW,
        ),
        NotificationKind.APPROVAL_NEEDED: NotificationTemplate(
            title="Approval needed",
            message=lambda ctx: f'Task "{ctx.task_title}" is waiting for your approval',
            priority=NotificationPriority.HIGH,
        ),
        NotificationKind.TASK_APPROVED: NotificationTemplate(
            title="Task approved",
            message=lambda ctx: f'Task "{ctx.task_title}" was approved and can go to production',
            priority=NotificationPriority.MEDIUM,
        ),
        NotificationKind.TASK_REJECTED: NotificationTemplate(
            title="Task rejected",
            message=_rejected_message,
            priority=NotificationPriority.HIGH,
        ),
        NotificationKind.TASK_COMPLETED: NotificationTemplate(
            title="Task completed",
            message=lambda ctx: f'Task "{ctx.task_title}" was delivered to the client',
            priority=NotificationPriority.MEDIUM,
        ),
    }
)


class NotificationTemplateRegistry:
    """Lookup and rendering of notification templates."""

    def __init__(
        self,
        templates: Mapping[NotificationKind, NotificationTemplate] = DEFAULT_TEMPLATES,
    ) -> None:
        self._templates = templates

    def get(self, kind: NotificationKind) -> NotificationTemplate | None:
        """Return the template for ``kind``, or None if unregistered."""
        return self._templates.get(kind)

    def render(
        self,
        kind: NotificationKind,
        context: TemplateContext,
    ) -> RenderedNotification:
        """Render the template registered for ``kind``.

        Args:
            kind: Notification kind.
            context: Values to interpolate.

        Returns:
            Rendered title, message and priority.

        Raises:
            InvalidTemplateError: If no template is registered for ``kind``.
        """
        template = self.get(kind)
        if template is None:
            raise InvalidTemplateError(str(kind))
        return RenderedNotification(
            title=template.title,
            message=template.message(context),
            priority=template.priority,
        )

    def kinds(self) -> frozenset[NotificationKind]:
        """All registered kinds."""
        return frozenset(self._templates)
