"""Pure domain services: status policy and notification templates."""

from printflow.domain.services.notification_templates import (
    DEFAULT_TEMPLATES,
    NotificationTemplate,
    NotificationTemplateRegistry,
    RenderedNotification,
    TemplateContext,
)
from printflow.domain.services.status_policy import (
    STATUS_WORKFLOW,
    TARGET_TEAM_FOR_STATUS,
    StatusPolicy,
    StatusRule,
)

__all__: list[str] = [
    "DEFAULT_TEMPLATES",
    "NotificationTemplate",
    "NotificationTemplateRegistry",
    "RenderedNotification",
    "STATUS_WORKFLOW",
    "StatusPolicy",
    "StatusRule",
    "TARGET_TEAM_FOR_STATUS",
    "TemplateContext",
]
