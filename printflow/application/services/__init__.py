"""Application services: notification dispatch and the workflow engine."""

from printflow.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from printflow.application.services.workflow_engine import (
    TaskFilters,
    TransitionResult,
    WorkflowEngine,
)

__all__: list[str] = [
    "NotificationDispatcher",
    "TaskFilters",
    "TransitionResult",
    "WorkflowEngine",
]
