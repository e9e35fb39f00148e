"""Workflow service dependencies.

FastAPI dependency injection for the wired workflow services. The app
factory sets the services at startup; tests set them directly.
"""

from printflow.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from printflow.application.services.workflow_engine import WorkflowEngine
from printflow.bootstrap.workflow import WorkflowServices

# Set at startup
_workflow_services: WorkflowServices | None = None


def get_workflow_services() -> WorkflowServices:
    """Get the wired workflow services.

    Raises:
        RuntimeError: If services were not set (startup error).
    """
    if _workflow_services is None:
        raise RuntimeError(
            "WorkflowServices not initialized. "
            "Call set_workflow_services() during startup."
        )
    return _workflow_services


def set_workflow_services(services: WorkflowServices | None) -> None:
    """Set (or with None, reset) the workflow services.

    Args:
        services: The services to serve requests with.
    """
    global _workflow_services
    _workflow_services = services


def get_workflow_engine() -> WorkflowEngine:
    """FastAPI dependency providing the workflow engine."""
    return get_workflow_services().engine


def get_notification_dispatcher() -> NotificationDispatcher:
    """FastAPI dependency providing the notification dispatcher."""
    return get_workflow_services().dispatcher


__all__ = [
    "get_notification_dispatcher",
    "get_workflow_engine",
    "get_workflow_services",
    "set_workflow_services",
]
