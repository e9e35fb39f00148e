"""FastAPI dependencies for the PrintFlow API."""

from printflow.api.dependencies.actor import get_actor
from printflow.api.dependencies.workflow import (
    get_notification_dispatcher,
    get_workflow_engine,
    get_workflow_services,
    set_workflow_services,
)

__all__ = [
    "get_actor",
    "get_notification_dispatcher",
    "get_workflow_engine",
    "get_workflow_services",
    "set_workflow_services",
]
