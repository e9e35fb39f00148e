"""API route modules."""

from printflow.api.routes.notifications import router as notifications_router
from printflow.api.routes.tasks import router as tasks_router
from printflow.api.routes.workflow import router as workflow_router

__all__: list[str] = ["notifications_router", "tasks_router", "workflow_router"]
