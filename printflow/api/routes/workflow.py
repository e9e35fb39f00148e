"""Workflow policy API routes.

Read-only view of the status policy, used by clients to decide which
transition buttons to show.
"""

from fastapi import APIRouter, Depends, Query

from printflow.api.dependencies.workflow import get_workflow_engine
from printflow.api.models.tasks import NextStatusesResponse
from printflow.application.services.workflow_engine import WorkflowEngine
from printflow.domain.models.actor import Role
from printflow.domain.models.task import TaskStatus

router = APIRouter(prefix="/v1/workflow", tags=["workflow"])


@router.get("/next-statuses", response_model=NextStatusesResponse)
async def get_next_statuses(
    status: TaskStatus = Query(..., description="Current task status"),
    role: Role = Query(..., description="Role of the acting user"),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> NextStatusesResponse:
    """Statuses ``role`` may move a task to from ``status``; empty if none."""
    next_statuses = engine.list_available_next_statuses(status, role)
    return NextStatusesResponse(
        status=status,
        role=role,
        next_statuses=sorted(next_statuses),
    )
