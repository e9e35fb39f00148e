"""Task workflow API routes.

FastAPI router for print jobs:
- Create, list, fetch, edit and delete jobs
- Request status transitions
- Add comments to the audit trail

Developer Golden Rules:
1. The workflow engine does every mutation - routes only translate
2. Domain errors map to RFC 7807 responses (404, 403, 400)
3. The actor comes from identity headers (see dependencies.actor)
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from printflow.api.dependencies.actor import get_actor
from printflow.api.dependencies.workflow import get_workflow_engine
from printflow.api.models.tasks import (
    CommentRequest,
    CreateTaskRequest,
    NoteResponse,
    ProblemResponse,
    StatusChangeRequest,
    TaskListResponse,
    TaskResponse,
    TransitionResponse,
    UpdateTaskRequest,
)
from printflow.api.problems import problem_response
from printflow.application.services.workflow_engine import TaskFilters, WorkflowEngine
from printflow.domain.errors.task import TaskNotFoundError, TransitionForbiddenError
from printflow.domain.models.actor import Actor, Team
from printflow.domain.models.task import TaskPriority, TaskStatus

router = APIRouter(prefix="/v1/tasks", tags=["tasks"])

_NOT_FOUND = {"model": ProblemResponse, "description": "Task not found"}
_BAD_REQUEST = {"model": ProblemResponse, "description": "Invalid input"}


def _not_found(e: TaskNotFoundError, instance: str) -> JSONResponse:
    return problem_response(404, "task-not-found", "Task Not Found", str(e), instance)


def _bad_request(e: ValueError, instance: str) -> JSONResponse:
    return problem_response(400, "invalid-input", "Invalid Input", str(e), instance)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    responses={400: _BAD_REQUEST},
)
async def create_task(
    body: CreateTaskRequest,
    actor: Actor = Depends(get_actor),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> TaskResponse:
    """Open a new print job in pending-design and notify the assigned team."""
    try:
        draft = body.to_draft()
    except ValueError as e:
        return _bad_request(e, "/v1/tasks")
    task = await engine.create_task(draft, actor)
    return TaskResponse.from_domain(task)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    status: TaskStatus | None = Query(None, description="Only tasks in this status"),
    priority: TaskPriority | None = Query(None),
    assigned_team: Team | None = Query(None),
    due_from: datetime | None = Query(None, description="Due on or after"),
    due_to: datetime | None = Query(None, description="Due on or before"),
    search: str | None = Query(None, description="Matches title or client name"),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> TaskListResponse:
    """List the task board with optional filters."""
    filters = TaskFilters(
        status=status,
        priority=priority,
        assigned_team=assigned_team,
        due_from=due_from,
        due_to=due_to,
        search=search,
    )
    tasks = await engine.list_tasks(filters)
    return TaskListResponse(
        items=[TaskResponse.from_domain(t) for t in tasks],
        total=len(tasks),
    )


@router.get("/{task_id}", response_model=TaskResponse, responses={404: _NOT_FOUND})
async def get_task(
    task_id: UUID,
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> TaskResponse:
    """Fetch one print job with its audit trail."""
    try:
        task = await engine.get_task(task_id)
    except TaskNotFoundError as e:
        return _not_found(e, f"/v1/tasks/{task_id}")
    return TaskResponse.from_domain(task)


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
async def update_task(
    task_id: UUID,
    body: UpdateTaskRequest,
    actor: Actor = Depends(get_actor),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> TaskResponse:
    """Edit job details. Status changes go through POST /status."""
    instance = f"/v1/tasks/{task_id}"
    try:
        task = await engine.update_task(task_id, body.to_changes(), actor)
    except TaskNotFoundError as e:
        return _not_found(e, instance)
    except ValueError as e:
        return _bad_request(e, instance)
    return TaskResponse.from_domain(task)


@router.delete("/{task_id}", status_code=204, responses={404: _NOT_FOUND})
async def delete_task(
    task_id: UUID,
    actor: Actor = Depends(get_actor),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> Response:
    """Delete a print job regardless of status."""
    if not await engine.delete_task(task_id):
        return _not_found(TaskNotFoundError(task_id), f"/v1/tasks/{task_id}")
    return Response(status_code=204)


@router.post(
    "/{task_id}/status",
    response_model=TransitionResponse,
    responses={
        403: {"model": ProblemResponse, "description": "Role may not make this transition"},
        404: _NOT_FOUND,
    },
)
async def change_status(
    task_id: UUID,
    body: StatusChangeRequest,
    actor: Actor = Depends(get_actor),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> TransitionResponse:
    """Request a status transition on behalf of the actor."""
    instance = f"/v1/tasks/{task_id}/status"
    try:
        result = await engine.request_status_change(task_id, body.status, actor, body.reason)
    except TaskNotFoundError as e:
        return _not_found(e, instance)
    except TransitionForbiddenError as e:
        return problem_response(
            403, "transition-forbidden", "Transition Forbidden", str(e), instance
        )
    return TransitionResponse.from_result(result)


@router.post(
    "/{task_id}/comments",
    response_model=NoteResponse,
    status_code=201,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
async def add_comment(
    task_id: UUID,
    body: CommentRequest,
    actor: Actor = Depends(get_actor),
    engine: WorkflowEngine = Depends(get_workflow_engine),
) -> NoteResponse:
    """Append a comment to the task's audit trail."""
    instance = f"/v1/tasks/{task_id}/comments"
    try:
        note = await engine.add_comment(task_id, actor, body.message)
    except TaskNotFoundError as e:
        return _not_found(e, instance)
    except ValueError as e:
        return _bad_request(e, instance)
    return NoteResponse.from_domain(note)
