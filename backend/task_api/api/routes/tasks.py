"""Task Routes — HTTP transport for the five Task CRUD verbs.

Invariants:
    - Routes are thin: parse body, call TaskService, render Outcome
    - task_id is taken as a plain string so malformed ids become 404, not 422
    - Failures are raised by the service and rendered by api/error_handlers.py

Design Decisions:
    - TaskService built per request from the app-wide DatabaseSessionManager
      (ADR: explicit persistence handle, no module-level db singleton)
    - PATCH shares the PUT handler: both are partial updates
"""

from fastapi import APIRouter, Depends, status

from task_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from task_api.infrastructure.task_store import SqlTaskStore
from task_api.schemas.task import TaskPayload
from task_api.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> TaskService:
    return TaskService(SqlTaskStore(db))


@router.get("", status_code=status.HTTP_200_OK)
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """List every task."""
    outcome = await service.list_tasks()
    return outcome.to_response()


@router.get("/{task_id}", status_code=status.HTTP_200_OK)
async def get_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Get a single task by id."""
    outcome = await service.get_task(task_id)
    return outcome.to_response()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskPayload, service: TaskService = Depends(get_task_service),
):
    """Create a task. title is required; status/priority default."""
    outcome = await service.create_task(body.supplied_fields())
    return outcome.to_response()


@router.put("/{task_id}", status_code=status.HTTP_200_OK)
@router.patch("/{task_id}", status_code=status.HTTP_200_OK)
async def update_task(
    task_id: str,
    body: TaskPayload,
    service: TaskService = Depends(get_task_service),
):
    """Apply the supplied fields to an existing task."""
    outcome = await service.update_task(task_id, body.supplied_fields())
    return outcome.to_response()


@router.delete("/{task_id}", status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Permanently delete a task."""
    outcome = await service.delete_task(task_id)
    return outcome.to_response()
