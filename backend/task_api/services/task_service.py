"""Task Service — one store call per request, uniform outcomes.

Invariants:
    - create rejects a missing/empty title before the store is touched
    - update/delete of an unknown (or malformed) id raises NotFoundError
    - update applies only supplied fields; id/createdAt/updatedAt never writable
    - No store exception escapes unmapped: anything that is not already a
      TaskApiError becomes StoreUnavailableError

Design Decisions:
    - Depends on the TaskStore protocol, not SqlTaskStore: tests swap in fakes
    - Returns Outcome on success and raises on failure; the API layer renders
      both through the same envelope
"""

import logging
from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

from task_api.core.errors import (
    NotFoundError, StoreUnavailableError, TaskApiError, ValidationError,
)
from task_api.core.outcome import Outcome
from task_api.core.repository_protocols import TaskStore
from task_api.core.validate_task import (
    is_title_missing, recognized_fields, require_valid,
)
from task_api.core.domain_types import TaskRecord
from task_api.schemas.task import TaskResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RESOURCE = "Task"


class TaskService:
    """CRUD orchestration for the Task resource."""

    def __init__(self, store: TaskStore):
        self._store = store

    async def list_tasks(self) -> Outcome:
        records = await self._call("find_all", self._store.find_all())
        return Outcome.ok([_to_wire(r) for r in records])

    async def get_task(self, task_id: str) -> Outcome:
        record = await self._call("find_by_id", self._store.find_by_id(task_id))
        if record is None:
            raise NotFoundError(_RESOURCE, task_id)
        return Outcome.ok(_to_wire(record))

    async def create_task(self, payload: Mapping[str, Any]) -> Outcome:
        fields = recognized_fields(payload)
        if is_title_missing(fields):
            raise ValidationError(
                "title is required",
                [{"field": "title", "message": "title is required"}],
            )
        require_valid(fields, partial=False)
        record = await self._call("insert", self._store.insert(fields))
        return Outcome.ok(_to_wire(record))

    async def update_task(
        self, task_id: str, payload: Mapping[str, Any],
    ) -> Outcome:
        fields = recognized_fields(payload)
        require_valid(fields, partial=True)
        record = await self._call(
            "update_by_id", self._store.update_by_id(task_id, fields),
        )
        if record is None:
            raise NotFoundError(_RESOURCE, task_id)
        return Outcome.ok(_to_wire(record))

    async def delete_task(self, task_id: str) -> Outcome:
        deleted = await self._call(
            "delete_by_id", self._store.delete_by_id(task_id),
        )
        if not deleted:
            raise NotFoundError(_RESOURCE, task_id)
        return Outcome.empty()

    async def _call(self, operation: str, pending: Awaitable[T]) -> T:
        """Await a store call, translating foreign failures into the taxonomy."""
        try:
            return await pending
        except TaskApiError:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected store failure during {operation}: {e}",
                exc_info=True,
                extra={"operation": operation},
            )
            raise StoreUnavailableError("Unexpected store failure", operation) from e


def _to_wire(record: TaskRecord) -> dict[str, Any]:
    return TaskResponse.from_record(record).to_wire()
