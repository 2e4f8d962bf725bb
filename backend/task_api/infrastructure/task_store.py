"""Task Store — schema-level persistence of Task records.

Invariants:
    - Fields are validated at write time (insert and update) via core/validate_task.py
    - Malformed identifiers short-circuit to "absent" without touching the database
    - One session and one transaction per operation: concurrent readers see the
      pre- or post-mutation row, never a partial write
    - created_at/updated_at set here only; updated_at refreshed on every update
    - Timestamps stored in UTC (dueDate arrives UTC-normalized from validation);
      naive values read back are tagged UTC
    - No caching: every read hits the database

Design Decisions:
    - Returns immutable TaskRecord, never ORM rows: the service cannot mutate
      persistence state behind the store's back
    - SELECT ... FOR UPDATE before a partial update: the row cannot vanish or be
      rewritten between read and write (ignored by SQLite, which serializes writers)
    - Hard delete via a single DELETE statement; rowcount decides found/not-found
"""

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from sqlalchemy import delete, select

from task_api.core.domain_types import (
    TaskId, TaskPriority, TaskRecord, TaskStatus, parse_task_id,
)
from task_api.core.validate_task import require_valid
from task_api.infrastructure.database import DatabaseSessionManager
from task_api.models.task import Task as TaskModel

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _column_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _to_record(row: TaskModel) -> TaskRecord:
    return TaskRecord(
        id=TaskId(row.id),
        title=row.title,
        description=row.description,
        status=TaskStatus(row.status),
        priority=TaskPriority(row.priority),
        due_date=_as_utc(row.due_date),
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


class SqlTaskStore:
    """Task persistence over an explicitly passed DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, fields: dict[str, Any]) -> TaskRecord:
        values = require_valid(fields, partial=False)
        now = _utcnow()
        row = TaskModel(
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
            **{name: _column_value(v) for name, v in values.items()},
        )
        async with self._db.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            record = _to_record(row)
        logger.info(
            f"Task {record.id} created",
            extra={"task_id": str(record.id), "operation": "insert"},
        )
        return record

    async def find_all(self) -> list[TaskRecord]:
        async with self._db.session() as db:
            result = await db.execute(
                select(TaskModel).order_by(TaskModel.created_at, TaskModel.id),
            )
            return [_to_record(row) for row in result.scalars().all()]

    async def find_by_id(self, task_id: str) -> TaskRecord | None:
        key = parse_task_id(task_id)
        if key is None:
            return None
        async with self._db.session() as db:
            row = await db.get(TaskModel, key)
            return _to_record(row) if row else None

    async def update_by_id(
        self, task_id: str, partial_fields: dict[str, Any],
    ) -> TaskRecord | None:
        values = require_valid(partial_fields, partial=True)
        key = parse_task_id(task_id)
        if key is None:
            return None
        async with self._db.session() as db:
            result = await db.execute(
                select(TaskModel).where(TaskModel.id == key).with_for_update(),
            )
            row = result.scalar_one_or_none()
            if row is None:
                return None
            for name, value in values.items():
                setattr(row, name, _column_value(value))
            row.updated_at = _utcnow()
            await db.commit()
            await db.refresh(row)
            record = _to_record(row)
        logger.info(
            f"Task {record.id} updated ({', '.join(sorted(values)) or 'no fields'})",
            extra={"task_id": str(record.id), "operation": "update"},
        )
        return record

    async def delete_by_id(self, task_id: str) -> bool:
        key = parse_task_id(task_id)
        if key is None:
            return False
        async with self._db.session() as db:
            result = await db.execute(
                delete(TaskModel).where(TaskModel.id == key),
            )
            await db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(
                f"Task {key} deleted",
                extra={"task_id": str(key), "operation": "delete"},
            )
        return deleted

