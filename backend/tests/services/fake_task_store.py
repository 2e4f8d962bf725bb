"""In-memory TaskStore fakes for service-level tests.

FakeTaskStore honours the TaskStore protocol (validation, id parsing,
partial updates) and logs every call so tests can assert which store
operations a service method touched. FailingTaskStore raises a foreign
exception from every operation.
"""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from task_api.core.domain_types import TaskId, TaskRecord, parse_task_id
from task_api.core.validate_task import require_valid


class FakeTaskStore:
    def __init__(self):
        self.records: dict[TaskId, TaskRecord] = {}
        self.calls: list[str] = []

    async def insert(self, fields):
        self.calls.append("insert")
        values = require_valid(fields)
        now = datetime.now(timezone.utc)
        record = TaskRecord(
            id=TaskId(uuid4()), created_at=now, updated_at=now, **values,
        )
        self.records[record.id] = record
        return record

    async def find_all(self):
        self.calls.append("find_all")
        return list(self.records.values())

    async def find_by_id(self, task_id):
        self.calls.append("find_by_id")
        key = parse_task_id(task_id)
        return self.records.get(key) if key else None

    async def update_by_id(self, task_id, partial_fields):
        self.calls.append("update_by_id")
        values = require_valid(partial_fields, partial=True)
        key = parse_task_id(task_id)
        if key is None or key not in self.records:
            return None
        record = replace(
            self.records[key], updated_at=datetime.now(timezone.utc), **values,
        )
        self.records[key] = record
        return record

    async def delete_by_id(self, task_id):
        self.calls.append("delete_by_id")
        key = parse_task_id(task_id)
        return self.records.pop(key, None) is not None if key else False


class FailingTaskStore:
    def __init__(self, exc: Exception | None = None):
        self._exc = exc or ConnectionError("connection refused")

    async def insert(self, fields):
        raise self._exc

    async def find_all(self):
        raise self._exc

    async def find_by_id(self, task_id):
        raise self._exc

    async def update_by_id(self, task_id, partial_fields):
        raise self._exc

    async def delete_by_id(self, task_id):
        raise self._exc
