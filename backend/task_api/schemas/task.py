"""Task Schemas — Pydantic models for the HTTP boundary.

Invariants:
    - TaskPayload accepts only JSON-typed shapes; semantic checks (non-empty
      title, enum membership) live in core/validate_task.py
    - Unknown keys (id, createdAt, anything else) are ignored, never rejected
    - TaskResponse always serializes with camelCase wire names

Design Decisions:
    - status/priority typed as str here, not Literal: an out-of-set value must
      produce the same field-level message whether it arrives over HTTP or
      through the service directly
    - exclude_unset on dump: distinguishes "absent" from explicit null for
      partial updates
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from task_api.core.domain_types import TaskPriority, TaskRecord, TaskStatus


class TaskPayload(BaseModel):
    """Create/update body: every key optional, unknown keys dropped."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: datetime | None = Field(None, alias="dueDate")

    def supplied_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskResponse(BaseModel):
    """Public task representation."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: TaskRecord) -> "TaskResponse":
        return cls.model_validate(record)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
