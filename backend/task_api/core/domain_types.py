"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps UUID: never use bare strings as keys in domain logic
    - TaskStatus and TaskPriority encode every valid value: no raw string matching
    - TaskRecord is immutable; the Store hands out copies, never live ORM rows

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - parse_task_id is pure: malformed input returns None, the caller decides
      what "absent" means (ADR: not-found without a round-trip to the store)
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task status: freely settable, no transition restrictions."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_STATUS = TaskStatus.PENDING
DEFAULT_PRIORITY = TaskPriority.MEDIUM


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class TaskRecord:
    """Persisted task as seen by the service layer."""
    id: TaskId
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime


def parse_task_id(raw: object) -> TaskId | None:
    """Parse an external identifier into the store's key type, or None."""
    if isinstance(raw, UUID):
        return TaskId(raw)
    if not isinstance(raw, str):
        return None
    try:
        return TaskId(UUID(raw.strip()))
    except ValueError:
        return None
