"""Task ORM — persists the sole managed resource.

Invariants:
    - id is UUID primary key, generated on insert, never reassigned
    - title is non-nullable text; emptiness is rejected before the row is built
    - status/priority stored as their enum string values
    - created_at/updated_at are owned by the store, never client-supplied

Design Decisions:
    - String columns + CHECK constraints over native DB enum types: the value
      sets are validated in core/validate_task.py first, the constraints only
      catch writes that bypass the store
    - Generic Uuid type: native uuid on PostgreSQL, CHAR(32) on SQLite tests
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from task_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Task row."""
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint("title <> ''", name="ck_tasks_title_not_empty"),
        CheckConstraint(
            "status IN ('pending', 'in-progress', 'completed')",
            name="ck_tasks_status",
        ),
        CheckConstraint(
            "priority IN ('low', 'medium', 'high')",
            name="ck_tasks_priority",
        ),
        Index("ix_tasks_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending",
    )
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default="medium",
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
