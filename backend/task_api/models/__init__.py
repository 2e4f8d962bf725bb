"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before
      create_all() or alembic autogenerate runs
"""

from task_api.models.task import Task  # noqa: F401
