"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - The service depends on these five operations, not on any query language
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Identifiers cross the boundary as raw strings: parsing belongs to the store
"""

from typing import Any, Protocol

from task_api.core.domain_types import TaskRecord


class TaskStore(Protocol):
    """Contract for task persistence: implemented by shell."""
    async def insert(self, fields: dict[str, Any]) -> TaskRecord: ...
    async def find_all(self) -> list[TaskRecord]: ...
    async def find_by_id(self, task_id: str) -> TaskRecord | None: ...
    async def update_by_id(
        self, task_id: str, partial_fields: dict[str, Any],
    ) -> TaskRecord | None: ...
    async def delete_by_id(self, task_id: str) -> bool: ...
