"""Task Store — persistence contract against a real (SQLite) database.

Invariants:
    - insert validates, generates id and timestamps, applies defaults
    - malformed ids are "absent" for find/update/delete
    - update touches only supplied fields and refreshes updated_at
    - delete is one-shot
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from task_api.core.domain_types import TaskPriority, TaskStatus
from task_api.core.errors import ValidationError


# ─── insert ──────────────────────────────────────────────────────

async def test_insert_applies_defaults(store):
    record = await store.insert({"title": "Test Task"})
    assert record.title == "Test Task"
    assert record.description == ""
    assert record.status is TaskStatus.PENDING
    assert record.priority is TaskPriority.MEDIUM
    assert record.due_date is None
    assert record.created_at == record.updated_at
    assert record.created_at.tzinfo is not None


async def test_insert_persists_supplied_fields(store):
    due = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)
    record = await store.insert({
        "title": "New Task",
        "description": "New Description",
        "status": "in-progress",
        "priority": "high",
        "due_date": due,
    })
    found = await store.find_by_id(str(record.id))
    assert found == record
    assert found.status is TaskStatus.IN_PROGRESS
    assert found.priority is TaskPriority.HIGH
    assert found.due_date == due


async def test_insert_generates_unique_ids(store):
    a = await store.insert({"title": "A"})
    b = await store.insert({"title": "B"})
    assert a.id != b.id


async def test_insert_rejects_empty_title_and_persists_nothing(store):
    with pytest.raises(ValidationError):
        await store.insert({"title": "", "status": "pending"})
    assert await store.find_all() == []


async def test_insert_rejects_unknown_status(store):
    with pytest.raises(ValidationError) as exc_info:
        await store.insert({"title": "t", "status": "archived"})
    assert exc_info.value.field_errors[0]["field"] == "status"
    assert await store.find_all() == []


# ─── find ────────────────────────────────────────────────────────

async def test_find_all_empty(store):
    assert await store.find_all() == []


async def test_find_all_returns_every_record_in_insertion_order(store):
    first = await store.insert({"title": "Test Task 1", "priority": "low"})
    second = await store.insert({"title": "Test Task 2", "status": "in-progress"})
    assert [r.id for r in await store.find_all()] == [first.id, second.id]


async def test_find_by_id_unknown_returns_none(store):
    await store.insert({"title": "t"})
    assert await store.find_by_id(str(uuid4())) is None


@pytest.mark.parametrize("raw", ["", "nope", "65f1c2a9e4b0a1b2c3d4e5f6"])
async def test_find_by_id_malformed_returns_none(store, raw):
    assert await store.find_by_id(raw) is None


# ─── update ──────────────────────────────────────────────────────

async def test_update_changes_only_supplied_fields(store):
    due = datetime(2031, 1, 1, tzinfo=timezone.utc)
    created = await store.insert({
        "title": "Test Task", "description": "keep me",
        "priority": "low", "due_date": due,
    })
    updated = await store.update_by_id(str(created.id), {"status": "completed"})
    assert updated.status is TaskStatus.COMPLETED
    assert updated.title == created.title
    assert updated.description == created.description
    assert updated.priority == created.priority
    assert updated.due_date == created.due_date
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at


async def test_update_is_visible_to_subsequent_reads(store):
    created = await store.insert({"title": "Test Task"})
    await store.update_by_id(str(created.id), {"title": "Updated Task"})
    found = await store.find_by_id(str(created.id))
    assert found.title == "Updated Task"


async def test_update_allows_any_status_transition(store):
    created = await store.insert({"title": "t", "status": "completed"})
    updated = await store.update_by_id(str(created.id), {"status": "pending"})
    assert updated.status is TaskStatus.PENDING


async def test_update_rejects_invalid_enum_and_leaves_record(store):
    created = await store.insert({"title": "t"})
    with pytest.raises(ValidationError):
        await store.update_by_id(str(created.id), {"priority": "urgent"})
    assert await store.find_by_id(str(created.id)) == created


async def test_update_unknown_id_returns_none(store):
    assert await store.update_by_id(str(uuid4()), {"title": "x"}) is None


async def test_update_malformed_id_returns_none(store):
    assert await store.update_by_id("not-an-id", {"title": "x"}) is None


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_is_one_shot(store):
    created = await store.insert({"title": "t"})
    assert await store.delete_by_id(str(created.id)) is True
    assert await store.delete_by_id(str(created.id)) is False
    assert await store.find_by_id(str(created.id)) is None


async def test_delete_unknown_leaves_count_unchanged(store):
    await store.insert({"title": "t"})
    assert await store.delete_by_id(str(uuid4())) is False
    assert await store.delete_by_id("garbage") is False
    assert len(await store.find_all()) == 1


async def test_round_trip_create_n_delete_n(store):
    records = [await store.insert({"title": f"Task {i}"}) for i in range(5)]
    assert len(await store.find_all()) == 5
    for record in records:
        assert await store.delete_by_id(str(record.id))
    assert await store.find_all() == []
