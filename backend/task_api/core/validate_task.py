"""Task Validation — explicit, pure field validation with a tagged result.

Invariants:
    - Only recognized fields survive (title, description, status, priority, due_date)
    - Unknown keys are dropped, never rejected
    - Enum values outside their set are rejected, never defaulted or coerced
    - Absent and empty/whitespace-only title are both "missing" on create;
      a present title is kept exactly as sent
    - dueDate is normalized to UTC; naive timestamps are taken as UTC
    - partial=True validates only supplied fields and applies no defaults

Design Decisions:
    - Tagged result (ValidTask | InvalidTask) over raising: callers in the shell
      decide how a failure surfaces (ADR: functional core, imperative shell)
    - Wire spelling (dueDate) and attribute spelling (due_date) both accepted
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from task_api.core.domain_types import (
    DEFAULT_PRIORITY, DEFAULT_STATUS, TaskPriority, TaskStatus,
)
from task_api.core.errors import ValidationError

RECOGNIZED_FIELDS = ("title", "description", "status", "priority", "due_date")
_WIRE_ALIASES = {"dueDate": "due_date"}
_WIRE_NAMES = {v: k for k, v in _WIRE_ALIASES.items()}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidTask:
    fields: dict[str, Any]


@dataclass(frozen=True)
class InvalidTask:
    errors: tuple[FieldError, ...]

    @property
    def message(self) -> str:
        return "; ".join(e.message for e in self.errors)


ValidationResult = ValidTask | InvalidTask


def recognized_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Project a payload onto recognized fields, normalizing wire aliases."""
    fields: dict[str, Any] = {}
    for key, value in raw.items():
        name = _WIRE_ALIASES.get(key, key)
        if name in RECOGNIZED_FIELDS:
            fields[name] = value
    return fields


def is_title_missing(raw: Mapping[str, Any]) -> bool:
    title = raw.get("title")
    return title is None or (isinstance(title, str) and not title.strip())


def validate_task_fields(
    raw: Mapping[str, Any], *, partial: bool = False,
) -> ValidationResult:
    """Validate and normalize task fields.

    For creation (partial=False) the result holds every field with defaults
    applied. For updates (partial=True) it holds exactly the supplied fields.
    """
    fields = recognized_fields(raw)
    errors: list[FieldError] = []
    normalized: dict[str, Any] = {}

    if "title" in fields or not partial:
        _check(errors, normalized, "title", _title(fields.get("title")))
    if "description" in fields:
        _check(errors, normalized, "description", _description(fields["description"]))
    if "status" in fields:
        _check(errors, normalized, "status", _enum(TaskStatus, "status", fields["status"]))
    if "priority" in fields:
        _check(errors, normalized, "priority", _enum(TaskPriority, "priority", fields["priority"]))
    if "due_date" in fields:
        _check(errors, normalized, "due_date", _due_date(fields["due_date"]))

    if errors:
        return InvalidTask(tuple(errors))
    if not partial:
        normalized.setdefault("description", "")
        normalized.setdefault("status", DEFAULT_STATUS)
        normalized.setdefault("priority", DEFAULT_PRIORITY)
        normalized.setdefault("due_date", None)
    return ValidTask(normalized)


# ─── Per-field checks: return (value, None) or (None, message) ──

def _check(errors, normalized, name, checked) -> None:
    value, message = checked
    if message:
        errors.append(FieldError(_WIRE_NAMES.get(name, name), message))
    else:
        normalized[name] = value


def _title(value: Any) -> tuple[str | None, str | None]:
    if value is None:
        return None, "title is required"
    if not isinstance(value, str):
        return None, "title must be a string"
    if not value.strip():
        return None, "title is required"
    return value, None


def _description(value: Any) -> tuple[str | None, str | None]:
    if value is None:
        return "", None
    if not isinstance(value, str):
        return None, "description must be a string"
    return value, None


def _enum(enum_cls, name: str, value: Any):
    allowed = ", ".join(m.value for m in enum_cls)
    try:
        return enum_cls(value), None
    except ValueError:
        return None, f"{name} must be one of: {allowed}"


def _due_date(value: Any) -> tuple[datetime | None, str | None]:
    invalid = None, "dueDate must be an ISO-8601 timestamp"
    if value is None:
        return None, None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return invalid
    if not isinstance(value, datetime):
        return invalid
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc), None
    try:
        return value.astimezone(timezone.utc), None
    except OverflowError:
        return invalid


def require_valid(
    raw: Mapping[str, Any], *, partial: bool = False,
) -> dict[str, Any]:
    """validate_task_fields for callers that propagate failure as ValidationError."""
    result = validate_task_fields(raw, partial=partial)
    if isinstance(result, InvalidTask):
        raise ValidationError(
            result.message, [e.to_dict() for e in result.errors],
        )
    return result.fields
