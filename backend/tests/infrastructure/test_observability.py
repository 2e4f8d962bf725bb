"""Structured Logging — JSON formatter output and idempotent setup."""

import json
import logging

from task_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "task_api.test", logging.INFO, __file__, 1, "Task %s created", ("abc",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "task_api.test"
    assert payload["message"] == "Task abc created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(task_id="abc", operation="insert", unrelated="x"),
    ))
    assert payload["task_id"] == "abc"
    assert payload["operation"] == "insert"
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler.get_name() == "task_api":
                logging.root.removeHandler(handler)
