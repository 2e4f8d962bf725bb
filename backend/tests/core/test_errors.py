"""Error Hierarchy — status codes, categories and the failure envelope."""

from task_api.core.errors import (
    ErrorCategory, ErrorSeverity, NotFoundError, StoreUnavailableError,
    TaskApiError, ValidationError,
)


def test_validation_error_is_400_with_field_details():
    err = ValidationError("title is required", [{"field": "title", "message": "title is required"}])
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.to_response() == {
        "success": False,
        "message": "title is required",
        "code": "VALIDATION_ERROR",
        "errors": [{"field": "title", "message": "title is required"}],
    }


def test_not_found_error_is_404_and_carries_id():
    err = NotFoundError("Task", "abc")
    assert err.http_status == 404
    assert err.message == "Task 'abc' not found"
    assert err.context.task_id == "abc"
    assert err.to_response()["success"] is False


def test_store_unavailable_is_500_and_critical():
    err = StoreUnavailableError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.context.operation == "execute"
    assert err.to_response() == {
        "success": False,
        "message": "Store execute failed: Connection or operational error",
        "code": "STORE_UNAVAILABLE",
    }


def test_all_errors_share_the_base():
    for err in (
        ValidationError("x"),
        NotFoundError("Task", "1"),
        StoreUnavailableError("x", "query"),
    ):
        assert isinstance(err, TaskApiError)


def test_every_category_is_raised_by_some_error():
    raised = {
        ValidationError("x").category,
        NotFoundError("Task", "x").category,
        StoreUnavailableError("x", "execute").category,
    }
    assert raised == set(ErrorCategory)
