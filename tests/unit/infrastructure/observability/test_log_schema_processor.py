from todo_list_api.infrastructure.observability.logging.log_schema_processor import (
    log_schema_processor,
)


def test_nests_known_blocks_and_keeps_extra(monkeypatch):
    monkeypatch.setenv("SERVICE_NAME", "todo-test")
    monkeypatch.setenv("APP_ENV", "qa")
    event = {
        "event": "Request processed",
        "level": "info",
        "timestamp": "2030-01-01T00:00:00Z",
        "correlation_id": "abc",
        "processing_status": "SUCCESS",
        "processing_duration_ms": "12.5",
        "processing_http_status": 200,
        "context_component": "api",
        "context_endpoint": "/tasks",
        "context_method": "GET",
        "task_id": "42",
    }

    result = log_schema_processor(None, "info", event)

    assert result["message"] == "Request processed"
    assert result["service"] == "todo-test"
    assert result["environment"] == "qa"
    assert result["correlation_id"] == "abc"
    assert result["processing"] == {"status": "SUCCESS", "duration_ms": 12.5, "http_status": 200}
    assert result["context"] == {"component": "api", "endpoint": "/tasks", "method": "GET"}
    assert result["extra"] == {"task_id": "42"}
    assert "error" not in result


def test_error_block_and_bad_duration():
    event = {
        "event": "Unhandled error",
        "processing_status": "ERROR",
        "processing_duration_ms": "n/a",
        "error_type": "OperationalError",
        "error_details": "database is locked",
    }

    result = log_schema_processor(None, "error", event)

    assert result["error"] == {"type": "OperationalError", "details": "database is locked"}
    assert result["processing"]["duration_ms"] is None
    assert "context" not in result
    assert "extra" not in result
