"""Structured logging — JSON formatter fields and setup idempotence."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, "member %s", ("created",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.test"
    assert payload["message"] == "member created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extra_fields_only():
    payload = json.loads(JSONFormatter().format(_record(
        error_code="NATIONAL_ID_ALREADY_EXISTS", national_id="123", secret="x",
    )))
    assert payload["error_code"] == "NATIONAL_ID_ALREADY_EXISTS"
    assert payload["national_id"] == "123"
    assert "secret" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        assert len(logging.root.handlers) == len(before) + 1
        assert logging.root.level == logging.WARNING
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
