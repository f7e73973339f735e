"""Tests for structured logging — JSON shape and extra fields."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.ERROR, __file__, 1, "Project %s failed", (7,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "app.test"
    assert log["message"] == "Project 7 failed"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="DATABASE_ERROR", project_id=7, unrelated="x"),
    ))
    assert log["error_code"] == "DATABASE_ERROR"
    assert log["project_id"] == 7
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        import sys
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in log["exception"]


def test_setup_logging_replaces_its_handler():
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
