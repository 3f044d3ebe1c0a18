"""Structured Logging: JSON formatter output and root handler setup."""

import json
import logging

import pytest

from weather_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "weather_api.test", logging.INFO, __file__, 1, "Weather created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "weather_api.test"
    assert log["message"] == "Weather created"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(_record(weather_id="abc", path="/weathers")))
    assert log["weather_id"] == "abc"
    assert log["path"] == "/weathers"
    assert "error_code" not in log


def test_json_formatter_keeps_non_ascii():
    record = _record()
    record.msg = "Já existe uma previsão com essa descrição."
    assert "previsão" in JSONFormatter().format(record)


def test_json_formatter_ignores_unknown_extras():
    log = json.loads(JSONFormatter().format(_record(method="POST", status_code=201)))
    assert "method" not in log
    assert "status_code" not in log


def test_json_formatter_uses_record_time():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter().format(record))
    assert log["timestamp"] == "1970-01-01T00:00:00+00:00"


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_setup_logging_replaces_its_own_handler(root_logger):
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")

    assert first not in root_logger.handlers
    assert second in root_logger.handlers
    assert root_logger.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)


def test_setup_logging_unknown_level_falls_back_to_info(root_logger):
    handler = setup_logging("chatty", "JSON")

    assert root_logger.level == logging.INFO
    assert isinstance(handler.formatter, JSONFormatter)
