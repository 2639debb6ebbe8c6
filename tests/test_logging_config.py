"""
Tests for structured JSON logging configuration.

Tests logging_config.py module functionality.
"""

import json
import logging
from io import StringIO

import pytest

from idea_vault.logging_config import CONTEXT_FIELDS, JSONFormatter, setup_logging


def _record(msg="Test message", level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord(
        name="test_logger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def test_basic_log_formatting(self):
        """Test that basic log record is formatted as JSON."""
        log_data = json.loads(JSONFormatter().format(_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test_logger"
        assert log_data["message"] == "Test message"
        assert log_data["module"] == "test_module"
        assert log_data["function"] == "test_function"
        assert log_data["line"] == 42
        assert log_data["timestamp"].endswith("Z")

    @pytest.mark.parametrize("field", CONTEXT_FIELDS)
    def test_context_fields_included(self, field):
        """Test that each context field is copied when present."""
        log_data = json.loads(JSONFormatter().format(_record(**{field: "value"})))
        assert log_data[field] == "value"

    def test_context_fields_omitted_when_absent(self):
        log_data = json.loads(JSONFormatter().format(_record()))
        for field in CONTEXT_FIELDS:
            assert field not in log_data

    def test_non_serializable_context_value(self):
        """Test that values json cannot encode fall back to str()."""
        log_data = json.loads(JSONFormatter().format(_record(idea_id=object())))
        assert log_data["idea_id"].startswith("<object object")

    def test_log_with_exception(self):
        """Test that exception info is included."""
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys

            record = _record("Error occurred", level=logging.ERROR, exc_info=sys.exc_info())

        log_data = json.loads(JSONFormatter().format(record))

        assert "exception" in log_data
        assert "ValueError: Test exception" in log_data["exception"]


class TestSetupLogging:
    """Test setup_logging function."""

    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_json_handler(self):
        setup_logging(level="INFO")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.INFO

    def test_level_is_case_insensitive(self):
        setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_noisy_libraries(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_output_is_json(self):
        setup_logging(level="INFO")
        stream = StringIO()
        logging.getLogger().handlers[0].setStream(stream)

        logging.getLogger("idea_vault.test").info("classified", extra={"record_type": "tool"})

        log_data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert log_data["message"] == "classified"
        assert log_data["record_type"] == "tool"
