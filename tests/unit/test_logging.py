"""
Tests for logging helpers.
"""

import json
import logging

import pytest

from curve_series.core.logging import (
    JSONFormatter,
    LogContext,
    current_context,
    get_logger,
    log_operation,
    setup_logging,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="curve_series.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Export written",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefix(self):
        """Test names are placed under the package logger."""
        assert get_logger("something").name == "curve_series.something"
        assert get_logger("curve_series.export").name == "curve_series.export"


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self):
        """Test the message and level are serialized."""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["message"] == "Export written"
        assert data["level"] == "INFO"
        assert data["logger"] == "curve_series.test"
        assert "context" not in data

    def test_promoted_attributes(self):
        """Test known extra attributes become top-level keys."""
        data = json.loads(JSONFormatter().format(make_record(rows=183, format="xlsx", other=1)))

        assert data["rows"] == 183
        assert data["format"] == "xlsx"
        assert "other" not in data

    def test_context(self):
        """Test LogContext fields are attached."""
        with LogContext(operation="export"):
            with LogContext(curve_id="abc"):
                data = json.loads(JSONFormatter().format(make_record()))

        assert data["context"] == {"operation": "export", "curve_id": "abc"}


class TestLogContext:
    """Tests for LogContext."""

    def test_nesting_and_reset(self):
        """Test context is merged inside and restored outside."""
        with LogContext(a=1):
            with LogContext(b=2):
                assert current_context() == {"a": 1, "b": 2}
            assert current_context() == {"a": 1}
        assert current_context() == {}


class TestLogOperation:
    """Tests for log_operation."""

    def test_success(self, caplog):
        """Test start and completion are logged."""
        logger = get_logger("ops")
        with caplog.at_level(logging.INFO, logger="curve_series"):
            with log_operation(logger, "demo"):
                pass

        assert "Starting: demo" in caplog.text
        assert "Completed: demo" in caplog.text

    def test_failure_reraises(self, caplog):
        """Test failures are logged and propagated."""
        logger = get_logger("ops")
        with caplog.at_level(logging.INFO, logger="curve_series"):
            with pytest.raises(ValueError, match="boom"):
                with log_operation(logger, "demo"):
                    raise ValueError("boom")

        failures = [r for r in caplog.records if r.getMessage() == "Failed: demo"]
        assert len(failures) == 1
        assert failures[0].levelno == logging.ERROR
        assert failures[0].error_type == "ValueError"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_output_is_json(self, tmp_path):
        """Test the log file receives JSON lines."""
        log_file = tmp_path / "logs" / "curve_series.log"
        setup_logging(level="debug", log_file=log_file)
        try:
            get_logger("file_test").info("hello", extra={"rows": 3})
            for handler in logging.getLogger("curve_series").handlers:
                handler.flush()

            lines = [json.loads(line) for line in log_file.read_text().splitlines()]
            assert any(line["message"] == "hello" and line["rows"] == 3 for line in lines)
        finally:
            for handler in logging.getLogger("curve_series").handlers:
                handler.close()
            setup_logging(level="INFO")
