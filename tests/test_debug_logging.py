"""Tests for highsystems/logging/debug.py — JSON debug logging."""

import json
import logging

import pytest

from highsystems.logging.debug import (
    JSONFormatter,
    RequestTimer,
    get_logger,
    sequence_var,
    setup_logging,
)


def _record(msg="test"):
    return logging.LogRecord(
        name="highsystems.request", level=logging.DEBUG, pathname="",
        lineno=0, msg=msg, args=(), exc_info=None,
    )


class TestJSONFormatter:

    def test_output_is_valid_json(self):
        parsed = json.loads(JSONFormatter().format(_record("hello")))
        assert parsed["message"] == "hello"
        assert parsed["level"] == "DEBUG"
        assert parsed["logger"] == "highsystems.request"
        assert "timestamp" in parsed

    def test_includes_sequence(self):
        token = sequence_var.set(42)
        try:
            parsed = json.loads(JSONFormatter().format(_record()))
            assert parsed["sequence"] == 42
        finally:
            sequence_var.reset(token)

    def test_sequence_defaults_to_null(self):
        parsed = json.loads(JSONFormatter().format(_record()))
        assert parsed["sequence"] is None

    def test_includes_debug_data(self):
        record = _record()
        record.debug_data = {"operation": "get_records", "status": 200}
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["operation"] == "get_records"
        assert parsed["status"] == 200


class TestGetLogger:

    def test_channels_are_children(self):
        assert get_logger("request").name == "highsystems.request"
        assert get_logger().name == "highsystems.main"


class TestRequestTimer:

    def test_measures_elapsed(self):
        with RequestTimer() as timer:
            _ = sum(range(1000))
        assert timer.elapsed_ms >= 0
        assert isinstance(timer.elapsed_ms, float)


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("highsystems")
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:

    def test_creates_stdout_handler(self, override_settings, restore_logger):
        override_settings(HS_LOG_FILE="", HS_LOG_LEVEL="DEBUG")
        setup_logging()
        logger = restore_logger
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
        assert logger.propagate is False

    def test_file_handler(self, override_settings, restore_logger, tmp_path):
        override_settings(HS_LOG_FILE=str(tmp_path / "hs.log"))
        setup_logging()
        assert any(isinstance(h, logging.FileHandler) for h in restore_logger.handlers)
