"""Unit tests for logging configuration."""

import io
import json
import logging
import sys

from isolanguage.logging_config import JsonFormatter, configure_logging


def _record(msg, **extra):
    record = logging.LogRecord(
        "isolanguage.test", logging.WARNING, __file__, 1, msg, (), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Test JSON log formatting."""

    def test_basic_fields(self):
        data = json.loads(JsonFormatter().format(_record("hello")))
        assert data["level"] == "WARNING"
        assert data["logger"] == "isolanguage.test"
        assert data["message"] == "hello"
        assert "timestamp" in data
        assert "extra" not in data

    def test_extra_fields(self):
        data = json.loads(JsonFormatter().format(_record("rejected", code="zz")))
        assert data["extra"] == {"code": "zz"}

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "isolanguage.test", logging.ERROR, __file__, 1, "failed", (),
                sys.exc_info(),
            )
        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestConfigureLogging:
    """Test root logger configuration."""

    def test_text_format(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="INFO", stream=stream)
        logging.getLogger("isolanguage.test").info("plain message")
        output = stream.getvalue()
        assert "isolanguage.test - INFO - plain message" in output

    def test_json_format(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level=logging.INFO, json_format=True, stream=stream)
        logging.getLogger("isolanguage.test").info("json message")
        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert lines[-1]["message"] == "json message"

    def test_level_filters(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)
        logging.getLogger("isolanguage.test").info("hidden")
        assert stream.getvalue() == ""
        assert restore_root_logger.level == logging.WARNING
