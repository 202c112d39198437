"""Tests for centralized logging."""

import json
import logging
import sys

from cloudlink.infrastructure.logging import configure_logging, JSONFormatter


class TestConfigureLogging:
    def test_default_level(self):
        configure_logging(level=logging.INFO)
        logger = logging.getLogger("cloudlink")
        assert logger.level == logging.INFO

    def test_debug_level(self):
        configure_logging(level=logging.DEBUG)
        assert logging.getLogger("cloudlink").level == logging.DEBUG

    def test_level_by_name(self):
        configure_logging(level="warning")
        assert logging.getLogger("cloudlink").level == logging.WARNING

    def test_unknown_level_name_falls_back_to_warning(self):
        configure_logging(level="CHATTY")
        assert logging.getLogger("cloudlink").level == logging.WARNING

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger("cloudlink")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger("cloudlink")
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        assert len(logging.getLogger("cloudlink").handlers) == 1


class TestJSONFormatter:
    def test_format_basic(self):
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="cloudlink.application.dispatch_engine",
            level=logging.WARNING,
            pathname="dispatch_engine.py",
            lineno=1,
            msg="Rejected %s message: %s",
            args=("port", "missing id header"),
            exc_info=None,
        )
        data = json.loads(formatter.format(record))
        assert data["message"] == "Rejected port message: missing id header"
        assert data["level"] == "WARNING"
        assert data["logger"] == "cloudlink.application.dispatch_engine"
        assert "timestamp" in data

    def test_format_with_exception(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="error occurred",
            args=(),
            exc_info=exc_info,
        )
        data = json.loads(formatter.format(record))
        assert "ValueError" in data["exception"]


class TestLoggerTree:
    def test_module_loggers_inherit_level(self):
        configure_logging(level="DEBUG")
        child = logging.getLogger("cloudlink.dead_letter")
        assert child.getEffectiveLevel() == logging.DEBUG

    def test_records_still_propagate(self):
        configure_logging(level=logging.INFO)
        assert logging.getLogger("cloudlink").propagate is True
