"""
Tests for structured JSON logging configuration.

CHANGELOG:
- 2026-10-09: Initial creation (STORY-006)

TODO:
- None
"""

import json
import logging
import sys

import pytest
from energy_trend.logging_config import JSONFormatter, setup_logging


def _record(msg: str, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="energy_trend.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Each record is one JSON object."""

    def test_fields(self) -> None:
        """Output carries timestamp, level, logger and message."""
        entry = json.loads(JSONFormatter().format(_record("Inserted 2 rows")))

        assert entry["level"] == "ERROR"
        assert entry["logger"] == "energy_trend.test"
        assert entry["message"] == "Inserted 2 rows"
        assert "timestamp" in entry
        assert "exc_info" not in entry

    def test_exception_included(self) -> None:
        """A traceback is rendered into exc_info."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("failed", exc_info=sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in entry["exc_info"]


class TestSetupLogging:
    """setup_logging replaces root handlers."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_single_json_handler(self) -> None:
        """Root logger ends up with one handler using JSONFormatter."""
        setup_logging("debug")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG
