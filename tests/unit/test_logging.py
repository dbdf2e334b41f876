"""Unit tests for cmdsort logging module."""

import json
import logging
import sys
from pathlib import Path

from cmdsort.logging import ConsoleFormatter, JsonFormatter, get_logger, setup_logging


def _record(msg: str = "Test message", level: int = logging.INFO, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JSON log formatter."""

    def test_format_basic_message(self) -> None:
        """Test formatting basic log message."""
        data = json.loads(JsonFormatter().format(_record()))

        assert data["message"] == "Test message"
        assert data["level"] == "info"
        assert data["logger"] == "test"
        assert "ts" in data

    def test_format_with_context(self) -> None:
        """Test path and declaration extras are included."""
        data = json.loads(JsonFormatter().format(_record(path="cli.py", declaration="Commands")))

        assert data["path"] == "cli.py"
        assert data["declaration"] == "Commands"

    def test_format_with_exception(self) -> None:
        """Test formatting message with exception."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record("Error occurred", logging.ERROR)
        record.exc_info = exc_info
        data = json.loads(JsonFormatter().format(record))

        assert "ValueError" in data["exception"]


class TestConsoleFormatter:
    """Tests for console formatter."""

    def test_includes_level_and_message(self) -> None:
        """Test the level name and message appear."""
        output = ConsoleFormatter().format(_record(level=logging.WARNING))
        assert "WARNING" in output
        assert "Test message" in output

    def test_includes_path_context(self) -> None:
        """Test the file path is shown when present."""
        output = ConsoleFormatter().format(_record(path="cli.py"))
        assert "[cli.py]" in output


class TestGetLogger:
    """Tests for get_logger."""

    def test_namespaced(self) -> None:
        """Test loggers live under the cmdsort namespace."""
        assert get_logger("validator").name == "cmdsort.validator"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self) -> None:
        """Test the root cmdsort logger level is applied."""
        setup_logging(level="debug", console_output=False, json_output=False)
        try:
            assert logging.getLogger("cmdsort").level == logging.DEBUG
            assert logging.getLogger("cmdsort").handlers == []
        finally:
            setup_logging(console_output=True, json_output=False)

    def test_writes_json_file(self, tmp_path: Path) -> None:
        """Test JSON lines are written to the log directory."""
        setup_logging(level="info", log_dir=tmp_path, json_output=True, console_output=False)
        try:
            get_logger("test").info("hello", extra={"path": "cli.py"})
            for handler in logging.getLogger("cmdsort").handlers:
                handler.flush()

            line = (tmp_path / "cmdsort.log").read_text().strip().splitlines()[-1]
            data = json.loads(line)
            assert data["message"] == "hello"
            assert data["path"] == "cli.py"
        finally:
            for handler in logging.getLogger("cmdsort").handlers:
                handler.close()
            setup_logging(console_output=True, json_output=False)
