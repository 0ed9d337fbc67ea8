"""Tests for the standard logging bridge"""

import logging
import pytest
from datetime import datetime, timezone

from runner_logger import TaskRunnerLogHandler, TaskRunnerLoggerProvider
from runner_logger.console.base_console import BaseConsole
from runner_logger.core.clock import TimeOffsetTracker


class LineConsole(BaseConsole):
    """Console double collecting flushed lines."""

    def __init__(self):
        self.lines = []
        self._pending = []

    def write(self, message, foreground=None, background=None):
        self._pending.append(message)

    def write_line(self, message, foreground=None, background=None):
        self._pending.append(message)

    def flush(self):
        self.lines.append("".join(self._pending))
        self._pending.clear()


@pytest.fixture
def bridged():
    console = LineConsole()
    provider = TaskRunnerLoggerProvider(
        lambda category, level: True,
        console_factory=lambda: console,
        clock=TimeOffsetTracker(lambda: datetime(2024, 1, 1, tzinfo=timezone.utc)),
    )
    handler = TaskRunnerLogHandler(provider)
    logger = logging.getLogger("tests.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield logger, provider, console
    logger.removeHandler(handler)


class TestTaskRunnerLogHandler:
    """Test TaskRunnerLogHandler."""

    def test_routes_record(self, bridged):
        logger, provider, console = bridged
        logger.warning("disk %s", "full")

        assert console.lines == ["[WARNING   ] [00:00:00.00] [    ] disk full"]
        assert "tests.bridge" in provider.get_loggers()

    def test_maps_levels(self, bridged):
        logger, _, console = bridged
        logger.debug("d")
        logger.info("i")
        logger.error("e")
        logger.critical("c")
        assert [line[1:10].strip() for line in console.lines] == ["DEBUG", "INFO", "ERROR", "FATAL"]

    def test_exception_traceback_lines(self, bridged):
        logger, _, console = bridged
        try:
            raise ValueError("bad input")
        except ValueError:
            logger.exception("step failed")

        assert console.lines[0].endswith("] step failed")
        assert console.lines[1].endswith("] Traceback (most recent call last):")
        assert console.lines[-1].endswith("] ValueError: bad input")

    def test_provider_filter_applies(self):
        console = LineConsole()
        provider = TaskRunnerLoggerProvider(
            lambda category, level: False,
            console_factory=lambda: console,
        )
        handler = TaskRunnerLogHandler(provider)
        record = logging.LogRecord("quiet", logging.ERROR, __file__, 1, "hidden", None, None)
        handler.handle(record)
        assert console.lines == []
