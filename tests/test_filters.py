"""Tests for log filters"""

import pytest

from runner_logger import LogLevel
from runner_logger.filters import BaseFilter, CallbackFilter, LevelFilter


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFORMATION
        assert LogLevel.INFORMATION < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.CRITICAL
        assert LogLevel.CRITICAL < LogLevel.NONE

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFORMATION
        assert LogLevel.from_string("Warn") == LogLevel.WARNING
        assert LogLevel.from_string("fatal") == LogLevel.CRITICAL
        assert LogLevel.from_string("off") == LogLevel.NONE

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    @pytest.mark.parametrize("levelno, expected", [
        (5, LogLevel.TRACE),
        (10, LogLevel.DEBUG),
        (20, LogLevel.INFORMATION),
        (30, LogLevel.WARNING),
        (40, LogLevel.ERROR),
        (50, LogLevel.CRITICAL),
        (60, LogLevel.CRITICAL),
    ])
    def test_from_logging_level(self, levelno, expected):
        assert LogLevel.from_logging_level(levelno) == expected


class TestLevelFilter:
    """Test LevelFilter."""

    def test_min_level(self):
        log_filter = LevelFilter(min_level=LogLevel.WARNING)
        assert log_filter.should_log("Build", LogLevel.WARNING) is True
        assert log_filter.should_log("Build", LogLevel.INFORMATION) is False

    def test_default_is_information(self):
        log_filter = LevelFilter()
        assert log_filter("Build", LogLevel.INFORMATION) is True
        assert log_filter("Build", LogLevel.DEBUG) is False

    def test_longest_prefix_wins(self):
        log_filter = LevelFilter(
            min_level=LogLevel.ERROR,
            category_levels={
                "Build": LogLevel.INFORMATION,
                "Build.Compile": LogLevel.TRACE,
            },
        )
        assert log_filter.level_for("Build.Compile.Csc") == LogLevel.TRACE
        assert log_filter.level_for("Build.Restore") == LogLevel.INFORMATION
        assert log_filter.level_for("Test") == LogLevel.ERROR

    def test_none_silences_category(self):
        log_filter = LevelFilter(category_levels={"Http": LogLevel.NONE})
        assert log_filter("Http", LogLevel.CRITICAL) is False

    def test_none_messages_never_logged(self):
        log_filter = LevelFilter(min_level=LogLevel.TRACE)
        assert log_filter("Build", LogLevel.NONE) is False

    def test_repr(self):
        assert "LevelFilter" in repr(LevelFilter())


class TestCallbackFilter:
    """Test CallbackFilter."""

    def test_callback(self):
        log_filter = CallbackFilter(lambda category, level: category.startswith("Build"))
        assert isinstance(log_filter, BaseFilter)
        assert log_filter("Build", LogLevel.TRACE) is True
        assert log_filter("Test", LogLevel.CRITICAL) is False

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            CallbackFilter("nope")

    def test_errors_propagate(self):
        def broken(category, level):
            raise RuntimeError("filter bug")

        with pytest.raises(RuntimeError):
            CallbackFilter(broken)("Build", LogLevel.INFORMATION)

    def test_repr(self):
        def only_build(category, level):
            return True

        assert repr(CallbackFilter(only_build)) == "CallbackFilter(callback=only_build)"
