"""Logger provider builder pattern"""

from datetime import datetime
from typing import Callable, Optional, TextIO

from runner_logger.console.base_console import BaseConsole
from runner_logger.console.host_platform import create_console
from runner_logger.core.clock import TimeOffsetTracker
from runner_logger.core.log_level import LogLevel
from runner_logger.core.logger import LogFilter
from runner_logger.core.logger_config import LoggerConfig
from runner_logger.core.logger_provider import TaskRunnerLoggerProvider
from runner_logger.filters.level_filter import LevelFilter


class LoggerProviderBuilder:
    """Builder pattern for provider construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()
        self._custom_filter: Optional[LogFilter] = None
        self._console_factory: Optional[Callable[[], BaseConsole]] = None
        self._now: Optional[Callable[[], datetime]] = None

    def with_min_level(self, level: LogLevel) -> "LoggerProviderBuilder":
        """Set minimum log level."""
        self._config.min_level = level
        return self

    def with_category_level(self, prefix: str, level: LogLevel) -> "LoggerProviderBuilder":
        """
        Set the minimum level for categories starting with prefix.

        The longest matching prefix wins; LogLevel.NONE silences the
        category entirely.
        """
        self._config.category_levels[prefix] = level
        return self

    def with_filter(self, log_filter: LogFilter) -> "LoggerProviderBuilder":
        """
        Use a custom filter predicate instead of the level settings.

        Args:
            log_filter: Callable (category_name, level) -> bool

        Returns:
            Self for method chaining

        Example:
            provider = (LoggerProviderBuilder()
                .with_filter(lambda category, level: category != "noisy")
                .build())
        """
        if not callable(log_filter):
            raise TypeError("log_filter must be callable")
        self._custom_filter = log_filter
        return self

    def with_console_mode(self, mode: str) -> "LoggerProviderBuilder":
        """Force "ansi" or "native" output, or "auto" to probe the host."""
        self._config.console_mode = mode
        return self

    def with_stream(self, stream: TextIO) -> "LoggerProviderBuilder":
        """Write to stream instead of sys.stdout."""
        self._config.stream = stream
        return self

    def with_console_factory(self, factory: Callable[[], BaseConsole]) -> "LoggerProviderBuilder":
        """Build each logger's backend with factory; overrides mode and stream."""
        self._console_factory = factory
        return self

    def with_clock(self, now: Callable[[], datetime]) -> "LoggerProviderBuilder":
        """Use a custom clock for elapsed-time stamps."""
        self._now = now
        return self

    def build(self) -> TaskRunnerLoggerProvider:
        """Build and return configured provider."""
        # Re-run validation on values set through the fluent methods
        config = LoggerConfig(
            min_level=self._config.min_level,
            category_levels=dict(self._config.category_levels),
            console_mode=self._config.console_mode,
            stream=self._config.stream,
        )

        log_filter = self._custom_filter or LevelFilter(
            min_level=config.min_level,
            category_levels=config.category_levels,
        )

        console_factory = self._console_factory
        if console_factory is None:
            def console_factory() -> BaseConsole:
                return create_console(mode=config.console_mode, stream=config.stream)

        return TaskRunnerLoggerProvider(
            log_filter,
            console_factory=console_factory,
            clock=TimeOffsetTracker(self._now),
        )
