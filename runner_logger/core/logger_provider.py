"""
Task runner logger provider

Process-wide registry of per-category loggers sharing one elapsed-time clock.
"""

from __future__ import annotations
from datetime import timedelta
from typing import Callable, Dict, Optional
import threading

from runner_logger.console.base_console import BaseConsole
from runner_logger.console.host_platform import create_console
from runner_logger.core.clock import TimeOffsetTracker
from runner_logger.core.logger import LogFilter, TaskRunnerLogger


class TaskRunnerLoggerProvider:
    """
    Creates and caches TaskRunnerLogger instances by category name.

    All loggers created by one provider share its filter and its
    TimeOffsetTracker, so elapsed times printed by different categories are
    comparable.

    Thread Safety:
        create_logger() constructs exactly one logger (and one console
        backend) per distinct category name under concurrent calls.
    """

    def __init__(
        self,
        log_filter: LogFilter,
        console_factory: Optional[Callable[[], BaseConsole]] = None,
        clock: Optional[TimeOffsetTracker] = None,
    ):
        """
        Initialize provider.

        Args:
            log_filter: Predicate (category_name, level) -> bool
            console_factory: Builds the backend for each new logger
                             (default: create_console, probing the host)
            clock: Shared elapsed-time tracker (default: wall clock)
        """
        if not callable(log_filter):
            raise TypeError("log_filter must be callable")

        self._filter = log_filter
        self._console_factory = console_factory or create_console
        self._clock = clock or TimeOffsetTracker()
        self._loggers: Dict[str, TaskRunnerLogger] = {}
        self._lock = threading.Lock()

    @property
    def clock(self) -> TimeOffsetTracker:
        return self._clock

    def create_logger(self, category_name: str) -> TaskRunnerLogger:
        """
        Get the logger for a category, creating it on first request.

        Args:
            category_name: Logger category

        Returns:
            The single TaskRunnerLogger for this category
        """
        logger = self._loggers.get(category_name)
        if logger is not None:
            return logger

        with self._lock:
            logger = self._loggers.get(category_name)
            if logger is None:
                logger = TaskRunnerLogger(
                    self,
                    category_name,
                    self._filter,
                    self._console_factory(),
                )
                self._loggers[category_name] = logger
            return logger

    def get_time_offset(self) -> timedelta:
        """Elapsed time since the first call on this provider."""
        return self._clock.offset()

    def get_loggers(self) -> Dict[str, TaskRunnerLogger]:
        """Snapshot of the created loggers by category."""
        with self._lock:
            return dict(self._loggers)

    def dispose(self) -> None:
        """Release the provider. Loggers hold no resources, so nothing to do."""

    def __enter__(self) -> "TaskRunnerLoggerProvider":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.dispose()
