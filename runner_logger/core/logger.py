"""
Per-category task runner logger

Renders leveled messages and scope start/stop events as fixed-layout,
colored console lines.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Optional

from runner_logger.core.activity import Activity, LogLine, as_scope
from runner_logger.core.console_color import ConsoleColor
from runner_logger.core.layout import (
    center_pad,
    format_offset,
    pad_right,
    split_lines,
    start_marker,
)
from runner_logger.core.log_level import LogLevel, style_for
from runner_logger.core.scope import ScopeHandle
from runner_logger.formatters.text_formatter import default_formatter

if TYPE_CHECKING:
    from runner_logger.console.base_console import BaseConsole
    from runner_logger.core.logger_provider import TaskRunnerLoggerProvider

LogFilter = Callable[[str, LogLevel], bool]
Formatter = Callable[[Any, Optional[BaseException]], str]


class TaskRunnerLogger:
    """
    Logger for one category.

    Instances are created by TaskRunnerLoggerProvider.create_logger() and
    live for the rest of the process. Each owns its console backend.
    """

    def __init__(
        self,
        provider: "TaskRunnerLoggerProvider",
        category_name: str,
        log_filter: LogFilter,
        console: "BaseConsole",
    ):
        self._provider = provider
        self._category_name = category_name
        self._filter = log_filter
        self._console = console

    @property
    def category_name(self) -> str:
        return self._category_name

    @property
    def console(self) -> "BaseConsole":
        return self._console

    def is_enabled(self, level: LogLevel) -> bool:
        """Ask the provider's filter whether level is enabled for this category."""
        return self._filter(self._category_name, level)

    def log(
        self,
        level: LogLevel,
        state: Any,
        exception: Optional[BaseException] = None,
        formatter: Optional[Formatter] = None,
    ) -> None:
        """
        Log a message.

        The formatter is only invoked when the level is enabled. Exceptions
        raised by the formatter propagate to the caller.

        Args:
            level: Message level
            state: Message state passed to the formatter
            exception: Optional exception passed to the formatter
            formatter: Function (state, exception) -> str
                       (default: runner_logger.formatters.default_formatter)
        """
        if not self.is_enabled(level):
            return

        if formatter is None:
            formatter = default_formatter

        style = style_for(level)
        self._write(LogLine(
            style.label,
            "",
            formatter(state, exception),
            style.category_color,
            style.message_color,
            None,
        ))

    def trace(self, message: Any, exception: Optional[BaseException] = None) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, exception)

    def debug(self, message: Any, exception: Optional[BaseException] = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, exception)

    def info(self, message: Any, exception: Optional[BaseException] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFORMATION, message, exception)

    def warning(self, message: Any, exception: Optional[BaseException] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, exception)

    def error(self, message: Any, exception: Optional[BaseException] = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, exception)

    def critical(self, message: Any, exception: Optional[BaseException] = None) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, exception)

    def begin_scope(self, state: Any) -> ScopeHandle:
        """
        Open a scope and write its start line.

        Args:
            state: Activity, GenericScope, or any object (rendered via str())

        Returns:
            Handle whose release writes the end line exactly once

        Example:
            activity = Activity("TASK", "restore packages")
            with logger.begin_scope(activity):
                restore()
                activity.success = True
        """
        scope = as_scope(state)
        self._write(scope.start_line())

        return ScopeHandle(lambda: self._write(scope.end_line()))

    def begin_activity(self, category: str, name: str) -> ScopeHandle:
        """Create an Activity and open a scope for it; see handle.activity."""
        activity = Activity(category, name)
        handle = self.begin_scope(activity)
        handle.activity = activity
        return handle

    def _write(self, line: LogLine) -> None:
        """Render each line of the message through the console backend."""
        marker = start_marker(line.start)
        highlight = line.message_color != ConsoleColor.WHITE

        for text in split_lines(line.message):
            self._console.write(
                f"[{pad_right(line.category)}{marker}] ",
                foreground=line.category_color,
            )
            self._console.write(
                f"[{format_offset(self._provider.get_time_offset())}] ",
                foreground=line.message_color if highlight else ConsoleColor.BLUE,
            )
            self._console.write(
                f"[{center_pad(line.status)}] ",
                foreground=line.message_color if highlight else ConsoleColor.YELLOW,
            )
            self._console.write_line(text, foreground=line.message_color)
            self._console.flush()

    def __repr__(self) -> str:
        return f"TaskRunnerLogger(category={self._category_name!r})"
