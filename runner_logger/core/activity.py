"""
Scope state variants

A scope is opened with either an Activity (a named unit of work with an
outcome) or a GenericScope (a free-form message). Each variant knows which
lines it renders when the scope opens and closes.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from runner_logger.core.console_color import ConsoleColor


class LogLine(NamedTuple):
    """A single render request for the line renderer."""

    category: str
    status: str
    message: str
    category_color: ConsoleColor
    message_color: ConsoleColor
    start: Optional[bool]


@dataclass
class Activity:
    """
    A nested unit of work whose start and end are both logged.

    The caller assigns ``success`` and ``conclusion`` before the scope
    closes; the logger reads them once when writing the end line.

    Example:
        activity = Activity("BUILD", "compile")
        with logger.begin_scope(activity):
            compile_sources()
            activity.success = True
    """

    category: str
    name: str
    success: bool = False
    conclusion: Optional[str] = None

    def start_line(self) -> LogLine:
        return LogLine(
            self.category or "",
            "",
            self.name or "",
            ConsoleColor.GREEN,
            ConsoleColor.WHITE,
            True,
        )

    def end_line(self) -> LogLine:
        message = self.name or ""
        if self.conclusion:
            message = f"{message} {self.conclusion}"

        if self.success:
            return LogLine(
                self.category or "", "OK", message,
                ConsoleColor.GREEN, ConsoleColor.WHITE, False,
            )
        return LogLine(
            self.category or "", "FAIL", message,
            ConsoleColor.RED, ConsoleColor.RED, False,
        )


@dataclass(frozen=True)
class GenericScope:
    """A scope described only by a message."""

    message: str

    def start_line(self) -> LogLine:
        return LogLine("START", "", self.message, ConsoleColor.WHITE, ConsoleColor.WHITE, True)

    def end_line(self) -> LogLine:
        return LogLine("STOP", "", self.message, ConsoleColor.WHITE, ConsoleColor.WHITE, False)


ScopeState = Union[Activity, GenericScope]


def as_scope(state) -> ScopeState:
    """Coerce arbitrary scope state into one of the scope variants."""
    if isinstance(state, (Activity, GenericScope)):
        return state
    return GenericScope(str(state))
