"""
Plain text formatter
"""

import traceback
from typing import Any, Optional

from runner_logger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format state with str(), optionally followed by the exception.

    Each traceback line becomes its own rendered log line.
    """

    def __init__(self, include_traceback: bool = True):
        """
        Initialize text formatter.

        Args:
            include_traceback: Append the full traceback; when False only
                               "ExceptionType: message" is appended
        """
        self.include_traceback = include_traceback

    def format(self, state: Any, exception: Optional[BaseException]) -> str:
        message = "" if state is None else str(state)
        if exception is None:
            return message

        if self.include_traceback:
            details = "".join(traceback.format_exception(
                type(exception), exception, exception.__traceback__
            )).rstrip("\n")
        else:
            details = f"{type(exception).__name__}: {exception}"

        if not message:
            return details
        return f"{message}\n{details}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(include_traceback={self.include_traceback})"


default_formatter = TextFormatter()
