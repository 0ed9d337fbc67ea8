"""
Callback-based filter

Filters messages using a custom callback function
"""

from typing import Callable

from runner_logger.core.log_level import LogLevel
from runner_logger.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter messages using a custom callback function.

    Provides maximum flexibility for filtering logic.
    """

    def __init__(self, callback: Callable[[str, LogLevel], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function taking (category_name, level) and returning
                      True to log the message, False to discard it.

        Example:
            # Hide debug output of the restore step
            def quiet_restore(category, level):
                return not (category == "Restore" and level <= LogLevel.DEBUG)

            filter = CallbackFilter(quiet_restore)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, category_name: str, level: LogLevel) -> bool:
        """
        Use callback to determine if the message should be logged.

        Raises:
            Exception: If callback raises an exception, it's propagated
        """
        return bool(self.callback(category_name, level))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
