"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class BaseFormatter(ABC):
    """
    Abstract base class for message formatters.

    Instances are callable with the (state, exception) signature that
    TaskRunnerLogger.log() expects.
    """

    @abstractmethod
    def format(self, state: Any, exception: Optional[BaseException]) -> str:
        """
        Format message state into a string.

        Args:
            state: Message state supplied by the caller
            exception: Exception associated with the message, if any

        Returns:
            Message text; may span several lines
        """
        pass

    def __call__(self, state: Any, exception: Optional[BaseException] = None) -> str:
        """Allow formatters to be callable."""
        return self.format(state, exception)
