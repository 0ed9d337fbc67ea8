"""
Base filter interface
"""

from abc import ABC, abstractmethod

from runner_logger.core.log_level import LogLevel


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Instances are callable, so they can be handed to
    TaskRunnerLoggerProvider directly.
    """

    @abstractmethod
    def should_log(self, category_name: str, level: LogLevel) -> bool:
        """
        Determine if a message should be logged.

        Args:
            category_name: Category of the logger
            level: Level of the message

        Returns:
            True if the message should be logged, False otherwise
        """
        pass

    def __call__(self, category_name: str, level: LogLevel) -> bool:
        """Allow filters to be callable."""
        return self.should_log(category_name, level)
