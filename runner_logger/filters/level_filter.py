"""
Level-based filter

Filters messages by a minimum level, optionally overridden per category
prefix.
"""

from typing import Dict, Optional

from runner_logger.core.log_level import LogLevel
from runner_logger.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter messages based on log level.

    Messages at LogLevel.NONE are never logged.
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFORMATION,
        category_levels: Optional[Dict[str, LogLevel]] = None,
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum level (inclusive) for categories without a rule
            category_levels: Minimum level per category prefix. The longest
                             matching prefix wins.

        Example:
            # Only WARNING and above, except everything from "Build.*"
            filter = LevelFilter(
                min_level=LogLevel.WARNING,
                category_levels={"Build": LogLevel.TRACE},
            )

            # Silence one category
            filter = LevelFilter(category_levels={"Http": LogLevel.NONE})
        """
        self.min_level = min_level
        self.category_levels = dict(category_levels or {})

    def level_for(self, category_name: str) -> LogLevel:
        """Return the minimum level that applies to a category."""
        best_prefix = None
        for prefix in self.category_levels:
            if category_name.startswith(prefix):
                if best_prefix is None or len(prefix) > len(best_prefix):
                    best_prefix = prefix

        if best_prefix is None:
            return self.min_level
        return self.category_levels[best_prefix]

    def should_log(self, category_name: str, level: LogLevel) -> bool:
        """
        Check if level reaches the threshold for the category.

        Args:
            category_name: Category of the logger
            level: Level of the message

        Returns:
            True if the message level is enabled, False otherwise
        """
        if level >= LogLevel.NONE:
            return False
        return level >= self.level_for(category_name)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, categories={len(self.category_levels)})"
