"""
Log filters module

Filters are predicates (category_name, level) -> bool deciding whether a
logger writes a message.
"""

from runner_logger.filters.base_filter import BaseFilter
from runner_logger.filters.level_filter import LevelFilter
from runner_logger.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "CallbackFilter",
]
