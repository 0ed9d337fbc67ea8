"""
Message formatters module

Formatters turn (state, exception) into the message text a logger renders.
"""

from runner_logger.formatters.base_formatter import BaseFormatter
from runner_logger.formatters.text_formatter import TextFormatter, default_formatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "default_formatter",
]
