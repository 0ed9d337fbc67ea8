"""
Log level enumeration and per-level rendering styles
"""

from enum import IntEnum
from typing import Dict, NamedTuple

from runner_logger.core.console_color import ConsoleColor


class LogLevel(IntEnum):
    """
    Log level enumeration.

    NONE is a sentinel used by filters to switch a category off; messages
    logged at NONE render with the generic style.
    """

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Accepts the member names plus the common short aliases
        ("info", "warn", "fatal").

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogLevel":
        """
        Map a numeric level from the standard ``logging`` module.

        Args:
            levelno: Numeric level, e.g. ``logging.INFO``

        Returns:
            Closest LogLevel at or below the given number
        """
        if levelno < 10:
            return cls.TRACE
        if levelno < 20:
            return cls.DEBUG
        if levelno < 30:
            return cls.INFORMATION
        if levelno < 40:
            return cls.WARNING
        if levelno < 50:
            return cls.ERROR
        return cls.CRITICAL


LEVEL_ALIASES: Dict[str, str] = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
    "OFF": "NONE",
}


class LevelStyle(NamedTuple):
    """Category label and colors used to render one level."""

    label: str
    category_color: ConsoleColor
    message_color: ConsoleColor


DEFAULT_STYLE = LevelStyle("LOG", ConsoleColor.WHITE, ConsoleColor.WHITE)

LEVEL_STYLES: Dict[LogLevel, LevelStyle] = {
    LogLevel.TRACE: LevelStyle("TRACE", ConsoleColor.DARK_GRAY, ConsoleColor.DARK_GRAY),
    LogLevel.DEBUG: LevelStyle("DEBUG", ConsoleColor.DARK_MAGENTA, ConsoleColor.DARK_MAGENTA),
    LogLevel.INFORMATION: LevelStyle("INFO", ConsoleColor.GREEN, ConsoleColor.WHITE),
    LogLevel.WARNING: LevelStyle("WARNING", ConsoleColor.YELLOW, ConsoleColor.WHITE),
    LogLevel.ERROR: LevelStyle("ERROR", ConsoleColor.RED, ConsoleColor.WHITE),
    LogLevel.CRITICAL: LevelStyle("FATAL", ConsoleColor.RED, ConsoleColor.WHITE),
}


def style_for(level) -> LevelStyle:
    """Return the rendering style for a level, falling back to LOG/white."""
    return LEVEL_STYLES.get(level, DEFAULT_STYLE)
