"""
Logger provider configuration
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, TextIO

from runner_logger.console.host_platform import CONSOLE_MODES
from runner_logger.core.log_level import LogLevel


@dataclass
class LoggerConfig:
    """
    Configuration for a TaskRunnerLoggerProvider.

    Used by LoggerProviderBuilder; hosts normally go through the builder.
    """

    # Level settings
    min_level: LogLevel = LogLevel.INFORMATION
    category_levels: Dict[str, LogLevel] = field(default_factory=dict)

    # Console settings
    console_mode: str = "auto"
    stream: Optional[TextIO] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_level, str):
            self.min_level = LogLevel.from_string(self.min_level)
        if not isinstance(self.min_level, LogLevel):
            raise TypeError("min_level must be LogLevel enum")

        levels = {}
        for prefix, level in self.category_levels.items():
            if isinstance(level, str):
                level = LogLevel.from_string(level)
            if not isinstance(level, LogLevel):
                raise TypeError(f"level for category '{prefix}' must be LogLevel enum")
            levels[prefix] = level
        self.category_levels = levels

        if self.console_mode not in CONSOLE_MODES:
            raise ValueError(
                f"console_mode must be one of {', '.join(CONSOLE_MODES)}"
            )

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration showing every level."""
        return cls(min_level=LogLevel.TRACE)

    @classmethod
    def quiet_config(cls) -> "LoggerConfig":
        """Create configuration showing warnings and above."""
        return cls(min_level=LogLevel.WARNING)
