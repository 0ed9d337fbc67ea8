"""
Core module for the task runner logger

This module contains the fundamental classes:
- TaskRunnerLoggerProvider: Registry of per-category loggers
- TaskRunnerLogger: Per-category logger
- Activity / GenericScope: Scope state variants
- LogLevel / ConsoleColor: Level and color enumerations
- LoggerConfig / LoggerProviderBuilder: Configuration
"""

from runner_logger.core.log_level import LogLevel
from runner_logger.core.console_color import ConsoleColor
from runner_logger.core.activity import Activity, GenericScope
from runner_logger.core.clock import TimeOffsetTracker
from runner_logger.core.scope import ScopeHandle
from runner_logger.core.logger import TaskRunnerLogger
from runner_logger.core.logger_provider import TaskRunnerLoggerProvider
from runner_logger.core.logger_config import LoggerConfig
from runner_logger.core.provider_builder import LoggerProviderBuilder

__all__ = [
    "LogLevel",
    "ConsoleColor",
    "Activity",
    "GenericScope",
    "TimeOffsetTracker",
    "ScopeHandle",
    "TaskRunnerLogger",
    "TaskRunnerLoggerProvider",
    "LoggerConfig",
    "LoggerProviderBuilder",
]
