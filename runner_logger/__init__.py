"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Runner Logger - colorized console logging for task runners
Renders leveled messages and nested activity start/stop lines with the
elapsed time since the run started
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from runner_logger.core.log_level import LogLevel
from runner_logger.core.console_color import ConsoleColor
from runner_logger.core.activity import Activity, GenericScope
from runner_logger.core.logger import TaskRunnerLogger
from runner_logger.core.logger_provider import TaskRunnerLoggerProvider
from runner_logger.core.logger_config import LoggerConfig
from runner_logger.core.provider_builder import LoggerProviderBuilder
from runner_logger.handler import TaskRunnerLogHandler

# Import submodules (not all classes by default)
from runner_logger import console
from runner_logger import filters
from runner_logger import formatters

__all__ = [
    "LogLevel",
    "ConsoleColor",
    "Activity",
    "GenericScope",
    "TaskRunnerLogger",
    "TaskRunnerLoggerProvider",
    "LoggerConfig",
    "LoggerProviderBuilder",
    "TaskRunnerLogHandler",
    "console",
    "filters",
    "formatters",
]
