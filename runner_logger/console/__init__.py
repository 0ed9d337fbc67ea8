"""Console module - colored terminal backends"""

from runner_logger.console.base_console import BaseConsole
from runner_logger.console.ansi_console import AnsiLogConsole, AnsiSystemConsole
from runner_logger.console.windows_console import WindowsLogConsole
from runner_logger.console.host_platform import create_console, is_windows

__all__ = [
    "BaseConsole",
    "AnsiLogConsole",
    "AnsiSystemConsole",
    "WindowsLogConsole",
    "create_console",
    "is_windows",
]
