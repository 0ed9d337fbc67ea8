"""
Host platform probe and console backend selection
"""

import os
from typing import Callable, Optional, TextIO

from runner_logger.console.ansi_console import AnsiLogConsole, AnsiSystemConsole
from runner_logger.console.base_console import BaseConsole
from runner_logger.console.windows_console import WindowsLogConsole

CONSOLE_MODES = ("auto", "ansi", "native")


def is_windows() -> bool:
    """True when the host provides the native Windows console color API."""
    return os.name == "nt"


def create_console(
    probe: Callable[[], bool] = is_windows,
    mode: str = "auto",
    stream: Optional[TextIO] = None,
) -> BaseConsole:
    """
    Create the console backend for this host.

    Args:
        probe: Platform probe, consulted once when mode is "auto"
        mode: "auto", "ansi" or "native"
        stream: Output stream for the backend (default: sys.stdout)

    Returns:
        WindowsLogConsole on native-color hosts, AnsiLogConsole otherwise

    Raises:
        ValueError: If mode is not one of CONSOLE_MODES
    """
    if mode not in CONSOLE_MODES:
        raise ValueError(f"Invalid console mode: {mode}")

    native = probe() if mode == "auto" else mode == "native"
    if native:
        return WindowsLogConsole(stream=stream)
    return AnsiLogConsole(AnsiSystemConsole(stream))
