"""
ANSI escape sequence console backend

Used on every host without native console color APIs.
"""

import sys
from typing import Dict, List, Optional, TextIO

from runner_logger.console.base_console import BaseConsole
from runner_logger.core.console_color import ConsoleColor

DEFAULT_FOREGROUND = "\x1b[39m\x1b[22m"
DEFAULT_BACKGROUND = "\x1b[49m"

# Bright colors are bold + the base color
FOREGROUND_CODES: Dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "\x1b[30m",
    ConsoleColor.DARK_RED: "\x1b[31m",
    ConsoleColor.DARK_GREEN: "\x1b[32m",
    ConsoleColor.DARK_YELLOW: "\x1b[33m",
    ConsoleColor.DARK_BLUE: "\x1b[34m",
    ConsoleColor.DARK_MAGENTA: "\x1b[35m",
    ConsoleColor.DARK_CYAN: "\x1b[36m",
    ConsoleColor.GRAY: "\x1b[37m",
    ConsoleColor.DARK_GRAY: "\x1b[1m\x1b[30m",
    ConsoleColor.RED: "\x1b[1m\x1b[31m",
    ConsoleColor.GREEN: "\x1b[1m\x1b[32m",
    ConsoleColor.YELLOW: "\x1b[1m\x1b[33m",
    ConsoleColor.BLUE: "\x1b[1m\x1b[34m",
    ConsoleColor.MAGENTA: "\x1b[1m\x1b[35m",
    ConsoleColor.CYAN: "\x1b[1m\x1b[36m",
    ConsoleColor.WHITE: "\x1b[1m\x1b[37m",
}

# ANSI has no bright backgrounds in the basic palette
BACKGROUND_CODES: Dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "\x1b[40m",
    ConsoleColor.DARK_RED: "\x1b[41m",
    ConsoleColor.DARK_GREEN: "\x1b[42m",
    ConsoleColor.DARK_YELLOW: "\x1b[43m",
    ConsoleColor.DARK_BLUE: "\x1b[44m",
    ConsoleColor.DARK_MAGENTA: "\x1b[45m",
    ConsoleColor.DARK_CYAN: "\x1b[46m",
    ConsoleColor.GRAY: "\x1b[47m",
    ConsoleColor.RED: "\x1b[41m",
    ConsoleColor.GREEN: "\x1b[42m",
    ConsoleColor.YELLOW: "\x1b[43m",
    ConsoleColor.BLUE: "\x1b[44m",
    ConsoleColor.MAGENTA: "\x1b[45m",
    ConsoleColor.CYAN: "\x1b[46m",
    ConsoleColor.WHITE: "\x1b[47m",
}


def foreground_code(color: ConsoleColor) -> str:
    return FOREGROUND_CODES.get(color, DEFAULT_FOREGROUND)


def background_code(color: ConsoleColor) -> str:
    return BACKGROUND_CODES.get(color, DEFAULT_BACKGROUND)


class AnsiSystemConsole:
    """Raw output stream used by AnsiLogConsole."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize raw console.

        Args:
            stream: Output stream (default: sys.stdout at write time)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stdout is honored
        return self._stream or sys.stdout

    def write(self, message: str) -> None:
        self.stream.write(message)
        self.stream.flush()

    def write_line(self, message: str) -> None:
        self.write(message + "\n")


class AnsiLogConsole(BaseConsole):
    """
    Console backend that wraps fragments in ANSI SGR sequences.

    Fragments are collected in a buffer and handed to the raw console as
    one string on flush(), so a rendered line reaches the terminal in a
    single write.
    """

    def __init__(self, system_console=None):
        """
        Initialize ANSI console.

        Args:
            system_console: Raw stream with write(text)/write_line(text)
                            (default: AnsiSystemConsole over sys.stdout)
        """
        self.system_console = system_console or AnsiSystemConsole()
        self._buffer: List[str] = []

    def write(
        self,
        message: str,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
    ) -> None:
        if background is not None:
            self._buffer.append(background_code(background))
        if foreground is not None:
            self._buffer.append(foreground_code(foreground))

        self._buffer.append(message)

        if foreground is not None:
            self._buffer.append(DEFAULT_FOREGROUND)
        if background is not None:
            self._buffer.append(DEFAULT_BACKGROUND)

    def write_line(
        self,
        message: str,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
    ) -> None:
        self.write(message, foreground, background)
        self._buffer.append("\n")

    def flush(self) -> None:
        """Hand buffered output to the raw console and clear the buffer."""
        if not self._buffer:
            return
        output = "".join(self._buffer)
        self._buffer.clear()
        self.system_console.write(output)
