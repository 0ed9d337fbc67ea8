"""
Base console interface

A console backend writes colored text fragments to the terminal.
"""

from abc import ABC, abstractmethod
from typing import Optional

from runner_logger.core.console_color import ConsoleColor


class BaseConsole(ABC):
    """
    Abstract base class for console backends.

    Fragments written with write()/write_line() may be buffered until
    flush() is called.
    """

    @abstractmethod
    def write(
        self,
        message: str,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
    ) -> None:
        """
        Write a colored fragment.

        Args:
            message: Text to write
            foreground: Text color, or None for the terminal default
            background: Background color, or None for the terminal default
        """
        pass

    @abstractmethod
    def write_line(
        self,
        message: str,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
    ) -> None:
        """Write a colored fragment followed by a line break."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Push pending output to the terminal."""
        pass
