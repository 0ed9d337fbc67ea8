"""
Native Windows console backend

Colors are applied through the kernel32 console text attribute API,
set before each fragment and restored afterwards.
"""

import ctypes
import sys
from typing import Any, Optional, TextIO

from runner_logger.console.base_console import BaseConsole
from runner_logger.core.console_color import ConsoleColor

STD_OUTPUT_HANDLE = -11
FALLBACK_ATTRIBUTES = 0x07  # gray on black


class _Coord(ctypes.Structure):
    _fields_ = [("X", ctypes.c_short), ("Y", ctypes.c_short)]


class _SmallRect(ctypes.Structure):
    _fields_ = [
        ("Left", ctypes.c_short),
        ("Top", ctypes.c_short),
        ("Right", ctypes.c_short),
        ("Bottom", ctypes.c_short),
    ]


class _ConsoleScreenBufferInfo(ctypes.Structure):
    _fields_ = [
        ("dwSize", _Coord),
        ("dwCursorPosition", _Coord),
        ("wAttributes", ctypes.c_ushort),
        ("srWindow", _SmallRect),
        ("dwMaximumWindowSize", _Coord),
    ]


def _load_kernel32() -> Any:
    return ctypes.windll.kernel32  # type: ignore[attr-defined]


class WindowsLogConsole(BaseConsole):
    """
    Console backend using native console colors.

    Writes go straight to the stream; flush() flushes it.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        kernel32: Any = None,
        default_attributes: Optional[int] = None,
    ):
        """
        Initialize Windows console.

        Args:
            stream: Output stream (default: sys.stdout at write time)
            kernel32: kernel32 API object (default: ctypes.windll.kernel32)
            default_attributes: Attributes restored after each colored write
                                (default: read from the console)
        """
        self._stream = stream
        self._kernel32 = kernel32 if kernel32 is not None else _load_kernel32()
        self._handle = self._kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
        if default_attributes is None:
            default_attributes = self._read_attributes()
        self.default_attributes = default_attributes

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _read_attributes(self) -> int:
        info = _ConsoleScreenBufferInfo()
        if self._kernel32.GetConsoleScreenBufferInfo(self._handle, ctypes.byref(info)):
            return info.wAttributes
        # Output is redirected, not a console
        return FALLBACK_ATTRIBUTES

    def _attributes_for(
        self,
        foreground: Optional[ConsoleColor],
        background: Optional[ConsoleColor],
    ) -> int:
        fg = int(foreground) if foreground is not None else self.default_attributes & 0x0F
        bg = int(background) if background is not None else (self.default_attributes >> 4) & 0x0F
        return fg | (bg << 4)

    def write(
        self,
        message: str,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
    ) -> None:
        if foreground is None and background is None:
            self.stream.write(message)
            return

        # Text already in the stream buffer must not pick up the new color
        self.stream.flush()
        self._kernel32.SetConsoleTextAttribute(
            self._handle, self._attributes_for(foreground, background)
        )
        try:
            self.stream.write(message)
            self.stream.flush()
        finally:
            self._kernel32.SetConsoleTextAttribute(self._handle, self.default_attributes)

    def write_line(
        self,
        message: str,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
    ) -> None:
        self.write(message, foreground, background)
        self.stream.write("\n")

    def flush(self) -> None:
        self.stream.flush()
