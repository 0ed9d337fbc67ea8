"""
Console color enumeration

Values match the Windows console character attribute bits, so the native
backend can use them directly while the ANSI backend maps them to SGR codes.
"""

from enum import IntEnum


class ConsoleColor(IntEnum):
    """The sixteen standard console colors."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_CYAN = 3
    DARK_RED = 4
    DARK_MAGENTA = 5
    DARK_YELLOW = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    CYAN = 11
    RED = 12
    MAGENTA = 13
    YELLOW = 14
    WHITE = 15

    def __str__(self) -> str:
        return self.name

    @property
    def is_bright(self) -> bool:
        """True for the intensified half of the palette."""
        return self >= ConsoleColor.DARK_GRAY
