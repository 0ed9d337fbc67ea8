"""
Fixed-width text layout helpers used by the line renderer
"""

import re
from datetime import timedelta
from typing import List, Optional

CATEGORY_MAX_LENGTH = 9
STATUS_MAX_LENGTH = 4

_LINE_BREAK = re.compile(r"\r\n|\n")


def pad_right(text: str, width: int = CATEGORY_MAX_LENGTH) -> str:
    """Right-pad text with spaces to width. Longer text is never truncated."""
    return text.ljust(width)


def center_pad(text: str, width: int = STATUS_MAX_LENGTH) -> str:
    """
    Center text within width.

    Padding is only applied when at least one space fits on each side;
    otherwise the text is returned unchanged. An odd remainder goes to the
    right.

    Args:
        text: Text to center
        width: Target field width

    Returns:
        Centered text
    """
    padding = width - len(text)
    if padding < 2:
        return text

    left = padding // 2
    right = padding - left
    return " " * left + text + " " * right


def start_marker(start: Optional[bool]) -> str:
    """'>' for a scope start, '<' for a scope stop, ' ' for a plain line."""
    if start is None:
        return " "
    return ">" if start else "<"


def format_offset(offset: timedelta) -> str:
    """
    Format an elapsed offset as ``hh:mm:ss.ff``.

    Whole days are dropped and hundredths are truncated. A negative offset
    (wall clock moved backwards) is rendered by magnitude.
    """
    offset = abs(offset)
    hours, remainder = divmod(offset.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    hundredths = offset.microseconds // 10000
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{hundredths:02d}"


def split_lines(message: str) -> List[str]:
    """Split a message on line breaks, keeping empty segments."""
    return _LINE_BREAK.split(message)
