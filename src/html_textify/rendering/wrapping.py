"""
Line breaking for quoted text.

Quoted blocks are wrapped so every physical line stays within the wrap width.
Breaks happen on whitespace only; a token with no whitespace anywhere after the
break column is emitted whole.
"""

from typing import List

DEFAULT_WRAP_WIDTH = 74


def break_long_lines(
    data: str, line_length: int, width: int = DEFAULT_WRAP_WIDTH
) -> List[str]:
    """
    Split a text fragment into pieces that fit the remaining line width.

    Args:
        data: Fragment about to be emitted
        line_length: Characters already on the current output line
        width: Maximum line width

    Returns:
        Ordered pieces; every piece except the last ends with a newline
    """
    pieces: List[str] = []
    existing = line_length

    if existing >= width:
        pieces.append("\n")
        existing = 0

    while len(data) + existing > width:
        i = width - existing
        while i >= 0 and not data[i].isspace():
            i -= 1
        if i == -1:
            # No whitespace before the limit, look forward instead
            i = width - existing
            while i < len(data) and not data[i].isspace():
                i += 1
        pieces.append(data[:i] + "\n")
        while i < len(data) and data[i].isspace():
            i += 1
        data = data[i:]
        existing = 0

    if data:
        pieces.append(data)
    return pieces
