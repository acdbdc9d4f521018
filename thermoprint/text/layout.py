"""
text/layout.py

Fixed-width column helpers for receipt lines.

All widths and lengths are counted in characters, never bytes: a line is
measured before it is encoded, and the printer's code page is one byte per
character anyway.
"""

from typing import Final

__all__ = ["ELLIPSIS", "truncate", "center", "right_align", "two_column"]

ELLIPSIS: Final[str] = "..."


def truncate(text: str, max_chars: int) -> str:
    """
    Shorten text to max_chars characters, marking the cut with "...".

    Text that already fits is returned unchanged. For max_chars < 3 the kept
    prefix is empty and the result is just "...", which is longer than
    max_chars.

    Example:
        >>> truncate("Chemise en lin blanche", 10)
        'Chemise...'
    """
    if len(text) <= max_chars:
        return text
    cut = max(max_chars - len(ELLIPSIS), 0)
    return text[:cut] + ELLIPSIS


def center(text: str, width: int) -> str:
    """
    Center text by left padding only.

    No trailing spaces are added; the printer discards them. Text at least
    as wide as the line is returned unchanged.
    """
    if len(text) >= width:
        return text
    return " " * ((width - len(text)) // 2) + text


def right_align(text: str, width: int) -> str:
    """Left-pad text so it ends at column width."""
    if len(text) >= width:
        return text
    return " " * (width - len(text)) + text


def two_column(left: str, right: str, width: int) -> str:
    """
    Build a row with left flush-left and right flush-right.

    The row is exactly width characters when both parts fit with room to
    spare. Otherwise the gap shrinks to a single space and the row overflows.

    Example:
        >>> two_column("TOTAL", "30000 FCFA", 20)
        'TOTAL     30000 FCFA'
    """
    gap = max(width - (len(left) + len(right)), 1)
    return left + " " * gap + right
