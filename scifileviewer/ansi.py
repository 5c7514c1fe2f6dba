"""Display-width measurement and clipping for terminal cells.

Renderers place text on a cell grid, so everything here counts terminal
columns rather than code points.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks and zero-width
    joiners/selectors consume no columns, and East Asian wide/fullwidth
    characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if ch == "\ufe0f":
        # Emoji presentation selector widens the preceding symbol to two cells.
        return 1
    if unicodedata.combining(ch) or unicodedata.category(ch) in {"Mn", "Me", "Cf"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the column width of plain (escape-free) ``text``."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def expand_tabs(text: str) -> str:
    """Replace tabs with spaces up to the next tab stop."""
    if "\t" not in text:
        return text
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)
