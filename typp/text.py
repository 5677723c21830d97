"""Display-width measurement and column slicing for document rows.

These helpers keep rendering aligned with terminal cells when tabs, wide
characters, or combining marks are present.
"""

from __future__ import annotations

import re
import unicodedata

DEFAULT_TAB_STOP = 8
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def char_display_width(ch: str, col: int, tab_stop: int = DEFAULT_TAB_STOP) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next ``tab_stop`` column, combining marks consume no
    columns, and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return tab_stop - (col % tab_stop)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def display_width(text: str, tab_stop: int = DEFAULT_TAB_STOP) -> int:
    col = 0
    for ch in text:
        col += char_display_width(ch, col, tab_stop)
    return col


def slice_columns(text: str, start: int, end: int, tab_stop: int = DEFAULT_TAB_STOP) -> str:
    """Return the part of ``text`` covering display columns ``[start, end)``.

    Tabs are expanded into spaces so the slice lines up with terminal cells.
    A wide character cut by either edge is dropped rather than split.
    """
    start = max(0, start)
    if end <= start or not text:
        return ""

    out: list[str] = []
    col = 0
    # Combining marks follow the visibility of the character they modify.
    base_shown = False
    for ch in text:
        w = char_display_width(ch, col, tab_stop)
        if w == 0 and ch != "\t":
            if base_shown:
                out.append(ch)
            continue
        if col >= end:
            break
        if ch == "\t":
            first = max(col, start)
            last = min(col + w, end)
            if last > first:
                out.append(" " * (last - first))
            base_shown = False
        else:
            base_shown = col >= start and col + w <= end
            if base_shown:
                out.append(ch)
        col += w
    return "".join(out)
