"""Frame composition for the navigator's draw cycle.

Builds the row texts and welcome banner; the navigator sends them to the
terminal surface. Nothing here writes to the terminal directly.
"""

from __future__ import annotations

from . import PRODUCT_NAME, __version__
from .document import Document

EMPTY_ROW_MARKER = "~"
FAREWELL_MESSAGE = "Goodbye."
WELCOME_ROW_DIVISOR = 3


def welcome_message(width: int, product: str = PRODUCT_NAME, version: str = __version__) -> str:
    """Return the centered welcome banner, hard-truncated to ``width`` columns."""
    message = f"{product} -- version {version}"
    padding = max((width - len(message)) // 2 - 1, 0)
    banner = f"{EMPTY_ROW_MARKER}{' ' * padding}{message}"
    return banner[: max(0, width)]


def welcome_row(rows: int) -> int:
    return rows // WELCOME_ROW_DIVISOR


def frame_rows(document: Document, columns: int, rows: int) -> list[str]:
    """Return the text for terminal rows ``0 .. rows-2``.

    The last terminal row is left untouched. Document rows are clipped to
    ``[0, columns)``; past the end of the document each row shows the empty
    marker, except the welcome row of an empty document.
    """
    out: list[str] = []
    banner_row = welcome_row(rows)
    for terminal_row in range(max(0, rows - 1)):
        row = document.row(terminal_row)
        if row is not None:
            out.append(row.render(0, columns))
        elif document.is_empty() and terminal_row == banner_row:
            out.append(welcome_message(columns))
        else:
            out.append(EMPTY_ROW_MARKER)
    return out
