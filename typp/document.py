"""Read-only document model: a list of rows loaded from a file.

The navigator only asks for rows by index and whether the document is empty;
``Row.render`` produces the clipped printable form for a column span.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .text import DEFAULT_TAB_STOP, display_width, sanitize_terminal_text, slice_columns

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


class Row:
    """One document line, sanitized so every character is printable."""

    def __init__(self, text: str, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.text = sanitize_terminal_text(text)
        self.tab_stop = tab_stop

    def __len__(self) -> int:
        return display_width(self.text, self.tab_stop)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self.text == other.text

    def __repr__(self) -> str:
        return f"Row({self.text!r})"

    def render(self, start: int, end: int) -> str:
        """Return the display columns ``[start, end)`` of this row."""
        return slice_columns(self.text, start, end, self.tab_stop)


class Document:
    """Immutable sequence of rows; ``Document()`` is the empty document."""

    def __init__(self, rows: list[Row] | None = None, path: Path | None = None) -> None:
        self.rows: list[Row] = list(rows or [])
        self.path = path

    @classmethod
    def from_text(cls, source: str, path: Path | None = None, tab_stop: int = DEFAULT_TAB_STOP) -> Document:
        return cls([Row(line, tab_stop) for line in source.splitlines()], path=path)

    @classmethod
    def open(cls, path: Path, tab_stop: int = DEFAULT_TAB_STOP) -> Document:
        """Load ``path`` into a document.

        Raises ``OSError`` when the file cannot be read; callers decide whether
        to fall back to an empty document.
        """
        document = cls.from_text(read_text(path), path=path, tab_stop=tab_stop)
        logger.debug("loaded %s (%d rows)", path, len(document))
        return document

    def __len__(self) -> int:
        return len(self.rows)

    def row(self, index: int) -> Row | None:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def is_empty(self) -> bool:
        return not self.rows
