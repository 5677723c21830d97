"""Decoded key events.

Every key read from the terminal is exactly one of ``Char``, ``Ctrl``,
``Alt`` or ``Special``. Events are frozen and hashable so they can key the
binding tables used by navigation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Char:
    """A plain printable (or whitespace) character."""

    char: str


@dataclass(frozen=True)
class Ctrl:
    """A control-modified character, e.g. ``Ctrl("q")`` for Ctrl+Q."""

    char: str


@dataclass(frozen=True)
class Alt:
    """An Alt/Meta-modified character (``ESC`` followed by the character)."""

    char: str


@dataclass(frozen=True)
class Special:
    """A named non-character key such as ``UP``, ``HOME`` or ``ESC``."""

    name: str


KeyEvent = Union[Char, Ctrl, Alt, Special]

UP = Special("UP")
DOWN = Special("DOWN")
RIGHT = Special("RIGHT")
LEFT = Special("LEFT")
HOME = Special("HOME")
END = Special("END")
INSERT = Special("INSERT")
DELETE = Special("DELETE")
PAGE_UP = Special("PAGE_UP")
PAGE_DOWN = Special("PAGE_DOWN")
BACKSPACE = Special("BACKSPACE")
ESC = Special("ESC")
NULL = Special("NULL")
UNKNOWN = Special("UNKNOWN")


def describe_key(key: KeyEvent) -> str:
    """Return a short human-readable label, used in debug logging."""
    if isinstance(key, Char):
        return repr(key.char)
    if isinstance(key, Ctrl):
        return f"Ctrl+{key.char}"
    if isinstance(key, Alt):
        return f"Alt+{key.char}"
    return key.name
