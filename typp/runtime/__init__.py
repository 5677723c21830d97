"""Runtime pieces of the viewer session.

Groups the terminal surface, persisted config, and the `Navigator` loop that
ties them to a document.
"""

from __future__ import annotations

from .navigator import Navigator
from .terminal import TerminalController, TerminalIOError, TerminalSize

__all__ = [
    "Navigator",
    "TerminalController",
    "TerminalIOError",
    "TerminalSize",
]
