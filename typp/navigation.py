"""Cursor navigation primitives: positions, viewport bounds, and key motions.

This module has no terminal or rendering concerns. Every motion is a pure
function of the current position and the current viewport.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .input import Char, Ctrl, KeyBinding, KeyBindingRegistry, KeyEvent

QUIT_KEY = Ctrl("q")


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Viewport:
    """Last addressable column (``width``) and row (``height``) of the grid."""

    width: int
    height: int

    @classmethod
    def from_terminal_size(cls, columns: int, rows: int) -> Viewport:
        return cls(width=max(0, columns - 1), height=max(0, rows - 1))


Motion = Callable[[Position, Viewport], Position]


def move_up(pos: Position, viewport: Viewport) -> Position:
    return Position(pos.x, max(pos.y - 1, 0))


def move_down(pos: Position, viewport: Viewport) -> Position:
    if pos.y < viewport.height:
        return Position(pos.x, pos.y + 1)
    return pos


def move_left(pos: Position, viewport: Viewport) -> Position:
    return Position(max(pos.x - 1, 0), pos.y)


def move_right(pos: Position, viewport: Viewport) -> Position:
    if pos.x < viewport.width:
        return Position(pos.x + 1, pos.y)
    return pos


def jump_top(pos: Position, viewport: Viewport) -> Position:
    return Position(pos.x, 0)


def jump_bottom(pos: Position, viewport: Viewport) -> Position:
    return Position(pos.x, viewport.height)


def jump_middle(pos: Position, viewport: Viewport) -> Position:
    return Position(pos.x, viewport.height // 2)


def jump_line_start(pos: Position, viewport: Viewport) -> Position:
    return Position(0, pos.y)


def jump_line_end(pos: Position, viewport: Viewport) -> Position:
    return Position(viewport.width, pos.y)


def default_motion_registry() -> KeyBindingRegistry:
    """Build the vim-style motion table used in normal mode."""
    return KeyBindingRegistry().register_bindings(
        KeyBinding((Char("k"),), move_up),
        KeyBinding((Char("j"),), move_down),
        KeyBinding((Char("h"),), move_left),
        KeyBinding((Char("l"),), move_right),
        KeyBinding((Char("H"),), jump_top),
        KeyBinding((Char("L"),), jump_bottom),
        KeyBinding((Char("M"),), jump_middle),
        KeyBinding((Char("0"),), jump_line_start),
        KeyBinding((Char("$"),), jump_line_end),
    )


MOTIONS = default_motion_registry()


class KeyAction(Enum):
    MOVE = "move"
    QUIT = "quit"
    NONE = "none"


def classify_key(key: KeyEvent, motions: KeyBindingRegistry = MOTIONS) -> KeyAction:
    """Return what ``key`` asks for; unbound keys are ``KeyAction.NONE``."""
    if key == QUIT_KEY:
        return KeyAction.QUIT
    if key in motions:
        return KeyAction.MOVE
    return KeyAction.NONE


def move_cursor(
    pos: Position,
    key: KeyEvent,
    viewport: Viewport,
    motions: KeyBindingRegistry = MOTIONS,
) -> Position:
    """Apply the motion bound to ``key``; unbound keys leave ``pos`` unchanged."""
    motion = motions.lookup(key)
    if motion is None:
        return pos
    return motion(pos, viewport)
