"""Reusable key-binding registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .keys import KeyEvent


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key events to a single action."""

    keys: tuple[KeyEvent, ...]
    action: Callable[..., Any]


class KeyBindingRegistry:
    """Small key-dispatch table keyed by decoded key events."""

    def __init__(self) -> None:
        self._actions: dict[KeyEvent, Callable[..., Any]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyBindingRegistry:
        """Register one binding, overwriting existing actions for the same keys."""
        for key in binding.keys:
            self._actions[key] = binding.action
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyBindingRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: KeyEvent) -> Callable[..., Any] | None:
        """Return the action bound to ``key`` or ``None`` for unbound keys."""
        return self._actions.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._actions
