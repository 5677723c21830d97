"""Input-layer public API for key decoding and key-binding tables.

Low-level terminal decoding (`read_key`) yields the closed `KeyEvent`
variant; navigation builds its bindings on `KeyBindingRegistry`.
"""

from .key_registry import KeyBinding, KeyBindingRegistry
from .keys import Alt, Char, Ctrl, KeyEvent, Special, describe_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyBindingRegistry",
    "KeyEvent",
    "Char",
    "Ctrl",
    "Alt",
    "Special",
    "describe_key",
]
