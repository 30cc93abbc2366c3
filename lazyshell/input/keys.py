"""Keyboard dispatch tables for insert and normal modes.

Maps ``(mode, key token)`` to at most one intent. Dispatch never touches
session state, so the result depends on the mode and the key alone.
"""

from __future__ import annotations

from ..intents import Action, Intent, WriteChar
from ..state import Mode
from .key_registry import KeyComboBinding, KeyComboRegistry

__all__ = [
    "INSERT_BINDINGS",
    "NORMAL_BINDINGS",
    "dispatch_key",
    "is_printable_key",
]

INSERT_BINDINGS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("ESC",), Action.SWITCH_TO_NORMAL),
    KeyComboBinding(("BACKSPACE",), Action.BACKSPACE),
    KeyComboBinding(("ENTER",), Action.SUBMIT),
    KeyComboBinding(("CTRL_D", "CTRL_C"), Action.QUIT),
)

NORMAL_BINDINGS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("h", "LEFT"), Action.LEFT),
    KeyComboBinding(("j", "DOWN"), Action.DOWN),
    KeyComboBinding(("k", "UP"), Action.UP),
    KeyComboBinding(("l", "RIGHT"), Action.RIGHT),
    KeyComboBinding(("i",), Action.INSERT_BEFORE),
    KeyComboBinding(("a",), Action.INSERT_AFTER),
    KeyComboBinding(("I",), Action.INSERT_AT_LINE_START),
    KeyComboBinding(("A",), Action.INSERT_AT_LINE_END),
    KeyComboBinding(("CTRL_N",), Action.NEXT_OUTPUT),
    KeyComboBinding(("CTRL_P",), Action.PREVIOUS_OUTPUT),
    KeyComboBinding(("CTRL_O",), Action.HISTORY_OLDER),
    KeyComboBinding(("CTRL_I",), Action.HISTORY_NEWER),
    KeyComboBinding(("CTRL_U",), Action.SCROLL_UP),
    KeyComboBinding(("CTRL_D",), Action.SCROLL_DOWN),
    KeyComboBinding(("CTRL_C",), Action.QUIT),
)


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character rather than a named token."""
    return len(key) == 1 and key.isprintable()


def dispatch_key(mode: Mode, key: str) -> Intent | None:
    """Translate one key token into an intent for ``mode``."""
    if mode is Mode.INSERT:
        intent = INSERT_BINDINGS.lookup(key)
        if intent is not None:
            return intent
        if is_printable_key(key):
            return WriteChar(key)
        return None
    return NORMAL_BINDINGS.lookup(key)
