"""Abstract user actions produced by the key dispatcher.

Every action except character insertion is a plain enum member;
``WriteChar`` carries the typed character.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Action(Enum):
    SWITCH_TO_NORMAL = "switch_to_normal"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    QUIT = "quit"
    LEFT = "left"
    DOWN = "down"
    UP = "up"
    RIGHT = "right"
    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    INSERT_AT_LINE_START = "insert_at_line_start"
    INSERT_AT_LINE_END = "insert_at_line_end"
    NEXT_OUTPUT = "next_output"
    PREVIOUS_OUTPUT = "previous_output"
    HISTORY_OLDER = "history_older"
    HISTORY_NEWER = "history_newer"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


@dataclass(frozen=True)
class WriteChar:
    """Insert ``char`` into the live buffer at the cursor column."""

    char: str


Intent = Union[Action, WriteChar]


def is_buffer_editing(intent: Intent) -> bool:
    """Return whether ``intent`` edits the live buffer and must collapse a history peek."""
    return isinstance(intent, WriteChar) or intent in (Action.BACKSPACE, Action.SUBMIT)
