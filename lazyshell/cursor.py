"""Cursor positions for the two focusable panes.

A cursor is either on the command line or inside the output pane.
Movement here is purely horizontal; pane switches belong to the reducer.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class CommandLine:
    """Column offset into the text shown on the command line."""

    x: int = 0

    def left(self) -> CommandLine:
        return replace(self, x=max(0, self.x - 1))

    def right(self) -> CommandLine:
        return replace(self, x=self.x + 1)

    def right_capped(self, max_x: int) -> CommandLine:
        """Step right without passing ``max_x``."""
        return replace(self, x=max(0, min(self.x + 1, max_x)))


@dataclass(frozen=True)
class OutputPane:
    """Column/row offset into the viewed output, relative to its scroll origin."""

    x: int = 0
    y: int = 0

    def left(self) -> OutputPane:
        return replace(self, x=max(0, self.x - 1))

    def right(self) -> OutputPane:
        return replace(self, x=self.x + 1)

    def right_capped(self, max_x: int) -> OutputPane:
        """Step right without passing ``max_x``."""
        return replace(self, x=max(0, min(self.x + 1, max_x)))


Cursor = Union[CommandLine, OutputPane]
