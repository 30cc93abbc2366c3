"""Frame geometry: status row, output box, and command box.

All coordinates are 0-based screen cells. The output box takes whatever
rows remain after the status line and the fixed-height command box.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width
from ..cursor import CommandLine, Cursor

STATUS_ROWS = 1
COMMAND_BOX_ROWS = 3
MIN_OUTPUT_BOX_ROWS = 3
PROMPT = "❯ "


@dataclass(frozen=True)
class FrameLayout:
    width: int
    height: int
    output_top: int
    output_rows: int
    command_top: int

    @property
    def output_interior_rows(self) -> int:
        """Visible text rows inside the output box borders."""
        return max(0, self.output_rows - 2)

    @property
    def interior_width(self) -> int:
        return max(0, self.width - 2)

    @property
    def command_text_row(self) -> int:
        return self.command_top + 1


def compute_layout(width: int, height: int) -> FrameLayout:
    """Split a ``width`` x ``height`` terminal into the three stacked regions."""
    width = max(1, width)
    height = max(1, height)
    output_top = STATUS_ROWS
    output_rows = max(MIN_OUTPUT_BOX_ROWS, height - STATUS_ROWS - COMMAND_BOX_ROWS)
    return FrameLayout(
        width=width,
        height=height,
        output_top=output_top,
        output_rows=output_rows,
        command_top=output_top + output_rows,
    )


def cursor_screen_position(layout: FrameLayout, cursor: Cursor, command_text: str) -> tuple[int, int]:
    """Map a session cursor to a ``(row, col)`` screen cell inside its box interior."""
    last_col = max(1, layout.width - 2)
    if isinstance(cursor, CommandLine):
        prefix = command_text[: max(0, cursor.x)]
        col = 1 + display_width(PROMPT) + display_width(prefix)
        return layout.command_text_row, min(col, last_col)
    rows = max(1, layout.output_interior_rows)
    row = layout.output_top + 1 + max(0, min(cursor.y, rows - 1))
    col = 1 + max(0, cursor.x)
    return row, min(col, last_col)


def scrollbar_thumb(total_lines: int, offset: int, rows: int) -> tuple[int, int] | None:
    """Return ``(start, size)`` of the scrollbar thumb, or ``None`` when everything fits."""
    if rows <= 0 or (total_lines <= rows and offset <= 0):
        return None
    total = max(total_lines, offset + rows)
    size = max(1, min(rows, (rows * rows) // max(1, total)))
    max_offset = max(1, total - rows)
    start = round(min(offset, max_offset) / max_offset * (rows - size))
    return start, size
