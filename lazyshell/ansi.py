"""Column arithmetic for terminal text that may carry SGR escapes.

Used to keep box borders aligned when the command line is colored or an
output line holds tabs or wide characters.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET_SGR = "\x1b[0m"


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when drawn at column ``col`` (tabs depend on ``col``)."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text: str) -> int:
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def _segments(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, piece)`` pairs, one escape sequence or one character at a time."""
    pos = 0
    while pos < len(text):
        match = ANSI_ESCAPE_RE.match(text, pos) if text[pos] == "\x1b" else None
        if match is not None:
            yield True, match.group(0)
            pos = match.end()
        else:
            yield False, text[pos]
            pos += 1


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Cut ``max_cols`` display columns out of ``text`` starting at ``start_cols``.

    Tabs become spaces. When the cut begins past a style escape, the last
    such escape is replayed first so the visible part keeps its color.
    """
    start_cols = max(0, start_cols)
    pieces: list[str] = []
    last_sgr = ""
    styled = False
    col = 0
    shown = 0
    for is_escape, piece in _segments(text):
        if shown >= max_cols:
            break
        if is_escape:
            if piece.endswith("m"):
                last_sgr = piece
                if col >= start_cols:
                    pieces.append(piece)
                    styled = True
            continue
        width = char_display_width(piece, col)
        col += width
        if col <= start_cols:
            continue
        if last_sgr and not styled:
            pieces.append(last_sgr)
            styled = True
        if piece == "\t":
            # A tab straddling start_cols only contributes its visible part.
            spaces = min(col - max(start_cols, col - width), max_cols - shown)
            pieces.append(" " * spaces)
            shown += spaces
            continue
        if shown + width > max_cols:
            break
        pieces.append(piece)
        shown += width
    return "".join(pieces)


def pad_ansi_line(text: str, width: int) -> str:
    """Fit ``text`` to exactly ``width`` columns, resetting any style before the padding."""
    clipped = slice_ansi_line(text, 0, width)
    fill = " " * max(0, width - display_width(clipped))
    if "\x1b" in clipped:
        return clipped + RESET_SGR + fill
    return clipped + fill
