"""Rendering engine for the status/output/command terminal view.

Defines render context data and writes fully composed ANSI frames.
Rendering reads the session but never mutates it.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from ..ansi import display_width, pad_ansi_line, slice_ansi_line
from ..cursor import OutputPane
from ..highlight import DEFAULT_STYLE, colorize_command, sanitize_terminal_text
from ..state import Mode, Session
from ..ui_theme import DEFAULT_THEME, UITheme
from .layout import PROMPT, FrameLayout, compute_layout, cursor_screen_position, scrollbar_thumb

__all__ = [
    "RenderContext",
    "FrameLayout",
    "build_frame",
    "build_status_line",
    "compute_layout",
    "current_directory_label",
    "render_frame",
]


@dataclass
class RenderContext:
    session: Session
    width: int
    height: int
    cwd: str
    style: str = DEFAULT_STYLE
    no_color: bool = False
    theme: UITheme = field(default=DEFAULT_THEME)


def current_directory_label() -> str:
    """Return the working directory for the command box title, or ``~``."""
    try:
        return os.getcwd()
    except OSError:
        return "~"


def build_status_line(left_text: str, width: int, right_text: str) -> str:
    usable = max(1, width)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _status_row(context: RenderContext) -> str:
    session = context.session
    theme = context.theme
    left = ""
    if session.viewing_command is not None:
        left = f" history {session.viewing_command + 1}/{len(session.previous_commands)}"
    right = f"{session.mode.value}  {session.viewing_output + 1}/{len(session.outputs)} "
    line = build_status_line(left, context.width, right)
    mode_color = theme.status_mode_insert if session.mode is Mode.INSERT else theme.status_mode_normal
    mode_label = session.mode.value
    split_at = line.rfind(mode_label)
    if split_at < 0 or not mode_color:
        return f"{theme.status}{line}{theme.reset}"
    return (
        f"{theme.status}{line[:split_at]}"
        f"{mode_color}{mode_label}{theme.reset}"
        f"{theme.status}{line[split_at + len(mode_label):]}{theme.reset}"
    )


def _top_border(title: str, width: int, theme: UITheme, border: str) -> str:
    if width < 2:
        return "─" * width
    inner = width - 2
    title = slice_ansi_line(sanitize_terminal_text(title.replace("\n", " ")), 0, inner)
    fill = "─" * max(0, inner - display_width(title))
    return f"{border}┌{theme.reset}{theme.title}{title}{theme.reset}{border}{fill}┐{theme.reset}"


def _bottom_border(width: int, theme: UITheme, border: str) -> str:
    if width < 2:
        return "─" * width
    return f"{border}└{'─' * (width - 2)}┘{theme.reset}"


def _body_row(content: str, width: int, theme: UITheme, border: str, right_edge: str | None = None) -> str:
    if width < 2:
        return " " * width
    right = right_edge if right_edge is not None else f"{border}│{theme.reset}"
    return f"{border}│{theme.reset}{pad_ansi_line(content, width - 2)}{right}"


def _output_rows(context: RenderContext, layout: FrameLayout) -> list[str]:
    session = context.session
    theme = context.theme
    output = session.current_output
    focused = isinstance(session.cursor, OutputPane)
    border = theme.border_focused if focused else theme.border
    interior_rows = layout.output_interior_rows

    title = output.command if output is not None else ""
    lines = [sanitize_terminal_text(line) for line in output.lines] if output is not None else []
    vertical = output.scroll.vertical if output is not None else 0
    horizontal = output.scroll.horizontal if output is not None else 0
    thumb = scrollbar_thumb(len(lines), vertical, interior_rows)

    rows = [_top_border(title, layout.width, theme, border)]
    for row in range(interior_rows):
        idx = vertical + row
        text = slice_ansi_line(lines[idx], horizontal, layout.interior_width) if idx < len(lines) else ""
        right_edge = None
        if thumb is not None:
            start, size = thumb
            if start <= row < start + size:
                right_edge = f"{theme.scrollbar_thumb}█{theme.reset}"
            else:
                right_edge = f"{theme.scrollbar_track}│{theme.reset}"
        rows.append(_body_row(text, layout.width, theme, border, right_edge))
    rows.append(_bottom_border(layout.width, theme, border))
    return rows


def _command_rows(context: RenderContext, layout: FrameLayout) -> list[str]:
    session = context.session
    theme = context.theme
    focused = not isinstance(session.cursor, OutputPane)
    border = theme.border_focused if focused else theme.border
    command = colorize_command(session.displayed_command, context.style, context.no_color)
    prompt = f"{theme.prompt}{PROMPT}{theme.reset}"
    return [
        _top_border(context.cwd, layout.width, theme, border),
        _body_row(f"{prompt}{command}", layout.width, theme, border),
        _bottom_border(layout.width, theme, border),
    ]


def build_frame(context: RenderContext) -> str:
    """Compose one full frame, ending with the hardware cursor placed for the session."""
    layout = compute_layout(context.width, context.height)
    rows = [_status_row(context)]
    rows.extend(_output_rows(context, layout))
    rows.extend(_command_rows(context, layout))

    out: list[str] = ["\033[?25l\033[H"]
    visible = rows[: layout.height]
    for idx, row in enumerate(visible):
        out.append(row)
        out.append("\033[K")
        if idx < len(visible) - 1:
            out.append("\r\n")
    cursor_row, cursor_col = cursor_screen_position(
        layout,
        context.session.cursor,
        context.session.displayed_command,
    )
    out.append(f"\033[{cursor_row + 1};{cursor_col + 1}H\033[?25h")
    return "".join(out)


def render_frame(context: RenderContext) -> None:
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))
