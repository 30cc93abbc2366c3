"""Command-line syntax coloring and output sanitization.

Command text is colored with Pygments' shell lexer.
Captured output is shown as plain text with terminal control bytes neutralized.
"""

from __future__ import annotations

import re

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import BashLexer
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")

_LEXER = BashLexer()
_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str) -> str:
    """Return ``style`` if Pygments knows it, else the default style."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    if style in set(get_all_styles()):
        _VALID_STYLES.add(style)
        return style
    _INVALID_STYLES.add(style)
    return DEFAULT_STYLE


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        formatter = TerminalFormatter(style=style)
    except ClassNotFound:
        formatter = TerminalFormatter()
    _FORMATTERS[style] = formatter
    return formatter


def colorize_command(command: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``command`` colored for the terminal, as a single line."""
    command = sanitize_terminal_text(command)
    if no_color or not command:
        return command
    rendered = pygments_highlight(command, _LEXER, _formatter_for_style(normalize_style(style)))
    return rendered.rstrip("\n")
