"""Runtime composition layer for lazyshell.

Builds the initial session, wires rendering and command execution into the
loop callbacks, and starts the loop on the controlling terminal.
"""

from __future__ import annotations

import logging
import os
import sys

from ..render import RenderContext, current_directory_label, render_frame
from ..shell import run_command
from ..state import Session
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

logger = logging.getLogger(__name__)


def build_callbacks(style: str, no_color: bool, theme: UITheme) -> RuntimeLoopCallbacks:
    """Bind presentation settings into the loop's render and execute operations."""

    def render(session: Session, columns: int, lines: int) -> None:
        render_frame(
            RenderContext(
                session=session,
                width=columns,
                height=lines,
                cwd=current_directory_label(),
                style=style,
                no_color=no_color,
                theme=theme,
            )
        )

    return RuntimeLoopCallbacks(render=render, run_command=run_command)


def run_session(style: str, no_color: bool, theme: UITheme) -> Session:
    """Run an interactive session on stdin/stdout and return its final state."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("lazyshell needs an interactive terminal.")

    terminal = TerminalController(stdin_fd, stdout_fd)
    session = Session()
    logger.info("session started (style=%s, theme=%s)", style, theme.name)
    try:
        run_main_loop(
            session,
            terminal,
            stdin_fd,
            RuntimeLoopTiming(),
            build_callbacks(style, no_color, theme),
        )
    except Exception:
        logger.exception("session aborted")
        raise
    logger.info(
        "session ended: %d commands, %d outputs",
        len(session.previous_commands),
        len(session.outputs),
    )
    return session
