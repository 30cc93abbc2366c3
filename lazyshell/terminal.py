"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor shape.
Restoration runs on normal exit, on exceptions, and on SIGTERM/SIGHUP.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[H\x1b[2J"
LEAVE_TUI_SEQUENCE = b"\x1b[0 q\x1b[?25h\x1b[?1049l"
BAR_CURSOR_SEQUENCE = b"\x1b[6 q"
BLOCK_CURSOR_SEQUENCE = b"\x1b[2 q"
TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def _exit_on_signal(signum: int, _frame) -> None:
    raise SystemExit(128 + signum)


class TerminalController:
    """Manage terminal mode transitions for the interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._bar_cursor: bool | None = None

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self._bar_cursor = None
        logger.debug("entered raw alternate-screen mode")

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer, default cursor, and saved tty state."""
        try:
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("restored terminal state")

    def set_bar_cursor(self, enabled: bool) -> None:
        """Switch between bar (editing) and block (navigation) cursor shapes."""
        desired = bool(enabled)
        if desired == self._bar_cursor:
            return
        os.write(self.stdout_fd, BAR_CURSOR_SEQUENCE if desired else BLOCK_CURSOR_SEQUENCE)
        self._bar_cursor = desired

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        previous_handlers = {signum: signal.signal(signum, _exit_on_signal) for signum in TERMINATION_SIGNALS}
        try:
            self.enable_tui_mode()
            yield
        finally:
            try:
                self.disable_tui_mode()
            finally:
                for signum, handler in previous_handlers.items():
                    signal.signal(signum, handler)
