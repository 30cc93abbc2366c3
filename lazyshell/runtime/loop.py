"""Main interactive event loop for the terminal UI.

Each iteration redraws when needed, waits briefly for one key, maps it to
an intent, and applies it together with any follow-up intents it chains.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import dispatch_key, read_key
from ..reducer import CommandRunner, apply_intent_chain
from ..render.layout import compute_layout
from ..state import Mode, RunningState, Session
from ..terminal import TerminalController

POLL_TIMEOUT_MS = 250


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = POLL_TIMEOUT_MS


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    ``render`` draws the session for a ``(columns, lines)`` terminal;
    ``run_command`` executes submitted command lines.
    """

    render: Callable[[Session, int, int], None]
    run_command: CommandRunner


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF and CR-LF into one ``ENTER`` token.

    Returns the key to dispatch (``None`` to drop it) and the new skip flag.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    session: Session,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until a quit intent marks the session done."""
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while session.running is RunningState.RUNNING:
            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                session.dirty = True
            session.height = compute_layout(term.columns, term.lines).output_interior_rows

            if session.dirty:
                terminal.set_bar_cursor(session.mode is Mode.INSERT)
                callbacks.render(session, term.columns, term.lines)
                session.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.poll_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
            if normalized is None:
                continue
            intent = dispatch_key(session.mode, normalized)
            if intent is None:
                continue
            apply_intent_chain(session, intent, callbacks.run_command)
