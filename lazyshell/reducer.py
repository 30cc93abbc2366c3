"""Session state machine: apply one intent to the session.

Each handler mutates the session in place and may return a follow-up intent,
which ``apply_intent_chain`` feeds back in before the next frame is drawn.
Boundary moves (history, outputs, cursor) saturate instead of failing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from .cursor import CommandLine, OutputPane
from .intents import Action, Intent, WriteChar, is_buffer_editing
from .shell import decode_output, run_command
from .state import Mode, Output, RunningState, Session

logger = logging.getLogger(__name__)

SCROLL_STEP = 10

CommandRunner = Callable[[str], Optional[bytes]]


class CursorInvariantError(AssertionError):
    """Raised when a buffer edit arrives while the cursor is in the output pane."""


def _collapse_history_peek(session: Session) -> None:
    """Materialize a peeked history entry into the live buffer before editing it."""
    if session.viewing_command is not None:
        session.current_command = session.displayed_command
    session.viewing_command = None


def _command_line_cursor(session: Session, intent: Intent) -> CommandLine:
    cursor = session.cursor
    if not isinstance(cursor, CommandLine):
        raise CursorInvariantError(f"{intent!r} requires a command-line cursor, got {cursor!r}")
    return cursor


def _write_char(session: Session, intent: WriteChar) -> None:
    cursor = _command_line_cursor(session, intent)
    column = min(cursor.x, len(session.current_command))
    buffer = session.current_command
    session.current_command = buffer[:column] + intent.char + buffer[column:]
    session.cursor = CommandLine(column + 1)


def _backspace(session: Session) -> None:
    cursor = _command_line_cursor(session, Action.BACKSPACE).left()
    buffer = session.current_command
    column = min(cursor.x, len(buffer))
    session.cursor = CommandLine(column)
    # At column 0 the left move saturates, so the first character goes.
    if column < len(buffer):
        session.current_command = buffer[:column] + buffer[column + 1 :]


def _submit(session: Session, run: CommandRunner) -> None:
    command = session.current_command
    captured = run(command)
    text = decode_output(captured) if captured is not None else None
    if text is not None:
        output = Output(command=command, stdout=text)
        output.scroll.vertical = max(0, len(output.lines) - session.height)
        session.outputs.append(output)
        session.viewing_output = len(session.outputs) - 1
    session.previous_commands.append(command)
    session.current_command = ""
    session.viewing_command = None
    session.cursor = CommandLine(0)


def _enter_insert(session: Session, action: Action) -> None:
    length = len(session.displayed_command)
    column = session.cursor.x
    if action is Action.INSERT_BEFORE:
        column = min(column, length)
    elif action is Action.INSERT_AFTER:
        column = min(column + 1, length)
    elif action is Action.INSERT_AT_LINE_START:
        column = 0
    else:
        column = length
    session.mode = Mode.INSERT
    session.cursor = CommandLine(column)


def _right_limit(session: Session) -> int:
    cursor = session.cursor
    if isinstance(cursor, CommandLine):
        return len(session.displayed_command)
    output = session.current_output
    if output is None:
        return 0
    return output.line_length(cursor.y + output.scroll.vertical)


def _move_up(session: Session) -> None:
    cursor = session.cursor
    if isinstance(cursor, CommandLine):
        session.cursor = OutputPane(cursor.x, max(0, session.height - 1))
    else:
        session.cursor = OutputPane(cursor.x, max(0, cursor.y - 1))


def _move_down(session: Session) -> None:
    cursor = session.cursor
    if not isinstance(cursor, OutputPane):
        return
    if cursor.y + 1 >= session.height:
        session.cursor = CommandLine(cursor.x)
    else:
        session.cursor = OutputPane(cursor.x, cursor.y + 1)


def _step_output(session: Session, delta: int) -> None:
    if not session.outputs:
        session.viewing_output = 0
        return
    last = len(session.outputs) - 1
    session.viewing_output = max(0, min(last, session.viewing_output + delta))


def _history_older(session: Session) -> None:
    if session.viewing_command is not None:
        session.viewing_command = max(0, session.viewing_command - 1)
    elif session.previous_commands:
        session.viewing_command = len(session.previous_commands) - 1


def _history_newer(session: Session) -> None:
    if session.viewing_command is None:
        return
    if session.viewing_command >= len(session.previous_commands) - 1:
        session.viewing_command = None
    else:
        session.viewing_command += 1


def _scroll(session: Session, delta: int) -> None:
    output = session.current_output
    if output is None:
        return
    output.scroll.vertical = max(0, output.scroll.vertical + delta)


def apply_intent(session: Session, intent: Intent, run: CommandRunner = run_command) -> Intent | None:
    """Apply ``intent`` to ``session`` and return an optional follow-up intent."""
    if session.running is RunningState.DONE:
        return None
    if is_buffer_editing(intent):
        _collapse_history_peek(session)
    session.dirty = True

    if isinstance(intent, WriteChar):
        _write_char(session, intent)
        return None

    if intent is Action.BACKSPACE:
        _backspace(session)
    elif intent is Action.SUBMIT:
        _submit(session, run)
    elif intent is Action.SWITCH_TO_NORMAL:
        session.mode = Mode.NORMAL
    elif intent in (
        Action.INSERT_BEFORE,
        Action.INSERT_AFTER,
        Action.INSERT_AT_LINE_START,
        Action.INSERT_AT_LINE_END,
    ):
        _enter_insert(session, intent)
    elif intent is Action.LEFT:
        session.cursor = session.cursor.left()
    elif intent is Action.RIGHT:
        session.cursor = session.cursor.right_capped(_right_limit(session))
    elif intent is Action.UP:
        _move_up(session)
    elif intent is Action.DOWN:
        _move_down(session)
    elif intent is Action.NEXT_OUTPUT:
        _step_output(session, 1)
    elif intent is Action.PREVIOUS_OUTPUT:
        _step_output(session, -1)
    elif intent is Action.HISTORY_OLDER:
        _history_older(session)
    elif intent is Action.HISTORY_NEWER:
        _history_newer(session)
    elif intent is Action.SCROLL_UP:
        _scroll(session, -SCROLL_STEP)
    elif intent is Action.SCROLL_DOWN:
        _scroll(session, SCROLL_STEP)
    elif intent is Action.QUIT:
        logger.info("quit requested")
        session.running = RunningState.DONE
    else:
        raise AssertionError(f"unhandled intent: {intent!r}")
    return None


def apply_intent_chain(session: Session, intent: Intent | None, run: CommandRunner = run_command) -> None:
    """Apply ``intent`` and every follow-up it yields, in order."""
    while intent is not None:
        intent = apply_intent(session, intent, run)
