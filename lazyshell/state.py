from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .cursor import CommandLine, Cursor


class Mode(Enum):
    INSERT = "Insert"
    NORMAL = "Normal"


class RunningState(Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass
class Scroll:
    vertical: int = 0
    horizontal: int = 0


def split_output_lines(text: str) -> list[str]:
    """Split captured output on ``\\n`` only; a trailing newline ends the last line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class Output:
    command: str
    stdout: str
    scroll: Scroll = field(default_factory=Scroll)

    @property
    def lines(self) -> list[str]:
        return split_output_lines(self.stdout)

    def line_length(self, row: int) -> int:
        """Return the length of line ``row``, or 0 when it does not exist."""
        lines = self.lines
        if 0 <= row < len(lines):
            return len(lines[row])
        return 0


@dataclass
class Session:
    mode: Mode = Mode.INSERT
    cursor: Cursor = field(default_factory=CommandLine)
    outputs: list[Output] = field(default_factory=list)
    previous_commands: list[str] = field(default_factory=list)
    current_command: str = ""
    viewing_output: int = 0
    viewing_command: int | None = None
    height: int = 0
    running: RunningState = RunningState.RUNNING
    dirty: bool = True

    @property
    def displayed_command(self) -> str:
        """Text on the command line: the peeked history entry, else the live buffer."""
        if self.viewing_command is not None and 0 <= self.viewing_command < len(self.previous_commands):
            return self.previous_commands[self.viewing_command]
        return self.current_command

    @property
    def current_output(self) -> Output | None:
        if 0 <= self.viewing_output < len(self.outputs):
            return self.outputs[self.viewing_output]
        return None
