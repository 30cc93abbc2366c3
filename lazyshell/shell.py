"""Synchronous command execution for submitted command lines.

Command lines are split on whitespace only: there is no quoting, piping,
redirection or expansion. The first token names the executable.
"""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


def split_command_line(command_line: str) -> list[str]:
    """Return whitespace-separated tokens of ``command_line``."""
    return command_line.split()


def run_command(command_line: str) -> bytes | None:
    """Run ``command_line`` to completion and return its captured stdout bytes.

    Returns ``None`` when there is nothing to run or the process cannot be
    spawned. A non-zero exit status still returns whatever was written to
    stdout.
    """
    argv = split_command_line(command_line)
    if not argv:
        logger.debug("empty command line, nothing to run")
        return None
    try:
        proc = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        logger.warning("failed to launch %r: %s", argv[0], exc)
        return None
    logger.info("ran %r: exit status %d, %d bytes", argv, proc.returncode, len(proc.stdout))
    return proc.stdout


def decode_output(data: bytes) -> str | None:
    """Decode captured bytes as UTF-8, returning ``None`` for undecodable output."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("dropping %d bytes of non-UTF-8 output", len(data))
        return None
