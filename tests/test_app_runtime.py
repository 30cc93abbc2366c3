"""Tests for ``lazyshell.runtime.app`` wiring.

Covers callback composition and the interactive-terminal guard.
"""

from __future__ import annotations

import unittest
from unittest import mock

from lazyshell.runtime import app
from lazyshell.shell import run_command
from lazyshell.state import RunningState, Session
from lazyshell.ui_theme import PLAIN_THEME


class AppRuntimeBehaviorTests(unittest.TestCase):
    def test_build_callbacks_renders_with_bound_presentation_settings(self) -> None:
        callbacks = app.build_callbacks("native", True, PLAIN_THEME)
        session = Session()

        with mock.patch("lazyshell.runtime.app.render_frame") as render_frame, mock.patch(
            "lazyshell.runtime.app.current_directory_label", return_value="/tmp"
        ):
            callbacks.render(session, 90, 30)

        context = render_frame.call_args.args[0]
        self.assertIs(context.session, session)
        self.assertEqual((context.width, context.height, context.cwd), (90, 30, "/tmp"))
        self.assertEqual(context.style, "native")
        self.assertTrue(context.no_color)
        self.assertIs(context.theme, PLAIN_THEME)
        self.assertIs(callbacks.run_command, run_command)

    def test_run_session_requires_a_terminal(self) -> None:
        with mock.patch("lazyshell.runtime.app.os.isatty", return_value=False), mock.patch(
            "lazyshell.runtime.app.sys.stdin"
        ), mock.patch("lazyshell.runtime.app.sys.stdout"), mock.patch(
            "lazyshell.runtime.app.run_main_loop"
        ) as run_main_loop:
            with self.assertRaises(SystemExit):
                app.run_session("monokai", False, PLAIN_THEME)

        run_main_loop.assert_not_called()

    def test_run_session_returns_final_session(self) -> None:
        def finish(session, *_args):
            session.running = RunningState.DONE

        with mock.patch("lazyshell.runtime.app.os.isatty", return_value=True), mock.patch(
            "lazyshell.runtime.app.sys.stdin"
        ), mock.patch("lazyshell.runtime.app.sys.stdout"), mock.patch(
            "lazyshell.terminal.termios.tcgetattr", return_value=[0]
        ), mock.patch("lazyshell.runtime.app.run_main_loop", side_effect=finish) as run_main_loop:
            session = app.run_session("monokai", False, PLAIN_THEME)

        run_main_loop.assert_called_once()
        self.assertIs(session.running, RunningState.DONE)


if __name__ == "__main__":
    unittest.main()
