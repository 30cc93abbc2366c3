"""CLI argument and logging setup tests.

Verifies how ``lazyshell.cli.main`` resolves style and theme preferences
before handing off to the session runtime.
"""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyshell import cli
from lazyshell.ui_theme import OCEAN_THEME, PLAIN_THEME


class CliArgumentTests(unittest.TestCase):
    def _run_main(self, argv: list[str], saved_style=None, saved_theme=None):
        with mock.patch("lazyshell.cli.run_session") as run_session, mock.patch(
            "lazyshell.cli.load_style_name", return_value=saved_style
        ), mock.patch("lazyshell.cli.load_theme_name", return_value=saved_theme), mock.patch(
            "lazyshell.cli.save_theme_name"
        ) as save_theme, mock.patch("lazyshell.cli.save_style_name") as save_style:
            cli.main(argv)
        self.save_style = save_style
        return run_session, save_theme

    def test_defaults_use_monokai_and_default_theme(self) -> None:
        run_session, save_theme = self._run_main([])

        run_session.assert_called_once()
        style, no_color, theme = run_session.call_args.args
        self.assertEqual(style, "monokai")
        self.assertFalse(no_color)
        self.assertEqual(theme.name, "default")
        save_theme.assert_not_called()
        self.save_style.assert_not_called()

    def test_saved_preferences_are_used_when_no_flags_given(self) -> None:
        run_session, _save_theme = self._run_main([], saved_style="native", saved_theme="ocean")

        style, _no_color, theme = run_session.call_args.args
        self.assertEqual(style, "native")
        self.assertIs(theme, OCEAN_THEME)

    def test_explicit_theme_is_persisted_and_applied(self) -> None:
        run_session, save_theme = self._run_main(["--theme", "ocean"], saved_theme="default")

        save_theme.assert_called_once_with("ocean")
        self.assertIs(run_session.call_args.args[2], OCEAN_THEME)

    def test_unknown_style_falls_back_to_default(self) -> None:
        run_session, _save_theme = self._run_main(["--style", "no-such-style"])

        self.assertEqual(run_session.call_args.args[0], "monokai")
        self.save_style.assert_not_called()

    def test_explicit_style_is_persisted_and_applied(self) -> None:
        run_session, _save_theme = self._run_main(["--style", "native"], saved_style="monokai")

        self.save_style.assert_called_once_with("native")
        self.assertEqual(run_session.call_args.args[0], "native")

    def test_no_color_selects_plain_theme(self) -> None:
        run_session, _save_theme = self._run_main(["--no-color", "--theme", "ocean"])

        _style, no_color, theme = run_session.call_args.args
        self.assertTrue(no_color)
        self.assertIs(theme, PLAIN_THEME)

    def test_log_level_is_case_insensitive(self) -> None:
        args = cli.build_parser().parse_args(["--log-level", "debug"])

        self.assertEqual(args.log_level, "DEBUG")


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("lazyshell")
        self.saved = (list(self.logger.handlers), self.logger.level, self.logger.propagate)

    def tearDown(self) -> None:
        handlers, level, propagate = self.saved
        for handler in self.logger.handlers:
            if handler not in handlers:
                handler.close()
        self.logger.handlers[:] = handlers
        self.logger.setLevel(level)
        self.logger.propagate = propagate

    def test_without_log_file_no_handler_is_added(self) -> None:
        before = list(self.logger.handlers)

        cli.configure_logging(None)

        self.assertEqual(self.logger.handlers, before)

    def test_log_file_receives_package_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "lazyshell.log"

            cli.configure_logging(log_path, "DEBUG")
            logging.getLogger("lazyshell.shell").debug("ran %s", "ls")
            for handler in self.logger.handlers:
                handler.flush()

            content = log_path.read_text(encoding="utf-8")
            self.assertIn("DEBUG lazyshell.shell: ran ls", content)
            self.assertFalse(self.logger.propagate)

            for handler in list(self.logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    self.logger.removeHandler(handler)


if __name__ == "__main__":
    unittest.main()
