"""Command-line front door for lazyshell.

Parses presentation and diagnostics options, configures logging,
then dispatches into the interactive session runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_style_name, load_theme_name, save_style_name, save_theme_name
from .highlight import DEFAULT_STYLE, normalize_style
from .runtime import run_session
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(log_file: Path | None, level: str = "INFO") -> None:
    """Send ``lazyshell`` log records to ``log_file``; without one they are discarded.

    The terminal belongs to the TUI, so records never go to stdout/stderr.
    """
    package_logger = logging.getLogger("lazyshell")
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Modal terminal shell with a scrollback viewer over past command outputs."
    )
    parser.add_argument(
        "--style",
        default=None,
        help=f"Pygments style for the command line (default: saved style or {DEFAULT_STYLE}); saved as the new default.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); saved as the new default.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable all color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write diagnostic log records to this file.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Minimum level written to --log-file (default: INFO).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch an interactive session."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    style = normalize_style(args.style or load_style_name() or DEFAULT_STYLE)
    if args.style is not None and style == args.style:
        save_style_name(style)
    if args.theme is not None:
        save_theme_name(args.theme)
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    run_session(style, args.no_color, theme)


if __name__ == "__main__":
    main()
