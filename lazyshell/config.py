"""Persistent JSON preferences.

Only presentation choices live here: the UI theme and the Pygments style
used for the command line. History and captured outputs are never saved.
A broken or unwritable file never stops the shell from starting.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyshell"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

THEME_KEY = "theme"
STYLE_KEY = "style"


def load_config() -> dict[str, object]:
    """Read the preferences object, or ``{}`` if there is no usable one on disk."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` back to ``CONFIG_PATH``, silently giving up on filesystem errors."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    except OSError:
        return


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _save_name(key: str, name: str) -> None:
    name = str(name).strip()
    if name:
        save_config({**load_config(), key: name})


def load_theme_name() -> str | None:
    return _load_name(THEME_KEY)


def save_theme_name(theme_name: str) -> None:
    _save_name(THEME_KEY, theme_name)


def load_style_name() -> str | None:
    """Saved Pygments style name, ``None`` when unset or not a non-empty string."""
    return _load_name(STYLE_KEY)


def save_style_name(style_name: str) -> None:
    _save_name(STYLE_KEY, style_name)
