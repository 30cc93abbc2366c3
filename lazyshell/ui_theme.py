"""Color palettes for the status line, box borders and scrollbar.

The command text itself is colored by Pygments (see ``highlight``); a theme
only styles the chrome around it. ``PLAIN_THEME`` is forced by ``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """SGR prefixes keyed by the screen element they style."""

    name: str
    reset: str
    status: str
    status_mode_insert: str
    status_mode_normal: str
    border: str
    border_focused: str
    title: str
    prompt: str
    scrollbar_track: str
    scrollbar_thumb: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    status="\033[7m",
    status_mode_insert="\033[7;1;38;5;114m",
    status_mode_normal="\033[7;1;38;5;75m",
    border="\033[2m",
    border_focused="\033[38;5;252m",
    title="\033[1;38;5;81m",
    prompt="\033[1;38;5;213m",
    scrollbar_track="\033[2m",
    scrollbar_thumb="\033[38;5;81m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    status="\033[48;5;24;38;5;153m",
    status_mode_insert="\033[1;48;5;24;38;5;84m",
    status_mode_normal="\033[1;48;5;24;38;5;45m",
    border="\033[2;38;5;31m",
    border_focused="\033[38;5;45m",
    title="\033[1;38;5;45m",
    prompt="\033[1;38;5;39m",
    scrollbar_track="\033[2;38;5;31m",
    scrollbar_thumb="\033[38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    status="",
    status_mode_insert="",
    status_mode_normal="",
    border="",
    border_focused="",
    title="",
    prompt="",
    scrollbar_track="",
    scrollbar_thumb="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme``; ``plain`` is reached only through ``--no-color``."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    key = (name or "").strip().lower()
    return key if key in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for ``name``; unknown names get the default palette."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
