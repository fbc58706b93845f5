"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the header row and selected entries.
The plain theme is monochrome and is used when color is disabled.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import BG_WHITE, FG_BLACK, REVERSE, RESET


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    header: str
    selected: str
    reset: str


DEFAULT_THEME = UITheme(
    name="default",
    header=FG_BLACK + BG_WHITE,
    selected=FG_BLACK + BG_WHITE,
    reset=RESET,
)

OCEAN_THEME = UITheme(
    name="ocean",
    header="\x1b[1;38;5;231;48;5;24m",
    selected="\x1b[38;5;16;48;5;117m",
    reset=RESET,
)

PLAIN_THEME = UITheme(
    name="plain",
    header=REVERSE,
    selected=REVERSE,
    reset=RESET,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def color_disabled_by_env() -> bool:
    """Honor the ``NO_COLOR`` convention (any non-empty value)."""
    return bool(os.environ.get("NO_COLOR"))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color or color_disabled_by_env():
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "color_disabled_by_env",
    "normalize_theme_name",
    "resolve_theme",
]
