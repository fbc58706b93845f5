"""Persistent JSON config helpers.

Stores the preferred UI theme and cursor marker.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "termselect"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def is_valid_marker(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and value.isprintable() and not value.isspace()


def load_cursor_marker() -> str | None:
    """Load the persisted cursor marker; only a single visible character is accepted."""
    value = load_config().get("cursor_marker")
    return value if is_valid_marker(value) else None
