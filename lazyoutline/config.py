"""Persistent JSON config helpers.

Stores font size, autofocus window size, theme name, and the drag-simulation
flag. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .outline_model.focus import MAX_DISTANCE_FROM_CURSOR
from .outline_model.types import DEFAULT_FONT_SIZE

APP_NAME = "lazyoutline"
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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config dir never breaks a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _update(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_font_size() -> float:
    """Return the persisted font size, or the default when unset/invalid.

    Booleans and non-positive numbers are rejected.
    """
    value = load_config().get("font_size")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_FONT_SIZE
    return float(value)


def save_font_size(font_size: float) -> None:
    if font_size <= 0:
        return
    _update("font_size", float(font_size))


def load_max_distance() -> int:
    """Return the persisted autofocus distance (integer >= 1)."""
    value = load_config().get("max_distance")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return MAX_DISTANCE_FROM_CURSOR
    return value


def save_max_distance(max_distance: int) -> None:
    if max_distance < 1:
        return
    _update("max_distance", int(max_distance))


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    _update("theme", stripped)


def load_simulate_drag() -> bool:
    """Return whether drop targets are forced visible; only explicit booleans count."""
    value = load_config().get("simulate_drag")
    return value if isinstance(value, bool) else False


def save_simulate_drag(simulate_drag: bool) -> None:
    _update("simulate_drag", bool(simulate_drag))
