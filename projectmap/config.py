"""Persistent JSON config helpers.

Stores the font location/size, artifact file names and color overrides.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .image_theme import DEFAULT_THEME, ImageTheme, theme_with_overrides
from .render.fonts import DEFAULT_FONT_PATH, DEFAULT_FONT_SIZE

APP_NAME = "projectmap"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_TEXT_FILENAME = "project-map.txt"
DEFAULT_IMAGE_FILENAME = "project-map.png"


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


def _config_data(data: dict[str, object] | None) -> dict[str, object]:
    return load_config() if data is None else data


def load_font_path(data: dict[str, object] | None = None) -> Path:
    """Return the configured font file, or the DejaVu Sans Mono default.

    Each ``load_*`` helper reads the config file unless ``data`` from an
    earlier ``load_config()`` call is passed in.
    """
    value = _config_data(data).get("font_path")
    if isinstance(value, str) and value.strip():
        return Path(value).expanduser()
    return DEFAULT_FONT_PATH


def load_font_size(data: dict[str, object] | None = None) -> int:
    """Return the configured font size; booleans and non-positive values are ignored."""
    value = _config_data(data).get("font_size")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_FONT_SIZE
    return value


def _load_filename(key: str, default: str, data: dict[str, object] | None) -> str:
    """Read a bare file name; anything containing a path separator is rejected."""
    value = _config_data(data).get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    name = value.strip()
    if Path(name).name != name:
        return default
    return name


def load_text_filename(data: dict[str, object] | None = None) -> str:
    return _load_filename("text_filename", DEFAULT_TEXT_FILENAME, data)


def load_image_filename(data: dict[str, object] | None = None) -> str:
    return _load_filename("image_filename", DEFAULT_IMAGE_FILENAME, data)


def load_theme(data: dict[str, object] | None = None) -> ImageTheme:
    """Return the default palette with any valid ``colors`` overrides applied."""
    value = _config_data(data).get("colors")
    if not isinstance(value, dict):
        return DEFAULT_THEME
    return theme_with_overrides(value)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_TEXT_FILENAME",
    "DEFAULT_IMAGE_FILENAME",
    "load_config",
    "load_font_path",
    "load_font_size",
    "load_text_filename",
    "load_image_filename",
    "load_theme",
]
