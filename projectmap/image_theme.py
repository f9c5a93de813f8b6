"""Image palette definitions and override helpers.

Colors are ``#rrggbb`` strings, which Pillow accepts directly as fills.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class ImageTheme:
    """Semantic palette used by the rasterizer."""

    background: str
    directory: str
    file: str
    default: str
    text: str


DEFAULT_THEME = ImageTheme(
    background="#111111",
    directory="#4e9a06",
    file="#729fcf",
    default="#ffffff",
    text="#eeeeee",
)


def normalize_hex_color(value: object) -> str | None:
    """Return ``value`` as lowercase ``#rrggbb`` or ``None`` when invalid."""
    if not isinstance(value, str):
        return None
    match = _HEX_COLOR_RE.match(value.strip())
    if match is None:
        return None
    return "#" + match.group(1).lower()


def theme_with_overrides(overrides: dict[str, object] | None, base: ImageTheme = DEFAULT_THEME) -> ImageTheme:
    """Apply color overrides by field name; unknown keys and bad values are dropped."""
    if not overrides:
        return base
    known = {field.name for field in fields(ImageTheme)}
    changes: dict[str, str] = {}
    for key, raw_value in overrides.items():
        if key not in known:
            continue
        color = normalize_hex_color(raw_value)
        if color is not None:
            changes[key] = color
    return replace(base, **changes) if changes else base


__all__ = [
    "ImageTheme",
    "DEFAULT_THEME",
    "normalize_hex_color",
    "theme_with_overrides",
]
