"""Monospace font loading for the rasterizer.

Exactly one face is used. If it cannot be loaded the render fails; no
substitute font is tried.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import ImageFont

DEFAULT_FONT_PATH = Path("/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf")
DEFAULT_FONT_SIZE = 21


class FontUnavailableError(RuntimeError):
    """Raised when the monospace face cannot be loaded."""


@dataclass(frozen=True)
class FontFace:
    """A loaded font plus where it came from."""

    path: Path | None
    size: int
    font: ImageFont.FreeTypeFont | ImageFont.ImageFont


def load_font_face(path: Path = DEFAULT_FONT_PATH, size: int = DEFAULT_FONT_SIZE) -> FontFace:
    """Load the face at ``path``; raise ``FontUnavailableError`` on failure."""
    try:
        font = ImageFont.truetype(str(path), size=size)
    except OSError as exc:
        raise FontUnavailableError(f"Font not available: {path}") from exc
    return FontFace(path=path, size=size, font=font)


__all__ = [
    "DEFAULT_FONT_PATH",
    "DEFAULT_FONT_SIZE",
    "FontUnavailableError",
    "FontFace",
    "load_font_face",
]
