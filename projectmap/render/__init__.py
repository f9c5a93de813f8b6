"""PNG rendering of tree text."""

from __future__ import annotations

from .fonts import DEFAULT_FONT_PATH, DEFAULT_FONT_SIZE, FontFace, FontUnavailableError, load_font_face
from .raster import (
    DEFAULT_LAYOUT,
    RasterLayout,
    RenderedImage,
    classify_line,
    rasterize,
    save_png,
    strip_icons,
    text_lines,
)

__all__ = [
    "DEFAULT_FONT_PATH",
    "DEFAULT_FONT_SIZE",
    "FontFace",
    "FontUnavailableError",
    "load_font_face",
    "DEFAULT_LAYOUT",
    "RasterLayout",
    "RenderedImage",
    "classify_line",
    "rasterize",
    "save_png",
    "strip_icons",
    "text_lines",
]
