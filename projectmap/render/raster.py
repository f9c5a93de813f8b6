"""Rasterize tree text into a color-coded PNG.

The rasterizer only sees raw text lines. Directory/file classification is
recovered by looking for the icon glyphs in each line, so a persisted text
artifact can be rendered without the tree it came from.

Each line gets a row band of ``font_size * line_spacing`` pixels: a filled
marker square in the classified color, then the line text with icons removed.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO

from PIL import Image, ImageDraw

from ..image_theme import DEFAULT_THEME, ImageTheme
from ..tree_model import DIR_ICON, FILE_ICON
from .fonts import DEFAULT_FONT_SIZE, FontFace

_ICON_RE = re.compile(f"(?:{DIR_ICON}|{FILE_ICON}) ")


@dataclass(frozen=True)
class RasterLayout:
    """Fixed geometry of the output image, in pixels."""

    width: int = 900
    padding: int = 40
    icon_size: int = 14
    text_gap: int = 10
    font_size: int = DEFAULT_FONT_SIZE
    line_spacing: float = 1.6

    @property
    def line_height(self) -> float:
        return self.font_size * self.line_spacing

    @property
    def text_x(self) -> int:
        return self.padding + self.icon_size + self.text_gap

    def row_top(self, index: int) -> float:
        return self.padding + index * self.line_height

    def image_height(self, line_count: int) -> int:
        return round(line_count * self.line_height + self.padding * 2)


DEFAULT_LAYOUT = RasterLayout()


@dataclass(frozen=True)
class RenderedImage:
    """Rasterized tree plus the marker color chosen for each line."""

    width: int
    height: int
    marker_colors: tuple[str, ...]
    image: Image.Image


def text_lines(text: str) -> list[str]:
    """Split a persisted text artifact back into raw lines.

    Only a newline ends a line; other Unicode line breaks can appear in file names.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def classify_line(line: str, theme: ImageTheme = DEFAULT_THEME) -> str:
    """Return the marker color for ``line`` based on which icon it contains."""
    stripped = line.strip()
    if DIR_ICON in stripped:
        return theme.directory
    if FILE_ICON in stripped:
        return theme.file
    return theme.default


def strip_icons(line: str) -> str:
    """Remove icon glyphs followed by a space; prefix and pointer glyphs are kept."""
    return _ICON_RE.sub("", line).rstrip()


def rasterize(
    lines: Sequence[str],
    face: FontFace,
    theme: ImageTheme = DEFAULT_THEME,
    layout: RasterLayout = DEFAULT_LAYOUT,
) -> RenderedImage:
    """Draw ``lines`` onto a new canvas sized for them."""
    height = layout.image_height(len(lines))
    image = Image.new("RGB", (layout.width, height), theme.background)
    draw = ImageDraw.Draw(image)

    marker_colors: list[str] = []
    for index, line in enumerate(lines):
        top = round(layout.row_top(index))
        color = classify_line(line, theme)
        marker_colors.append(color)

        box_top = top + 2
        draw.rectangle(
            (layout.padding, box_top, layout.padding + layout.icon_size - 1, box_top + layout.icon_size - 1),
            fill=color,
        )
        text = strip_icons(line)
        if text:
            draw.text((layout.text_x, top), text, font=face.font, fill=theme.text, anchor="lt")

    return RenderedImage(width=layout.width, height=height, marker_colors=tuple(marker_colors), image=image)


def save_png(rendered: RenderedImage, sink: BinaryIO) -> None:
    """Encode ``rendered`` as PNG into ``sink``."""
    rendered.image.save(sink, format="PNG")


__all__ = [
    "RasterLayout",
    "DEFAULT_LAYOUT",
    "RenderedImage",
    "text_lines",
    "classify_line",
    "strip_icons",
    "rasterize",
    "save_png",
]
