"""End-to-end map generation and artifact persistence.

``generate_text_map`` writes the labelled text tree. ``generate_image_map``
writes the single-tree text artifact, reads it back and rasterizes it to PNG.
Both write through a temporary file that is renamed into place, so a failed
write never leaves a partial artifact under the final name.
"""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from .config import DEFAULT_IMAGE_FILENAME, DEFAULT_TEXT_FILENAME
from .file_tree_model import RootEntry
from .image_theme import DEFAULT_THEME, ImageTheme
from .render import (
    DEFAULT_FONT_PATH,
    DEFAULT_FONT_SIZE,
    RasterLayout,
    load_font_face,
    rasterize,
    save_png,
    text_lines,
)
from .tree_model import LABELLED, SINGLE_TREE, RootStyle, build_text_artifact, serialize_roots

logger = logging.getLogger(__name__)


class MapStatus(Enum):
    NO_SELECTION = "no-selection"
    WRITTEN = "written"


@dataclass(frozen=True)
class MapResult:
    """Outcome of one map command."""

    status: MapStatus
    text_path: Path | None = None
    image_path: Path | None = None
    line_count: int = 0


NO_SELECTION = MapResult(status=MapStatus.NO_SELECTION)


def _artifact_mode(path: Path) -> int:
    """Keep an existing artifact's mode, else use what a plain create would give."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@contextlib.contextmanager
def atomic_sink(path: Path) -> Iterator[BinaryIO]:
    """Yield a binary handle whose contents replace ``path`` on clean exit."""
    handle = tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(handle.name)
    try:
        with handle:
            yield handle
        os.chmod(temp_path, _artifact_mode(path))
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def write_text_artifact(path: Path, text: str) -> None:
    with atomic_sink(path) as sink:
        sink.write(text.encode("utf-8"))


def _serialize_to_file(
    roots: Sequence[RootEntry],
    text_path: Path,
    style: RootStyle,
    sort_entries: bool,
) -> int:
    blocks = serialize_roots(roots, style=style, sort_entries=sort_entries)
    write_text_artifact(text_path, build_text_artifact(blocks, style=style))
    line_count = sum(len(block) for block in blocks)
    logger.debug("wrote %d tree lines to %s", line_count, text_path)
    return line_count


def generate_text_map(
    roots: Sequence[RootEntry],
    output_dir: Path,
    text_filename: str = DEFAULT_TEXT_FILENAME,
    sort_entries: bool = False,
) -> MapResult:
    """Write the labelled text tree for ``roots`` into ``output_dir``."""
    if not roots:
        return NO_SELECTION
    text_path = output_dir / text_filename
    line_count = _serialize_to_file(roots, text_path, LABELLED, sort_entries)
    return MapResult(status=MapStatus.WRITTEN, text_path=text_path, line_count=line_count)


def generate_image_map(
    roots: Sequence[RootEntry],
    output_dir: Path,
    font_path: Path = DEFAULT_FONT_PATH,
    font_size: int = DEFAULT_FONT_SIZE,
    theme: ImageTheme = DEFAULT_THEME,
    text_filename: str = DEFAULT_TEXT_FILENAME,
    image_filename: str = DEFAULT_IMAGE_FILENAME,
    sort_entries: bool = False,
) -> MapResult:
    """Write the single-tree text artifact and its PNG rendering.

    The font is loaded after the text artifact is written; a missing font
    raises ``FontUnavailableError`` and leaves the text artifact in place.
    """
    if not roots:
        return NO_SELECTION
    text_path = output_dir / text_filename
    image_path = output_dir / image_filename
    line_count = _serialize_to_file(roots, text_path, SINGLE_TREE, sort_entries)

    face = load_font_face(font_path, font_size)
    lines = text_lines(text_path.read_text(encoding="utf-8"))
    rendered = rasterize(lines, face, theme=theme, layout=RasterLayout(font_size=font_size))
    with atomic_sink(image_path) as sink:
        save_png(rendered, sink)
    logger.debug("wrote %dx%d image to %s", rendered.width, rendered.height, image_path)
    return MapResult(status=MapStatus.WRITTEN, text_path=text_path, image_path=image_path, line_count=line_count)


__all__ = [
    "MapStatus",
    "MapResult",
    "atomic_sink",
    "write_text_artifact",
    "generate_text_map",
    "generate_image_map",
]
