"""Line model and glyph tables for serialized trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DIR_ICON = "📁"
FILE_ICON = "📄"
LAST_CONTINUATION = "    "
MID_CONTINUATION = "┃   "


class Pointer(Enum):
    """Branch glyph for a child line; the value is the rendered glyph."""

    LAST = "┗━ "
    MID = "┣━ "


class Marker(Enum):
    """Entry kind; the value is the icon glyph."""

    DIR = DIR_ICON
    FILE = FILE_ICON


@dataclass(frozen=True)
class TreeLine:
    """One renderable row of a serialized tree.

    ``pointer`` is ``None`` for a top-level root line, which renders as just
    the icon and name.
    """

    prefix: str
    pointer: Pointer | None
    marker: Marker
    name: str

    @property
    def depth(self) -> int:
        return len(self.prefix) // len(LAST_CONTINUATION)

    @property
    def text(self) -> str:
        pointer = self.pointer.value if self.pointer is not None else ""
        return f"{self.prefix}{pointer}{self.marker.value} {self.name}"


@dataclass(frozen=True)
class RootStyle:
    """How top-level roots are emitted.

    ``label_directories`` emits a line for a directory root itself,
    ``child_indent`` is the prefix its children start with, and
    ``blank_between_roots`` separates root blocks with an empty line.
    """

    name: str
    label_directories: bool
    child_indent: str
    blank_between_roots: bool


# Image command: directory roots are unrolled into their children.
SINGLE_TREE = RootStyle(name="single-tree", label_directories=False, child_indent="", blank_between_roots=True)
# Text command: every root gets its own labelled line.
LABELLED = RootStyle(name="labelled", label_directories=True, child_indent="   ", blank_between_roots=False)


__all__ = [
    "DIR_ICON",
    "FILE_ICON",
    "LAST_CONTINUATION",
    "MID_CONTINUATION",
    "Pointer",
    "Marker",
    "TreeLine",
    "RootStyle",
    "SINGLE_TREE",
    "LABELLED",
]
