"""Tree-line serialization for filesystem trees.

Exports the line model, glyph tables, root styles and the serializer.
"""

from __future__ import annotations

from .types import (
    DIR_ICON,
    FILE_ICON,
    LABELLED,
    LAST_CONTINUATION,
    MID_CONTINUATION,
    SINGLE_TREE,
    Marker,
    Pointer,
    RootStyle,
    TreeLine,
)
from .serialize import (
    build_text_artifact,
    count_tree_lines,
    serialize_directory,
    serialize_root,
    serialize_roots,
)

__all__ = [
    "DIR_ICON",
    "FILE_ICON",
    "LABELLED",
    "LAST_CONTINUATION",
    "MID_CONTINUATION",
    "SINGLE_TREE",
    "Marker",
    "Pointer",
    "RootStyle",
    "TreeLine",
    "build_text_artifact",
    "count_tree_lines",
    "serialize_directory",
    "serialize_root",
    "serialize_roots",
]
