"""Serialize filesystem trees into prefix-annotated tree lines.

Traversal is depth-first pre-order. A continuation bar stays in a column for
as long as the sibling that opened it still has later siblings; the last
sibling's descendants get blank padding instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..file_tree_model import DirectoryNode, RootEntry, build_tree, stat_entry
from .types import (
    LAST_CONTINUATION,
    MID_CONTINUATION,
    SINGLE_TREE,
    Marker,
    Pointer,
    RootStyle,
    TreeLine,
)

logger = logging.getLogger(__name__)


def serialize_directory(node: DirectoryNode, prefix: str = "") -> list[TreeLine]:
    """Emit lines for every descendant of ``node``; ``node`` itself is not emitted."""
    lines: list[TreeLine] = []
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        is_last = index == last_index
        lines.append(
            TreeLine(
                prefix=prefix,
                pointer=Pointer.LAST if is_last else Pointer.MID,
                marker=Marker.DIR if child.is_dir else Marker.FILE,
                name=child.name,
            )
        )
        if isinstance(child, DirectoryNode):
            continuation = LAST_CONTINUATION if is_last else MID_CONTINUATION
            lines.extend(serialize_directory(child, prefix + continuation))
    return lines


def serialize_root(entry: RootEntry, style: RootStyle = SINGLE_TREE, sort_entries: bool = False) -> list[TreeLine] | None:
    """Serialize one root entry, or return ``None`` when it no longer exists.

    The directory flag is re-read from the filesystem since the entry may
    have changed after it was selected.
    """
    is_dir = stat_entry(entry.path)
    if is_dir is None:
        logger.debug("skipping missing root %s", entry.path)
        return None

    name = entry.path.name or str(entry.path)
    if not is_dir:
        return [TreeLine(prefix="", pointer=None, marker=Marker.FILE, name=name)]

    lines: list[TreeLine] = []
    if style.label_directories:
        lines.append(TreeLine(prefix="", pointer=None, marker=Marker.DIR, name=name))
    tree = build_tree(entry.path, sort_entries=sort_entries)
    lines.extend(serialize_directory(tree, style.child_indent))
    return lines


def serialize_roots(
    roots: Sequence[RootEntry],
    style: RootStyle = SINGLE_TREE,
    sort_entries: bool = False,
) -> list[list[TreeLine]]:
    """Serialize every existing root, one block of lines per root."""
    blocks: list[list[TreeLine]] = []
    for entry in roots:
        block = serialize_root(entry, style=style, sort_entries=sort_entries)
        if block is not None:
            blocks.append(block)
    return blocks


def build_text_artifact(blocks: Sequence[Sequence[TreeLine]], style: RootStyle = SINGLE_TREE) -> str:
    """Join serialized blocks into the newline-terminated text artifact."""
    rendered_blocks = ["".join(f"{line.text}\n" for line in block) for block in blocks]
    separator = "\n" if style.blank_between_roots else ""
    return separator.join(rendered_blocks)


def count_tree_lines(text: str) -> int:
    """Count the non-blank lines of a text artifact."""
    return sum(1 for line in text.split("\n") if line.strip())


__all__ = [
    "serialize_directory",
    "serialize_root",
    "serialize_roots",
    "build_text_artifact",
    "count_tree_lines",
]
