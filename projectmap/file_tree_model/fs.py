"""Filesystem enumeration and tree construction.

Children keep the order ``os.scandir`` yields them in. Sorting only happens
when a caller asks for it explicitly.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .types import DirectoryNode, FileNode, TreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One raw directory listing row."""

    name: str
    path: Path
    is_dir: bool


def stat_entry(path: Path) -> bool | None:
    """Return whether ``path`` is a directory, or ``None`` when it is gone."""
    try:
        mode = path.stat().st_mode
    except OSError:
        return None
    return stat.S_ISDIR(mode)


def _child_sort_key(child: DirectoryChild) -> tuple[bool, str]:
    return (not child.is_dir, child.name.casefold())


def list_directory(
    directory: Path,
    sort_entries: bool = False,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List ``directory`` children in enumeration order.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned, in which case ``children`` is empty.
    Symlinks are classified without following them.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    if sort_entries:
        children.sort(key=_child_sort_key)
    return children, None


def build_tree(directory: Path, sort_entries: bool = False) -> DirectoryNode:
    """Build the full recursive tree under ``directory``."""

    def build_children(current: Path) -> tuple[TreeNode, ...]:
        children, scan_error = list_directory(current, sort_entries=sort_entries)
        if scan_error is not None:
            logger.debug("skipping unreadable directory %s: %s", current, scan_error)
            return ()

        nodes: list[TreeNode] = []
        for child in children:
            if child.is_dir:
                nodes.append(DirectoryNode(path=child.path, children=build_children(child.path)))
            else:
                nodes.append(FileNode(path=child.path))
        return tuple(nodes)

    return DirectoryNode(path=directory, children=build_children(directory))


__all__ = [
    "DirectoryChild",
    "stat_entry",
    "list_directory",
    "build_tree",
]
