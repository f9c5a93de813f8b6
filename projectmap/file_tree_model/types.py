"""Domain datatypes for filesystem-backed tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileNode:
    """Leaf node for a regular file (or anything that is not a directory)."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return False


@dataclass(frozen=True)
class DirectoryNode:
    """Directory node with children in listing order."""

    path: Path
    children: tuple["TreeNode", ...] = ()

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return True


TreeNode = DirectoryNode | FileNode


@dataclass(frozen=True)
class RootEntry:
    """One selected top-level path handed to the serializer.

    ``is_dir`` records what selection saw; the serializer stats the path again
    and trusts that result instead.
    """

    path: Path
    is_dir: bool


__all__ = [
    "FileNode",
    "DirectoryNode",
    "TreeNode",
    "RootEntry",
]
