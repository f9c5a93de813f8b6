"""Domain model for filesystem file/directory trees.

This package contains the non-rendering tree primitives:
- file/directory node datatypes with nested children
- directory enumeration in filesystem order
- recursive tree construction
"""

from __future__ import annotations

from .types import DirectoryNode, FileNode, RootEntry, TreeNode
from .fs import DirectoryChild, build_tree, list_directory, stat_entry

__all__ = [
    "DirectoryNode",
    "FileNode",
    "RootEntry",
    "TreeNode",
    "DirectoryChild",
    "build_tree",
    "list_directory",
    "stat_entry",
]
