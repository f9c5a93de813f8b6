"""Resolve which top-level entries of a workspace go into the map."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .file_tree_model import RootEntry, list_directory


def resolve_selection(
    workspace: Path,
    select: Iterable[str] | None = None,
    exclude: Iterable[str] = (),
) -> list[RootEntry]:
    """Return selected top-level entries of ``workspace`` in listing order.

    With no ``select`` every entry is included. Names in ``select`` that do
    not exist are ignored. ``exclude`` wins over ``select``.
    """
    children, scan_error = list_directory(workspace)
    if scan_error is not None:
        return []

    wanted = None if select is None else set(select)
    unwanted = set(exclude)
    roots: list[RootEntry] = []
    for child in children:
        if wanted is not None and child.name not in wanted:
            continue
        if child.name in unwanted:
            continue
        roots.append(RootEntry(path=child.path, is_dir=child.is_dir))
    return roots


__all__ = ["resolve_selection"]
