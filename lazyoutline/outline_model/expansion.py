"""Expansion-set helpers keyed by ``hash_path``."""

from __future__ import annotations

from collections.abc import Iterable

from .paths import HOME_PATH, append_to_path, hash_path, head
from .store import OutlineStore, children_sorted
from .types import OutlineState, Path


def is_expanded(state: OutlineState, path: Path) -> bool:
    """Return whether the node at ``path`` currently shows its children."""
    return hash_path(path) in state.expanded


def expand_paths(paths: Iterable[Path]) -> frozenset[str]:
    """Build an expansion set from explicit paths."""
    return frozenset(hash_path(path) for path in paths)


def toggle_expanded(expanded: frozenset[str], path: Path) -> frozenset[str]:
    """Return ``expanded`` with ``path`` flipped."""
    key = hash_path(path)
    if key in expanded:
        return expanded - {key}
    return expanded | {key}


def expand_along_path(cursor: Path | None, expanded: Iterable[str] = ()) -> frozenset[str]:
    """Expand the root plus every prefix of ``cursor`` including the cursor itself.

    This is the default expansion a host applies when the cursor moves so the
    cursor row and its children are reachable by the flattener.
    """
    keys = set(expanded)
    keys.add(hash_path(HOME_PATH))
    if cursor:
        for end in range(1, len(cursor) + 1):
            keys.add(hash_path(cursor[:end]))
    return frozenset(keys)


def expand_all(store: OutlineStore) -> frozenset[str]:
    """Expansion set covering the root and every node path reachable from it."""
    keys: set[str] = set()
    stack: list[Path] = [HOME_PATH]
    while stack:
        path = stack.pop()
        keys.add(hash_path(path))
        for child in children_sorted(store, head(path)):
            # store cycles would otherwise never terminate
            if child.id not in path:
                stack.append(append_to_path(path, child.id))
    return frozenset(keys)
