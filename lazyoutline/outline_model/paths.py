"""Path algebra for outline node paths.

Paths are tuples of node ids ordered root-to-node. They are stored
*unrooted*: a top-level node has path ``(id,)`` and the hidden root is only
ever represented by ``HOME_PATH``.
"""

from __future__ import annotations

import json

from .types import NodeId, Path

ROOT_ID: NodeId = "__ROOT__"
HOME_PATH: Path = (ROOT_ID,)


def head(path: Path) -> NodeId:
    """Return the id of the node a path points at."""
    return path[-1]


def is_root(path: Path | None) -> bool:
    """Return whether ``path`` is the hidden outline root."""
    return path is not None and len(path) == 1 and path[0] == ROOT_ID


def unroot(path: Path) -> Path:
    """Drop a leading root segment unless the path is the root itself."""
    if len(path) > 1 and path[0] == ROOT_ID:
        return path[1:]
    return path


def append_to_path(path: Path, node_id: NodeId) -> Path:
    """Return the child path of ``path`` for ``node_id``."""
    if is_root(path):
        return (node_id,)
    return unroot(path + (node_id,))


def parent_path(path: Path) -> Path:
    """Return the parent path, ``HOME_PATH`` for top-level nodes."""
    if len(path) <= 1:
        return HOME_PATH
    return path[:-1]


def hash_path(path: Path) -> str:
    """Deterministic expansion-set key for ``path``.

    Ids are arbitrary strings, so segments are JSON-encoded rather than joined
    with a separator that an id could contain.
    """
    return json.dumps(list(path), ensure_ascii=False, separators=(",", ":"))


def shared_prefix_length(a: Path, b: Path) -> int:
    """Number of leading segments ``a`` and ``b`` have in common."""
    count = 0
    for left, right in zip(a, b):
        if left != right:
            break
        count += 1
    return count


def is_prefix_of(prefix: Path, path: Path) -> bool:
    """Return whether ``prefix`` equals ``path`` or is one of its ancestors."""
    return len(prefix) <= len(path) and shared_prefix_length(prefix, path) == len(prefix)


def is_ancestor_of(ancestor: Path, path: Path) -> bool:
    """Strict ancestry: ``ancestor`` is a shorter prefix of ``path``."""
    return len(ancestor) < len(path) and is_prefix_of(ancestor, path)


def is_descendant_of(path: Path, ancestor: Path) -> bool:
    """Strict descent: ``path`` extends ``ancestor`` by at least one segment."""
    return is_ancestor_of(ancestor, path)
