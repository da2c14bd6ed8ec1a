"""Flatten expanded outline subtrees into a pre-order visible-node list."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from .expansion import is_expanded
from .paths import HOME_PATH, append_to_path, head
from .store import children_filter_predicate, children_sorted
from .types import Node, OutlineState, Path, VisibleNode


class IndexCounter:
    """Running flat-sequence index shared by one traversal."""

    __slots__ = ("value",)

    def __init__(self, start: int = 0) -> None:
        self.value = start

    def take(self) -> int:
        """Return the current index and advance."""
        current = self.value
        self.value += 1
        return current


def visible_children(state: OutlineState, path: Path) -> list[Node]:
    """Children of ``path`` that the flattener emits (empty when collapsed)."""
    if not is_expanded(state, path):
        return []
    predicate = children_filter_predicate(state, path)
    return [child for child in children_sorted(state.store, head(path)) if predicate(child)]


def build_visible_nodes(
    state: OutlineState,
    root_path: Path = HOME_PATH,
    depth: int = 0,
    counter: IndexCounter | None = None,
) -> list[VisibleNode]:
    """Return visible descendants of ``root_path`` in pre-order.

    The root itself is never emitted; a collapsed root yields ``[]``. Flat
    indices come from ``counter`` and are contiguous across the whole result.
    A node is a leaf when none of its children are visible, whether because it
    is collapsed or because every child was filtered out.
    """
    counter = counter if counter is not None else IndexCounter()
    entries: list[VisibleNode] = []

    # Explicit stack so deep outlines never hit the interpreter recursion limit.
    stack: list[tuple[Path, int, Iterator[tuple[int, Node]]]] = [
        (root_path, depth, enumerate(visible_children(state, root_path)))
    ]
    while stack:
        parent, level, pending = stack[-1]
        step = next(pending, None)
        if step is None:
            stack.pop()
            continue
        index, child = step
        child_path = append_to_path(parent, child.id)
        grandchildren = visible_children(state, child_path)
        entries.append(
            VisibleNode(
                depth=level,
                index_in_sibling_group=index,
                index_in_flat_sequence=counter.take(),
                is_leaf=not grandchildren,
                path=child_path,
                node=child,
            )
        )
        if grandchildren:
            stack.append((child_path, level + 1, enumerate(grandchildren)))

    logger.debug("Flattened {} visible nodes under {}", len(entries), "/".join(root_path))
    return entries
