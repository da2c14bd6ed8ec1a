"""Read-only outline store interface and an in-memory implementation.

The view-model only ever reads from a store through ``resolve_node`` and
``child_ids``. Selectors in this module (sorting, visibility filtering,
value-path lookup) are layered on top of that two-method protocol so any host
store can be plugged in.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Protocol

from loguru import logger

from ..errors import OutlinePathError
from .paths import HOME_PATH, ROOT_ID, append_to_path, head, is_root
from .types import Node, NodeId, OutlineState, Path

META_PREFIX = "="
HIDDEN_ATTRIBUTE = "=hidden"
SORT_ATTRIBUTE = "=sort"
SORT_ALPHABETICAL = "Alphabetical"


class OutlineStore(Protocol):
    """Minimal lookups a host store must provide."""

    def resolve_node(self, node_id: NodeId) -> Node | None:
        ...

    def child_ids(self, node_id: NodeId) -> Sequence[NodeId]:
        ...


class MemoryStore:
    """Dict-backed outline store.

    Child order is insertion order; ``rank`` defaults to the insertion index so
    ``children_sorted`` reproduces it unless ranks are given explicitly.
    """

    def __init__(self) -> None:
        self._nodes: dict[NodeId, Node] = {}
        self._children: dict[NodeId, list[NodeId]] = {ROOT_ID: []}
        self._next_id = 0
        self._reserved_ids: set[NodeId] = set()

    def resolve_node(self, node_id: NodeId) -> Node | None:
        return self._nodes.get(node_id)

    def child_ids(self, node_id: NodeId) -> Sequence[NodeId]:
        return tuple(self._children.get(node_id, ()))

    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def _new_id(self) -> NodeId:
        self._next_id += 1
        return f"n{self._next_id}"

    def add_node(
        self,
        value: str,
        parent_id: NodeId = ROOT_ID,
        node_id: NodeId | None = None,
        rank: float | None = None,
    ) -> Node:
        """Create a node under ``parent_id`` and return it.

        Raises ``ValueError`` when an explicit ``node_id`` is already taken, so
        ids stay unique and every node keeps a single parent.
        """
        if node_id is None:
            node_id = self._new_id()
            while node_id in self._nodes or node_id in self._reserved_ids:
                node_id = self._new_id()
        elif node_id in self._nodes or node_id == ROOT_ID:
            raise ValueError(f"Duplicate node id: {node_id!r}")
        siblings = self._children.setdefault(parent_id, [])
        node = Node(
            id=node_id,
            value=value,
            parent_id=parent_id,
            rank=float(len(siblings)) if rank is None else float(rank),
        )
        self._nodes[node_id] = node
        self._children.setdefault(node_id, [])
        siblings.append(node_id)
        return node

    def link_child_id(self, parent_id: NodeId, child_id: NodeId) -> None:
        """Attach a raw child id without creating a node (dangling references)."""
        self._children.setdefault(parent_id, []).append(child_id)

    def add_tree(self, entry: Mapping[str, Any], parent_id: NodeId = ROOT_ID) -> Node:
        """Insert a nested ``{"value", "children", "id"?, "rank"?}`` mapping."""
        raw_id = entry.get("id")
        node = self.add_node(
            str(entry.get("value", "")),
            parent_id=parent_id,
            node_id=None if raw_id is None else str(raw_id),
            rank=entry.get("rank"),
        )
        for child in entry.get("children", ()) or ():
            self.add_tree(child, parent_id=node.id)
        return node

    @classmethod
    def from_nested(cls, roots: Iterable[Mapping[str, Any]]) -> MemoryStore:
        """Build a store from top-level nested node mappings."""
        roots = list(roots)
        store = cls()
        # generated ids must not take an explicit id that appears later
        pending = list(roots)
        while pending:
            entry = pending.pop()
            if entry.get("id") is not None:
                store._reserved_ids.add(str(entry["id"]))
            pending.extend(entry.get("children", ()) or ())
        for entry in roots:
            store.add_tree(entry)
        return store


def resolve_node(store: OutlineStore, node_id: NodeId) -> Node | None:
    """Resolve ``node_id``; the root resolves to a synthetic node."""
    if node_id == ROOT_ID:
        return Node(id=ROOT_ID, value="", parent_id=None)
    return store.resolve_node(node_id)


def resolved_children(store: OutlineStore, node_id: NodeId) -> list[Node]:
    """Resolve child ids of ``node_id`` in store order, skipping dangling ids."""
    children: list[Node] = []
    for child_id in store.child_ids(node_id):
        child = store.resolve_node(child_id)
        if child is None:
            logger.warning("Skipping unresolvable child {!r} of {!r}", child_id, node_id)
            continue
        children.append(child)
    return children


def find_attribute_id(store: OutlineStore, node_id: NodeId | None, name: str) -> NodeId | None:
    """Return the id of ``node_id``'s child named ``name``."""
    if node_id is None:
        return None
    for child_id in store.child_ids(node_id):
        child = store.resolve_node(child_id)
        if child is not None and child.value == name:
            return child.id
    return None


def attribute_value_of(store: OutlineStore, node_id: NodeId) -> str | None:
    """Value of the first resolvable child of ``node_id``."""
    for child_id in store.child_ids(node_id):
        child = store.resolve_node(child_id)
        if child is not None:
            return child.value
    return None


def attribute(store: OutlineStore, node_id: NodeId | None, name: str) -> str | None:
    """Return the value of attribute ``name`` on ``node_id``.

    Attributes are child nodes whose value is ``name``; the attribute value is
    the value of that child's first child.
    """
    attribute_id = find_attribute_id(store, node_id, name)
    if attribute_id is None:
        return None
    return attribute_value_of(store, attribute_id)


def children_sorted(store: OutlineStore, node_id: NodeId) -> list[Node]:
    """Return resolvable children of ``node_id`` in display order.

    Manual rank orders children, falling back to case-folded value and id.
    A ``=sort`` attribute of ``Alphabetical`` sorts by value first.
    """
    children = resolved_children(store, node_id)
    if attribute(store, node_id, SORT_ATTRIBUTE) == SORT_ALPHABETICAL:
        children.sort(key=lambda child: (child.value.casefold(), child.rank, child.id))
    else:
        children.sort(key=lambda child: (child.rank, child.value.casefold(), child.id))
    return children


def is_meta_attribute(value: str) -> bool:
    return value.startswith(META_PREFIX)


def _is_visible_child(store: OutlineStore, child: Node) -> bool:
    if is_meta_attribute(child.value):
        return False
    for grandchild_id in store.child_ids(child.id):
        grandchild = store.resolve_node(grandchild_id)
        if grandchild is not None and grandchild.value == HIDDEN_ATTRIBUTE:
            return False
    return True


def children_filter_predicate(state: OutlineState, path: Path) -> Callable[[Node], bool]:
    """Return the visibility filter applied to children listed under ``path``.

    Meta attributes and nodes tagged ``=hidden`` are dropped unless the
    snapshot shows hidden nodes. The filter does not vary by parent path.
    """
    if state.show_hidden:
        return lambda _child: True
    store = state.store
    return lambda child: _is_visible_child(store, child)


def has_visible_children(state: OutlineState, node_id: NodeId) -> bool:
    """Return whether any child of ``node_id`` survives the visibility filter."""
    children = resolved_children(state.store, node_id)
    if state.show_hidden:
        return bool(children)
    return any(_is_visible_child(state.store, child) for child in children)


def is_path_resolvable(store: OutlineStore, path: Path) -> bool:
    """Return whether ``path`` is a real parent/child chain in ``store``."""
    if not path:
        return False
    if is_root(path):
        return True
    parent_id = ROOT_ID
    for node_id in path:
        if node_id not in store.child_ids(parent_id):
            return False
        if store.resolve_node(node_id) is None:
            return False
        parent_id = node_id
    return True


def resolve_path_by_values(store: OutlineStore, values: Sequence[str]) -> Path:
    """Map display values (root-to-node) to the first matching node path."""
    path = HOME_PATH
    for value in values:
        match = next(
            (child for child in children_sorted(store, head(path)) if child.value == value),
            None,
        )
        if match is None:
            shown = "/".join(values)
            raise OutlinePathError(f"No node matches {value!r} in path {shown!r}")
        path = append_to_path(path, match.id)
    return path
