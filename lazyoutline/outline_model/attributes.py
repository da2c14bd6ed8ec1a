"""Meta-attribute lookups for per-node bullets and styles.

Attributes are ordinary child nodes whose value starts with ``=``; the value of
an attribute is the value of its first child. ``=children`` on a parent and
``=grandchildren`` on a grandparent carry overrides (``=bullet``, ``=style``,
``=styleContainer``) applied to every node below them.

Siblings share the same parent and grandparent attributes, so a layout pass
resolves them through one ``AttributeCache`` instead of rescanning the sibling
group for every row.
"""

from __future__ import annotations

from .store import OutlineStore, attribute, attribute_value_of, find_attribute_id, resolved_children
from .types import Node, NodeId

CHILDREN_ATTRIBUTE = "=children"
GRANDCHILDREN_ATTRIBUTE = "=grandchildren"
BULLET_ATTRIBUTE = "=bullet"
STYLE_ATTRIBUTE = "=style"
STYLE_CONTAINER_ATTRIBUTE = "=styleContainer"
BULLET_NONE = "None"


def get_style(
    store: OutlineStore,
    node_id: NodeId | None,
    attribute_name: str = STYLE_ATTRIBUTE,
) -> dict[str, str]:
    """Collect ``property -> value`` pairs listed under a style attribute."""
    style_id = find_attribute_id(store, node_id, attribute_name)
    if style_id is None:
        return {}
    style: dict[str, str] = {}
    for prop in resolved_children(store, style_id):
        value = attribute_value_of(store, prop.id)
        if value is not None:
            style[prop.value] = value
    return style


class AttributeCache:
    """Memoized attribute lookups for one store snapshot."""

    def __init__(self, store: OutlineStore) -> None:
        self.store = store
        self._ids: dict[tuple[NodeId, str], NodeId | None] = {}
        self._values: dict[tuple[NodeId, str], str | None] = {}
        self._styles: dict[tuple[NodeId, str], dict[str, str]] = {}
        self._parents: dict[NodeId, NodeId | None] = {}

    def find_attribute_id(self, node_id: NodeId | None, name: str) -> NodeId | None:
        if node_id is None:
            return None
        key = (node_id, name)
        if key not in self._ids:
            self._ids[key] = find_attribute_id(self.store, node_id, name)
        return self._ids[key]

    def attribute(self, node_id: NodeId | None, name: str) -> str | None:
        if node_id is None:
            return None
        key = (node_id, name)
        if key not in self._values:
            self._values[key] = attribute(self.store, node_id, name)
        return self._values[key]

    def get_style(self, node_id: NodeId | None, attribute_name: str = STYLE_ATTRIBUTE) -> dict[str, str]:
        if node_id is None:
            return {}
        key = (node_id, attribute_name)
        if key not in self._styles:
            self._styles[key] = get_style(self.store, node_id, attribute_name)
        return self._styles[key]

    def parent_id_of(self, node_id: NodeId) -> NodeId | None:
        if node_id not in self._parents:
            node = self.store.resolve_node(node_id)
            self._parents[node_id] = None if node is None else node.parent_id
        return self._parents[node_id]


def children_attribute_id(cache: AttributeCache, node: Node) -> NodeId | None:
    """``=children`` attribute on the node's parent, if any."""
    if node.value == CHILDREN_ATTRIBUTE:
        return None
    return cache.find_attribute_id(node.parent_id, CHILDREN_ATTRIBUTE)


def grandchildren_attribute_id(cache: AttributeCache, node: Node) -> NodeId | None:
    """``=grandchildren`` attribute on the node's grandparent, if any."""
    if node.value == GRANDCHILDREN_ATTRIBUTE or node.parent_id is None:
        return None
    return cache.find_attribute_id(cache.parent_id_of(node.parent_id), GRANDCHILDREN_ATTRIBUTE)


def hide_bullet_for(store: OutlineStore, node: Node, cache: AttributeCache | None = None) -> bool:
    """Return whether an inherited ``=bullet`` of ``None`` hides the bullet."""
    cache = cache or AttributeCache(store)
    for attribute_id in (children_attribute_id(cache, node), grandchildren_attribute_id(cache, node)):
        if cache.attribute(attribute_id, BULLET_ATTRIBUTE) == BULLET_NONE:
            return True
    return False


def styles_for(
    store: OutlineStore,
    node: Node,
    cache: AttributeCache | None = None,
) -> tuple[dict[str, str], dict[str, str]]:
    """Return merged ``(style, style_container)`` overrides for ``node``.

    Grandparent ``=grandchildren`` values apply first; parent ``=children``
    values override them.
    """
    cache = cache or AttributeCache(store)
    children_id = children_attribute_id(cache, node)
    grandchildren_id = grandchildren_attribute_id(cache, node)
    style = {**cache.get_style(grandchildren_id), **cache.get_style(children_id)}
    container = {
        **cache.get_style(grandchildren_id, STYLE_CONTAINER_ATTRIBUTE),
        **cache.get_style(children_id, STYLE_CONTAINER_ATTRIBUTE),
    }
    return style, container

