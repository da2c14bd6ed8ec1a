"""Outline view-model: flattening, autofocus classification, and layout.

Turns an expansion state and cursor into a flat pre-order list of visible
nodes, classifies each against the cursor, and positions them for rendering.
"""

from __future__ import annotations

from .attributes import AttributeCache, attribute, get_style, hide_bullet_for, styles_for
from .build import IndexCounter, build_visible_nodes, visible_children
from .expansion import expand_all, expand_along_path, expand_paths, is_expanded, toggle_expanded
from .focus import (
    MAX_DISTANCE_FROM_CURSOR,
    FocusContext,
    classify,
    classify_with_context,
    focus_context,
    raw_distance,
)
from .layout import indent_unit, layout_outline, root_drop_end_visible
from .navigation import (
    find_path_index,
    next_index_after_subtree,
    next_visible_index,
    parent_index,
    previous_visible_index,
)
from .paths import (
    HOME_PATH,
    ROOT_ID,
    append_to_path,
    hash_path,
    head,
    is_ancestor_of,
    is_descendant_of,
    is_prefix_of,
    is_root,
    parent_path,
    shared_prefix_length,
    unroot,
)
from .rendering import format_positioned_node, render_outline_lines
from .store import (
    MemoryStore,
    OutlineStore,
    children_filter_predicate,
    children_sorted,
    has_visible_children,
    is_path_resolvable,
    resolve_node,
    resolve_path_by_values,
)
from .types import (
    DropTargets,
    FocusLevel,
    Node,
    OutlineLayout,
    OutlineState,
    PositionedNode,
    RenderMode,
    VisibleNode,
)

__all__ = [
    "Node",
    "VisibleNode",
    "FocusLevel",
    "OutlineState",
    "RenderMode",
    "DropTargets",
    "PositionedNode",
    "OutlineLayout",
    "ROOT_ID",
    "HOME_PATH",
    "head",
    "is_root",
    "unroot",
    "append_to_path",
    "parent_path",
    "hash_path",
    "shared_prefix_length",
    "is_prefix_of",
    "is_ancestor_of",
    "is_descendant_of",
    "is_expanded",
    "expand_paths",
    "toggle_expanded",
    "expand_along_path",
    "expand_all",
    "OutlineStore",
    "MemoryStore",
    "resolve_node",
    "children_sorted",
    "children_filter_predicate",
    "has_visible_children",
    "is_path_resolvable",
    "resolve_path_by_values",
    "AttributeCache",
    "attribute",
    "get_style",
    "hide_bullet_for",
    "styles_for",
    "IndexCounter",
    "visible_children",
    "build_visible_nodes",
    "MAX_DISTANCE_FROM_CURSOR",
    "FocusContext",
    "focus_context",
    "classify",
    "classify_with_context",
    "raw_distance",
    "indent_unit",
    "layout_outline",
    "root_drop_end_visible",
    "find_path_index",
    "next_visible_index",
    "previous_visible_index",
    "next_index_after_subtree",
    "parent_index",
    "format_positioned_node",
    "render_outline_lines",
]
