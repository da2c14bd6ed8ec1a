"""Outline view-model datatypes shared across outline-model modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .store import OutlineStore

NodeId = str
Path = tuple[NodeId, ...]
SimplePath = Path

DEFAULT_FONT_SIZE = 18.0


@dataclass(frozen=True)
class Node:
    """One outline node as owned by the store."""

    id: NodeId
    value: str
    parent_id: NodeId | None
    rank: float = 0.0


class FocusLevel(IntEnum):
    """Visibility class of a node relative to the cursor, ordered by distance."""

    SHOW = 0
    DIM = 1
    HIDE = 2
    HIDE_WITH_PARENT = 3

    @property
    def css_name(self) -> str:
        """Render-layer class suffix (``show``, ``dim``, ``hide``, ``hide-parent``)."""
        return _FOCUS_CSS_NAMES[self]

    @property
    def is_hidden(self) -> bool:
        return self >= FocusLevel.HIDE


_FOCUS_CSS_NAMES = {
    FocusLevel.SHOW: "show",
    FocusLevel.DIM: "dim",
    FocusLevel.HIDE: "hide",
    FocusLevel.HIDE_WITH_PARENT: "hide-parent",
}


@dataclass(frozen=True)
class OutlineState:
    """Immutable snapshot consumed by one view-model computation.

    ``expanded`` holds ``hash_path`` keys. ``cursor`` and
    ``expand_hover_top_path`` are ``None`` when unset.
    """

    store: OutlineStore
    expanded: frozenset[str] = frozenset()
    cursor: Path | None = None
    expand_hover_top_path: Path | None = None
    drag_in_progress: bool = False
    font_size: float = DEFAULT_FONT_SIZE
    show_hidden: bool = False


@dataclass(frozen=True)
class VisibleNode:
    """One visible node in flat pre-order with its tree coordinates."""

    depth: int
    index_in_sibling_group: int
    index_in_flat_sequence: int
    is_leaf: bool
    path: SimplePath
    node: Node


@dataclass(frozen=True)
class RenderMode:
    """Drag-related flags that change drop-target visibility."""

    drag_in_progress: bool = False
    simulate_drag: bool = False
    simulate_drop: bool = False

    @property
    def forces_drop_targets(self) -> bool:
        return self.drag_in_progress or self.simulate_drag or self.simulate_drop


@dataclass(frozen=True)
class DropTargets:
    """Eligibility of the two insertion targets a row can carry."""

    end: bool = False
    empty: bool = False


@dataclass(frozen=True)
class PositionedNode:
    """A visible node annotated for rendering."""

    visible: VisibleNode
    focus: FocusLevel
    distance: int
    left_offset: float
    prev_sibling_id: NodeId | None
    next_sibling_id: NodeId | None
    drop_targets: DropTargets
    hide_bullet: bool = False
    style: dict[str, str] = field(default_factory=dict)
    style_container: dict[str, str] = field(default_factory=dict)

    @property
    def node(self) -> Node:
        return self.visible.node

    @property
    def path(self) -> SimplePath:
        return self.visible.path

    @property
    def depth(self) -> int:
        return self.visible.depth

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation used by ``--json`` output."""
        return {
            "id": self.node.id,
            "value": self.node.value,
            "path": list(self.path),
            "depth": self.depth,
            "index_in_sibling_group": self.visible.index_in_sibling_group,
            "index_in_flat_sequence": self.visible.index_in_flat_sequence,
            "leaf": self.visible.is_leaf,
            "focus": self.focus.css_name,
            "distance": self.distance,
            "left": round(self.left_offset, 3),
            "prev_sibling_id": self.prev_sibling_id,
            "next_sibling_id": self.next_sibling_id,
            "drop_end": self.drop_targets.end,
            "drop_empty": self.drop_targets.empty,
            "hide_bullet": self.hide_bullet,
            "style": dict(self.style),
            "style_container": dict(self.style_container),
        }


@dataclass(frozen=True)
class OutlineLayout:
    """Full positioned output of one snapshot."""

    nodes: tuple[PositionedNode, ...]
    root_drop_end: bool
    mode: RenderMode

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "root_drop_end": self.root_drop_end,
            "drag_in_progress": self.mode.drag_in_progress,
        }
