"""Position visible nodes as flat siblings with computed indentation."""

from __future__ import annotations

from collections.abc import Sequence

from .attributes import AttributeCache, hide_bullet_for, styles_for
from .build import build_visible_nodes
from .focus import (
    MAX_DISTANCE_FROM_CURSOR,
    FocusContext,
    classify_with_context,
    focus_context,
    raw_distance,
)
from .paths import HOME_PATH
from .types import (
    DropTargets,
    FocusLevel,
    OutlineLayout,
    OutlineState,
    Path,
    PositionedNode,
    RenderMode,
    VisibleNode,
)

INDENT_EM = 1.2
ROOT_DROP_MAX_CURSOR_DEPTH = 3


def indent_unit(font_size: float) -> float:
    """Horizontal offset per depth level."""
    return font_size * INDENT_EM


def root_drop_end_visible(state: OutlineState, ctx: FocusContext | None = None) -> bool:
    """Root drop target only shows while top-level rows are not faded out.

    Uses the resolved cursor of ``ctx`` so a stale cursor counts as no cursor.
    """
    cursor = (ctx if ctx is not None else focus_context(state)).cursor
    return not cursor or len(cursor) < ROOT_DROP_MAX_CURSOR_DEPTH


def drop_targets_for(entry: VisibleNode, focus: FocusLevel, is_last: bool, mode: RenderMode) -> DropTargets:
    """Trailing and empty-subtree insertion eligibility for one row."""
    return DropTargets(
        end=is_last and focus is not FocusLevel.HIDE_WITH_PARENT,
        empty=entry.is_leaf and (focus in (FocusLevel.SHOW, FocusLevel.DIM) or mode.forces_drop_targets),
    )


def layout_outline(
    state: OutlineState,
    mode: RenderMode | None = None,
    max_distance: int = MAX_DISTANCE_FROM_CURSOR,
    visible: Sequence[VisibleNode] | None = None,
    root_path: Path = HOME_PATH,
) -> OutlineLayout:
    """Flatten, classify, and position every visible node of ``state``.

    ``visible`` may be passed to reuse an already flattened sequence. When
    ``mode`` is omitted it is derived from ``state.drag_in_progress``.
    """
    if mode is None:
        mode = RenderMode(drag_in_progress=state.drag_in_progress)
    if visible is None:
        visible = build_visible_nodes(state, root_path)

    ctx = focus_context(state, max_distance)
    unit = indent_unit(state.font_size)
    store = state.store
    attributes = AttributeCache(store)
    positioned: list[PositionedNode] = []
    for i, entry in enumerate(visible):
        focus = classify_with_context(ctx, entry.path)
        prev_id = visible[i - 1].node.id if i > 0 and entry.index_in_sibling_group != 0 else None
        next_id = visible[i + 1].node.id if i + 1 < len(visible) else None
        style, style_container = styles_for(store, entry.node, attributes)
        positioned.append(
            PositionedNode(
                visible=entry,
                focus=focus,
                distance=raw_distance(ctx, len(entry.path) - 1),
                left_offset=entry.depth * unit,
                prev_sibling_id=prev_id,
                next_sibling_id=next_id,
                drop_targets=drop_targets_for(entry, focus, next_id is None, mode),
                hide_bullet=hide_bullet_for(store, entry.node, attributes),
                style=style,
                style_container=style_container,
            )
        )

    return OutlineLayout(
        nodes=tuple(positioned),
        root_drop_end=root_drop_end_visible(state, ctx),
        mode=mode,
    )
