"""Autofocus classification of visible nodes relative to the cursor.

The cursor and its neighborhood stay fully visible, a bounded window of
ancestors above the cursor stays legible, and everything else is dimmed or
hidden. Hidden rows stay in the flat list so the layout does not jump when the
cursor moves.

Cursor-derived values are computed once per snapshot in ``FocusContext``;
``classify_with_context`` is then O(len(path)) per node.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .paths import head, is_prefix_of, is_root, shared_prefix_length
from .store import has_visible_children, is_path_resolvable
from .types import FocusLevel, OutlineState, Path

MAX_DISTANCE_FROM_CURSOR = 3


@dataclass(frozen=True)
class FocusContext:
    """Cursor-derived inputs shared by every node of one snapshot."""

    cursor: Path | None
    cursor_has_children: bool
    first_visible_path: Path | None
    max_distance: int = MAX_DISTANCE_FROM_CURSOR


def window_size(max_distance: int, cursor_has_children: bool) -> int:
    """Ancestor levels kept between the cursor and the first visible path.

    The window is one level wider when the cursor node has children.
    """
    return max(0, max_distance - (1 if cursor_has_children else 2))


def focus_context(state: OutlineState, max_distance: int = MAX_DISTANCE_FROM_CURSOR) -> FocusContext:
    """Derive the cursor window for ``state``.

    A cursor that no longer resolves in the store is treated as no cursor.
    ``state.expand_hover_top_path`` overrides the computed window.
    """
    cursor = state.cursor or None
    if cursor is not None and not is_path_resolvable(state.store, cursor):
        logger.warning("Cursor {} does not resolve; classifying without a cursor", "/".join(cursor))
        cursor = None

    cursor_has_children = cursor is not None and has_visible_children(state, head(cursor))

    first_visible = state.expand_hover_top_path or None
    if first_visible is None and cursor is not None:
        window = window_size(max_distance, cursor_has_children)
        if len(cursor) - window > 0:
            first_visible = cursor[: len(cursor) - window]

    logger.debug(
        "Focus context: cursor={} has_children={} first_visible={}",
        cursor,
        cursor_has_children,
        first_visible,
    )
    return FocusContext(
        cursor=cursor,
        cursor_has_children=cursor_has_children,
        first_visible_path=first_visible,
        max_distance=max_distance,
    )


def raw_distance(ctx: FocusContext, depth: int) -> int:
    """Depth-only distance from the cursor clamped to ``[0, max_distance]``."""
    if ctx.cursor is None:
        return 0
    return max(0, min(ctx.max_distance, len(ctx.cursor) - depth))


def _distance_level(distance: int) -> FocusLevel:
    if distance <= 0:
        return FocusLevel.SHOW
    if distance == 1:
        return FocusLevel.DIM
    return FocusLevel.HIDE


def is_in_window(ctx: FocusContext, path: Path) -> bool:
    """Return whether ``path`` is at or below the first visible path."""
    first = ctx.first_visible_path
    return first is None or is_root(first) or is_prefix_of(first, path)


def classify_with_context(ctx: FocusContext, path: Path) -> FocusLevel:
    """Classify the node at ``path`` using a precomputed context."""
    in_window = is_in_window(ctx, path)
    cursor = ctx.cursor
    if cursor is None:
        return FocusLevel.SHOW if in_window else FocusLevel.HIDE_WITH_PARENT

    shared = shared_prefix_length(cursor, path)
    is_cursor = len(path) == len(cursor) == shared
    if is_cursor:
        return FocusLevel.SHOW

    is_ancestor_of_cursor = len(path) < len(cursor) and len(path) == shared
    is_descendant_of_cursor = len(path) > len(cursor) and len(cursor) == shared

    if not is_ancestor_of_cursor and not in_window:
        return FocusLevel.HIDE_WITH_PARENT

    depth = len(path) - 1
    if is_descendant_of_cursor and depth > len(cursor) + ctx.max_distance:
        return FocusLevel.HIDE

    # cursor_has_children keeps the parent at its raw distance instead of dimming it
    is_cursor_parent = is_ancestor_of_cursor and len(cursor) - len(path) == 1
    should_dim = (
        in_window
        and not (is_cursor_parent and ctx.cursor_has_children)
        and not is_descendant_of_cursor
    )
    if should_dim:
        return FocusLevel.DIM
    return _distance_level(raw_distance(ctx, depth))


def classify(
    state: OutlineState,
    path: Path,
    max_distance: int = MAX_DISTANCE_FROM_CURSOR,
) -> FocusLevel:
    """Classify one node; builds a fresh context (use ``focus_context`` in loops)."""
    return classify_with_context(focus_context(state, max_distance), path)
