"""Flat-sequence index navigation helpers."""

from __future__ import annotations

from collections.abc import Sequence

from .types import OutlineLayout, Path, VisibleNode


def find_path_index(entries: Sequence[VisibleNode], path: Path | None) -> int | None:
    """Return the flat index of ``path``, or ``None`` when it is not visible."""
    if not path:
        return None
    for idx, entry in enumerate(entries):
        if entry.path == path:
            return idx
    return None


def _hidden_indices(layout: OutlineLayout | None) -> set[int]:
    if layout is None:
        return set()
    return {idx for idx, node in enumerate(layout.nodes) if node.focus.is_hidden}


def _step_visible_index(
    entries: Sequence[VisibleNode],
    selected_idx: int,
    step: int,
    layout: OutlineLayout | None,
) -> int | None:
    if not entries:
        return None
    hidden = _hidden_indices(layout)
    idx = selected_idx + step
    while 0 <= idx < len(entries):
        if idx not in hidden:
            return idx
        idx += step
    return None


def next_visible_index(
    entries: Sequence[VisibleNode],
    selected_idx: int,
    layout: OutlineLayout | None = None,
) -> int | None:
    """Return the next row index, skipping hidden rows when ``layout`` is given."""
    return _step_visible_index(entries, selected_idx, 1, layout)


def previous_visible_index(
    entries: Sequence[VisibleNode],
    selected_idx: int,
    layout: OutlineLayout | None = None,
) -> int | None:
    """Return the previous row index, skipping hidden rows when ``layout`` is given."""
    return _step_visible_index(entries, selected_idx, -1, layout)


def next_index_after_subtree(entries: Sequence[VisibleNode], idx: int) -> int | None:
    """Return first index after the visible subtree rooted at ``idx``."""
    if not entries or idx < 0 or idx >= len(entries):
        return None
    depth = entries[idx].depth
    cursor = idx + 1
    while cursor < len(entries) and entries[cursor].depth > depth:
        cursor += 1
    if cursor >= len(entries):
        return None
    return cursor


def parent_index(entries: Sequence[VisibleNode], idx: int) -> int | None:
    """Return the index of the nearest preceding row one level shallower."""
    if idx <= 0 or idx >= len(entries):
        return None
    depth = entries[idx].depth
    cursor = idx - 1
    while cursor >= 0:
        if entries[cursor].depth < depth:
            return cursor
        cursor -= 1
    return None
