"""Formatting helpers for positioned outline rows."""

from __future__ import annotations

from ..ansi import clip_ansi_line
from ..ui_theme import DEFAULT_THEME, UITheme
from .expansion import is_expanded
from .store import has_visible_children
from .types import OutlineLayout, OutlineState, PositionedNode

INDENT = "  "
DROP_TARGET_LABEL = "┄ drop"


def row_marker(node: PositionedNode, state: OutlineState) -> str:
    """Return the bullet column for a row (empty when the bullet is hidden)."""
    if node.hide_bullet:
        return ""
    if not node.visible.is_leaf:
        return "▾ "
    if not is_expanded(state, node.path) and has_visible_children(state, node.node.id):
        return "▸ "
    return "• "


def format_positioned_node(
    node: PositionedNode,
    state: OutlineState,
    theme: UITheme | None = None,
    columns: int | None = None,
) -> str:
    """Render one outline row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = INDENT * node.depth
    marker = row_marker(node, state)
    if node.path == state.cursor:
        text_color = active_theme.cursor
    else:
        text_color = active_theme.focus_color(node.focus)
    marker_part = f"{active_theme.marker}{marker}{reset}" if marker else ""
    row = f"{indent}{marker_part}{text_color}{node.node.value}{reset}"
    if columns is not None:
        row = clip_ansi_line(row, columns)
    return row


def _drop_row(depth: int, theme: UITheme) -> str:
    return f"{INDENT * depth}{theme.drop_target}{DROP_TARGET_LABEL}{theme.reset}"


def render_outline_lines(
    layout: OutlineLayout,
    state: OutlineState,
    theme: UITheme | None = None,
    include_hidden: bool = False,
    columns: int | None = None,
) -> list[str]:
    """Render the layout as terminal rows.

    Hidden focus levels are skipped unless ``include_hidden``. Drop-target
    rows are emitted only while the layout mode forces drop targets.
    """
    active_theme = theme or DEFAULT_THEME
    show_drops = layout.mode.forces_drop_targets
    lines: list[str] = []
    for node in layout.nodes:
        if node.focus.is_hidden and not include_hidden:
            continue
        lines.append(format_positioned_node(node, state, active_theme, columns))
        if show_drops and node.drop_targets.empty:
            lines.append(_drop_row(node.depth + 1, active_theme))
        if show_drops and node.drop_targets.end:
            lines.append(_drop_row(node.depth, active_theme))
    if show_drops and layout.root_drop_end:
        lines.append(_drop_row(0, active_theme))
    return lines
