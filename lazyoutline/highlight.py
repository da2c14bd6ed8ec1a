"""Pygments highlighting for JSON layout dumps."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}


def normalize_style(style: str | None) -> str:
    """Return ``style`` when pygments knows it, otherwise the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_json(source: str, style: str | None = DEFAULT_STYLE) -> str:
    """Return ``source`` with ANSI JSON syntax colors."""
    return highlight(source, JsonLexer(), _formatter_for_style(normalize_style(style)))
