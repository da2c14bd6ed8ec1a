"""ANSI-aware width measurement and clipping for outline rows.

Node values are arbitrary user text, so widths account for East Asian wide
characters and combining marks while escape sequences count as zero columns.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_width(ch: str) -> int:
    """Terminal columns used by one non-tab character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Visible column width of a styled string."""
    return sum(char_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int, ellipsis: str = "…") -> str:
    """Trim a styled row to ``max_cols`` columns, marking the cut with ``ellipsis``.

    Escape sequences are kept so colors stay balanced up to the cut point.
    """
    if max_cols <= 0 or not text:
        return ""
    if display_width(text) <= max_cols:
        return text

    budget = max_cols - display_width(ellipsis)
    out: list[str] = []
    col = 0
    i = 0
    while i < len(text):
        match = ANSI_ESCAPE_RE.match(text, i) if text[i] == "\x1b" else None
        if match:
            out.append(match.group(0))
            i = match.end()
            continue
        w = char_width(text[i])
        if col + w > budget:
            break
        out.append(text[i])
        col += w
        i += 1
    if budget >= 0:
        out.append(ellipsis)
    return "".join(out)
