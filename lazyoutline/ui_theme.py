"""Outline row palettes and theme selection helpers.

Each theme maps the four focus levels and the row chrome (bullets, expansion
markers, drop targets) to ANSI sequences.
"""

from __future__ import annotations

from dataclasses import dataclass

from .outline_model.types import FocusLevel


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by outline renderers."""

    name: str
    reset: str
    marker: str
    bullet: str
    focus_show: str
    focus_dim: str
    focus_hide: str
    focus_hide_parent: str
    drop_target: str
    cursor: str

    def focus_color(self, level: FocusLevel) -> str:
        """Return the text color for a focus level."""
        if level is FocusLevel.SHOW:
            return self.focus_show
        if level is FocusLevel.DIM:
            return self.focus_dim
        if level is FocusLevel.HIDE:
            return self.focus_hide
        return self.focus_hide_parent


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    marker="\033[38;5;44m",
    bullet="\033[38;5;250m",
    focus_show="\033[38;5;252m",
    focus_dim="\033[2;38;5;245m",
    focus_hide="\033[2;38;5;238m",
    focus_hide_parent="\033[2;38;5;236m",
    drop_target="\033[38;5;214m",
    cursor="\033[1;38;5;81m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    marker="\033[38;5;39m",
    bullet="\033[38;5;117m",
    focus_show="\033[38;5;153m",
    focus_dim="\033[2;38;5;110m",
    focus_hide="\033[2;38;5;24m",
    focus_hide_parent="\033[2;38;5;23m",
    drop_target="\033[38;5;215m",
    cursor="\033[1;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    marker="",
    bullet="",
    focus_show="",
    focus_dim="",
    focus_hide="",
    focus_hide_parent="",
    drop_target="",
    cursor="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    candidate = str(name or "").strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
