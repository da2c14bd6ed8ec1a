"""Command-line front door for lazyoutline.

Loads an outline file, builds a view-model snapshot from the options, and
prints the positioned rows (or the layout as JSON).
"""

from __future__ import annotations

import argparse
import json
import shutil
import sys
from pathlib import Path

from loguru import logger

from . import config
from .errors import LazyOutlineError
from .highlight import DEFAULT_STYLE, highlight_json
from .log import configure_logging
from .outline_io import load_outline
from .outline_model import (
    OutlineState,
    RenderMode,
    expand_all,
    expand_along_path,
    expand_paths,
    layout_outline,
    render_outline_lines,
    resolve_path_by_values,
)
from .outline_model.store import OutlineStore
from .outline_model.types import Path as NodePath
from .ui_theme import available_theme_names, resolve_theme

PATH_SEPARATOR = "/"


def _positive_float(value: str) -> float:
    """argparse type for positive numbers."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def _default_columns() -> int:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def _value_path(store: OutlineStore, raw: str) -> NodePath:
    values = [part for part in raw.split(PATH_SEPARATOR) if part]
    return resolve_path_by_values(store, values)


def build_state(args: argparse.Namespace, store: OutlineStore) -> OutlineState:
    """Translate parsed options into an immutable view-model snapshot."""
    cursor = _value_path(store, args.cursor) if args.cursor else None
    if args.expand_all:
        expanded = expand_all(store)
    else:
        explicit = expand_paths(_value_path(store, raw) for raw in args.expand)
        expanded = expand_along_path(cursor, explicit)
    return OutlineState(
        store=store,
        expanded=expanded,
        cursor=cursor,
        drag_in_progress=args.drag,
        font_size=args.font_size if args.font_size is not None else config.load_font_size(),
        show_hidden=args.show_hidden,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the autofocused flat layout of a collapsible outline."
    )
    parser.add_argument("path", help="Outline file (.json or indented text).")
    parser.add_argument("--cursor", default=None, help="Value path of the focused node, e.g. 'Work/Today'.")
    parser.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="PATH",
        help="Value path to expand (repeatable). The cursor chain is always expanded.",
    )
    parser.add_argument("--expand-all", action="store_true", help="Expand every node.")
    parser.add_argument("--show-hidden", action="store_true", help="Show meta attributes and =hidden nodes.")
    parser.add_argument("--all", action="store_true", help="Also print rows classified as hidden.")
    parser.add_argument("--json", action="store_true", help="Dump the positioned layout as JSON.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for --json output.")
    parser.add_argument("--font-size", type=_positive_float, default=None, help="Font size used for indentation.")
    parser.add_argument("--drag", action="store_true", help="Render as if a drag is in progress.")
    parser.add_argument("--simulate-drag", action="store_true", help="Force every drop target visible.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the outline layout.

    Input errors (unreadable files, unknown value paths) exit with a message.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    try:
        store = load_outline(path)
        state = build_state(args, store)
    except LazyOutlineError as exc:
        raise SystemExit(str(exc)) from exc

    mode = RenderMode(
        drag_in_progress=state.drag_in_progress,
        simulate_drag=args.simulate_drag or config.load_simulate_drag(),
    )
    layout = layout_outline(state, mode=mode, max_distance=config.load_max_distance())
    logger.debug("Laid out {} rows", len(layout.nodes))

    no_color = args.no_color or not sys.stdout.isatty()
    if args.json:
        text = json.dumps(layout.to_dict(), indent=2, ensure_ascii=False) + "\n"
        sys.stdout.write(text if no_color else highlight_json(text, args.style))
        return

    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=no_color)
    lines = render_outline_lines(
        layout,
        state,
        theme=theme,
        include_hidden=args.all,
        columns=None if no_color else _default_columns(),
    )
    sys.stdout.write("".join(line + "\n" for line in lines))


if __name__ == "__main__":
    main()
