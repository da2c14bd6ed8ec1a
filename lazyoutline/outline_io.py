"""Load outlines from JSON or indented text files into a ``MemoryStore``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from .errors import OutlineLoadError
from .outline_model.paths import ROOT_ID
from .outline_model.store import MemoryStore

TAB_WIDTH = 4
BULLET_PREFIXES = ("- ", "* ", "• ")


def _strip_bullet(text: str) -> str:
    for prefix in BULLET_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):].strip()
    return text


def parse_outline_text(text: str) -> MemoryStore:
    """Parse an indentation-nested outline, one node per non-blank line.

    A line nests under the closest preceding line with smaller indentation.
    Tabs count as four columns and a leading ``-``/``*``/``•`` bullet is dropped.
    """
    store = MemoryStore()
    parents: list[tuple[int, str]] = []
    for raw_line in text.splitlines():
        line = raw_line.expandtabs(TAB_WIDTH).rstrip()
        if not line.strip():
            continue
        indent = len(line) - len(line.lstrip(" "))
        while parents and parents[-1][0] >= indent:
            parents.pop()
        parent_id = parents[-1][1] if parents else ROOT_ID
        node = store.add_node(_strip_bullet(line.strip()), parent_id=parent_id)
        parents.append((indent, node.id))
    return store


def _validate_tree(entry: Any, where: str, seen_ids: set[str]) -> Mapping[str, Any]:
    if not isinstance(entry, Mapping):
        raise OutlineLoadError(f"{where}: expected an object, got {type(entry).__name__}")
    raw_id = entry.get("id")
    if raw_id is not None:
        node_id = str(raw_id)
        if node_id in seen_ids or node_id == ROOT_ID:
            raise OutlineLoadError(f"{where}: duplicate node id {node_id!r}")
        seen_ids.add(node_id)
    rank = entry.get("rank")
    if rank is not None and (isinstance(rank, bool) or not isinstance(rank, (int, float))):
        raise OutlineLoadError(f"{where}: 'rank' must be a number")
    children = entry.get("children", [])
    if children is not None and not isinstance(children, list):
        raise OutlineLoadError(f"{where}: 'children' must be a list")
    for idx, child in enumerate(children or ()):
        _validate_tree(child, f"{where}.children[{idx}]", seen_ids)
    return entry


def parse_outline_json(data: Any) -> MemoryStore:
    """Build a store from decoded JSON.

    Accepts a list of top-level node objects, a single node object with a
    ``value``, or a wrapper object whose ``children`` are the top-level nodes.
    """
    if isinstance(data, list):
        roots = data
    elif isinstance(data, Mapping) and "value" in data:
        roots = [data]
    elif isinstance(data, Mapping):
        roots = data.get("children") or []
    else:
        raise OutlineLoadError(f"Unsupported outline JSON root: {type(data).__name__}")
    if not isinstance(roots, list):
        raise OutlineLoadError("Top-level 'children' must be a list")
    seen_ids: set[str] = set()
    validated = [_validate_tree(entry, f"$[{idx}]", seen_ids) for idx, entry in enumerate(roots)]
    return MemoryStore.from_nested(validated)


def load_outline(path: Path) -> MemoryStore:
    """Read ``path`` as JSON (``.json`` suffix) or indented text."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OutlineLoadError(f"Cannot read outline {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise OutlineLoadError(f"Invalid JSON in {path}: {exc}") from exc
        store = parse_outline_json(data)
    else:
        store = parse_outline_text(text)
    logger.debug("Loaded {} nodes from {}", len(store.nodes()), path)
    return store
