"""Outline file loading tests for indented text and JSON inputs."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from lazyoutline.errors import OutlineLoadError
from lazyoutline.outline_io import load_outline, parse_outline_json, parse_outline_text
from lazyoutline.outline_model import ROOT_ID, children_sorted


def _tree(store, node_id=ROOT_ID):
    return [(child.value, _tree(store, child.id)) for child in children_sorted(store, node_id)]


class OutlineTextTests(unittest.TestCase):
    def test_indentation_nests_lines(self) -> None:
        store = parse_outline_text("Work\n  - Today\n  Later\n\t* Deep\n\nHome\n")

        self.assertEqual(
            _tree(store),
            [("Work", [("Today", []), ("Later", [("Deep", [])])]), ("Home", [])],
        )

    def test_dedent_returns_to_matching_level(self) -> None:
        store = parse_outline_text("A\n    B\n  C\nD")
        self.assertEqual(_tree(store), [("A", [("B", []), ("C", [])]), ("D", [])])


class OutlineJsonTests(unittest.TestCase):
    def test_accepts_list_single_node_and_wrapper(self) -> None:
        nested = [{"value": "A", "children": [{"value": "B"}]}]
        for data in (nested, nested[0], {"children": nested}):
            self.assertEqual(_tree(parse_outline_json(data)), [("A", [("B", [])])])

    def test_explicit_ids_and_ranks(self) -> None:
        store = parse_outline_json([{"id": 7, "value": "Late", "rank": 5}, {"id": "x", "value": "Early", "rank": 1}])

        self.assertEqual([child.id for child in children_sorted(store, ROOT_ID)], ["x", "7"])

    def test_rejects_malformed_shapes(self) -> None:
        for data in ("text", [1], [{"value": "A", "children": {}}], [{"value": "A", "rank": "high"}]):
            with self.assertRaises(OutlineLoadError):
                parse_outline_json(data)

    def test_rejects_duplicate_explicit_ids(self) -> None:
        nested = [
            {
                "id": "a",
                "value": "A",
                "children": [{"id": "b", "value": "B", "children": [{"id": "a", "value": "A-again"}]}],
            }
        ]
        with self.assertRaises(OutlineLoadError):
            parse_outline_json(nested)
        with self.assertRaises(OutlineLoadError):
            parse_outline_json([{"id": 1, "value": "A"}, {"id": "1", "value": "B"}])
        with self.assertRaises(OutlineLoadError):
            parse_outline_json([{"id": ROOT_ID, "value": "Root"}])

    def test_generated_ids_avoid_later_explicit_ids(self) -> None:
        store = parse_outline_json([{"value": "First"}, {"id": "n1", "value": "Second"}])

        children = children_sorted(store, ROOT_ID)
        self.assertEqual([child.value for child in children], ["First", "Second"])
        self.assertNotEqual(children[0].id, "n1")
        self.assertEqual(store.resolve_node("n1").value, "Second")


class LoadOutlineTests(unittest.TestCase):
    def test_load_outline_by_suffix(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            json_path = root / "outline.json"
            json_path.write_text(json.dumps([{"value": "A"}]), encoding="utf-8")
            text_path = root / "outline.txt"
            text_path.write_text("A\n  B\n", encoding="utf-8")

            self.assertEqual(_tree(load_outline(json_path)), [("A", [])])
            self.assertEqual(_tree(load_outline(text_path)), [("A", [("B", [])])])

    def test_load_outline_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            broken = root / "broken.json"
            broken.write_text("{not json", encoding="utf-8")

            with self.assertRaises(OutlineLoadError):
                load_outline(broken)
            with self.assertRaises(OutlineLoadError):
                load_outline(root / "missing.txt")


if __name__ == "__main__":
    unittest.main()
