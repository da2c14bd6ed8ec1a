"""Autofocus classification tests.

Covers the cursor window, ancestor/sibling dimming, shifted-hidden rows,
hover overrides, and degradation when the cursor no longer resolves.
"""

from __future__ import annotations

import unittest

from lazyoutline.outline_model import (
    HOME_PATH,
    FocusLevel,
    MemoryStore,
    OutlineState,
    classify,
    classify_with_context,
    focus_context,
    raw_distance,
)
from lazyoutline.outline_model.focus import window_size


def _store() -> MemoryStore:
    return MemoryStore.from_nested(
        [
            {
                "id": "a",
                "value": "A",
                "children": [
                    {
                        "id": "b",
                        "value": "B",
                        "children": [
                            {
                                "id": "c",
                                "value": "C",
                                "children": [{"id": "d", "value": "D"}, {"id": "d2", "value": "D2"}],
                            }
                        ],
                    },
                    {"id": "y", "value": "Y"},
                ],
            },
            {"id": "x", "value": "X", "children": [{"id": "x1", "value": "X1"}]},
        ]
    )


class FocusWindowTests(unittest.TestCase):
    def test_window_size_depends_on_cursor_children(self) -> None:
        self.assertEqual(window_size(3, cursor_has_children=True), 2)
        self.assertEqual(window_size(3, cursor_has_children=False), 1)
        self.assertEqual(window_size(1, cursor_has_children=False), 0)

    def test_leaf_cursor_truncates_one_level(self) -> None:
        ctx = focus_context(OutlineState(store=_store(), cursor=("a", "b", "c", "d")))

        self.assertFalse(ctx.cursor_has_children)
        self.assertEqual(ctx.first_visible_path, ("a", "b", "c"))

    def test_cursor_with_children_widens_window(self) -> None:
        ctx = focus_context(OutlineState(store=_store(), cursor=("a", "b", "c")))

        self.assertTrue(ctx.cursor_has_children)
        self.assertEqual(ctx.first_visible_path, ("a",))

    def test_shallow_cursor_has_no_window(self) -> None:
        ctx = focus_context(OutlineState(store=_store(), cursor=("a",)))
        self.assertIsNone(ctx.first_visible_path)

    def test_hover_path_overrides_window(self) -> None:
        ctx = focus_context(
            OutlineState(store=_store(), cursor=("a", "b", "c", "d"), expand_hover_top_path=("x",))
        )
        self.assertEqual(ctx.first_visible_path, ("x",))


class ClassifyLeafCursorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = OutlineState(store=_store(), cursor=("a", "b", "c", "d"))

    def test_cursor_is_shown(self) -> None:
        self.assertIs(classify(self.state, ("a", "b", "c", "d")), FocusLevel.SHOW)

    def test_sibling_and_parent_are_dimmed(self) -> None:
        self.assertIs(classify(self.state, ("a", "b", "c", "d2")), FocusLevel.DIM)
        self.assertIs(classify(self.state, ("a", "b", "c")), FocusLevel.DIM)

    def test_ancestors_above_window_fade_by_distance(self) -> None:
        self.assertIs(classify(self.state, ("a", "b")), FocusLevel.HIDE)
        self.assertIs(classify(self.state, ("a",)), FocusLevel.HIDE)

    def test_rows_outside_window_shift_and_hide(self) -> None:
        self.assertIs(classify(self.state, ("a", "y")), FocusLevel.HIDE_WITH_PARENT)
        self.assertIs(classify(self.state, ("x",)), FocusLevel.HIDE_WITH_PARENT)
        self.assertIs(classify(self.state, ("x", "x1")), FocusLevel.HIDE_WITH_PARENT)


class ClassifyParentCursorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = OutlineState(store=_store(), cursor=("a", "b", "c"))

    def test_cursor_and_children_are_shown(self) -> None:
        self.assertIs(classify(self.state, ("a", "b", "c")), FocusLevel.SHOW)
        self.assertIs(classify(self.state, ("a", "b", "c", "d")), FocusLevel.SHOW)

    def test_direct_parent_keeps_raw_distance(self) -> None:
        self.assertIs(classify(self.state, ("a", "b")), FocusLevel.HIDE)

    def test_window_rows_are_dimmed(self) -> None:
        self.assertIs(classify(self.state, ("a",)), FocusLevel.DIM)
        self.assertIs(classify(self.state, ("a", "y")), FocusLevel.DIM)

    def test_rows_outside_window_shift_and_hide(self) -> None:
        self.assertIs(classify(self.state, ("x",)), FocusLevel.HIDE_WITH_PARENT)


class ClassifyEdgeCaseTests(unittest.TestCase):
    def test_no_cursor_shows_everything(self) -> None:
        state = OutlineState(store=_store())
        for path in [("a",), ("a", "b", "c", "d"), ("x", "x1")]:
            self.assertIs(classify(state, path), FocusLevel.SHOW)

    def test_hover_without_cursor_hides_outside_rows(self) -> None:
        state = OutlineState(store=_store(), expand_hover_top_path=("a",))
        self.assertIs(classify(state, ("a", "b")), FocusLevel.SHOW)
        self.assertIs(classify(state, ("x",)), FocusLevel.HIDE_WITH_PARENT)

    def test_root_window_includes_everything(self) -> None:
        state = OutlineState(store=_store(), cursor=("a", "b", "c", "d"), expand_hover_top_path=HOME_PATH)
        self.assertIs(classify(state, ("x",)), FocusLevel.DIM)

    def test_hover_window_can_exclude_cursor_siblings(self) -> None:
        state = OutlineState(store=_store(), cursor=("a", "b", "c", "d"), expand_hover_top_path=("x",))
        self.assertIs(classify(state, ("a", "b", "c", "d")), FocusLevel.SHOW)
        self.assertIs(classify(state, ("a", "b", "c", "d2")), FocusLevel.HIDE_WITH_PARENT)
        self.assertIs(classify(state, ("x", "x1")), FocusLevel.DIM)

    def test_unresolvable_cursor_degrades_to_no_cursor(self) -> None:
        for cursor in [("ghost",), ("a", "c"), ()]:
            state = OutlineState(store=_store(), cursor=cursor)
            ctx = focus_context(state)
            self.assertIsNone(ctx.cursor)
            self.assertIs(classify_with_context(ctx, ("x",)), FocusLevel.SHOW)
            self.assertEqual(raw_distance(ctx, 0), 0)

    def test_descendants_beyond_fade_boundary_are_hidden(self) -> None:
        state = OutlineState(store=_store(), cursor=("a",))
        near = ("a", "p", "q", "r", "s")
        far = near + ("t",)
        self.assertIs(classify(state, near), FocusLevel.SHOW)
        self.assertIs(classify(state, far), FocusLevel.HIDE)

    def test_classification_is_order_independent(self) -> None:
        state = OutlineState(store=_store(), cursor=("a", "b", "c", "d"))
        ctx = focus_context(state)
        paths = [("a",), ("a", "b"), ("a", "b", "c"), ("a", "b", "c", "d"), ("a", "y"), ("x",)]

        forward = [classify_with_context(ctx, path) for path in paths]
        backward = [classify_with_context(ctx, path) for path in reversed(paths)]

        self.assertEqual(forward, list(reversed(backward)))
        self.assertEqual(forward, [classify(state, path) for path in paths])

    def test_raw_distance_is_clamped(self) -> None:
        ctx = focus_context(OutlineState(store=_store(), cursor=("a", "b", "c", "d")))
        self.assertEqual(raw_distance(ctx, 0), 3)
        self.assertEqual(raw_distance(ctx, 2), 2)
        self.assertEqual(raw_distance(ctx, 6), 0)

    def test_custom_max_distance_changes_window(self) -> None:
        state = OutlineState(store=_store(), cursor=("a", "b", "c", "d"))
        ctx = focus_context(state, max_distance=4)
        self.assertEqual(ctx.first_visible_path, ("a", "b"))
        self.assertIs(classify(state, ("a", "b", "c", "d2"), max_distance=4), FocusLevel.DIM)


if __name__ == "__main__":
    unittest.main()
