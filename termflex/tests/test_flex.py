from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from termflex.cells import to_plain  # noqa: E402
from termflex.flex import FlexContainer, distribute_space, justify_spacing, resolve_bases  # noqa: E402
from termflex.models import AUTO_BASIS, FlexItem, JustifyContent, LayoutSettings  # noqa: E402


def row(width: int, height: int = 0, **kwargs) -> FlexContainer:
    return FlexContainer("row", width, height, **kwargs)


class SizeResolutionTests(unittest.TestCase):
    def test_equal_grow_splits_evenly(self):
        flex = row(30).add_child("a", grow=1).add_child("b", grow=1).add_child("c", grow=1)
        self.assertEqual(flex.resolve_sizes(), [10, 10, 10])
        self.assertEqual(flex.render(), "a" + " " * 9 + "b" + " " * 9 + "c" + " " * 9)

    def test_auto_remainder_goes_to_earliest(self):
        flex = row(31).add_child("a", grow=1).add_child("b", grow=1).add_child("c", grow=1)
        self.assertEqual(flex.resolve_sizes(), [11, 10, 10])

    def test_auto_items_fill_available_space(self):
        flex = row(32, padding=1, gap=1)
        for content in "abc":
            flex.add_child(content, shrink=0)
        sizes = flex.resolve_sizes()
        self.assertEqual(sizes, [10, 9, 9])
        self.assertEqual(sum(sizes), 32 - 2 - 2)

    def test_explicit_bases_leave_rest_to_auto(self):
        flex = row(20).add_child("a", basis=8).add_child("b").add_child("c")
        self.assertEqual(flex.resolve_sizes(), [8, 6, 6])

    def test_grow_truncation_not_redistributed(self):
        flex = row(10)
        for content in "abc":
            flex.add_child(content, grow=1, basis=0)
        self.assertEqual(flex.resolve_sizes(), [3, 3, 3])

    def test_shrink_never_goes_negative(self):
        flex = row(10).add_child("a", basis=2).add_child("b", basis=100)
        result = flex.layout()
        self.assertEqual(result.sizes, [0, 54])
        self.assertTrue(all(size >= 0 for size in result.sizes))
        self.assertTrue(any("overflow" in note for note in result.clamps))
        self.assertEqual([len(line) for line in result.text.split("\n")], [10])

    def test_single_oversized_item_shrinks_to_fit(self):
        self.assertEqual(row(10).add_child("a", basis=100).resolve_sizes(), [10])

    def test_zero_shrink_weight_keeps_bases(self):
        flex = row(10).add_child("a", shrink=0, basis=8).add_child("b", shrink=0, basis=8)
        self.assertEqual(flex.resolve_sizes(), [8, 8])

    def test_min_item_width_floor(self):
        flex = row(30).add_child("a").add_child("b").add_child("c").set_min_item_width(12)
        result = flex.layout()
        self.assertEqual(result.sizes, [12, 12, 12])
        self.assertEqual(result.width, 30)
        self.assertTrue(result.clamped)

    def test_min_item_width_ignored_for_columns(self):
        flex = FlexContainer("column", 5, 6).add_child("a", grow=1).add_child("b", grow=1)
        flex.set_min_item_width(4)
        self.assertEqual(flex.resolve_sizes(), [3, 3])

    def test_min_panel_width_setting_is_row_floor(self):
        settings = LayoutSettings(min_panel_width=12)
        flex = row(30, settings=settings).add_child("a").add_child("b").add_child("c")
        self.assertEqual(flex.resolve_sizes(), [12, 12, 12])
        column = FlexContainer("column", 5, 6, settings=settings).add_child("a", grow=1).add_child("b", grow=1)
        self.assertEqual(column.resolve_sizes(), [3, 3])

    def test_functions(self):
        items = [FlexItem("a", flex_grow=1), FlexItem("b", flex_basis=4)]
        bases = resolve_bases(items, 10)
        self.assertEqual(bases, [6, 4])
        self.assertEqual(distribute_space(items, [2, 4], 10), [6, 4])
        self.assertEqual(justify_spacing(JustifyContent.START, 5, 0), ([], 5))


class ClampTests(unittest.TestCase):
    def test_row_width_raised_to_minimum(self):
        result = row(4).add_child("x").layout()
        self.assertEqual(result.width, 10)
        self.assertIn("width 4 raised to minimum 10", result.clamps)

    def test_column_height_raised_to_minimum(self):
        result = FlexContainer("column", 5, 1).add_child("x").layout()
        self.assertEqual(result.height, 3)
        self.assertEqual(len(result.text.split("\n")), 3)

    def test_empty_container(self):
        flex = row(40, 10)
        self.assertEqual(flex.render(), "")
        self.assertEqual(flex.layout().sizes, [])
        self.assertEqual(flex.resolve_sizes(), [])
        self.assertEqual(FlexContainer("column").render(), "")

    def test_blank_items_keep_one_cross_cell(self):
        result = row(10).add_child("").add_child("").layout()
        self.assertEqual((result.width, result.height), (10, 1))
        self.assertEqual(result.text, " " * 10)


class JustifyTests(unittest.TestCase):
    def test_space_evenly(self):
        flex = row(19).set_justify_content("space-evenly")
        flex.add_child("xxxxx", shrink=0, basis=5).add_child("yyyyy", shrink=0, basis=5)
        result = flex.layout()
        self.assertEqual(result.offsets, [3, 11])
        self.assertEqual(result.text, "   xxxxx   yyyyy   ")

    def test_space_between(self):
        flex = row(20).set_justify_content(JustifyContent.SPACE_BETWEEN)
        flex.add_child("aaaa", basis=4).add_child("bbbb", basis=4)
        self.assertEqual(flex.render(), "aaaa" + " " * 12 + "bbbb")

    def test_space_between_single_item_matches_start(self):
        between = row(20).set_justify_content("space-between").add_child("hi", basis=4)
        start = row(20).add_child("hi", basis=4)
        self.assertEqual(between.render(), start.render())

    def test_space_around(self):
        flex = row(12).set_justify_content("space-around")
        flex.add_child("aa", basis=2).add_child("bb", basis=2)
        self.assertEqual(flex.render(), "  aa    bb  ")

    def test_space_around_remainder_trails(self):
        flex = row(9).set_justify_content("space-around")
        flex.add_child("aa", shrink=0, basis=2).add_child("bb", shrink=0, basis=2)
        result = flex.layout()
        self.assertEqual(result.offsets, [1, 5])
        self.assertEqual(result.text, " aa  bb  ")
        self.assertEqual(justify_spacing(JustifyContent.SPACE_AROUND, 5, 2), ([1, 2], 2))

    def test_end_and_center(self):
        self.assertEqual(row(12).set_justify_content("end").add_child("ab", basis=2).render(), " " * 10 + "ab")
        self.assertEqual(row(11).set_justify_content("center").add_child("abc", basis=3).render(), "    abc    ")

    def test_gap_between_items(self):
        flex = row(12, gap=2).add_child("a", grow=1).add_child("b", grow=1)
        result = flex.layout()
        self.assertEqual(result.sizes, [5, 5])
        self.assertEqual(result.offsets, [0, 7])
        self.assertEqual(result.text, "a      b    ")

    def test_invalid_justify(self):
        with self.assertRaises(ValueError):
            row(10).set_justify_content("sideways")


class OrderAndAlignTests(unittest.TestCase):
    def test_order_sorts_items(self):
        flex = row(10).add_child("A", grow=1, order=2).add_child("B", grow=1, order=1)
        self.assertEqual(flex.render(), "B    A    ")

    def test_equal_order_keeps_insertion(self):
        flex = row(10).add_child("A", grow=1).add_child("B", grow=1)
        self.assertEqual(flex.render(), "A    B    ")

    def test_row_cross_center(self):
        flex = row(10, 3).set_align_items("center").add_child("x", basis=10)
        self.assertEqual(flex.render().split("\n"), [" " * 10, "x" + " " * 9, " " * 10])

    def test_align_self_overrides_container(self):
        flex = row(20, 3).set_align_items("start")
        flex.add_child("a", basis=10, align_self="end").add_child("b", basis=10)
        lines = flex.render().split("\n")
        self.assertEqual(lines[0], " " * 10 + "b" + " " * 9)
        self.assertEqual(lines[1], " " * 20)
        self.assertEqual(lines[2], "a" + " " * 19)

    def test_column_direction(self):
        flex = FlexContainer("column", 5, 6).add_child("top", grow=1).add_child("bot", grow=1)
        self.assertEqual(flex.resolve_sizes(), [3, 3])
        self.assertEqual(
            flex.render().split("\n"),
            ["top  ", "     ", "     ", "bot  ", "     ", "     "],
        )

    def test_column_cross_center(self):
        flex = FlexContainer("column", 7, 3).set_align_items("center").add_child("abc")
        self.assertEqual(flex.render().split("\n"), ["  abc  ", " " * 7, " " * 7])

    def test_cross_auto_uses_tallest_item(self):
        result = row(10).add_child("a\nb\nc", grow=1).add_child("d", grow=1).layout()
        self.assertEqual(result.height, 3)
        self.assertEqual(result.cross_sizes, [3, 3])


class BoxAndContentTests(unittest.TestCase):
    def test_padding_and_margin(self):
        result = row(14, padding=1, margin=1).add_child("ab").layout()
        self.assertEqual((result.width, result.height), (14, 5))
        lines = result.text.split("\n")
        self.assertEqual(lines[2], "  ab          ")
        self.assertEqual(lines[0], " " * 14)

    def test_styled_content_measured_by_cells(self):
        rendered = row(10).add_child("\x1b[1mhi\x1b[0m", grow=1).render()
        self.assertEqual(to_plain(rendered), "hi" + " " * 8)

    def test_content_cropped_to_slot(self):
        flex = row(10).add_child("abcdefgh", shrink=0, basis=3).add_child("xy", grow=1)
        self.assertEqual(flex.render(), "abcxy     ")

    def test_wrap_is_noted(self):
        flex = row(10).set_wrap("wrap").add_child("x")
        with self.assertLogs("termflex.flex", level="WARNING"):
            result = flex.layout()
        self.assertTrue(any("no-wrap" in note for note in result.clamps))
        self.assertEqual(result.text, row(10).add_child("x").render())

    def test_add_item_copies(self):
        item = FlexItem("a", flex_grow=1)
        flex = row(10).add_item(item)
        item.flex_grow = 5
        self.assertEqual(flex.items[0].flex_grow, 1)

    def test_item_normalisation(self):
        item = FlexItem(42, flex_grow=-3, flex_shrink=-1, align_self="center")
        self.assertEqual(item.content, "42")
        self.assertEqual((item.flex_grow, item.flex_shrink), (0, 0))
        self.assertTrue(FlexItem("a").is_auto)
        self.assertFalse(FlexItem("a", flex_basis=0).is_auto)
        self.assertEqual(AUTO_BASIS, -1)

    def test_item_basis_and_order_are_integers(self):
        item = FlexItem("a", flex_basis=4.7, order=2.0)
        self.assertEqual(item.flex_basis, 4)
        self.assertIsInstance(item.flex_basis, int)
        self.assertIsInstance(item.order, int)
        sizes = row(10).add_item(item).add_child("b", basis=2.5).resolve_sizes()
        self.assertEqual(sizes, [4, 2])
        self.assertTrue(all(isinstance(size, int) for size in sizes))


if __name__ == "__main__":
    unittest.main()
