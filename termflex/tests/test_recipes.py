from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from termflex.cells import to_plain  # noqa: E402
from termflex.models import Direction  # noqa: E402
from termflex.recipes import (  # noqa: E402
    DashboardLayout,
    ResponsiveLayout,
    SidebarLayout,
    clamp_height,
    count_lines,
)


class HelperTests(unittest.TestCase):
    def test_count_lines(self):
        self.assertEqual(count_lines(""), 0)
        self.assertEqual(count_lines("a"), 1)
        self.assertEqual(count_lines("a\nb\n"), 3)

    def test_clamp_height(self):
        self.assertEqual(clamp_height(6, 0, 5), 5)
        self.assertEqual(clamp_height(1, 3, 0), 3)
        self.assertEqual(clamp_height(4), 4)


class DashboardTests(unittest.TestCase):
    def test_max_header_height(self):
        header = "\n".join(f"h{index}" for index in range(1, 7))
        dashboard = DashboardLayout(30, 20, header, "body", max_header_height=5)
        self.assertEqual(dashboard.section_heights(), (5, 15, 0))
        lines = to_plain(dashboard.render()).split("\n")
        self.assertEqual(len(lines), 20)
        self.assertEqual([line.rstrip() for line in lines[:6]], ["h1", "h2", "h3", "h4", "h5", "body"])

    def test_unbounded_header_takes_its_lines(self):
        header = "\n".join(f"h{index}" for index in range(1, 7))
        self.assertEqual(DashboardLayout(30, 20, header, "body").section_heights(), (6, 14, 0))

    def test_footer_at_bottom(self):
        dashboard = DashboardLayout(20, 6, "top", "middle", "bottom")
        self.assertEqual(dashboard.section_heights(), (1, 4, 1))
        lines = to_plain(dashboard.render()).split("\n")
        self.assertEqual(lines[-1].rstrip(), "bottom")
        self.assertEqual(lines[1].rstrip(), "middle")

    def test_header_shrinks_before_footer(self):
        dashboard = DashboardLayout(20, 5, "1\n2\n3\n4", "", "a\nb\nc")
        self.assertEqual(dashboard.section_heights(), (2, 0, 3))

    def test_minimums_give_way_last(self):
        dashboard = DashboardLayout(20, 5, "1\n2\n3\n4", "", "a\nb\nc", min_header_height=3)
        self.assertEqual(dashboard.section_heights(), (3, 0, 2))

    def test_min_header_reserves_space(self):
        dashboard = DashboardLayout(20, 10, "", "body", min_header_height=2)
        self.assertEqual(dashboard.section_heights(), (2, 8, 0))

    def test_setters_chain(self):
        dashboard = DashboardLayout(20, 5).set_header("h").set_main("m").set_footer("f")
        self.assertEqual(dashboard.section_heights(), (1, 3, 1))


class SidebarTests(unittest.TestCase):
    def test_weights_split_row(self):
        layout = SidebarLayout(100, 10, "M", "S")
        self.assertEqual(layout.mode, "medium")
        self.assertEqual(layout.layout().sizes, [66, 33])

    def test_fixed_sidebar_width(self):
        self.assertEqual(SidebarLayout(100, 10, "M", "S", 20).layout().sizes, [79, 20])

    def test_sidebar_first(self):
        result = SidebarLayout(100, 10, "M", "S", sidebar_first=True).layout()
        self.assertEqual(result.sizes, [33, 66])
        self.assertTrue(to_plain(result.text).startswith("S"))

    def test_small_terminal_stacks(self):
        layout = SidebarLayout(60, 9, "M", "S")
        self.assertIs(layout.container().direction, Direction.COLUMN)
        result = layout.layout()
        self.assertEqual(result.sizes, [6, 3])
        lines = to_plain(result.text).split("\n")
        self.assertEqual(lines[0].rstrip(), "M")
        self.assertEqual(lines[6].rstrip(), "S")


class ResponsiveTests(unittest.TestCase):
    def _layout(self, width: int, height: int = 0, count: int = 3, **kwargs) -> ResponsiveLayout:
        layout = ResponsiveLayout(width, height, **kwargs)
        for index in range(count):
            layout.add_section(f"section {index}")
        return layout

    def test_small_is_single_column(self):
        layout = self._layout(60, count=2)
        self.assertEqual(len(layout.columns()), 1)
        lines = to_plain(layout.render()).split("\n")
        self.assertEqual([line.rstrip() for line in lines[:2]], ["section 0", "section 1"])

    def test_medium_uses_two_columns(self):
        layout = self._layout(100, 10)
        self.assertEqual([len(column) for column in layout.columns()], [2, 1])
        self.assertEqual(layout.column_widths(), [65, 32])
        self.assertEqual(layout.layout().sizes, [65, 32])

    def test_large_uses_three_columns(self):
        layout = self._layout(150, 10)
        self.assertEqual(len(layout.columns()), 3)
        self.assertEqual(layout.column_widths(), [48, 48, 48])

    def test_weights_and_gap(self):
        layout = ResponsiveLayout(100, gap=0).add_section("a", weight=2).add_section("b")
        self.assertEqual(layout.column_widths(), [66, 33])

    def test_fewer_sections_than_columns(self):
        layout = self._layout(150, count=1)
        self.assertEqual(len(layout.columns()), 1)
        self.assertTrue(to_plain(layout.render()).startswith("section 0"))

    def test_empty(self):
        self.assertEqual(ResponsiveLayout(100).render(), "")


if __name__ == "__main__":
    unittest.main()
