"""Ready-made screen shapes assembled from flex containers."""

from __future__ import annotations

import logging

from termflex.cells import measure
from termflex.flex import FlexContainer
from termflex.grid import split_evenly
from termflex.layout import LARGE, MEDIUM, SMALL, responsive_padding, select_layout_mode
from termflex.models import DEFAULT_SETTINGS, Direction, LayoutResult, LayoutSettings

logger = logging.getLogger(__name__)

MODE_COLUMNS = {SMALL: 1, MEDIUM: 2, LARGE: 3}


def count_lines(text: str) -> int:
    if not text:
        return 0
    return text.count("\n") + 1


def clamp_height(lines: int, minimum: int = 0, maximum: int = 0) -> int:
    size = max(lines, minimum, 0)
    if maximum > 0:
        size = min(size, maximum)
    return size


class ResponsiveLayout:
    """Stack sections in one, two or three columns depending on the width."""

    def __init__(
        self,
        width: int,
        height: int = 0,
        *,
        gap: int | None = None,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.gap = gap
        self.settings = settings or DEFAULT_SETTINGS
        self._sections: list[tuple[str, int]] = []

    @property
    def mode(self) -> str:
        return select_layout_mode(self.width, self.settings)

    def add_section(self, content: str, weight: int = 1) -> ResponsiveLayout:
        self._sections.append((content, max(1, int(weight))))
        return self

    def columns(self) -> list[list[tuple[str, int]]]:
        if not self._sections:
            return []
        count = min(MODE_COLUMNS[self.mode], len(self._sections))
        chunks: list[list[tuple[str, int]]] = []
        start = 0
        for size in split_evenly(len(self._sections), count):
            chunks.append(self._sections[start : start + size])
            start += size
        return chunks

    def _gaps(self) -> tuple[int, int]:
        horizontal, vertical = responsive_padding(self.width, self.settings)
        if self.gap is not None:
            horizontal = self.gap
        return horizontal, vertical

    def _natural_height(self, columns: list[list[tuple[str, int]]], vertical_gap: int) -> int:
        heights = []
        for column in columns:
            total = sum(measure(content)[1] for content, _ in column)
            heights.append(total + vertical_gap * (len(column) - 1))
        return max(heights, default=0)

    def _column(self, sections: list[tuple[str, int]], width: int, height: int, gap: int) -> FlexContainer:
        container = FlexContainer(Direction.COLUMN, width, height, gap=gap, settings=self.settings)
        for content, weight in sections:
            if self.height > 0:
                container.add_child(content, grow=weight, basis=0)
            else:
                container.add_child(content, shrink=0, basis=measure(content)[1])
        return container

    def column_widths(self) -> list[int]:
        columns = self.columns()
        if len(columns) <= 1:
            return [self.width] * len(columns)
        probe = FlexContainer(Direction.ROW, self.width, gap=self._gaps()[0], settings=self.settings)
        for column in columns:
            probe.add_child("", grow=sum(weight for _, weight in column), basis=0)
        return probe.resolve_sizes()

    def layout(self) -> LayoutResult:
        columns = self.columns()
        if not columns:
            return LayoutResult()

        horizontal_gap, vertical_gap = self._gaps()
        height = self.height if self.height > 0 else self._natural_height(columns, vertical_gap)
        logger.debug("responsive layout: mode=%s columns=%d height=%d", self.mode, len(columns), height)

        if len(columns) == 1:
            return self._column(columns[0], self.width, height, vertical_gap).layout()

        # column widths are resolved first, then each column renders into its slot
        widths = self.column_widths()
        row = FlexContainer(Direction.ROW, self.width, height, gap=horizontal_gap, settings=self.settings)
        for column, column_width in zip(columns, widths):
            rendered = self._column(column, column_width, height, vertical_gap).render()
            row.add_child(rendered, shrink=0, basis=column_width)
        return row.layout()

    def render(self) -> str:
        return self.layout().text


class DashboardLayout:
    """Header, main and footer stacked vertically.

    Header and footer heights come from their line counts, clamped to the
    given bounds (a maximum of 0 is unbounded). When the three regions do not
    fit, the header shrinks first, then the footer; main takes what is left.
    """

    def __init__(
        self,
        width: int,
        height: int,
        header: str = "",
        main: str = "",
        footer: str = "",
        *,
        min_header_height: int = 0,
        max_header_height: int = 0,
        min_footer_height: int = 0,
        max_footer_height: int = 0,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.header = header
        self.main = main
        self.footer = footer
        self.min_header_height = max(0, int(min_header_height))
        self.max_header_height = max(0, int(max_header_height))
        self.min_footer_height = max(0, int(min_footer_height))
        self.max_footer_height = max(0, int(max_footer_height))
        self.settings = settings or DEFAULT_SETTINGS

    def set_header(self, header: str) -> DashboardLayout:
        self.header = header
        return self

    def set_main(self, main: str) -> DashboardLayout:
        self.main = main
        return self

    def set_footer(self, footer: str) -> DashboardLayout:
        self.footer = footer
        return self

    def total_height(self) -> int:
        return max(self.height, self.settings.min_column_height)

    def section_heights(self) -> tuple[int, int, int]:
        total = self.total_height()
        header = clamp_height(count_lines(self.header), self.min_header_height, self.max_header_height)
        footer = clamp_height(count_lines(self.footer), self.min_footer_height, self.max_footer_height)

        excess = header + footer - total
        if excess > 0:
            # give up space above the minimums first, then the minimums themselves
            for floor_header, floor_footer in (
                (self.min_header_height, self.min_footer_height),
                (0, 0),
            ):
                cut = min(excess, max(0, header - floor_header))
                header -= cut
                excess -= cut
                cut = min(excess, max(0, footer - floor_footer))
                footer -= cut
                excess -= cut
            logger.debug("dashboard sections shrunk to header=%d footer=%d", header, footer)

        return header, total - header - footer, footer

    def layout(self) -> LayoutResult:
        header, main, footer = self.section_heights()
        container = FlexContainer(Direction.COLUMN, self.width, self.total_height(), settings=self.settings)
        container.add_child(self.header, shrink=0, basis=header)
        container.add_child(self.main, shrink=0, basis=main)
        container.add_child(self.footer, shrink=0, basis=footer)
        return container.layout()

    def render(self) -> str:
        return self.layout().text


class SidebarLayout:
    """Main content beside a sidebar; stacked vertically on small terminals."""

    def __init__(
        self,
        width: int,
        height: int,
        main: str = "",
        sidebar: str = "",
        sidebar_width: int = 0,
        *,
        main_weight: int = 2,
        sidebar_weight: int = 1,
        sidebar_first: bool = False,
        gap: int | None = None,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.main = main
        self.sidebar = sidebar
        self.sidebar_width = max(0, int(sidebar_width))
        self.main_weight = max(0, int(main_weight))
        self.sidebar_weight = max(0, int(sidebar_weight))
        self.sidebar_first = sidebar_first
        self.settings = settings or DEFAULT_SETTINGS
        self.gap = self.settings.gap if gap is None else max(0, int(gap))

    @property
    def mode(self) -> str:
        return select_layout_mode(self.width, self.settings)

    def container(self) -> FlexContainer:
        sidebar_order = -1 if self.sidebar_first else 1
        if self.mode == SMALL:
            container = FlexContainer(Direction.COLUMN, self.width, self.height, settings=self.settings)
            container.add_child(self.main, grow=self.main_weight, basis=0)
            container.add_child(self.sidebar, grow=self.sidebar_weight, basis=0, order=sidebar_order)
            return container

        container = FlexContainer(Direction.ROW, self.width, self.height, gap=self.gap, settings=self.settings)
        if self.sidebar_width:
            container.add_child(self.main, grow=1, basis=0)
            container.add_child(self.sidebar, shrink=0, basis=self.sidebar_width, order=sidebar_order)
        else:
            container.add_child(self.main, grow=self.main_weight, basis=0)
            container.add_child(self.sidebar, grow=self.sidebar_weight, basis=0, order=sidebar_order)
        return container

    def layout(self) -> LayoutResult:
        return self.container().layout()

    def render(self) -> str:
        return self.layout().text
