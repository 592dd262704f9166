"""Fixed rows x columns grid of pre-rendered cells."""

from __future__ import annotations

import logging

from termflex.cells import (
    Block,
    blank_block,
    block_width,
    fit_block,
    join_horizontal,
    join_vertical,
    pad_block,
    parse_block,
    render_block,
)
from termflex.models import DEFAULT_SETTINGS, LayoutResult, LayoutSettings

logger = logging.getLogger(__name__)


def split_evenly(total: int, count: int) -> list[int]:
    """Split ``total`` cells into ``count`` tracks, earliest tracks take the remainder."""
    if count <= 0:
        return []
    share, extra = divmod(max(0, total), count)
    return [share + (1 if index < extra else 0) for index in range(count)]


class GridContainer:
    """Uniform grid; a width or height of 0 sizes tracks to the largest cell."""

    def __init__(
        self,
        rows: int,
        columns: int,
        width: int = 0,
        height: int = 0,
        *,
        padding: int = 0,
        margin: int = 0,
        gap: int = 0,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.rows = max(0, int(rows))
        self.columns = max(0, int(columns))
        self.width = int(width)
        self.height = int(height)
        self.padding = max(0, int(padding))
        self.margin = max(0, int(margin))
        self.gap = max(0, int(gap))
        self.settings = settings or DEFAULT_SETTINGS
        self._cells = [["" for _ in range(self.columns)] for _ in range(self.rows)]

    def set_cell(self, row: int, col: int, content: str) -> GridContainer:
        if 0 <= row < self.rows and 0 <= col < self.columns:
            self._cells[row][col] = str(content)
        else:
            logger.debug("ignoring cell (%d, %d) outside %dx%d grid", row, col, self.rows, self.columns)
        return self

    def cell(self, row: int, col: int) -> str | None:
        if 0 <= row < self.rows and 0 <= col < self.columns:
            return self._cells[row][col]
        return None

    def _blocks(self) -> list[list[Block]]:
        return [[parse_block(content) for content in row] for row in self._cells]

    def _tracks(self, total: int, count: int, naturals: list[int], axis: str, clamps: list[str]) -> list[int]:
        if total <= 0:
            return [max(naturals, default=0)] * count
        available = total - 2 * (self.padding + self.margin) - self.gap * (count - 1)
        if available < 0:
            clamps.append(f"available {axis} {available} clamped to 0")
            available = 0
        return split_evenly(available, count)

    def _column_widths(self, blocks: list[list[Block]], clamps: list[str]) -> list[int]:
        naturals = [block_width(block) for row in blocks for block in row]
        return self._tracks(self.width, self.columns, naturals, "width", clamps)

    def _row_heights(self, blocks: list[list[Block]], clamps: list[str]) -> list[int]:
        naturals = [len(block) for row in blocks for block in row]
        return self._tracks(self.height, self.rows, naturals, "height", clamps)

    def column_widths(self) -> list[int]:
        return self._column_widths(self._blocks(), [])

    def row_heights(self) -> list[int]:
        return self._row_heights(self._blocks(), [])

    def layout(self) -> LayoutResult:
        if not self.rows or not self.columns:
            return LayoutResult()

        clamps: list[str] = []
        blocks = self._blocks()
        widths = self._column_widths(blocks, clamps)
        heights = self._row_heights(blocks, clamps)
        inner_width = sum(widths) + self.gap * (self.columns - 1)

        bands: list[Block] = []
        for row_index, row in enumerate(blocks):
            if row_index and self.gap:
                bands.append(blank_block(inner_width, self.gap))
            pieces: list[Block] = []
            for col_index, block in enumerate(row):
                if col_index and self.gap:
                    pieces.append(blank_block(self.gap, heights[row_index]))
                pieces.append(fit_block(block, width=widths[col_index], height=heights[row_index]))
            bands.append(fit_block(join_horizontal(pieces), width=inner_width))

        content = fit_block(join_vertical(bands), width=inner_width)
        boxed = pad_block(content, self.padding, self.padding, self.padding, self.padding)
        boxed = pad_block(boxed, self.margin, self.margin, self.margin, self.margin)

        inset = 2 * (self.padding + self.margin)
        width = self.width if self.width > 0 else inner_width + inset
        height = self.height if self.height > 0 else sum(heights) + self.gap * (self.rows - 1) + inset
        final = fit_block(boxed, width=width, height=height)

        offsets = []
        cursor = 0
        for col_width in widths:
            offsets.append(cursor)
            cursor += col_width + self.gap

        for note in clamps:
            logger.debug("grid layout clamp: %s", note)
        return LayoutResult(
            text=render_block(final),
            width=width,
            height=height,
            sizes=widths,
            offsets=offsets,
            cross_sizes=heights,
            clamps=clamps,
        )

    def render(self) -> str:
        return self.layout().text
