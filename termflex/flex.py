"""Flexbox-style container for pre-rendered terminal text blocks."""

from __future__ import annotations

import logging
from dataclasses import replace

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
from termflex.models import (
    AUTO_BASIS,
    DEFAULT_SETTINGS,
    AlignItems,
    Direction,
    FlexItem,
    FlexWrap,
    JustifyContent,
    LayoutResult,
    LayoutSettings,
)

logger = logging.getLogger(__name__)

CROSS_VALIGN = {
    AlignItems.START: "top",
    AlignItems.CENTER: "middle",
    AlignItems.END: "bottom",
}

CROSS_HALIGN = {
    AlignItems.START: "left",
    AlignItems.CENTER: "center",
    AlignItems.END: "right",
}


def resolve_bases(items: list[FlexItem], available: int) -> list[int]:
    """Starting main-axis size of each item.

    Auto items split whatever the explicit bases leave over; the remainder
    goes one cell at a time to the earliest auto items.
    """
    bases = [0 if item.is_auto else item.flex_basis for item in items]
    auto = [index for index, item in enumerate(items) if item.is_auto]
    if auto:
        pool = max(0, available - sum(bases))
        share, extra = divmod(pool, len(auto))
        for rank, index in enumerate(auto):
            bases[index] = share + (1 if rank < extra else 0)
    return bases


def distribute_space(items: list[FlexItem], bases: list[int], available: int) -> list[int]:
    """Apply flex-grow or flex-shrink to ``bases``.

    Each item gets ``delta * weight // total_weight``; truncation is not
    redistributed. Shrinking never takes an item below zero.
    """
    sizes = list(bases)
    remaining = available - sum(bases)
    if remaining > 0:
        total = sum(item.flex_grow for item in items)
        if total > 0:
            for index, item in enumerate(items):
                sizes[index] += remaining * item.flex_grow // total
    elif remaining < 0:
        total = sum(item.flex_shrink for item in items)
        if total > 0:
            deficit = -remaining
            for index, item in enumerate(items):
                sizes[index] = max(0, sizes[index] - deficit * item.flex_shrink // total)
    return sizes


def justify_spacing(justify: JustifyContent, leftover: int, count: int) -> tuple[list[int], int]:
    """Blank cells placed before each item (on top of the gap) and after the last."""
    before = [0] * count
    leftover = max(0, leftover)
    if count == 0:
        return before, leftover

    if justify is JustifyContent.END:
        before[0] = leftover
        return before, 0
    if justify is JustifyContent.CENTER:
        before[0] = leftover // 2
        return before, leftover - before[0]
    if justify is JustifyContent.SPACE_BETWEEN and count > 1:
        share, extra = divmod(leftover, count - 1)
        for index in range(1, count):
            before[index] = share + (1 if index - 1 < extra else 0)
        return before, 0
    if justify is JustifyContent.SPACE_AROUND:
        share, extra = divmod(leftover, count)
        half = share // 2
        for index in range(count):
            before[index] = half if index == 0 else share
        return before, share - half + extra
    if justify is JustifyContent.SPACE_EVENLY:
        share, extra = divmod(leftover, count + 1)
        slots = [share + (1 if index < extra else 0) for index in range(count + 1)]
        return slots[:count], slots[count]

    # start, and space-between with a single item
    return before, leftover


class FlexContainer:
    """Single-line flex container laying items out along one axis.

    ``width`` and ``height`` are the outer size in cells, margin included.
    A cross-axis size of 0 sizes the cross axis to the tallest (row) or
    widest (column) item.
    """

    def __init__(
        self,
        direction: Direction | str = Direction.ROW,
        width: int = 0,
        height: int = 0,
        *,
        padding: int = 0,
        margin: int = 0,
        gap: int = 0,
        settings: LayoutSettings | None = None,
    ) -> None:
        self._direction = Direction(direction)
        self.width = int(width)
        self.height = int(height)
        self.padding = max(0, int(padding))
        self.margin = max(0, int(margin))
        self.gap = max(0, int(gap))
        self.settings = settings or DEFAULT_SETTINGS
        self.justify_content = JustifyContent.START
        self.align_items = AlignItems.STRETCH
        self.wrap = FlexWrap.NO_WRAP
        self.min_item_width: int | None = None
        self._items: list[FlexItem] = []

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_row(self) -> bool:
        return self._direction is Direction.ROW

    @property
    def items(self) -> tuple[FlexItem, ...]:
        return tuple(self._items)

    def add_item(self, item: FlexItem) -> FlexContainer:
        self._items.append(replace(item))
        return self

    def add_child(
        self,
        content: str,
        grow: int = 0,
        shrink: int = 1,
        basis: int = AUTO_BASIS,
        align_self: AlignItems | str | None = None,
        order: int = 0,
    ) -> FlexContainer:
        return self.add_item(FlexItem(content, grow, shrink, basis, align_self, order))

    def set_justify_content(self, justify: JustifyContent | str) -> FlexContainer:
        self.justify_content = JustifyContent(justify)
        return self

    def set_align_items(self, align: AlignItems | str) -> FlexContainer:
        self.align_items = AlignItems(align)
        return self

    def set_wrap(self, wrap: FlexWrap | str) -> FlexContainer:
        self.wrap = FlexWrap(wrap)
        return self

    def set_gap(self, gap: int) -> FlexContainer:
        self.gap = max(0, int(gap))
        return self

    def set_padding(self, padding: int) -> FlexContainer:
        self.padding = max(0, int(padding))
        return self

    def set_margin(self, margin: int) -> FlexContainer:
        self.margin = max(0, int(margin))
        return self

    def set_min_item_width(self, width: int) -> FlexContainer:
        self.min_item_width = max(0, int(width))
        return self

    def _ordered(self) -> list[FlexItem]:
        return sorted(self._items, key=lambda item: item.order)

    def _outer_main(self, clamps: list[str]) -> int:
        if self.is_row:
            main, minimum, axis = self.width, self.settings.min_row_width, "width"
        else:
            main, minimum, axis = self.height, self.settings.min_column_height, "height"
        if main < minimum:
            clamps.append(f"{axis} {main} raised to minimum {minimum}")
            return minimum
        return main

    def _available_main(self, main: int, count: int, clamps: list[str]) -> int:
        available = main - 2 * (self.padding + self.margin) - self.gap * (count - 1)
        if available < 0:
            clamps.append(f"available main space {available} clamped to 0")
            return 0
        return available

    def _floor(self) -> int:
        if not self.is_row:
            return 0
        if self.min_item_width is not None:
            return self.min_item_width
        return self.settings.min_panel_width

    def _resolve(self, items: list[FlexItem], clamps: list[str]) -> tuple[int, int, list[int]]:
        main = self._outer_main(clamps)
        available = self._available_main(main, len(items), clamps)
        sizes = distribute_space(items, resolve_bases(items, available), available)
        floor = self._floor()
        if floor:
            sizes = [max(size, floor) for size in sizes]
        return main, available, sizes

    def resolve_sizes(self) -> list[int]:
        """Resolved main-axis size per item, in render order."""
        items = self._ordered()
        if not items:
            return []
        return self._resolve(items, [])[2]

    def _cross_inner(self, blocks: list[Block], clamps: list[str]) -> int:
        configured = self.height if self.is_row else self.width
        if configured <= 0:
            # auto cross size is never narrower than one cell
            if self.is_row:
                return max(1, max(len(block) for block in blocks))
            return max(1, max(block_width(block) for block in blocks))
        inner = configured - 2 * (self.padding + self.margin)
        if inner < 0:
            clamps.append(f"available cross space {inner} clamped to 0")
            return 0
        return inner

    def _item_box(self, item: FlexItem, block: Block, size: int, cross: int) -> Block:
        align = item.align_self or self.align_items
        if self.is_row:
            if align is AlignItems.STRETCH:
                return fit_block(block, width=size, height=cross)
            box = fit_block(block, width=size, height=min(len(block), cross))
            return fit_block(box, width=size, height=cross, valign=CROSS_VALIGN[align])
        if align is AlignItems.STRETCH:
            return fit_block(block, width=cross, height=size)
        box = fit_block(block, width=min(block_width(block), cross), height=size)
        return fit_block(box, width=cross, height=size, align=CROSS_HALIGN[align])

    def _spacer(self, length: int, cross: int) -> Block:
        if self.is_row:
            return blank_block(length, cross)
        return blank_block(cross, length)

    def layout(self) -> LayoutResult:
        items = self._ordered()
        if not items:
            return LayoutResult()

        clamps: list[str] = []
        if self.wrap is not FlexWrap.NO_WRAP:
            logger.warning("flex-wrap %s is not implemented, rendering as no-wrap", self.wrap.value)
            clamps.append(f"flex-wrap {self.wrap.value} rendered as no-wrap")

        main, available, sizes = self._resolve(items, clamps)
        blocks = [parse_block(item.content) for item in items]
        cross = self._cross_inner(blocks, clamps)
        inset = 2 * (self.padding + self.margin)

        before, trailing = justify_spacing(self.justify_content, available - sum(sizes), len(items))
        pieces: list[Block] = []
        offsets: list[int] = []
        cursor = 0
        for index, (item, block) in enumerate(zip(items, blocks)):
            lead = before[index] + (self.gap if index else 0)
            if lead:
                pieces.append(self._spacer(lead, cross))
            cursor += lead
            offsets.append(cursor)
            pieces.append(self._item_box(item, block, sizes[index], cross))
            cursor += sizes[index]
        if trailing:
            pieces.append(self._spacer(trailing, cross))
            cursor += trailing

        inner_main = max(0, main - inset)
        if cursor > inner_main:
            clamps.append(f"content overflow of {cursor - inner_main} cells cropped")

        if self.is_row:
            content = fit_block(join_horizontal(pieces), width=inner_main, height=cross)
        else:
            content = fit_block(join_vertical(pieces), width=cross, height=inner_main)
        boxed = pad_block(content, self.padding, self.padding, self.padding, self.padding)
        boxed = pad_block(boxed, self.margin, self.margin, self.margin, self.margin)

        outer_cross = cross + inset
        width, height = (main, outer_cross) if self.is_row else (outer_cross, main)
        final = fit_block(boxed, width=width, height=height)

        for note in clamps:
            logger.debug("flex layout clamp: %s", note)
        return LayoutResult(
            text=render_block(final),
            width=width,
            height=height,
            sizes=sizes,
            offsets=offsets,
            cross_sizes=[cross] * len(items),
            clamps=clamps,
        )

    def render(self) -> str:
        return self.layout().text
