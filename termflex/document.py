"""Layout documents: nested layouts described as JSON objects.

A node is a string (literal content), a list of strings (one per line) or an
object with a ``type`` key. Child nodes are rendered first, into the slot the
parent resolves for them, and handed to the parent as opaque content.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from termflex.cards import SummaryCard
from termflex.cells import measure
from termflex.flex import FlexContainer
from termflex.grid import GridContainer
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
from termflex.panel import Panel
from termflex.recipes import DashboardLayout, ResponsiveLayout, SidebarLayout


class LayoutDocumentError(ValueError):
    pass


def load_document(path: str) -> Any:
    doc_path = Path(path)
    if not doc_path.exists():
        raise LayoutDocumentError(f"layout document not found: {doc_path}")
    try:
        return json.loads(doc_path.read_text())
    except json.JSONDecodeError as exc:
        raise LayoutDocumentError(f"invalid JSON layout document: {exc}") from exc


def _int(node: dict, key: str, default: int = 0) -> int:
    value = node.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise LayoutDocumentError(f"{key} must be an integer: {value!r}") from exc


def _enum(enum_cls: type[Enum], node: dict, key: str, default: Enum):
    value = node.get(key, default)
    try:
        return enum_cls(value)
    except ValueError as exc:
        choices = ", ".join(member.value for member in enum_cls)
        raise LayoutDocumentError(f"{key} must be one of {choices}: {value!r}") from exc


def _box_options(node: dict) -> dict[str, int]:
    return {
        "padding": _int(node, "padding"),
        "margin": _int(node, "margin"),
        "gap": _int(node, "gap"),
    }


def _text_result(text: str) -> LayoutResult:
    width, height = measure(text)
    return LayoutResult(text=text, width=width, height=height)


def _build_text(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    if "lines" in node:
        return build(list(node["lines"]), width, height, settings)
    return _text_result(str(node.get("text", "")))


def _flex_items(node: dict) -> list[dict]:
    items = node.get("items", [])
    if not isinstance(items, list):
        raise LayoutDocumentError("flex items must be a list")
    return [item if isinstance(item, dict) else {"content": item} for item in items]


def _flex_item(spec: dict, content: str) -> FlexItem:
    align_self = spec.get("align_self")
    return FlexItem(
        content,
        flex_grow=_int(spec, "grow"),
        flex_shrink=_int(spec, "shrink", 1),
        flex_basis=_int(spec, "basis", AUTO_BASIS),
        align_self=None if align_self is None else _enum(AlignItems, spec, "align_self", AlignItems.STRETCH),
        order=_int(spec, "order"),
    )


def _build_flex(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    direction = _enum(Direction, node, "direction", Direction.ROW)
    width = _int(node, "width", width)
    height = _int(node, "height", height)
    options = _box_options(node)

    def container() -> FlexContainer:
        flex = FlexContainer(direction, width, height, settings=settings, **options)
        flex.set_justify_content(_enum(JustifyContent, node, "justify", JustifyContent.START))
        flex.set_align_items(_enum(AlignItems, node, "align", AlignItems.STRETCH))
        flex.set_wrap(_enum(FlexWrap, node, "wrap", FlexWrap.NO_WRAP))
        if "min_item_width" in node:
            flex.set_min_item_width(_int(node, "min_item_width"))
        return flex

    specs = _flex_items(node)
    # main-axis sizes never depend on content, so a probe tells each child its slot
    probe = container()
    for spec in specs:
        probe.add_item(_flex_item(spec, ""))
    sizes = probe.resolve_sizes()
    render_order = sorted(range(len(specs)), key=lambda index: _int(specs[index], "order"))
    slots = {index: sizes[rank] for rank, index in enumerate(render_order)}

    configured_cross = height if direction is Direction.ROW else width
    inset = 2 * (options["padding"] + options["margin"])
    cross = max(0, configured_cross - inset) if configured_cross > 0 else 0

    flex = container()
    for index, spec in enumerate(specs):
        slot = slots[index]
        child_width, child_height = (slot, cross) if direction is Direction.ROW else (cross, slot)
        content = build(spec.get("content", ""), child_width, child_height, settings).text
        flex.add_item(_flex_item(spec, content))
    return flex.layout()


def _build_grid(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    rows = _int(node, "rows")
    columns = _int(node, "columns")
    width = _int(node, "width", width)
    height = _int(node, "height", height)
    options = _box_options(node)

    probe = GridContainer(rows, columns, width, height, settings=settings, **options)
    widths = probe.column_widths() if width > 0 else [0] * probe.columns
    heights = probe.row_heights() if height > 0 else [0] * probe.rows

    grid = GridContainer(rows, columns, width, height, settings=settings, **options)
    cells = node.get("cells", [])
    if not isinstance(cells, list):
        raise LayoutDocumentError("grid cells must be a list of rows")
    for row_index, row in enumerate(cells):
        if not isinstance(row, list):
            raise LayoutDocumentError("grid cells must be a list of rows")
        for col_index, cell in enumerate(row):
            if row_index >= grid.rows or col_index >= grid.columns:
                continue
            content = build(cell, widths[col_index], heights[row_index], settings).text
            grid.set_cell(row_index, col_index, content)
    return grid.layout()


def _build_panel(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    width = _int(node, "width", width)
    height = _int(node, "height", height)
    border = bool(node.get("border", True))
    padding = _int(node, "padding")
    inset = 2 * (padding + (1 if border else 0))
    title_lines = 1 if node.get("title") else 0
    inner_width = max(0, width - inset) if width > 0 else 0
    inner_height = max(0, height - inset - title_lines) if height > 0 else 0

    content = build(node.get("content", ""), inner_width, inner_height, settings).text
    panel = Panel(
        str(node.get("title", "")),
        content,
        border,
        width,
        height,
        padding=padding,
        margin=_int(node, "margin"),
        settings=settings,
    )
    panel.set_focused(bool(node.get("focused", False)))
    return panel.layout()


def _build_card(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    card = SummaryCard(
        str(node.get("value", "")),
        str(node.get("label", "")),
        title=str(node.get("title", "")),
        icon=str(node.get("icon", "")),
        color=node.get("color"),
        width=_int(node, "width", width),
        min_height=_int(node, "min_height"),
        compact=bool(node.get("compact", False)),
        border=bool(node.get("border", True)),
        settings=settings,
    )
    return _text_result(card.render())


def _build_dashboard(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    width = _int(node, "width", width)
    height = _int(node, "height", height)
    header = build(node.get("header", ""), width, 0, settings).text
    footer = build(node.get("footer", ""), width, 0, settings).text
    dashboard = DashboardLayout(
        width,
        height,
        header,
        "",
        footer,
        min_header_height=_int(node, "min_header_height"),
        max_header_height=_int(node, "max_header_height"),
        min_footer_height=_int(node, "min_footer_height"),
        max_footer_height=_int(node, "max_footer_height"),
        settings=settings,
    )
    _, main_height, _ = dashboard.section_heights()
    dashboard.set_main(build(node.get("main", ""), width, main_height, settings).text)
    return dashboard.layout()


def _build_sidebar(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    width = _int(node, "width", width)
    height = _int(node, "height", height)
    gap = node.get("gap")

    def sidebar(main: str, side: str) -> SidebarLayout:
        return SidebarLayout(
            width,
            height,
            main,
            side,
            _int(node, "sidebar_width"),
            main_weight=_int(node, "main_weight", 2),
            sidebar_weight=_int(node, "sidebar_weight", 1),
            sidebar_first=bool(node.get("sidebar_first", False)),
            gap=None if gap is None else _int(node, "gap"),
            settings=settings,
        )

    probe = sidebar("", "")
    sizes = probe.container().resolve_sizes()
    main_size, side_size = (sizes[1], sizes[0]) if probe.sidebar_first else (sizes[0], sizes[1])
    if probe.container().is_row:
        main_box, side_box = (main_size, height), (side_size, height)
    else:
        main_box, side_box = (width, main_size), (width, side_size)

    main = build(node.get("main", ""), *main_box, settings).text
    side = build(node.get("sidebar", ""), *side_box, settings).text
    return sidebar(main, side).layout()


def _build_responsive(node: dict, width: int, height: int, settings: LayoutSettings) -> LayoutResult:
    width = _int(node, "width", width)
    height = _int(node, "height", height)
    gap = node.get("gap")
    sections = node.get("sections", [])
    if not isinstance(sections, list):
        raise LayoutDocumentError("responsive sections must be a list")
    specs = [section if isinstance(section, dict) and "content" in section else {"content": section} for section in sections]

    def responsive() -> ResponsiveLayout:
        return ResponsiveLayout(width, height, gap=None if gap is None else _int(node, "gap"), settings=settings)

    probe = responsive()
    for spec in specs:
        probe.add_section("", _int(spec, "weight", 1))
    slot_widths = []
    for column, column_width in zip(probe.columns(), probe.column_widths()):
        slot_widths.extend([column_width] * len(column))

    layout = responsive()
    for spec, slot_width in zip(specs, slot_widths):
        layout.add_section(build(spec["content"], slot_width, 0, settings).text, _int(spec, "weight", 1))
    return layout.layout()


BUILDERS: dict[str, Callable[[dict, int, int, LayoutSettings], LayoutResult]] = {
    "text": _build_text,
    "flex": _build_flex,
    "grid": _build_grid,
    "panel": _build_panel,
    "card": _build_card,
    "dashboard": _build_dashboard,
    "sidebar": _build_sidebar,
    "responsive": _build_responsive,
}


def build(node: Any, width: int = 0, height: int = 0, settings: LayoutSettings | None = None) -> LayoutResult:
    settings = settings or DEFAULT_SETTINGS
    if isinstance(node, str):
        return _text_result(node)
    if isinstance(node, list):
        return _text_result("\n".join(str(line) for line in node))
    if not isinstance(node, dict):
        raise LayoutDocumentError(f"layout node must be an object, string or list: {node!r}")

    kind = node.get("type", "text")
    builder = BUILDERS.get(kind)
    if builder is None:
        raise LayoutDocumentError(f"unknown node type: {kind}")
    return builder(node, width, height, settings)


def render(node: Any, width: int = 0, height: int = 0, settings: LayoutSettings | None = None) -> str:
    return build(node, width, height, settings).text
