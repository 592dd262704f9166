"""Cell-exact text blocks backed by rich.

A block is a list of ``rich.text.Text`` lines. Escape sequences in incoming
strings are decoded into styles, so they never count towards a line's width;
widths are terminal cells, so wide characters take two.
"""

from __future__ import annotations

import io
from typing import Literal

from rich.ansi import AnsiDecoder
from rich.cells import cell_len, set_cell_size
from rich.color import ColorSystem
from rich.console import Console, RenderableType
from rich.segment import Segment
from rich.style import StyleType
from rich.text import Text

Block = list[Text]
HAlign = Literal["left", "center", "right"]
VAlign = Literal["top", "middle", "bottom"]

TAB_SIZE = 8


def _console(width: int = 80) -> Console:
    return Console(
        file=io.StringIO(),
        width=max(1, width),
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
        markup=False,
        emoji=False,
        legacy_windows=False,
    )


def parse_block(content: str) -> Block:
    if not content:
        return []
    decoder = AnsiDecoder()
    lines: Block = []
    for raw in content.split("\n"):
        line = decoder.decode_line(raw)
        if "\t" in line.plain:
            line.expand_tabs(TAB_SIZE)
        lines.append(line)
    return lines


def _render_segment(segment: Segment) -> str:
    if segment.control:
        return ""
    if segment.style is None:
        return segment.text
    return segment.style.render(segment.text, color_system=ColorSystem.TRUECOLOR)


def render_block(block: Block) -> str:
    if not block:
        return ""
    console = _console(block_width(block))
    return "\n".join(
        "".join(_render_segment(segment) for segment in line.render(console, end=""))
        for line in block
    )


def to_plain(content: str) -> str:
    return "\n".join(line.plain for line in parse_block(content))


def block_width(block: Block) -> int:
    return max((line.cell_len for line in block), default=0)


def measure(content: str) -> tuple[int, int]:
    block = parse_block(content)
    return block_width(block), len(block)


def blank_block(width: int, height: int) -> Block:
    return [Text(" " * max(0, width)) for _ in range(max(0, height))]


def fit_block(
    block: Block,
    width: int | None = None,
    height: int | None = None,
    align: HAlign = "left",
    valign: VAlign = "top",
) -> Block:
    """Crop or pad ``block`` to exactly ``width`` x ``height`` cells.

    ``None`` keeps the natural extent. Overflowing lines are cropped on the
    right and overflowing rows are dropped from the bottom.
    """
    target_width = block_width(block) if width is None else max(0, width)
    target_height = len(block) if height is None else max(0, height)

    lines: Block = []
    for line in block[:target_height]:
        copy = line.copy()
        copy.align(align, target_width)
        lines.append(copy)

    missing = target_height - len(lines)
    if missing <= 0:
        return lines
    if valign == "bottom":
        above = missing
    elif valign == "middle":
        above = missing // 2
    else:
        above = 0
    return blank_block(target_width, above) + lines + blank_block(target_width, missing - above)


def pad_block(block: Block, top: int = 0, right: int = 0, bottom: int = 0, left: int = 0) -> Block:
    width = block_width(block)
    lines: Block = []
    for line in fit_block(block, width=width):
        line.pad_left(max(0, left))
        line.pad_right(max(0, right))
        lines.append(line)
    full = width + max(0, left) + max(0, right)
    return blank_block(full, top) + lines + blank_block(full, bottom)


def join_horizontal(blocks: list[Block], valign: VAlign = "top") -> Block:
    height = max((len(block) for block in blocks), default=0)
    fitted = [fit_block(block, width=block_width(block), height=height, valign=valign) for block in blocks]
    return [Text().join(block[row] for block in fitted) for row in range(height)]


def join_vertical(blocks: list[Block], align: HAlign = "left") -> Block:
    width = max((block_width(block) for block in blocks), default=0)
    lines: Block = []
    for block in blocks:
        lines.extend(fit_block(block, width=width, align=align))
    return lines


def render_renderable(renderable: RenderableType, width: int, height: int | None = None) -> Block:
    """Render any rich renderable into a block ``width`` cells wide."""
    console = _console(width)
    options = console.options.update(width=max(1, width), height=height)
    block: Block = []
    for segments in console.render_lines(renderable, options, pad=True):
        line = Text(end="")
        for segment in segments:
            if not segment.control:
                line.append(segment.text, segment.style)
        block.append(line)
    return block


def apply_box(
    content: str,
    width: int | None = None,
    height: int | None = None,
    style: StyleType | None = None,
    align: HAlign = "left",
    valign: VAlign = "top",
) -> str:
    block = fit_block(parse_block(content), width=width, height=height, align=align, valign=valign)
    if style:
        for line in block:
            line.stylize_before(style)
    return render_block(block)


def truncate_text(text: str, max_len: int) -> str:
    if cell_len(text) <= max_len:
        return text
    if max_len <= 3:
        return set_cell_size(text, max(0, max_len))
    return set_cell_size(text, max_len - 3) + "..."
