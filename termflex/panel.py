"""Titled, optionally bordered wrapper around one content block."""

from __future__ import annotations

import logging

from rich import box
from rich.panel import Panel as RichPanel
from rich.text import Text

from termflex.cells import (
    Block,
    block_width,
    fit_block,
    pad_block,
    parse_block,
    render_block,
    render_renderable,
    truncate_text,
)
from termflex.models import DEFAULT_SETTINGS, LayoutResult, LayoutSettings

logger = logging.getLogger(__name__)


def framed(block: Block, border_style, rounded: bool = True) -> Block:
    """Draw a border around ``block`` with rich's panel renderer."""
    width = block_width(block) + 2
    body = Text("\n", no_wrap=True, overflow="crop").join(block)
    renderable = RichPanel(
        body,
        box=box.ROUNDED if rounded else box.SQUARE,
        border_style=border_style,
        padding=0,
        expand=False,
        width=width,
        height=len(block) + 2,
    )
    return render_renderable(renderable, width)


class Panel:
    """Title line, then content, then padding, border and margin.

    ``width`` and ``height`` are the border-box size (padding and border
    included, margin excluded); 0 fits the content.
    """

    def __init__(
        self,
        title: str = "",
        content: str = "",
        border: bool = True,
        width: int = 0,
        height: int = 0,
        *,
        padding: int = 0,
        margin: int = 0,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.title = title
        self.content = content
        self.border = border
        self.width = int(width)
        self.height = int(height)
        self.padding = max(0, int(padding))
        self.margin = max(0, int(margin))
        self.settings = settings or DEFAULT_SETTINGS
        self.focused = False

    def set_title(self, title: str) -> Panel:
        self.title = title
        return self

    def set_content(self, content: str) -> Panel:
        self.content = content
        return self

    def set_focused(self, focused: bool) -> Panel:
        self.focused = focused
        return self

    def set_border(self, border: bool) -> Panel:
        self.border = border
        return self

    def _inset(self) -> int:
        return 2 * (self.padding + (1 if self.border else 0))

    def _inner(self, outer: int, axis: str, clamps: list[str]) -> int | None:
        if outer <= 0:
            return None
        inner = outer - self._inset()
        if inner < 0:
            clamps.append(f"inner {axis} {inner} clamped to 0")
            return 0
        return inner

    def _body(self, clamps: list[str]) -> Block:
        inner_width = self._inner(self.width, "width", clamps)
        lines: Block = []
        if self.title:
            title = self.title if inner_width is None else truncate_text(self.title, inner_width)
            lines.append(Text.styled(title, self.settings.theme.title_style(self.focused)))
        lines.extend(parse_block(self.content))
        inner_height = self._inner(self.height, "height", clamps)
        return fit_block(lines, width=inner_width, height=inner_height)

    def layout(self) -> LayoutResult:
        clamps: list[str] = []
        block = pad_block(self._body(clamps), self.padding, self.padding, self.padding, self.padding)
        if self.border:
            block = framed(block, self.settings.theme.border_style(self.focused))
        block = pad_block(block, self.margin, self.margin, self.margin, self.margin)

        natural_width = block_width(block)
        natural_height = len(block)
        width = self.width + 2 * self.margin if self.width > 0 else natural_width
        height = self.height + 2 * self.margin if self.height > 0 else natural_height
        final = fit_block(block, width=width, height=height)

        for note in clamps:
            logger.debug("panel layout clamp: %s", note)
        return LayoutResult(text=render_block(final), width=width, height=height, clamps=clamps)

    def render(self) -> str:
        return self.layout().text
