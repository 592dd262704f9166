"""Summary cards: a big value with a label, used in dashboard headers."""

from __future__ import annotations

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from termflex.cells import Block, fit_block, pad_block, render_block
from termflex.models import DEFAULT_SETTINGS, LayoutSettings
from termflex.panel import framed

MIN_CONTENT_WIDTH = 10


class SummaryCard:
    def __init__(
        self,
        value: str,
        label: str,
        *,
        title: str = "",
        icon: str = "",
        color: str | None = None,
        width: int = 0,
        min_height: int = 0,
        compact: bool = False,
        border: bool = True,
        settings: LayoutSettings | None = None,
    ) -> None:
        self.value = str(value)
        self.label = label
        self.title = title
        self.icon = icon
        self.color = color
        self.width = max(0, int(width))
        self.min_height = max(0, int(min_height))
        self.compact = compact
        self.border = border
        self.settings = settings or DEFAULT_SETTINGS

    def set_value(self, value: str) -> SummaryCard:
        self.value = str(value)
        return self

    def set_color(self, color: str | None) -> SummaryCard:
        self.color = color
        return self

    def content_width(self) -> int:
        if self.width <= 0:
            return max(cell_len(self.value), cell_len(self.label))
        # border and one cell of padding on each side
        width = self.width - 4 if self.border else self.width - 2
        return width if width >= 1 else MIN_CONTENT_WIDTH

    def _header(self) -> Block:
        if not (self.icon or self.title):
            return []
        line = Text()
        if self.icon:
            line.append(f"{self.icon} ")
        if self.title:
            line.append(self.title, self.settings.theme.title_style())
        return [line]

    def _value_lines(self) -> Block:
        theme = self.settings.theme
        value_style = theme.value_style(self.color)
        if self.compact:
            return [Text.assemble((self.value, value_style), " ", (self.label, theme.label_style()))]

        width = self.content_width()
        value = Text.styled(self.value, value_style)
        label = Text.styled(self.label, theme.label_style())
        value.align("center", width)
        label.align("center", width)
        return [value, label]

    def render(self) -> str:
        block = pad_block(self._header() + self._value_lines(), left=1, right=1)
        if self.border:
            block = framed(block, Style(color=self.color or self.settings.theme.primary))
        height = max(len(block), self.min_height)
        width = self.width if self.width > 0 else None
        return render_block(fit_block(block, width=width, height=height))
