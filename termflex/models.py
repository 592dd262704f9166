"""Shared value types for the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from termflex.theme import CLAUDE_THEME, Theme

AUTO_BASIS = -1


class Direction(str, Enum):
    ROW = "row"
    COLUMN = "column"


class JustifyContent(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class AlignItems(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class FlexWrap(str, Enum):
    NO_WRAP = "no-wrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


@dataclass
class FlexItem:
    content: str
    flex_grow: int = 0
    flex_shrink: int = 1
    flex_basis: int = AUTO_BASIS
    align_self: AlignItems | None = None
    order: int = 0

    def __post_init__(self) -> None:
        self.content = str(self.content)
        self.flex_grow = max(0, int(self.flex_grow))
        self.flex_shrink = max(0, int(self.flex_shrink))
        self.flex_basis = int(self.flex_basis)
        self.order = int(self.order)
        if self.align_self is not None:
            self.align_self = AlignItems(self.align_self)

    @property
    def is_auto(self) -> bool:
        return self.flex_basis < 0


@dataclass(frozen=True)
class LayoutSettings:
    """Engine-wide knobs, passed explicitly to every container."""

    theme: Theme = CLAUDE_THEME
    min_row_width: int = 10
    min_column_height: int = 3
    min_panel_width: int = 0
    small_breakpoint: int = 80
    medium_breakpoint: int = 120
    gap: int = 1


DEFAULT_SETTINGS = LayoutSettings()


@dataclass
class LayoutResult:
    text: str = ""
    width: int = 0
    height: int = 0
    sizes: list[int] = field(default_factory=list)
    offsets: list[int] = field(default_factory=list)
    cross_sizes: list[int] = field(default_factory=list)
    clamps: list[str] = field(default_factory=list)

    @property
    def clamped(self) -> bool:
        return bool(self.clamps)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "width": self.width,
            "height": self.height,
            "sizes": self.sizes,
            "offsets": self.offsets,
            "cross_sizes": self.cross_sizes,
            "clamps": self.clamps,
        }
