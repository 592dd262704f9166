"""Responsive layout mode selection by terminal width."""

from __future__ import annotations

from termflex.models import DEFAULT_SETTINGS, LayoutSettings

SMALL = "small"
MEDIUM = "medium"
LARGE = "large"

# horizontal chrome reserved around the main content per mode
MODE_INSET = {SMALL: 4, MEDIUM: 8, LARGE: 12}
MODE_PADDING = {SMALL: (1, 0), MEDIUM: (2, 1), LARGE: (3, 1)}
MODE_MARGIN = {SMALL: (0, 0), MEDIUM: (1, 0), LARGE: (2, 1)}


def select_layout_mode(width: int, settings: LayoutSettings | None = None) -> str:
    settings = settings or DEFAULT_SETTINGS
    if width < settings.small_breakpoint:
        return SMALL
    if width <= settings.medium_breakpoint:
        return MEDIUM
    return LARGE


def responsive_width(width: int, settings: LayoutSettings | None = None) -> tuple[int, str]:
    mode = select_layout_mode(width, settings)
    return max(0, width - MODE_INSET[mode]), mode


def responsive_padding(width: int, settings: LayoutSettings | None = None) -> tuple[int, int]:
    return MODE_PADDING[select_layout_mode(width, settings)]


def responsive_margin(width: int, settings: LayoutSettings | None = None) -> tuple[int, int]:
    return MODE_MARGIN[select_layout_mode(width, settings)]
