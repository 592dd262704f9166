"""Flexbox-style layout engine for fixed-width terminal screens."""

from __future__ import annotations

from termflex.cards import SummaryCard
from termflex.cells import apply_box, measure, to_plain
from termflex.flex import FlexContainer
from termflex.grid import GridContainer
from termflex.layout import (
    responsive_margin,
    responsive_padding,
    responsive_width,
    select_layout_mode,
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
from termflex.panel import Panel
from termflex.recipes import DashboardLayout, ResponsiveLayout, SidebarLayout

__all__ = [
    "AUTO_BASIS",
    "DEFAULT_SETTINGS",
    "AlignItems",
    "DashboardLayout",
    "Direction",
    "FlexContainer",
    "FlexItem",
    "FlexWrap",
    "GridContainer",
    "JustifyContent",
    "LayoutResult",
    "LayoutSettings",
    "Panel",
    "ResponsiveLayout",
    "SidebarLayout",
    "SummaryCard",
    "apply_box",
    "measure",
    "responsive_margin",
    "responsive_padding",
    "responsive_width",
    "select_layout_mode",
    "to_plain",
]
