"""Color palettes and the rich styles derived from them."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Theme:
    name: str
    primary: str | None = None
    secondary: str | None = None
    text: str | None = None
    muted: str | None = None
    accent: str | None = None
    bold: bool = True

    def title_style(self, focused: bool = False) -> Style:
        if focused:
            return Style(color=self.primary, bold=self.bold or None)
        return Style(color=self.text, bgcolor=self.accent, bold=self.bold or None)

    def border_style(self, focused: bool = False) -> Style:
        color = self.primary if focused else self.muted
        return Style(color=color)

    def value_style(self, color: str | None = None) -> Style:
        return Style(color=color or self.primary, bold=self.bold or None)

    def label_style(self) -> Style:
        return Style(color=self.muted)


CLAUDE_THEME = Theme(
    name="claude",
    primary="#FF6B35",
    secondary="#6BB6FF",
    text="#FFFFFF",
    muted="#AEB6BF",
    accent="#58D68D",
)

PLAIN_THEME = Theme(name="plain", bold=False)

BUILTIN_THEMES: dict[str, Theme] = {
    CLAUDE_THEME.name: CLAUDE_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def theme_for(name: str) -> Theme:
    theme = BUILTIN_THEMES.get(name)
    if theme is None:
        raise ValueError(f"unknown theme: {name}")
    return theme
