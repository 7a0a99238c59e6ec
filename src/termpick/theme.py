"""Colour themes for the pickers.

A theme is a plain value handed to the renderer; there is no process-wide
current theme.
"""

from dataclasses import dataclass

from rich.color import Color
from rich.style import Style

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """Semantic colours a picker draws with."""

    name: str
    header: RGB
    emphasis: RGB
    success: RGB
    muted: RGB
    warning: RGB
    error: RGB

    def color(self, role: str) -> RGB:
        try:
            return getattr(self, role)
        except AttributeError:
            raise ValueError(f"Unknown theme role: {role}") from None

    def style(self, role: str, bold: bool = False) -> Style:
        return Style(color=Color.from_rgb(*self.color(role)), bold=bold or None)


# Semantic roles map onto ANSI slots 6 (header), 4 (emphasis), 2 (success),
# 8 (muted), 3 (warning) and 1 (error) of each palette.
THEMES: dict[str, Theme] = {
    "dracula": Theme(
        name="dracula",
        header=(139, 233, 253),
        emphasis=(189, 147, 249),
        success=(80, 250, 123),
        muted=(98, 114, 164),
        warning=(241, 250, 140),
        error=(255, 85, 85),
    ),
    "nord": Theme(
        name="nord",
        header=(136, 192, 208),
        emphasis=(129, 161, 193),
        success=(163, 190, 140),
        muted=(76, 86, 106),
        warning=(235, 203, 139),
        error=(191, 97, 106),
    ),
    "gruvbox": Theme(
        name="gruvbox",
        header=(104, 157, 106),
        emphasis=(69, 133, 136),
        success=(152, 151, 26),
        muted=(146, 131, 116),
        warning=(215, 153, 33),
        error=(204, 36, 29),
    ),
    "monokai": Theme(
        name="monokai",
        header=(102, 217, 239),
        emphasis=(174, 129, 255),
        success=(166, 226, 46),
        muted=(117, 113, 94),
        warning=(230, 219, 116),
        error=(249, 38, 114),
    ),
}


def get_theme(name: str | None) -> Theme | None:
    """Look up a built-in theme by name. Empty or unknown names give None."""
    if not name:
        return None
    return THEMES.get(name.lower())


def theme_names() -> list[str]:
    return sorted(THEMES)
