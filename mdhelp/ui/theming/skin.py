# mdhelp/ui/theming/skin.py
# Skin: mutable role -> color table that turns into the Rich theme used to render help markdown

from __future__ import annotations

from typing import Mapping

from rich.color import Color, ColorParseError

from ..core.rich_components import Theme
from .theme_definitions import DEFAULT_PALETTES, ROLES

# luma thresholds used to pick a default skin for the terminal background
LIGHT_LUMA_THRESHOLD = 0.85
DARK_LUMA_THRESHOLD = 0.2


def _check_color(role: str, color: str) -> None:
    if role not in ROLES:
        raise ValueError(f"Unknown skin role {role!r}; expected one of {', '.join(ROLES)}")
    try:
        Color.parse(color)
    except ColorParseError as e:
        raise ValueError(f"Invalid color {color!r} for role {role!r}: {e}") from e


# * Color assignments for each semantic text role of rendered help
class Skin:
    def __init__(self, colors: Mapping[str, str]) -> None:
        missing = [role for role in ROLES if role not in colors]
        if missing:
            raise ValueError(f"Skin is missing roles: {', '.join(missing)}")
        for role, color in colors.items():
            _check_color(role, color)
        self._colors: dict[str, str] = {role: colors[role] for role in ROLES}

    @classmethod
    def default(cls) -> "Skin":
        return cls(DEFAULT_PALETTES["default"])

    @classmethod
    def default_dark(cls) -> "Skin":
        return cls(DEFAULT_PALETTES["dark"])

    @classmethod
    def default_light(cls) -> "Skin":
        return cls(DEFAULT_PALETTES["light"])

    def color(self, role: str) -> str:
        return self._colors[role]

    def colors(self) -> dict[str, str]:
        return dict(self._colors)

    def set_fg(self, role: str, color: str) -> None:
        _check_color(role, color)
        self._colors[role] = color

    def set_headers_fg(self, color: str) -> None:
        self.set_fg("headers", color)

    def copy(self) -> "Skin":
        return Skin(self._colors)

    # * Build the Rich theme mapping markdown element styles to this skin's colors
    def to_theme(self) -> Theme:
        c = self._colors
        return Theme(
            {
                # headings
                "markdown.h1": f"bold {c['headers']}",
                "markdown.h1.border": c["headers"],
                "markdown.h2": f"bold underline {c['headers']}",
                "markdown.h3": f"bold {c['headers']}",
                "markdown.h4": f"bold {c['headers']}",
                "markdown.h5": f"underline {c['headers']}",
                "markdown.h6": f"italic {c['headers']}",
                # inline emphasis
                "markdown.strong": f"bold {c['bold']}",
                "markdown.em": f"italic {c['italic']}",
                "markdown.emph": f"italic {c['italic']}",
                "markdown.s": f"strike {c['strikeout']}",
                # code
                "markdown.code": c["inline_code"],
                "markdown.code_block": c["code_block"],
                # body & structure
                "markdown.paragraph": c["paragraph"],
                "markdown.text": c["paragraph"],
                "markdown.block_quote": f"italic {c['paragraph']}",
                "markdown.item.bullet": f"bold {c['headers']}",
                "markdown.item.number": f"bold {c['headers']}",
                "markdown.hr": c["strikeout"],
                "markdown.table.border": c["strikeout"],
                "markdown.table.header": f"bold {c['headers']}",
                "markdown.link": c["inline_code"],
                "markdown.link_url": f"underline {c['inline_code']}",
            }
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Skin):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return f"Skin({self._colors!r})"


# * Pick a default skin for the detected terminal background luminance (None = unknown)
def default_for_terminal(luma: float | None) -> Skin:
    if luma is not None and luma > LIGHT_LUMA_THRESHOLD:
        return Skin.default_light()
    if luma is not None and luma < DARK_LUMA_THRESHOLD:
        return Skin.default_dark()
    return Skin.default()
