# mdhelp/ui/theming/__init__.py
# Style catalog: presets, palettes & skins

from .skin import (
    DARK_LUMA_THRESHOLD,
    LIGHT_LUMA_THRESHOLD,
    Skin,
    default_for_terminal,
)
from .style_presets import StylePreset, list_presets, lookup
from .theme_definitions import DEFAULT_PALETTES, PALETTES, ROLES

__all__ = [
    "DARK_LUMA_THRESHOLD",
    "LIGHT_LUMA_THRESHOLD",
    "Skin",
    "default_for_terminal",
    "StylePreset",
    "list_presets",
    "lookup",
    "DEFAULT_PALETTES",
    "PALETTES",
    "ROLES",
]
