# mdhelp/ui/theming/style_presets.py
# Style catalog: closed set of named color presets, case-insensitive lookup & derived metadata

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ...core.exceptions import PresetNotFoundError
from .skin import Skin
from .theme_definitions import PALETTES

# display names for identifier prefixes & variant suffixes that don't title-case cleanly
_FAMILY_NAMES = {
    "catppuccin": "Catppuccin",
    "rose-pine": "Rose Pine",
    "kanagawa": "Kanagawa",
}
_VARIANT_NAMES = {"frappe": "Frappé"}


# * Built-in presets; each member's value is its canonical identifier
class StylePreset(Enum):
    CATPPUCCIN_LATTE = "catppuccin-latte"
    CATPPUCCIN_FRAPPE = "catppuccin-frappe"
    CATPPUCCIN_MACCHIATO = "catppuccin-macchiato"
    CATPPUCCIN_MOCHA = "catppuccin-mocha"
    ROSE_PINE_MAIN = "rose-pine-main"
    ROSE_PINE_MOON = "rose-pine-moon"
    ROSE_PINE_DAWN = "rose-pine-dawn"
    KANAGAWA_WAVE = "kanagawa-wave"
    KANAGAWA_DRAGON = "kanagawa-dragon"
    KANAGAWA_LOTUS = "kanagawa-lotus"

    # * Resolve an identifier, ignoring case; unknown names raise PresetNotFoundError
    @classmethod
    def from_name(cls, name: str) -> "StylePreset":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise PresetNotFoundError(name) from None

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def family(self) -> str:
        prefix, _, _ = self.value.rpartition("-")
        return _FAMILY_NAMES[prefix]

    @property
    def variant(self) -> str:
        _, _, suffix = self.value.rpartition("-")
        return _VARIANT_NAMES.get(suffix, suffix.title())

    @property
    def display_name(self) -> str:
        return f"{self.family} {self.variant}"

    @property
    def is_light(self) -> bool:
        return self in _LIGHT_PRESETS

    # role -> color table; the same read-only mapping on every call
    def create_mapping(self) -> Mapping[str, str]:
        return _MAPPINGS[self]

    # fresh mutable skin seeded w/ this preset's colors
    def create_skin(self) -> Skin:
        return Skin(self.create_mapping())


_LIGHT_PRESETS = frozenset(
    {
        StylePreset.CATPPUCCIN_LATTE,
        StylePreset.ROSE_PINE_DAWN,
        StylePreset.KANAGAWA_LOTUS,
    }
)

_MAPPINGS: dict[StylePreset, Mapping[str, str]] = {
    preset: MappingProxyType(dict(PALETTES[preset.value])) for preset in StylePreset
}


# * All preset identifiers in catalog order
def list_presets() -> list[str]:
    return [preset.value for preset in StylePreset]


# * Look up a preset by identifier (case-insensitive)
def lookup(name: str) -> StylePreset:
    return StylePreset.from_name(name)
