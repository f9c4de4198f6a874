# mdhelp/ui/theming/theme_definitions.py
# Color palette definitions for the built-in help style presets

from __future__ import annotations


# semantic text roles a skin assigns colors to
ROLES = (
    "headers",
    "bold",
    "italic",
    "code_block",
    "inline_code",
    "strikeout",
    "paragraph",
)


# role -> color palettes keyed by canonical preset identifier
PALETTES = {
    "catppuccin-latte": {
        "headers": "#8839ef",  # mauve
        "bold": "#d20f39",  # red
        "italic": "#ea76cb",  # pink
        "code_block": "#40a02b",  # green
        "inline_code": "#179299",  # teal
        "strikeout": "#6c6f85",  # subtext0
        "paragraph": "#4c4f69",  # text
    },
    "catppuccin-frappe": {
        "headers": "#ca9ee6",
        "bold": "#e78284",
        "italic": "#f4b8e4",
        "code_block": "#a6d189",
        "inline_code": "#81c8be",
        "strikeout": "#a5adce",
        "paragraph": "#c6d0f5",
    },
    "catppuccin-macchiato": {
        "headers": "#c6a0f6",
        "bold": "#ed8796",
        "italic": "#f5bde6",
        "code_block": "#a6da95",
        "inline_code": "#8bd5ca",
        "strikeout": "#a5adcb",
        "paragraph": "#cad3f5",
    },
    "catppuccin-mocha": {
        "headers": "#cba6f7",
        "bold": "#f38ba8",
        "italic": "#f5c2e7",
        "code_block": "#a6e3a1",
        "inline_code": "#94e2d5",
        "strikeout": "#a6adc8",
        "paragraph": "#cdd6f4",
    },
    "rose-pine-main": {
        "headers": "#c4a7e7",  # iris
        "bold": "#eb6f92",  # love
        "italic": "#f6c177",  # gold
        "code_block": "#31748f",  # pine
        "inline_code": "#9ccfd8",  # foam
        "strikeout": "#6e6a86",  # muted
        "paragraph": "#e0def4",  # text
    },
    "rose-pine-moon": {
        "headers": "#c4a7e7",
        "bold": "#eb6f92",
        "italic": "#f6c177",
        "code_block": "#3e8fb0",
        "inline_code": "#9ccfd8",
        "strikeout": "#6e6a86",
        "paragraph": "#e0def4",
    },
    "rose-pine-dawn": {
        "headers": "#907aa9",
        "bold": "#b4637a",
        "italic": "#ea9d34",
        "code_block": "#286983",
        "inline_code": "#56949f",
        "strikeout": "#9893a5",
        "paragraph": "#575279",
    },
    "kanagawa-wave": {
        "headers": "#957fb8",  # oniViolet
        "bold": "#c0a36e",  # boatYellow2
        "italic": "#ffa066",  # surimiOrange
        "code_block": "#76946a",  # autumnGreen
        "inline_code": "#7aa89f",  # waveAqua2
        "strikeout": "#54546d",  # sumiInk6
        "paragraph": "#dcd7ba",  # fujiWhite
    },
    "kanagawa-dragon": {
        "headers": "#8ba4b0",
        "bold": "#c4746e",
        "italic": "#c4b28a",
        "code_block": "#87a987",
        "inline_code": "#8ea4a2",
        "strikeout": "#625e5a",
        "paragraph": "#c5c9c5",
    },
    "kanagawa-lotus": {
        "headers": "#6f5c7c",
        "bold": "#c84053",
        "italic": "#cc6d00",
        "code_block": "#6f894e",
        "inline_code": "#597b75",
        "strikeout": "#716e61",
        "paragraph": "#545464",
    },
}


# neutral skins used when no preset is chosen, picked by terminal background
DEFAULT_PALETTES = {
    "default": {
        "headers": "yellow",
        "bold": "bright_yellow",
        "italic": "magenta",
        "code_block": "cyan",
        "inline_code": "bright_cyan",
        "strikeout": "bright_black",
        "paragraph": "default",
    },
    "dark": {
        "headers": "#ffd75f",
        "bold": "#ffffaf",
        "italic": "#d787d7",
        "code_block": "#87d7d7",
        "inline_code": "#afd7ff",
        "strikeout": "#808080",
        "paragraph": "#e4e4e4",
    },
    "light": {
        "headers": "#875f00",
        "bold": "#5f0000",
        "italic": "#87005f",
        "code_block": "#005f5f",
        "inline_code": "#005f87",
        "strikeout": "#808080",
        "paragraph": "#262626",
    },
}
