# mdhelp/cli/commands/presets.py
# List built-in style presets w/ their family, variant & background

from __future__ import annotations

import typer

from ...mdhelp_io.console import console
from ...ui.core.rich_components import Text, themed_table
from ...ui.theming.style_presets import StylePreset
from ..app import app
from ..helpers import help_option


# * Swatch of a preset's role colors, each drawn as a colored block
def _swatch(preset: StylePreset) -> Text:
    swatch = Text()
    for color in preset.create_mapping().values():
        swatch.append("■ ", style=color)
    return swatch


@app.command()
def presets(
    help: bool = help_option(),
    plain: bool = typer.Option(False, "--plain", help="Print identifiers only, one per line"),
) -> None:
    """List the built-in style presets usable with --style and the style setting."""
    if plain:
        for preset in StylePreset:
            console.print(preset.identifier, highlight=False)
        return

    table = themed_table()
    table.add_column("identifier", style="bold")
    table.add_column("family")
    table.add_column("variant")
    table.add_column("background")
    table.add_column("colors")
    for preset in StylePreset:
        table.add_row(
            preset.identifier,
            preset.family,
            preset.variant,
            "light" if preset.is_light else "dark",
            _swatch(preset),
        )
    console.print(table)
