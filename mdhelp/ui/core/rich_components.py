# mdhelp/ui/core/rich_components.py
# Centralized Rich component imports & configuration

from __future__ import annotations

from typing import Any

# Core Rich components
from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.segment import Segment
from rich.text import Text
from rich.theme import Theme
from rich.cells import cell_len

# Layout & display components
from rich.table import Table
from rich.rule import Rule


# * Themed Table builder - consistent styling for CLI listings
def themed_table(
    border_style: str = "bright_black",
    show_header: bool = True,
    **kwargs: Any,
) -> Table:
    return Table(
        border_style=border_style,
        show_header=show_header,
        header_style=kwargs.pop("header_style", "bold"),
        padding=kwargs.pop("padding", (0, 1, 0, 0)),
        box=kwargs.pop("box", None),
        **kwargs,
    )


__all__ = [
    # Core
    "Console",
    "ConsoleOptions",
    "RenderableType",
    "RenderResult",
    "Segment",
    "Text",
    "Theme",
    "cell_len",
    # Layout & display
    "Table",
    "Rule",
    # Themed builders
    "themed_table",
]
