# mdhelp/mdhelp_io/terminal.py
# Terminal queries: current width (sampled per call) & background luminance detection

from __future__ import annotations

import os
from typing import Any, Mapping

from ..core.verbose import vlog

# width used when the terminal cannot be queried (pipes, CI, dumb terminals)
DEFAULT_TERMINAL_WIDTH = 80

# xterm default RGB values for the 16 base ANSI colors
_ANSI_RGB: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)


# * Sample the terminal width once; never raises
def terminal_width(console: Any = None) -> int:
    if console is None:
        from .console import console as shared_console

        console = shared_console

    try:
        width = int(console.size.width)
    except (OSError, ValueError, TypeError) as e:
        vlog("TERM", f"Terminal size query failed, using {DEFAULT_TERMINAL_WIDTH}", str(e))
        return DEFAULT_TERMINAL_WIDTH

    if width <= 0:
        return DEFAULT_TERMINAL_WIDTH
    return width


# relative luminance of an sRGB triple, 0.0 (black) .. 1.0 (white)
def _luma(rgb: tuple[int, int, int]) -> float:
    r, g, b = rgb
    return (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255


# * Estimate terminal background luminance from the COLORFGBG convention ("fg;bg" or "fg;x;bg")
def detect_terminal_luma(environ: Mapping[str, str] | None = None) -> float | None:
    env = os.environ if environ is None else environ
    raw = env.get("COLORFGBG")
    if not raw:
        return None

    background = raw.split(";")[-1].strip()
    try:
        index = int(background)
    except ValueError:
        return None

    if not 0 <= index < len(_ANSI_RGB):
        return None
    return _luma(_ANSI_RGB[index])
