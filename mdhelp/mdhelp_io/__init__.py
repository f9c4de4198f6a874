# mdhelp/mdhelp_io/__init__.py
# Console, terminal & file helpers

from .console import console, log_console, get_console, use_console
from .terminal import DEFAULT_TERMINAL_WIDTH, terminal_width, detect_terminal_luma

__all__ = [
    "console",
    "log_console",
    "get_console",
    "use_console",
    "DEFAULT_TERMINAL_WIDTH",
    "terminal_width",
    "detect_terminal_luma",
]
