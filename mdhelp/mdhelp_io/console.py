# mdhelp/mdhelp_io/console.py
# Shared Rich consoles: `console` receives rendered help (stdout), `log_console` diagnostics (stderr)

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from rich.console import Console


# replaceable Console behind a stable module-level name
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self, **kwargs: Any) -> None:
        self._console = Console(**kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()
log_console = _ConsoleProxy(stderr=True)


# * Console HelpPrinter prints to when none is passed in
def get_console() -> Console:
    return console._get_console()


# * Send help output to `target` inside the block (recording consoles, fixed widths)
@contextmanager
def use_console(target: Console) -> Iterator[Console]:
    previous = console._get_console()
    console._set_console(target)
    try:
        yield target
    finally:
        console._set_console(previous)


__all__ = ["console", "log_console", "get_console", "use_console"]
