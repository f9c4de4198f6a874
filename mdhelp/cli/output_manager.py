# mdhelp/cli/output_manager.py
# Diagnostics sink for one CLI invocation: stderr lines plus an optional plain-text log file
# * Help goes to stdout through `console`; everything here goes to `log_console` (stderr)

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.markup import escape

from ..core.output import OutputLevel


# * Level actually used: DEBUG is reserved for developer mode
def effective_level(requested: OutputLevel, dev_mode: bool = False) -> OutputLevel:
    ceiling = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
    return min(requested, ceiling)


class OutputManager:
    """Report rendering decisions for one ``mdhelp`` run.

    Lines look like ``0.02s RENDER Content-width mode: ...`` with optional
    indented detail lines. When ``log_file`` is given the same lines are
    appended to it without markup, framed by a session header & footer.
    """

    def __init__(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        *,
        dev_mode: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._level = effective_level(requested_level, dev_mode)
        self._started = time.monotonic()
        self.log_file = log_file
        self._handle: Optional[TextIO] = self._open(log_file)

    @property
    def level(self) -> OutputLevel:
        return self._level

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None:
        if self._level >= OutputLevel.VERBOSE:
            self._emit(msg, category, detail, "bold cyan")

    # developer output, e.g. the expanded markdown of a section
    def debug(self, msg: str, category: str = "DEBUG", detail: Optional[str] = None) -> None:
        if self._level >= OutputLevel.DEBUG:
            self._emit(msg, category, detail, "magenta")

    def start_session(self) -> None:
        stamp = datetime.now().isoformat(timespec="seconds")
        self._write(f"mdhelp session started {stamp} (level {self._level.name.lower()})")

    def end_session(self) -> None:
        self._write(f"mdhelp session ended after {self._elapsed()}")
        self.close()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _elapsed(self) -> str:
        return f"{time.monotonic() - self._started:.2f}s"

    def _emit(self, msg: str, category: str, detail: Optional[str], style: str) -> None:
        from ..mdhelp_io.console import log_console

        elapsed = self._elapsed()
        detail_lines = detail.splitlines() if detail else []
        # messages carry user text (help strings, paths); never read them as markup
        log_console.print(
            f"[dim]{elapsed}[/] [{style}]{escape(category)}[/] {escape(msg)}", highlight=False
        )
        for line in detail_lines:
            log_console.print(f"  [dim]{escape(line)}[/]", highlight=False)

        self._write(f"{elapsed} {category} {msg}", *(f"  {line}" for line in detail_lines))

    def _open(self, log_file: Path | None) -> Optional[TextIO]:
        if log_file is None:
            return None
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            return open(log_file, "a", encoding="utf-8")
        except OSError as e:
            from ..mdhelp_io.console import log_console

            log_console.print(f"[yellow]Warning:[/] cannot open log file {log_file}: {e}")
            self.log_file = None
            return None

    def _write(self, *lines: str) -> None:
        if self._handle is None:
            return
        for line in lines:
            self._handle.write(f"{line}\n")
        self._handle.flush()
