# mdhelp/core/output.py
# Diagnostics levels & the registry the rendering core logs through
# * No I/O here: the CLI registers mdhelp/cli/output_manager.py:OutputManager at startup

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * How much of the rendering process is reported on stderr
class OutputLevel(IntEnum):
    # help only
    NORMAL = 1
    # mode, sampled width, per-block & unified widths, settings sources
    VERBOSE = 2
    # also the expanded markdown of every section (developer mode)
    DEBUG = 3


@runtime_checkable
class OutputInterface(Protocol):
    @property
    def level(self) -> OutputLevel: ...

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None: ...

    def debug(self, msg: str, category: str = "DEBUG", detail: Optional[str] = None) -> None: ...

    def end_session(self) -> None: ...


# * Silent stand-in used by library callers & before the CLI starts
class NullOutputManager:
    @property
    def level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None:
        pass

    def debug(self, msg: str, category: str = "DEBUG", detail: Optional[str] = None) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# back to the silent manager (tests, end of an embedded render)
def reset_output_manager() -> None:
    set_output_manager(NullOutputManager())
