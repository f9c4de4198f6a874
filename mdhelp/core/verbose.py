# mdhelp/core/verbose.py
# Verbose logging utilities - delegates to unified OutputManager w/ structured logging for config, file I/O & rendering

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import OutputLevel, get_output_manager, set_output_manager


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager(requested_level, dev_mode=dev_mode, log_file=log_file)
    manager.start_session()
    set_output_manager(manager)


# * Check if verbose logging is enabled
def is_verbose_enabled() -> bool:
    return get_output_manager().level >= OutputLevel.VERBOSE


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Log a rendering decision (mode, widths)
def vlog_render(message: str, widths: list[int] | None = None) -> None:
    if widths:
        detail = "block widths: " + ", ".join(str(w) for w in widths)
        get_output_manager().verbose(message, "RENDER", detail)
    else:
        get_output_manager().verbose(message, "RENDER")


# * Developer-mode logging (expanded markdown, raw values)
def vlog_debug(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().debug(message, category, detail)


# * Cleanup verbose logging
def cleanup_verbose() -> None:
    get_output_manager().end_session()
