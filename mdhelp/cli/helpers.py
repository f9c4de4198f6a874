# mdhelp/cli/helpers.py
# Shared CLI helpers: markdown --help option for every command & error exits

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer
from rich.markup import escape

from ..core.exceptions import format_error_message
from ..mdhelp_io.console import log_console

PROG_NAME = "mdhelp"


# "root config get" (click's test runner) or "mdhelp config get" -> "mdhelp config get"
def display_path(ctx: typer.Context) -> str:
    parts = ctx.command_path.split()
    return " ".join([PROG_NAME, *parts[1:]])


# * Render help for the command of `ctx` through the markdown help printer
def show_command_help(ctx: typer.Context) -> None:
    from .. import __version__
    from ..ui.help.command_introspection import describe_click_command
    from ..ui.help.help_renderer import render_help

    is_root = ctx.parent is None
    description = describe_click_command(
        ctx.command,
        bin_name=display_path(ctx),
        version=__version__ if is_root else None,
    )
    render_help(description)


def _help_callback(ctx: typer.Context, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        show_command_help(ctx)
        raise typer.Exit()


# * Eager --help/-h option; replaces click's help so every screen goes through the renderer
def help_option() -> Any:
    return typer.Option(
        False,
        "--help",
        "-h",
        is_eager=True,
        callback=_help_callback,
        help="Show this message & exit.",
    )


# * Print a formatted error to stderr & exit w/ `code`
def fail(error_type: str, message: str, code: int = 1, hint: Optional[str] = None) -> NoReturn:
    log_console.print(format_error_message(error_type, escape(message)), highlight=False)
    if hint:
        log_console.print(f"[dim]{escape(hint)}[/]", highlight=False)
    raise typer.Exit(code)
