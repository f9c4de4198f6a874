# mdhelp/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies w/ the app object.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup
load_dotenv()

from .helpers import help_option, show_command_help


app = typer.Typer(
    name="mdhelp",
    help="Render command-line help as styled, width-adaptive markdown.",
    epilog=(
        "* `mdhelp preview --options-template list` shows this help with options as a bullet list\n"
        "* `mdhelp preview mypkg.cli:app --style rose-pine-moon` previews another program"
    ),
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
)


# * Initialize logging & show help when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    help: bool = help_option(),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log rendering decisions to stderr"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Also log developer details (implies --verbose)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    from ..core.verbose import cleanup_verbose, init_verbose

    # log_file & debug imply verbose mode
    verbose_enabled = verbose or debug or log_file is not None
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=debug)
    ctx.call_on_close(cleanup_verbose)

    if ctx.invoked_subcommand is None:
        show_command_help(ctx)
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import presets as _presets  # noqa: F401,E402
from .commands import preview as _preview  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
