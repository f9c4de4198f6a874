# mdhelp/cli/commands/preview.py
# Render the help of any Typer app, click command or argparse parser given as module:attribute

from __future__ import annotations

import importlib
from dataclasses import replace
from typing import Any, Optional

import typer

from ...config.settings import AUTO_STYLE, HelpSettings, settings_manager
from ...core.exceptions import CommandImportError, MdHelpError
from ...core.verbose import vlog
from ...ui.help.command_introspection import describe_command
from ...ui.help.help_renderer import render_help
from ...ui.help.help_templates import OPTION_TEMPLATES
from ...ui.theming.style_presets import list_presets, lookup
from ..app import app
from ..helpers import PROG_NAME, fail, help_option

DEFAULT_TARGET = "mdhelp.cli.app:app"


# * Import `module:attr` (attr may be dotted) & return the object
def load_target(target: str) -> Any:
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise CommandImportError(
            f"Expected module:attribute, got '{target}'", target
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise CommandImportError(f"Cannot import module '{module_name}': {e}", target) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise CommandImportError(
                f"Module '{module_name}' has no attribute '{attr_path}'", target
            ) from None
    vlog("PREVIEW", f"Loaded {target}", type(obj).__name__)
    return obj


# * Persisted/environment settings w/ command-line overrides applied
def _preview_settings(
    style: Optional[str],
    max_width: Optional[int],
    full_width: Optional[bool],
    options_template: Optional[str],
) -> HelpSettings:
    settings = settings_manager.effective()
    overrides: dict[str, Any] = {}

    if style is not None:
        if style.lower() != AUTO_STYLE:
            lookup(style)
        overrides["style"] = style
    if max_width is not None:
        overrides["max_width"] = max_width
    if full_width is not None:
        overrides["full_width"] = full_width
    if options_template is not None:
        if options_template not in OPTION_TEMPLATES:
            raise typer.BadParameter(
                f"Unknown options template '{options_template}'. "
                f"Valid templates: {', '.join(OPTION_TEMPLATES)}",
                param_hint="--options-template",
            )
        overrides["options_template"] = options_template

    return replace(settings, **overrides) if overrides else settings


@app.command()
def preview(
    target: str = typer.Argument(
        DEFAULT_TARGET,
        metavar="TARGET",
        help="Command to render as module:attribute (Typer app, click command or argparse parser)",
    ),
    help: bool = help_option(),
    style: Optional[str] = typer.Option(
        None, "--style", "-s", help="Style preset, or auto to follow the terminal background"
    ),
    max_width: Optional[int] = typer.Option(
        None, "--max-width", "-w", min=1, help="Never render wider than this many columns"
    ),
    full_width: Optional[bool] = typer.Option(
        None,
        "--full-width/--content-width",
        help="Print each section at the terminal width instead of the widest section's width",
        show_default=False,
    ),
    options_template: Optional[str] = typer.Option(
        None,
        "--options-template",
        "-t",
        help=f"Layout of the options section: {', '.join(OPTION_TEMPLATES)}",
    ),
    name: Optional[str] = typer.Option(
        None, "--name", help="Program name shown in the title & usage line"
    ),
) -> None:
    """Render the help of a command-line program through the markdown help printer."""
    try:
        settings = _preview_settings(style, max_width, full_width, options_template)
    except LookupError:
        fail(
            "Unknown style",
            str(style),
            hint=f"Available styles: {', '.join([AUTO_STYLE, *list_presets()])}",
        )
    except (MdHelpError, ValueError) as e:
        fail("Invalid settings", str(e))

    try:
        obj = load_target(target)
        bin_name = name or (PROG_NAME if target == DEFAULT_TARGET else None)
        description = describe_command(obj, bin_name=bin_name)
    except CommandImportError as e:
        fail("Cannot load command", str(e))
    except TypeError as e:
        fail("Not a command", f"{target}: {e}")

    render_help(description, settings)
