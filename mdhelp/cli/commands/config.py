# mdhelp/cli/commands/config.py
# Settings mgmt subcommands for mdhelp (show/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer

from ...config.settings import HelpSettings, settings_manager
from ...core.exceptions import SettingsValidationError
from ...mdhelp_io.console import console
from ..app import app
from ..helpers import help_option

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(help="Show & change the persisted help rendering defaults.")
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(HelpSettings)}


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print("[bold]Current Configuration[/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]", highlight=False)
    console.print()

    width = max(len(key) for key in data)
    for key, value in data.items():
        console.print(f"  [cyan]{key:<{width}}[/]  {json.dumps(value)}", highlight=False)

    console.print()
    console.print("[dim]Use mdhelp config --help to see available commands[/]")


# * default callback: show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
def config_callback(
    ctx: typer.Context,
    help: bool = help_option(),
) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(
    key: str = typer.Argument(..., help="Setting name"),
    help: bool = help_option(),
) -> None:
    """Print one setting as JSON."""
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}", param_hint="KEY")
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    console.print(json.dumps(value), highlight=False, markup=False)


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(
    key: str = typer.Argument(..., help="Setting name"),
    value: str = typer.Argument(..., help="New value, parsed as JSON when possible"),
    help: bool = help_option(),
) -> None:
    """Change one setting & save it."""
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}", param_hint="KEY")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except SettingsValidationError as e:
        raise typer.BadParameter(str(e), param_hint="VALUE") from e
    console.print(f"[green]✓[/] Set {key} = {json.dumps(coerced)}", highlight=False)


# * Reset all settings to defaults
@config_app.command()
def reset(help: bool = help_option()) -> None:
    """Restore the default settings."""
    settings_manager.reset()
    console.print("[green]✓[/] Reset settings to defaults")


# * Show the configuration file path
@config_app.command()
def path(help: bool = help_option()) -> None:
    """Print the location of the configuration file."""
    console.print(str(settings_manager.config_path), highlight=False, soft_wrap=True)
