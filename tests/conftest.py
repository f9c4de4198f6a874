# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from mdhelp.core.types import (
    ArgAction,
    ArgumentDescription,
    CommandDescription,
    SubcommandDescription,
)

# environment variables that change rendering or settings
_ISOLATED_ENV = (
    "MDHELP_STYLE",
    "MDHELP_MAX_WIDTH",
    "MDHELP_FULL_WIDTH",
    "MDHELP_OPTIONS_TEMPLATE",
    "COLORFGBG",
    "COLUMNS",
)


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    (fake_home / ".mdhelp").mkdir()
    monkeypatch.setattr(Path, "home", lambda: fake_home)

    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)

    # keep a stray .env in the working directory from leaking into settings
    monkeypatch.setattr("mdhelp.config.settings.load_dotenv", lambda *a, **k: False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from mdhelp.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = fake_home / ".mdhelp" / "config.json"

    # ! reset output manager to NullOutputManager for test isolation
    from mdhelp.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def write_config(isolate_config):
    # Write a config.json into the isolated home & drop cached settings
    def _write(data):
        config_file = isolate_config / ".mdhelp" / "config.json"
        if isinstance(data, str):
            config_file.write_text(data, encoding="utf-8")
        else:
            config_file.write_text(json.dumps(data), encoding="utf-8")

        from mdhelp.config.settings import settings_manager

        settings_manager._settings = None
        return config_file

    return _write


@pytest.fixture
def sample_description():
    # Small but complete command: options of every kind, positionals & subcommands
    return CommandDescription(
        name="broot",
        version="1.2.3",
        author="dystroy",
        about="A better way to navigate directories",
        after_help="* `broot ~` opens your home directory",
        arguments=(
            ArgumentDescription(
                id="help",
                short="h",
                long="help",
                help="Print help",
                action=ArgAction.FLAG,
            ),
            ArgumentDescription(
                id="verbose",
                short="v",
                long="verbose",
                help="Increase verbosity",
                action=ArgAction.COUNT,
            ),
            ArgumentDescription(
                id="color",
                long="color",
                value_names=("WHEN",),
                help="Use colors",
                possible_values=("yes", "no", "auto"),
                default_values=("auto",),
                env="BROOT_COLOR",
            ),
            ArgumentDescription(
                id="conf",
                short="c",
                value_names=("PATHS",),
                help="Semicolon separated paths to specific config files",
            ),
            ArgumentDescription(
                id="secret",
                long="secret",
                help="Never shown",
                hidden=True,
                action=ArgAction.FLAG,
            ),
            ArgumentDescription(
                id="root",
                value_names=("FILE",),
                help="Root directory",
                positional=True,
            ),
        ),
        subcommands=(
            SubcommandDescription("install", "Install the shell function"),
            SubcommandDescription("completions"),
        ),
    )


@pytest.fixture
def isolate_output():
    from mdhelp.core.output import reset_output_manager

    reset_output_manager()
    yield
    reset_output_manager()
