# tests/integration/test_cli_commands.py
# Integration tests for CLI command success paths, error exits & flag combinations

import json

import pytest
from typer.testing import CliRunner

from mdhelp.ui.theming.style_presets import list_presets

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


@pytest.fixture
def runner():
    return CliRunner()


# * Write an argparse program into an importable module
@pytest.fixture
def argparse_module(tmp_path, monkeypatch):
    module = tmp_path / "toy_cli.py"
    module.write_text(
        "import argparse\n"
        "parser = argparse.ArgumentParser(prog='toy', description='Toy program')\n"
        "parser.add_argument('--count', '-n', type=int, default=3, help='How many')\n"
        "parser.add_argument('path', help='Where to look')\n"
        "not_a_command = 42\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return "toy_cli"


class TestPresets:

    # * Verify --plain prints every identifier, one per line
    def test_plain_lists_identifiers(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["presets", "--plain"], env=ENV)

        assert result.exit_code == 0
        assert result.stdout.split() == list(list_presets())

    # * Verify the table view
    def test_table(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["presets"], env=ENV)

        assert result.exit_code == 0
        assert "identifier" in result.stdout
        assert "rose-pine-moon" in result.stdout


class TestPreview:

    # * Verify previewing the default target renders mdhelp's own help
    def test_default_target(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["preview", "--options-template", "list"], env=ENV)

        assert result.exit_code == 0
        assert "mdhelp" in result.stdout
        assert "Usage:" in result.stdout

    # * Verify an argparse parser can be previewed under another name
    def test_argparse_target(self, isolate_config, runner, argparse_module):
        from mdhelp.cli.app import app

        result = runner.invoke(
            app,
            ["preview", f"{argparse_module}:parser", "--name", "toybox", "-w", "70"],
            env=ENV,
        )

        assert result.exit_code == 0
        assert "toybox" in result.stdout
        assert "Toy program" in result.stdout
        assert "--count" in result.stdout

    # * Verify an unknown style exits w/ an error & the list of styles
    def test_unknown_style(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["preview", "--style", "nope"], env=ENV)

        assert result.exit_code == 1
        assert "Unknown style" in result.output
        assert "Available styles" in result.output

    # * Verify unknown options templates are rejected as bad parameters
    def test_unknown_options_template(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["preview", "-t", "fancy"], env=ENV)

        assert result.exit_code == 2

    # * Verify import failures & non-command objects exit w/ an error
    @pytest.mark.parametrize(
        "target, message",
        [
            ("no_such_module_xyz:app", "Cannot load command"),
            ("missing-colon", "Cannot load command"),
            ("toy_cli:missing", "Cannot load command"),
            ("toy_cli:not_a_command", "Not a command"),
        ],
    )
    def test_bad_targets(self, isolate_config, runner, argparse_module, target, message):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["preview", target], env=ENV)

        assert result.exit_code == 1
        assert message in result.output


class TestConfig:

    # * Verify set then get round trip through the config file
    def test_set_and_get(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["config", "set", "options_template", "list"], env=ENV)
        assert result.exit_code == 0
        assert "Set options_template" in result.stdout

        result = runner.invoke(app, ["config", "get", "options_template"], env=ENV)
        assert result.exit_code == 0
        assert result.stdout.strip() == '"list"'

        stored = json.loads((isolate_config / ".mdhelp" / "config.json").read_text())
        assert stored["options_template"] == "list"

    # * Verify numeric values are JSON-coerced
    def test_set_max_width(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["config", "set", "max_width", "90"], env=ENV)
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "get", "max_width"], env=ENV)
        assert result.stdout.strip() == "90"

    # * Verify invalid values & unknown keys are rejected
    @pytest.mark.parametrize(
        "args",
        [
            ["config", "set", "max_width", "0"],
            ["config", "set", "style", "neon"],
            ["config", "set", "colour", "1"],
            ["config", "get", "colour"],
        ],
    )
    def test_rejected(self, isolate_config, runner, args):
        from mdhelp.cli.app import app

        result = runner.invoke(app, args, env=ENV)

        assert result.exit_code != 0
        assert not (isolate_config / ".mdhelp" / "config.json").exists()

    # * Verify the bare config command lists current settings
    def test_show_current(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["config"], env=ENV)

        assert result.exit_code == 0
        assert "Current Configuration" in result.stdout
        assert "options_template" in result.stdout

    # * Verify reset restores defaults
    def test_reset(self, isolate_config, runner, write_config):
        from mdhelp.cli.app import app
        from mdhelp.config.settings import settings_manager

        write_config({"full_width": True})
        result = runner.invoke(app, ["config", "reset"], env=ENV)

        assert result.exit_code == 0
        assert settings_manager.get("full_width") is False

    # * Verify path prints the isolated config location
    def test_path(self, isolate_config, runner):
        from mdhelp.cli.app import app

        result = runner.invoke(app, ["config", "path"], env=ENV)

        assert result.exit_code == 0
        assert result.stdout.strip().endswith("config.json")


class TestVerboseLogging:

    # * Verify --log-file writes session markers & render decisions
    def test_log_file(self, isolate_config, runner, tmp_path):
        from mdhelp.cli.app import app

        log_file = tmp_path / "mdhelp.log"
        result = runner.invoke(
            app, ["--log-file", str(log_file), "preview", "--content-width"], env=ENV
        )

        assert result.exit_code == 0
        content = log_file.read_text()
        assert "mdhelp session started" in content
        assert "RENDER Content-width mode" in content
        assert "mdhelp session ended" in content
