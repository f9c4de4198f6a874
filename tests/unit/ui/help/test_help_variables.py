# tests/unit/ui/help/test_help_variables.py
# Unit tests for building the help variable environment from a command description

import pytest

from mdhelp.core.types import ArgAction, ArgumentDescription, CommandDescription
from mdhelp.ui.help.help_variables import (
    OPTION_LINES,
    POSITIONAL_LINES,
    SUBCOMMAND_LINES,
    build_variables,
    format_flags_compact,
)


def _option_items(description):
    return build_variables(description).group(OPTION_LINES)


def _values(item):
    return {name: value.text for name, value in item.values.items()}


class TestFlagsCompact:

    # * Verify the four short/long combinations
    @pytest.mark.parametrize(
        "short, long, expected",
        [
            ("v", "verbose", "-v, --verbose"),
            (None, "color", "    --color"),
            ("c", None, "-c"),
            (None, None, ""),
        ],
    )
    def test_combinations(self, short, long, expected):

        assert format_flags_compact(short, long) == expected


class TestScalars:

    # * Verify top-level scalars come from the description
    def test_top_level(self, sample_description):

        env = build_variables(sample_description)

        assert env.lookup("name").text == "broot"
        assert env.lookup("version").text == "1.2.3"
        assert env.lookup("author").text == "dystroy"
        assert env.lookup("about").markdown is True
        assert env.lookup("after_help").text == "* `broot ~` opens your home directory"

    # * Verify bin_name wins over name for display
    def test_bin_name_preferred(self):

        env = build_variables(CommandDescription(name="cli", bin_name="python -m cli"))

        assert env.lookup("name").text == "python -m cli"

    # * Verify absent optional fields stay unset
    def test_absent_fields_unset(self):

        env = build_variables(CommandDescription(name="bare"))

        for name in ("author", "version", "about", "after_help"):
            assert name not in env
        assert env.group(OPTION_LINES) == []
        assert env.lookup("positional-args").text == ""


class TestOptionLines:

    # * Verify hidden options & positionals don't produce option lines
    def test_filtering(self, sample_description):

        longs = [item.lookup("long").text for item in _option_items(sample_description)]

        assert longs == ["--help", "--verbose", "--color", ""]

    # * Verify keys of a fully described option
    def test_full_option(self, sample_description):

        color = _values(_option_items(sample_description)[2])

        assert color["flags-compact"] == "    --color"
        assert color["long"] == "--color"
        assert "short" not in color
        assert color["value"] == "WHEN"
        assert color["value-braced"] == "<WHEN>"
        assert color["value-long"] == "WHEN"
        assert color["value-long-braced"] == "<WHEN>"
        assert "value-short" not in color
        assert color["possible_values"] == " Possible values: [`yes`, `no`, `auto`]"
        assert color["details-possible-values"] == "\n    * *Possible values*: `yes`, `no`, `auto`"
        assert color["default"] == " Default: `auto`"
        assert color["details-default"] == "\n    * *Default*: `auto`"
        assert color["details-env"] == "\n    * *Environment*: `BROOT_COLOR`"

    # * Verify short-only value options fill the short value keys
    def test_short_only_value(self, sample_description):

        conf = _values(_option_items(sample_description)[3])

        assert conf["flags-compact"] == "-c"
        assert conf["short"] == "-c"
        assert conf["value-short-braced"] == "<PATHS>"
        assert "value-long-braced" not in conf

    # * Verify switches get no value & no default annotation
    @pytest.mark.parametrize("action", [ArgAction.FLAG, ArgAction.COUNT])
    def test_switches_have_no_value_or_default(self, action):

        description = CommandDescription(
            name="x",
            arguments=(
                ArgumentDescription(
                    id="quiet",
                    long="quiet",
                    value_names=("QUIET",),
                    default_values=("false",),
                    action=action,
                ),
            ),
        )
        item = _values(_option_items(description)[0])

        assert "value" not in item
        assert "default" not in item
        assert "details-default" not in item

    # * Verify only the first of several defaults is shown
    def test_first_default_only(self):

        description = CommandDescription(
            name="x",
            arguments=(
                ArgumentDescription(
                    id="tag",
                    long="tag",
                    value_names=("TAG",),
                    default_values=("a", "b"),
                    action=ArgAction.APPEND,
                ),
            ),
        )

        assert _values(_option_items(description)[0])["default"] == " Default: `a`"

    # * Verify help is inserted as markdown
    def test_help_is_markdown(self, sample_description):

        help_value = _option_items(sample_description)[0].lookup("help")

        assert help_value.text == "Print help"
        assert help_value.markdown is True


class TestPositionals:

    # * Verify optional positionals are bracketed in the usage args
    def test_optional_positional_usage(self, sample_description):

        env = build_variables(sample_description)

        assert env.lookup("positional-args").text == " [FILE]"
        items = env.group(POSITIONAL_LINES)
        assert [_values(item) for item in items] == [{"key": "FILE", "help": "Root directory"}]

    # * Verify required & last positionals
    def test_required_and_last(self):

        description = CommandDescription(
            name="x",
            arguments=(
                ArgumentDescription(id="src", value_names=("SRC",), positional=True, required=True),
                ArgumentDescription(id="rest", value_names=("ARGS",), positional=True, last=True),
            ),
        )

        assert build_variables(description).lookup("positional-args").text == " SRC [-- ARGS]"

    # * Verify positionals w/o a value name are left out entirely
    def test_unnamed_positional_skipped(self):

        description = CommandDescription(
            name="x",
            arguments=(ArgumentDescription(id="anon", positional=True, help="ignored"),),
        )
        env = build_variables(description)

        assert env.lookup("positional-args").text == ""
        assert env.group(POSITIONAL_LINES) == []


class TestSubcommands:

    # * Verify one item per subcommand, about only when present
    def test_subcommand_lines(self, sample_description):

        items = build_variables(sample_description).group(SUBCOMMAND_LINES)

        assert [_values(item) for item in items] == [
            {"sub-name": "install", "sub-about": "Install the shell function"},
            {"sub-name": "completions"},
        ]
