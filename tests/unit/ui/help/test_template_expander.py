# tests/unit/ui/help/test_template_expander.py
# Unit tests for the variable environment & template expansion

import re

import pytest

from mdhelp.core.exceptions import TemplateSyntaxError
from mdhelp.ui.help.help_templates import DEFAULT_TEMPLATES, OPTION_TEMPLATES
from mdhelp.ui.help.template_expander import (
    TemplateValue,
    VariableEnvironment,
    escape_markdown,
    expand,
    parse_template,
)


class TestVariableEnvironment:

    # * Verify scalars, markdown flag & unset
    def test_scalars(self):

        env = VariableEnvironment()
        env.set("name", "broot").set_md("about", "*fast*")

        assert env.get("name") == TemplateValue("broot")
        assert env.get("about") == TemplateValue("*fast*", markdown=True)
        assert "name" in env
        assert sorted(env) == ["about", "name"]

        env.unset("name")
        assert env.get("name") is None
        assert env.lookup("name") == TemplateValue("")

    # * Verify sub() appends ordered items to a group
    def test_groups_preserve_order(self):

        env = VariableEnvironment()
        env.sub("option-lines").set("long", "--a")
        env.sub("option-lines").set("long", "--b")

        items = env.group("option-lines")
        assert [item.lookup("long").text for item in items] == ["--a", "--b"]
        assert env.group("missing") == []
        assert env.group_names() == ["option-lines"]


class TestScalarExpansion:

    # * Verify known names are substituted & unknown ones vanish
    def test_unknown_names_expand_to_empty(self):

        env = VariableEnvironment().set("name", "broot")

        assert expand("# ${name} ${version}", env) == "# broot "

    # * Verify literal text w/o placeholders passes through
    def test_literal_text(self):

        assert expand("**Usage:**\n\nplain", VariableEnvironment()) == "**Usage:**\n\nplain"

    # * Verify plain values are escaped outside code spans
    def test_plain_values_escaped(self):

        env = VariableEnvironment().set("value", "<PATH>").set("name", "my_tool")

        assert expand("${value}", env) == "\\<PATH\\>"
        assert expand("run ${name}", env) == "run my\\_tool"

    # * Verify plain values are inserted raw inside code spans
    def test_plain_values_raw_in_code_span(self):

        env = VariableEnvironment().set("name", "my_tool").set("args", " [FILE]")

        assert expand("`${name} [options]${args}`", env) == "`my_tool [options] [FILE]`"

    # * Verify a placeholder after a closed code span is escaped again
    def test_after_closed_code_span(self):

        env = VariableEnvironment().set("value", "<N>")

        assert expand("`-n` ${value}", env) == "`-n` \\<N\\>"

    # * Verify markdown values are inserted verbatim
    def test_markdown_values_verbatim(self):

        env = VariableEnvironment().set_md("about", "A **bold** _claim_")

        assert expand("${about}", env) == "A **bold** _claim_"

    # * Verify the escaper covers inline markdown characters
    def test_escape_markdown(self):

        assert escape_markdown("a*b_c|d") == "a\\*b\\_c\\|d"
        assert escape_markdown("plain text") == "plain text"


class TestGroupExpansion:

    TEMPLATE = "**Options:**\n${option-lines\n* ${long}: ${help}\n}\nend"

    # * Verify a block repeats once per group item, in order
    def test_block_cardinality(self):

        env = VariableEnvironment()
        for name in ("--a", "--b", "--c"):
            env.sub("option-lines").set("long", name).set("help", f"help {name}")

        out = expand(self.TEMPLATE, env)
        assert out.split("\n") == [
            "**Options:**",
            "* --a: help --a",
            "* --b: help --b",
            "* --c: help --c",
            "end",
        ]

    # * Verify an absent group expands to nothing
    def test_absent_group(self):

        assert expand(self.TEMPLATE, VariableEnvironment()) == "**Options:**\nend"

    # * Verify names missing from an item fall back to the outer environment
    def test_fallback_to_outer_scope(self):

        env = VariableEnvironment().set("name", "broot")
        env.sub("subcommand-lines").set("sub-name", "install")
        env.sub("subcommand-lines").set("sub-name", "help").set("name", "inner")

        out = expand("${subcommand-lines\n${name} ${sub-name}\n}", env)
        assert out.split("\n") == ["broot install", "inner help"]

    # * Verify an item's missing names w/o outer value are empty
    def test_missing_in_item_and_outer(self):

        env = VariableEnvironment()
        env.sub("option-lines").set("long", "--a")

        assert expand("${option-lines\n${short}|${long}\n}", env) == "|--a"


class TestTemplateSyntax:

    # * Verify parsed blocks are cached per template text
    def test_parse_is_cached(self):

        template = "a\n${g\nb\n}\nc"

        assert parse_template(template) is parse_template(template)
        assert [block.group for block in parse_template(template)] == [None, "g", None]

    # * Verify unterminated blocks raise
    def test_unterminated_block(self):

        with pytest.raises(TemplateSyntaxError, match="Unterminated"):
            expand("${option-lines\n* ${long}", VariableEnvironment())

    # * Verify a stray closing brace raises w/ its line number
    def test_stray_close(self):

        with pytest.raises(TemplateSyntaxError) as exc_info:
            expand("text\n}", VariableEnvironment())

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "}"

    # * Verify nested blocks are rejected
    def test_nested_block(self):

        with pytest.raises(TemplateSyntaxError, match="Nested"):
            expand("${a\n${b\nx\n}\n}", VariableEnvironment())


def _without_blocks(template):
    kept, in_block = [], False
    for line in template.split("\n"):
        if in_block:
            in_block = re.fullmatch(r"\}\s*", line) is None
        elif re.fullmatch(r"\$\{[A-Za-z0-9_.-]+\s*", line):
            in_block = True
        else:
            kept.append(line)
    return re.sub(r"\$\{[A-Za-z0-9_.-]+\}", "", "\n".join(kept))


class TestBuiltinTemplates:

    # * Verify every built-in template expands against an empty environment to its bare text
    @pytest.mark.parametrize(
        "template",
        list({**DEFAULT_TEMPLATES, **OPTION_TEMPLATES}.values()),
        ids=list({**DEFAULT_TEMPLATES, **OPTION_TEMPLATES}),
    )
    def test_empty_environment(self, template):

        assert expand(template, VariableEnvironment()) == _without_blocks(template)
