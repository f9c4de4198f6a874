# mdhelp/ui/help/help_variables.py
# Variable model builder: turns a CommandDescription into the environment help templates expand against

from __future__ import annotations

from ...core.types import ArgAction, ArgumentDescription, CommandDescription
from ...core.verbose import vlog
from .template_expander import VariableEnvironment

# group names referenced by the default templates
OPTION_LINES = "option-lines"
POSITIONAL_LINES = "positional-lines"
SUBCOMMAND_LINES = "subcommand-lines"


# * Compact flag column: "-s, --long", "    --long" (aligned under short+long rows), "-s" or ""
def format_flags_compact(short: str | None, long: str | None) -> str:
    if short and long:
        return f"-{short}, --{long}"
    if long:
        return f"    --{long}"
    if short:
        return f"-{short}"
    return ""


def _quoted(values: tuple[str, ...]) -> str:
    return ", ".join(f"`{value}`" for value in values)


# fill one option-lines item from an argument w/ a short or long flag
def _add_option_line(env: VariableEnvironment, arg: ArgumentDescription) -> None:
    sub = env.sub(OPTION_LINES)
    sub.set("flags-compact", format_flags_compact(arg.short, arg.long))

    if arg.short:
        sub.set("short", f"-{arg.short}")
    if arg.long:
        sub.set("long", f"--{arg.long}")

    if arg.help:
        sub.set_md("help", arg.help)

    if arg.action.takes_values and arg.value_name:
        name = arg.value_name
        braced = f"<{name}>"
        sub.set("value", name)
        sub.set("value-braced", braced)
        if arg.short:
            sub.set("value-short-braced", braced)
            sub.set("value-short", name)
        if arg.long:
            sub.set("value-long-braced", braced)
            sub.set("value-long", name)

    if arg.env:
        sub.set_md("details-env", f"\n    * *Environment*: `{arg.env}`")

    if arg.possible_values:
        values = _quoted(arg.possible_values)
        sub.set_md("possible_values", f" Possible values: [{values}]")
        sub.set_md("details-possible-values", f"\n    * *Possible values*: {values}")

    # defaults of switches ("false", "0") say nothing useful
    if arg.default_values and arg.action in (ArgAction.SET, ArgAction.APPEND):
        default = arg.default_values[0]
        sub.set_md("default", f" Default: `{default}`")
        sub.set_md("details-default", f"\n    * *Default*: `{default}`")


# * Build the variable environment for one help invocation
def build_variables(description: CommandDescription) -> VariableEnvironment:
    env = VariableEnvironment()
    env.set("name", description.display_name)

    if description.author:
        env.set("author", description.author)
    if description.version:
        env.set("version", description.version)
    if description.about:
        env.set_md("about", description.about)
    if description.after_help:
        env.set_md("after_help", description.after_help)

    for arg in description.options():
        if arg.hidden or not (arg.short or arg.long):
            continue
        _add_option_line(env, arg)

    # positionals w/o a value name stay out of generated help entirely
    usage: list[str] = []
    for arg in description.positionals():
        key = arg.value_name
        if not key:
            continue
        usage.append(" ")
        if not arg.required:
            usage.append("[")
        if arg.last:
            usage.append("-- ")
        usage.append(key)
        if not arg.required:
            usage.append("]")

        sub = env.sub(POSITIONAL_LINES)
        sub.set("key", key)
        if arg.help:
            sub.set("help", arg.help)
    env.set("positional-args", "".join(usage))

    for subcommand in description.subcommands:
        sub = env.sub(SUBCOMMAND_LINES)
        sub.set("sub-name", subcommand.name)
        if subcommand.about:
            sub.set_md("sub-about", subcommand.about)

    vlog(
        "VARS",
        f"Built help variables for {description.display_name}",
        ", ".join(f"{group}: {len(env.group(group))}" for group in env.group_names()) or None,
    )
    return env
