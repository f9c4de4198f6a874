# mdhelp/ui/help/command_introspection.py
# Build CommandDescription objects from click/Typer commands & argparse parsers

from __future__ import annotations

import argparse
import inspect
from typing import TYPE_CHECKING, Any, Iterable

from ...core.types import (
    ArgAction,
    ArgumentDescription,
    CommandDescription,
    SubcommandDescription,
)

if TYPE_CHECKING:
    import click


def _clean_help(text: str | None) -> str | None:
    if not text:
        return None
    # text after click's "\f" is private to the docstring
    text = text.partition("\f")[0]
    # click's "\b" marks paragraphs that must not be rewrapped
    cleaned = inspect.cleandoc(text).replace("\b\n", "").replace("\b", "")
    return cleaned or None


def _first_paragraph(text: str | None) -> str | None:
    cleaned = _clean_help(text)
    if not cleaned:
        return None
    return " ".join(cleaned.split("\n\n", 1)[0].split())


# click >= 8.3 marks "no default" w/ an enum sentinel wrapping a bare object()
def _is_unset(value: Any) -> bool:
    return type(value) is object or type(getattr(value, "value", None)) is object


# defaults rendered as text; callables & "no default" produce nothing
def _format_defaults(default: Any) -> tuple[str, ...]:
    if default is None or default is Ellipsis or callable(default) or _is_unset(default):
        return ()
    if isinstance(default, (list, tuple, set, frozenset)):
        return tuple(_format_scalar(value) for value in default)
    return (_format_scalar(default),)


def _format_scalar(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    # enum choices show their value, like the command line expects
    return str(getattr(value, "value", value))


def _split_flags(opts: Iterable[str]) -> tuple[str | None, str | None]:
    short = long = None
    for opt in opts:
        if opt.startswith("--"):
            long = long or opt[2:]
        elif opt.startswith("-") and len(opt) == 2:
            short = short or opt[1:]
    return short, long


# ---------------------------------------------------------------------------
# click / Typer
# ---------------------------------------------------------------------------

# typer may build commands from its own bundled copy of click, so parameter & command
# kinds are read from click's attributes instead of isinstance checks against `click`
def _param_kind(param: Any) -> str | None:
    return getattr(param, "param_type_name", None)


def _is_click_command(obj: Any) -> bool:
    return callable(getattr(obj, "get_params", None)) and hasattr(obj, "context_class")


def _click_subcommands(command: Any) -> dict[str, Any]:
    commands = getattr(command, "commands", None)
    return commands if isinstance(commands, dict) else {}


def _click_choices(param: click.Parameter) -> tuple[str, ...]:
    choices = getattr(param.type, "choices", None)
    if not choices:
        return ()
    return tuple(_format_scalar(choice) for choice in choices)


def _click_action(param: click.Option) -> ArgAction:
    if param.count:
        return ArgAction.COUNT
    if param.is_flag:
        return ArgAction.FLAG
    if param.multiple:
        return ArgAction.APPEND
    return ArgAction.SET


def _click_env(param: click.Parameter) -> str | None:
    envvar = getattr(param, "envvar", None)
    if not envvar:
        return None
    if isinstance(envvar, str):
        return envvar
    return next(iter(envvar), None)


def _describe_click_param(param: click.Parameter) -> ArgumentDescription | None:
    name = param.name or ""
    value_name = param.metavar or name.upper()

    if _param_kind(param) == "option":
        short, long = _split_flags(param.opts)
        return ArgumentDescription(
            id=name,
            short=short,
            long=long,
            value_names=(value_name,) if value_name else (),
            help=_clean_help(param.help),
            hidden=param.hidden,
            required=param.required,
            possible_values=_click_choices(param),
            default_values=_format_defaults(param.default),
            action=_click_action(param),
            env=_click_env(param),
        )

    if _param_kind(param) == "argument":
        # Typer arguments carry help & hidden; plain click arguments don't
        return ArgumentDescription(
            id=name,
            value_names=(value_name,) if value_name else (),
            help=_clean_help(getattr(param, "help", None)),
            hidden=bool(getattr(param, "hidden", False)),
            positional=True,
            required=param.required,
            possible_values=_click_choices(param),
            default_values=_format_defaults(param.default),
            action=ArgAction.APPEND if param.nargs == -1 else ArgAction.SET,
            env=_click_env(param),
        )

    return None


# * Describe a click command (or a Typer app via typer.main.get_command) for help rendering
def describe_click_command(
    command: click.Command,
    *,
    bin_name: str | None = None,
    author: str | None = None,
    version: str | None = None,
) -> CommandDescription:
    name = command.name or bin_name or "command"
    ctx = command.context_class(command, info_name=name, **command.context_settings)

    arguments = []
    for param in command.get_params(ctx):
        described = _describe_click_param(param)
        if described is not None:
            arguments.append(described)

    subcommands = []
    for sub_name, sub in _click_subcommands(command).items():
        if getattr(sub, "hidden", False):
            continue
        about = sub.short_help or _first_paragraph(sub.help)
        subcommands.append(SubcommandDescription(name=sub_name, about=about))

    return CommandDescription(
        name=name,
        bin_name=bin_name,
        author=author,
        version=version,
        about=_clean_help(command.help),
        after_help=_clean_help(command.epilog),
        arguments=tuple(arguments),
        subcommands=tuple(subcommands),
    )


# ---------------------------------------------------------------------------
# argparse
# ---------------------------------------------------------------------------

_FLAG_ACTIONS = (
    argparse._StoreTrueAction,
    argparse._StoreFalseAction,
    argparse._StoreConstAction,
    argparse._AppendConstAction,
    argparse._HelpAction,
    argparse._VersionAction,
    argparse.BooleanOptionalAction,
)


def _argparse_action(action: argparse.Action) -> ArgAction:
    if isinstance(action, argparse._CountAction):
        return ArgAction.COUNT
    if isinstance(action, _FLAG_ACTIONS):
        return ArgAction.FLAG
    if isinstance(action, (argparse._AppendAction, argparse._ExtendAction)):
        return ArgAction.APPEND
    return ArgAction.SET


def _argparse_value_names(action: argparse.Action) -> tuple[str, ...]:
    metavar = action.metavar
    if isinstance(metavar, tuple):
        return tuple(metavar)
    if metavar:
        return (metavar,)
    if action.option_strings:
        return (action.dest.upper(),)
    return (action.dest,) if action.dest and action.dest != argparse.SUPPRESS else ()


def _argparse_defaults(action: argparse.Action) -> tuple[str, ...]:
    if action.default is argparse.SUPPRESS:
        return ()
    return _format_defaults(action.default)


# "%(default)s"-style placeholders expanded the way argparse's HelpFormatter does
def _expand_argparse_help(action: argparse.Action, prog: str) -> str | None:
    text = action.help
    if text is None or text is argparse.SUPPRESS:
        return None
    if "%" not in text:
        return text

    params = dict(vars(action), prog=prog)
    for name in list(params):
        value = params[name]
        if value is argparse.SUPPRESS:
            del params[name]
        elif hasattr(value, "__name__"):
            params[name] = value.__name__
    if params.get("choices") is not None:
        params["choices"] = ", ".join(str(choice) for choice in params["choices"])
    try:
        return text % params
    except (KeyError, TypeError, ValueError):
        # malformed placeholders (a lone "%") are shown as written
        return text


def _describe_argparse_action(action: argparse.Action, prog: str) -> ArgumentDescription:
    short, long = _split_flags(action.option_strings)
    positional = not action.option_strings
    return ArgumentDescription(
        id=action.dest,
        short=short,
        long=long,
        value_names=_argparse_value_names(action),
        help=_expand_argparse_help(action, prog),
        hidden=action.help is argparse.SUPPRESS,
        positional=positional,
        required=bool(action.required),
        last=positional and action.nargs == argparse.REMAINDER,
        possible_values=tuple(str(choice) for choice in action.choices or ()),
        default_values=_argparse_defaults(action),
        action=_argparse_action(action),
    )


def _argparse_subcommands(action: argparse._SubParsersAction) -> list[SubcommandDescription]:
    helps = {choice.dest: choice.help for choice in action._choices_actions}
    subcommands = []
    seen: set[int] = set()
    for name, parser in action.choices.items():
        # aliases map to the same parser; list each parser once
        if id(parser) in seen:
            continue
        seen.add(id(parser))
        about = helps.get(name) or _first_paragraph(parser.description)
        subcommands.append(SubcommandDescription(name=name, about=about))
    return subcommands


# * Describe an argparse parser for help rendering
def describe_argparse_parser(
    parser: argparse.ArgumentParser,
    *,
    bin_name: str | None = None,
    author: str | None = None,
    version: str | None = None,
) -> CommandDescription:
    arguments = []
    subcommands: list[SubcommandDescription] = []
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            subcommands.extend(_argparse_subcommands(action))
            continue
        arguments.append(_describe_argparse_action(action, parser.prog))

    return CommandDescription(
        name=parser.prog,
        bin_name=bin_name,
        author=author,
        version=version,
        about=parser.description,
        after_help=parser.epilog,
        arguments=tuple(arguments),
        subcommands=tuple(subcommands),
    )


# * Describe any supported command object: Typer app, click command or argparse parser
def describe_command(
    target: Any,
    *,
    bin_name: str | None = None,
    author: str | None = None,
    version: str | None = None,
) -> CommandDescription:
    import typer

    if isinstance(target, CommandDescription):
        return target
    if isinstance(target, typer.Typer):
        target = typer.main.get_command(target)
    if _is_click_command(target):
        return describe_click_command(target, bin_name=bin_name, author=author, version=version)
    if isinstance(target, argparse.ArgumentParser):
        return describe_argparse_parser(target, bin_name=bin_name, author=author, version=version)
    raise TypeError(
        f"Expected a Typer app, click command or argparse parser, got {type(target).__name__}"
    )
