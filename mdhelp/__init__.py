# mdhelp/__init__.py
# Render command-line help as styled, width-adaptive markdown in the terminal

__version__ = "0.1.0"

from .core.exceptions import MdHelpError, PresetNotFoundError, TemplateSyntaxError
from .core.types import (
    ArgAction,
    ArgumentDescription,
    CommandDescription,
    SubcommandDescription,
)
from .ui.help import (
    HelpPrinter,
    TemplateSet,
    VariableEnvironment,
    describe_argparse_parser,
    describe_click_command,
    describe_command,
    expand,
    render_help,
)
from .ui.theming import Skin, StylePreset, list_presets, lookup

__all__ = [
    "__version__",
    "MdHelpError",
    "PresetNotFoundError",
    "TemplateSyntaxError",
    "ArgAction",
    "ArgumentDescription",
    "CommandDescription",
    "SubcommandDescription",
    "HelpPrinter",
    "TemplateSet",
    "VariableEnvironment",
    "describe_argparse_parser",
    "describe_click_command",
    "describe_command",
    "expand",
    "render_help",
    "Skin",
    "StylePreset",
    "list_presets",
    "lookup",
]
