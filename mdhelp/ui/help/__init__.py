# mdhelp/ui/help/__init__.py
# Help system: variable model, templates, expansion & width-adaptive printing

from .command_introspection import (
    describe_argparse_parser,
    describe_click_command,
    describe_command,
)
from .help_renderer import HelpPrinter, RenderedBlock, render_help
from .help_templates import (
    DEFAULT_TEMPLATES,
    OPTION_TEMPLATES,
    TEMPLATE_AUTHOR,
    TEMPLATE_DESCRIPTION,
    TEMPLATE_EXAMPLES,
    TEMPLATE_KEYS,
    TEMPLATE_OPTIONS,
    TEMPLATE_OPTIONS_COMPACT_TABLE,
    TEMPLATE_OPTIONS_LIST,
    TEMPLATE_OPTIONS_MERGED_VALUE,
    TEMPLATE_OPTIONS_VERBOSE,
    TEMPLATE_POSITIONALS,
    TEMPLATE_SUBCOMMANDS,
    TEMPLATE_TITLE,
    TEMPLATE_USAGE,
    TemplateSet,
)
from .help_variables import build_variables, format_flags_compact
from .template_expander import TemplateValue, VariableEnvironment, expand

__all__ = [
    # Introspection
    "describe_argparse_parser",
    "describe_click_command",
    "describe_command",
    # Rendering
    "HelpPrinter",
    "RenderedBlock",
    "render_help",
    # Templates
    "DEFAULT_TEMPLATES",
    "OPTION_TEMPLATES",
    "TEMPLATE_AUTHOR",
    "TEMPLATE_DESCRIPTION",
    "TEMPLATE_EXAMPLES",
    "TEMPLATE_KEYS",
    "TEMPLATE_OPTIONS",
    "TEMPLATE_OPTIONS_COMPACT_TABLE",
    "TEMPLATE_OPTIONS_LIST",
    "TEMPLATE_OPTIONS_MERGED_VALUE",
    "TEMPLATE_OPTIONS_VERBOSE",
    "TEMPLATE_POSITIONALS",
    "TEMPLATE_SUBCOMMANDS",
    "TEMPLATE_TITLE",
    "TEMPLATE_USAGE",
    "TemplateSet",
    # Variables & expansion
    "build_variables",
    "format_flags_compact",
    "TemplateValue",
    "VariableEnvironment",
    "expand",
]
