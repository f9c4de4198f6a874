# mdhelp/ui/help/help_renderer.py
# Help printer: expands each section template & lays the results out against the terminal width

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...core.types import CommandDescription
from ...core.verbose import vlog_debug, vlog_render
from ...mdhelp_io.console import get_console
from ...mdhelp_io.terminal import detect_terminal_luma, terminal_width
from ..core.markdown import HelpMarkdown, measure_content_width
from ..core.rich_components import Console
from ..theming.skin import Skin, default_for_terminal
from .help_templates import TemplateSet
from .help_variables import build_variables
from .template_expander import VariableEnvironment, expand

if TYPE_CHECKING:
    from ...config.settings import HelpSettings


@dataclass
class RenderedBlock:
    # one expanded section, measured at the available width
    key: str
    markdown: HelpMarkdown
    content_width: int
    # template starts w/ a newline: print a blank line before it
    spaced: bool


# * Configurable printer for the help of one command
class HelpPrinter:
    """Print the help of a command through a set of markdown templates.

    Sections are printed in ``template_keys`` order. By default every section
    is laid out at the width of the widest one (content-width mode) so tables
    & paragraphs share a right margin; with ``full_width`` each section is
    printed on its own at the terminal width. ``max_width`` caps the width
    used in both modes.

    Example::

        printer = HelpPrinter(describe_click_command(cli)).with_template(
            "options", TEMPLATE_OPTIONS_LIST
        )
        printer.skin.set_fg("bold", "#ff8700")
        printer.print_help()
    """

    def __init__(
        self,
        description: CommandDescription,
        *,
        skin: Skin | None = None,
        full_width: bool = False,
        max_width: int | None = None,
        templates: TemplateSet | None = None,
        console: Console | None = None,
    ) -> None:
        self.description = description
        self._variables = build_variables(description)
        self._skin = skin if skin is not None else self.make_skin()
        self._templates = templates if templates is not None else TemplateSet()
        self._console = console
        self.full_width = full_width
        self.max_width = max_width

    # * Skin for the detected terminal background (light, dark, or neutral)
    @staticmethod
    def make_skin() -> Skin:
        return default_for_terminal(detect_terminal_luma())

    @property
    def max_width(self) -> int | None:
        return self._max_width

    @max_width.setter
    def max_width(self, value: int | None) -> None:
        if value is not None and value < 1:
            raise ValueError(f"max_width must be a positive integer, got {value}")
        self._max_width = value

    @property
    def skin(self) -> Skin:
        return self._skin

    def with_skin(self, skin: Skin) -> "HelpPrinter":
        self._skin = skin
        return self

    def with_max_width(self, width: int) -> "HelpPrinter":
        self.max_width = width
        return self

    # variables templates are expanded against; add or override entries before printing
    @property
    def variables(self) -> VariableEnvironment:
        return self._variables

    @property
    def template_set(self) -> TemplateSet:
        return self._templates

    # mutable list of section keys: reorder, insert or drop sections
    @property
    def template_keys(self) -> list[str]:
        return self._templates.keys

    def set_template(self, key: str, template: str) -> None:
        self._templates.set_template(key, template)

    def with_template(self, key: str, template: str) -> "HelpPrinter":
        self.set_template(key, template)
        return self

    def without(self, key: str) -> "HelpPrinter":
        self._templates.without(key)
        return self

    def _get_console(self) -> Console:
        return self._console if self._console is not None else get_console()

    def _available_width(self, console: Console) -> int:
        width = terminal_width(console)
        if self._max_width is not None:
            width = min(width, self._max_width)
        return width

    # expanded markdown per section, in print order
    def expand_sections(self) -> list[tuple[str, str]]:
        return [
            (key, expand(template, self._variables))
            for key, template in self._templates.ordered()
        ]

    # * Expand every section & measure its content width when laid out at `width`
    def render_blocks(self, width: int, console: Console | None = None) -> list[RenderedBlock]:
        console = console or self._get_console()
        blocks = []
        with console.use_theme(self._skin.to_theme()):
            for key, template in self._templates.ordered():
                text = expand(template, self._variables)
                markdown = HelpMarkdown(text)
                content_width = measure_content_width(console, markdown, width) if text.strip() else 0
                vlog_debug("BLOCK", f"{key}: {content_width} cells at width {width}", text)
                blocks.append(
                    RenderedBlock(
                        key=key,
                        markdown=markdown,
                        content_width=content_width,
                        spaced=template.startswith("\n"),
                    )
                )
        return blocks

    # * Print a single template expanded w/ this printer's variables
    def print_template(self, template: str) -> None:
        console = self._get_console()
        text = expand(template, self._variables)
        with console.use_theme(self._skin.to_theme()):
            width = self._available_width(console)
            self._emit(console, HelpMarkdown(text), width, template.startswith("\n"))

    # * Print all sections in order
    def print_help(self) -> None:
        if self.full_width:
            self._print_help_full_width()
        else:
            self._print_help_content_width()

    def _print_help_full_width(self) -> None:
        console = self._get_console()
        width = self._available_width(console)
        vlog_render(f"Full-width mode at {width} columns")
        with console.use_theme(self._skin.to_theme()):
            for _, template in self._templates.ordered():
                text = expand(template, self._variables)
                self._emit(console, HelpMarkdown(text), width, template.startswith("\n"))

    def _print_help_content_width(self) -> None:
        console = self._get_console()
        width = self._available_width(console)
        blocks = self.render_blocks(width, console)
        # blocks w/o measurable text (rules only) fall back to the available width
        unified = max((block.content_width for block in blocks), default=0) or width
        vlog_render(
            f"Content-width mode: {width} columns available, unified width {unified}",
            [block.content_width for block in blocks],
        )
        with console.use_theme(self._skin.to_theme()):
            for block in blocks:
                self._emit(console, block.markdown, unified, block.spaced)

    @staticmethod
    def _emit(console: Console, markdown: HelpMarkdown, width: int, spaced: bool) -> None:
        if not markdown.markup.strip():
            return
        if spaced:
            console.line()
        console.print(markdown, width=width)


# * Print help for a command using persisted settings (style, widths, options template)
def render_help(
    description: CommandDescription,
    settings: "HelpSettings | None" = None,
    console: Console | None = None,
    *,
    full_width: bool | None = None,
    max_width: int | None = None,
) -> HelpPrinter:
    from ...config.settings import resolve_skin, settings_manager
    from .help_templates import OPTION_TEMPLATES

    settings = settings or settings_manager.effective()
    printer = HelpPrinter(
        description,
        skin=resolve_skin(settings),
        full_width=settings.full_width if full_width is None else full_width,
        max_width=settings.max_width if max_width is None else max_width,
        console=console,
    )
    printer.set_template("options", OPTION_TEMPLATES[settings.options_template])
    printer.print_help()
    return printer
