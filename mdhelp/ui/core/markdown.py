# mdhelp/ui/core/markdown.py
# Markdown renderable for help sections & content-width measurement of rendered blocks

from __future__ import annotations

from typing import Any, ClassVar

from rich.markdown import Heading, HorizontalRule, Markdown, MarkdownElement

from .rich_components import Console, ConsoleOptions, RenderResult, Text, cell_len


# headings flush left & unboxed so they only take the width of their text
class FlushHeading(Heading):
    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        text = self.text
        text.justify = "left"
        if self.tag == "h2":
            yield Text("")
        yield text


# horizontal rule that fills the rendering width, except while a block is being measured
class ElasticRule(HorizontalRule):
    @classmethod
    def create(cls, markdown: Markdown, token: Any) -> MarkdownElement:
        return cls(measuring=getattr(markdown, "measuring", False))

    def __init__(self, measuring: bool = False) -> None:
        self.measuring = measuring

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if self.measuring:
            yield Text("")
            return
        yield from super().__rich_console__(console, options)


# * Markdown renderable used for every help section
class HelpMarkdown(Markdown):
    elements: ClassVar[dict[str, type[MarkdownElement]]] = {
        **Markdown.elements,
        "heading_open": FlushHeading,
        "hr": ElasticRule,
    }

    def __init__(self, markup: str, **kwargs: Any) -> None:
        kwargs.setdefault("hyperlinks", False)
        super().__init__(markup, **kwargs)
        self.measuring = False


# * Width of the widest rendered line (trailing padding ignored) when laid out at `width`
def measure_content_width(console: Console, markdown: HelpMarkdown, width: int) -> int:
    options = console.options.update(width=width, height=None)
    markdown.measuring = True
    try:
        lines = console.render_lines(markdown, options, pad=False)
    finally:
        markdown.measuring = False

    widest = 0
    for line in lines:
        text = "".join(segment.text for segment in line if not segment.control)
        widest = max(widest, cell_len(text.rstrip()))
    return widest
