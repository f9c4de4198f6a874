# mdhelp/ui/help/help_templates.py
# Default help section templates & the ordered, caller-editable template set

from __future__ import annotations

from typing import Iterator


# * Default section templates (CommonMark/GFM, expanded w/ the help variables)
TEMPLATE_TITLE = "# **${name}** ${version}"

TEMPLATE_AUTHOR = """
*by* ${author}
"""

TEMPLATE_DESCRIPTION = """
${about}
"""

TEMPLATE_USAGE = """
**Usage:** `${name} [options]${positional-args}`
"""

TEMPLATE_POSITIONALS = """
${positional-lines
* `${key}` : ${help}
}
"""

TEMPLATE_SUBCOMMANDS = """
**Subcommands:**

${subcommand-lines
* `${sub-name}`: ${sub-about}
}
"""

TEMPLATE_EXAMPLES = """
**Examples:**

${after_help}
"""

TEMPLATE_OPTIONS = """
**Options:**

| short | long | value | description |
|:-:|:-|:-:|:-|
${option-lines
| ${short} | ${long} | ${value} | ${help}${possible_values}${default} |
}
"""

# * Alternative options sections

# value token merged into the short & long columns
TEMPLATE_OPTIONS_MERGED_VALUE = """
**Options:**

| short | long | description |
|:-:|:-|:-|
${option-lines
| ${short} ${value-short-braced} | ${long} ${value-long-braced} | ${help}${possible_values}${default} |
}
"""

# one bullet per option, details as nested bullets
TEMPLATE_OPTIONS_LIST = """
**Options:**

${option-lines
* `${flags-compact}` ${value-braced}
    ${help}${details-default}${details-possible-values}${details-env}
}
"""

# two columns: flags & value, then description
TEMPLATE_OPTIONS_COMPACT_TABLE = """
**Options:**

| flags | description |
|:-|:-|
${option-lines
| `${flags-compact}` ${value-braced} | ${help}${possible_values}${default} |
}
"""

# one ruled paragraph per option
TEMPLATE_OPTIONS_VERBOSE = """
**Options:**
${option-lines

---
**`${flags-compact}`** ${value-braced}

* ${help}${details-default}${details-possible-values}${details-env}
}
"""

# options templates by short name (used by settings & the CLI)
OPTION_TEMPLATES = {
    "table": TEMPLATE_OPTIONS,
    "merged": TEMPLATE_OPTIONS_MERGED_VALUE,
    "list": TEMPLATE_OPTIONS_LIST,
    "compact": TEMPLATE_OPTIONS_COMPACT_TABLE,
    "verbose": TEMPLATE_OPTIONS_VERBOSE,
}

# section keys in default print order; "introduction" is an empty slot for caller content
TEMPLATE_KEYS = (
    "title",
    "author",
    "description",
    "introduction",
    "usage",
    "positionals",
    "options",
    "subcommands",
    "examples",
)

DEFAULT_TEMPLATES = {
    "title": TEMPLATE_TITLE,
    "author": TEMPLATE_AUTHOR,
    "description": TEMPLATE_DESCRIPTION,
    "usage": TEMPLATE_USAGE,
    "positionals": TEMPLATE_POSITIONALS,
    "options": TEMPLATE_OPTIONS,
    "subcommands": TEMPLATE_SUBCOMMANDS,
    "examples": TEMPLATE_EXAMPLES,
}


# * Ordered section keys plus a separate key -> template mapping
class TemplateSet:
    """Sections to print and the template for each.

    ``keys`` decides what is printed and in which order; ``templates`` holds
    the text for each key. The two are edited independently: a key w/o a
    template prints nothing, so removing a template disables a section while
    keeping its place for when a template is set again. A key listed twice
    prints twice.
    """

    def __init__(
        self,
        keys: list[str] | tuple[str, ...] | None = None,
        templates: dict[str, str] | None = None,
    ) -> None:
        self.keys: list[str] = list(TEMPLATE_KEYS if keys is None else keys)
        self.templates: dict[str, str] = dict(DEFAULT_TEMPLATES if templates is None else templates)

    def set_template(self, key: str, template: str) -> None:
        self.templates[key] = template

    # chainable set_template
    def with_template(self, key: str, template: str) -> "TemplateSet":
        self.set_template(key, template)
        return self

    # drop the template but keep the key in the order
    def without(self, key: str) -> "TemplateSet":
        self.templates.pop(key, None)
        return self

    def get(self, key: str) -> str | None:
        return self.templates.get(key)

    # (key, template) in print order, skipping keys w/o a template
    def ordered(self) -> Iterator[tuple[str, str]]:
        for key in self.keys:
            template = self.templates.get(key)
            if template is not None:
                yield key, template

    def copy(self) -> "TemplateSet":
        return TemplateSet(self.keys, self.templates)

    def __repr__(self) -> str:
        return f"TemplateSet(keys={self.keys!r}, templates={sorted(self.templates)!r})"
