# mdhelp/ui/help/template_expander.py
# Variable environment & template expansion: `${name}` scalars & `${group ... }` repeating blocks

from __future__ import annotations

import re
from collections import ChainMap
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Mapping, Union

from ...core.exceptions import TemplateSyntaxError


@dataclass(frozen=True)
class TemplateValue:
    # scalar variable; markdown values are inserted verbatim, plain ones literally
    text: str
    markdown: bool = False


EMPTY = TemplateValue("")


# * Scalars & ordered repeating groups that templates are expanded against
class VariableEnvironment:
    def __init__(self) -> None:
        self._values: dict[str, TemplateValue] = {}
        self._groups: dict[str, list[VariableEnvironment]] = {}

    def set(self, name: str, text: str) -> "VariableEnvironment":
        self._values[name] = TemplateValue(str(text))
        return self

    def set_md(self, name: str, text: str) -> "VariableEnvironment":
        self._values[name] = TemplateValue(str(text), markdown=True)
        return self

    def unset(self, name: str) -> None:
        self._values.pop(name, None)

    # append a new item to `group` & return it for filling
    def sub(self, group: str) -> "VariableEnvironment":
        item = VariableEnvironment()
        self._groups.setdefault(group, []).append(item)
        return item

    def get(self, name: str) -> TemplateValue | None:
        return self._values.get(name)

    # value for `name`, or the empty value when unset
    def lookup(self, name: str) -> TemplateValue:
        return self._values.get(name, EMPTY)

    def group(self, name: str) -> list["VariableEnvironment"]:
        return list(self._groups.get(name, ()))

    def group_names(self) -> list[str]:
        return list(self._groups)

    @property
    def values(self) -> Mapping[str, TemplateValue]:
        return self._values

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        sizes = {name: len(items) for name, items in self._groups.items()}
        return f"VariableEnvironment(values={sorted(self._values)}, groups={sizes})"


# * Template syntax
_VARIABLE = re.compile(r"\$\{([A-Za-z0-9_.-]+)\}")
_GROUP_OPEN = re.compile(r"^\$\{([A-Za-z0-9_.-]+)\s*$")
_GROUP_CLOSE = re.compile(r"^\}\s*$")

# characters w/ inline markdown meaning outside code spans
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]<>|#~])")


@dataclass(frozen=True)
class _Block:
    # group name, or None for literal lines expanded once against the outer scope
    group: str | None
    lines: tuple[str, ...]


_Scope = Union[ChainMap, Mapping[str, TemplateValue]]


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


# * Split a template into literal runs & repeating blocks (cached per template text)
@lru_cache(maxsize=64)
def parse_template(template: str) -> tuple[_Block, ...]:
    blocks: list[_Block] = []
    literal: list[str] = []
    group: str | None = None
    body: list[str] = []

    for number, line in enumerate(template.split("\n"), start=1):
        if group is None:
            opening = _GROUP_OPEN.match(line)
            if opening:
                if literal:
                    blocks.append(_Block(None, tuple(literal)))
                    literal = []
                group = opening.group(1)
                body = []
            elif _GROUP_CLOSE.match(line):
                raise TemplateSyntaxError("Closing brace without an open block", number, line)
            else:
                literal.append(line)
        elif _GROUP_CLOSE.match(line):
            blocks.append(_Block(group, tuple(body)))
            group = None
        elif _GROUP_OPEN.match(line):
            raise TemplateSyntaxError(f"Nested block inside ${{{group}", number, line)
        else:
            body.append(line)

    if group is not None:
        raise TemplateSyntaxError(f"Unterminated block ${{{group}", len(template.split("\n")), "")
    if literal:
        blocks.append(_Block(None, tuple(literal)))
    return tuple(blocks)


def _substitute(line: str, scope: _Scope) -> str:
    def replace(match: re.Match[str]) -> str:
        value = scope.get(match.group(1), EMPTY)
        if value.markdown:
            return value.text
        # code spans render literally, so escaping there would show the backslashes
        if line.count("`", 0, match.start()) % 2 == 1:
            return value.text
        return escape_markdown(value.text)

    return _VARIABLE.sub(replace, line)


# * Expand a template against an environment; missing variables & groups expand to nothing
def expand(template: str, env: VariableEnvironment) -> str:
    out: list[str] = []
    for block in parse_template(template):
        if block.group is None:
            out.extend(_substitute(line, env.values) for line in block.lines)
            continue
        for item in env.group(block.group):
            scope = ChainMap(dict(item.values), dict(env.values))
            out.extend(_substitute(line, scope) for line in block.lines)
    return "\n".join(out)
