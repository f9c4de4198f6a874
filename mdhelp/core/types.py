# mdhelp/core/types.py
# Read-only description of a command, its arguments & subcommands, as supplied by an argument parser

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


# * How an argument consumes command-line input
class ArgAction(Enum):
    SET = "set"
    APPEND = "append"
    FLAG = "flag"
    COUNT = "count"

    @property
    def takes_values(self) -> bool:
        return self in (ArgAction.SET, ArgAction.APPEND)


@dataclass(frozen=True)
class ArgumentDescription:
    # one flag or positional; short/long are stored without dashes
    id: str
    short: str | None = None
    long: str | None = None
    value_names: tuple[str, ...] = ()
    help: str | None = None
    hidden: bool = False
    positional: bool = False
    required: bool = False
    last: bool = False
    possible_values: tuple[str, ...] = ()
    default_values: tuple[str, ...] = ()
    action: ArgAction = ArgAction.SET
    env: str | None = None

    def __post_init__(self) -> None:
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short flag must be a single character, got {self.short!r}")

    @property
    def value_name(self) -> str | None:
        return self.value_names[0] if self.value_names else None


@dataclass(frozen=True)
class SubcommandDescription:
    name: str
    about: str | None = None


@dataclass(frozen=True)
class CommandDescription:
    name: str
    bin_name: str | None = None
    author: str | None = None
    version: str | None = None
    about: str | None = None
    after_help: str | None = None
    arguments: tuple[ArgumentDescription, ...] = field(default_factory=tuple)
    subcommands: tuple[SubcommandDescription, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return self.bin_name or self.name

    def options(self) -> Iterator[ArgumentDescription]:
        return (arg for arg in self.arguments if not arg.positional)

    def positionals(self) -> Iterator[ArgumentDescription]:
        return (arg for arg in self.arguments if arg.positional)
