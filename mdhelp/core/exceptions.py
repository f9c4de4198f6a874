# mdhelp/core/exceptions.py
# Custom exception hierarchy for mdhelp (pure - no I/O operations)

from __future__ import annotations

from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for mdhelp
class MdHelpError(Exception):
    pass


# * Style preset identifier not present in the catalog
class PresetNotFoundError(MdHelpError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"Unknown style preset: {name!r}")
        self.name = name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, name={self.name!r})"


# * Malformed help template (unterminated or stray repeating block)
class TemplateSyntaxError(MdHelpError):
    def __init__(self, message: str, line_number: int, line: str):
        super().__init__(f"{message} (template line {line_number}: {line!r})")
        self.line_number = line_number
        self.line = line

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"line_number={self.line_number!r}, line={self.line!r})"
        )


# * Configuration errors
class ConfigurationError(MdHelpError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(MdHelpError):
    pass


# * Target for help preview could not be imported or is not a command
class CommandImportError(MdHelpError):
    def __init__(self, message: str, target: str):
        super().__init__(message)
        self.target = target

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, target={self.target!r})"
