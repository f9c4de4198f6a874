# mdhelp/config/settings.py
# Configuration management for mdhelp: persisted help rendering defaults & environment overrides

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import typer
from dotenv import load_dotenv

from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.verbose import vlog_config
from ..mdhelp_io.generics import read_json_safe, write_json_safe
from ..mdhelp_io.terminal import detect_terminal_luma
from ..ui.help.help_templates import OPTION_TEMPLATES
from ..ui.theming.skin import Skin, default_for_terminal
from ..ui.theming.style_presets import list_presets, lookup

AUTO_STYLE = "auto"

# environment variable -> setting name
ENV_OVERRIDES = {
    "MDHELP_STYLE": "style",
    "MDHELP_MAX_WIDTH": "max_width",
    "MDHELP_FULL_WIDTH": "full_width",
    "MDHELP_OPTIONS_TEMPLATE": "options_template",
}

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


# * Default settings dataclass for help rendering
@dataclass
class HelpSettings:
    # "auto" picks a skin from the terminal background, else a preset identifier
    style: str = AUTO_STYLE
    # cap on the width used for rendering (None: terminal width)
    max_width: Optional[int] = None
    # print each section at the full width instead of the unified content width
    full_width: bool = False
    # key into OPTION_TEMPLATES
    options_template: str = "table"

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if not isinstance(self.style, str):
            raise ValueError(f"style must be a string, got {type(self.style).__name__}")
        if self.style.lower() != AUTO_STYLE:
            try:
                lookup(self.style)
            except LookupError:
                valid = ", ".join([AUTO_STYLE, *list_presets()])
                raise ValueError(
                    f"style must be one of {valid}, got '{self.style}'"
                ) from None

        # bool is an int subclass; reject it explicitly
        if self.max_width is not None and (
            isinstance(self.max_width, bool)
            or not isinstance(self.max_width, int)
            or self.max_width < 1
        ):
            raise ValueError(
                f"max_width must be a positive integer or null, got {self.max_width!r}"
            )

        # full_width strict bool validation (no coercion)
        if not isinstance(self.full_width, bool):
            raise ValueError(
                f"full_width must be a boolean (true/false), "
                f"got {type(self.full_width).__name__}: {self.full_width}"
            )

        if self.options_template not in OPTION_TEMPLATES:
            valid = ", ".join(OPTION_TEMPLATES)
            raise ValueError(
                f"options_template must be one of {valid}, got '{self.options_template}'"
            )


# * Parse one environment override into the setting's type
def _parse_env_value(env_name: str, key: str, raw: str) -> Any:
    text = raw.strip()
    if key == "max_width":
        if text.lower() in ("", "none", "null"):
            return None
        try:
            return int(text)
        except ValueError:
            raise SettingsValidationError(
                f"{env_name} must be an integer, got '{raw}'", key, raw
            ) from None
    if key == "full_width":
        lowered = text.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise SettingsValidationError(
            f"{env_name} must be a boolean (true/false), got '{raw}'", key, raw
        )
    return text


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".mdhelp" / "config.json"
        self._settings: Optional[HelpSettings] = None

    # load persisted settings from file or return defaults
    def load(self) -> HelpSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = HelpSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}", err=True)
                typer.echo("Using default settings", err=True)
                self._settings = HelpSettings()
        else:
            self._settings = HelpSettings()

        return self._settings

    # persisted settings w/ MDHELP_* environment overrides applied (never saved)
    def effective(self, environ: Optional[Mapping[str, str]] = None) -> HelpSettings:
        if environ is None:
            load_dotenv()
            environ = os.environ

        settings = self.load()
        overrides: Dict[str, Any] = {}
        for env_name, key in ENV_OVERRIDES.items():
            raw = environ.get(env_name)
            if raw is None:
                continue
            overrides[key] = _parse_env_value(env_name, key, raw)
            vlog_config(f"{key} (from {env_name})", overrides[key])

        if not overrides:
            return settings
        try:
            return replace(settings, **overrides)
        except ValueError as e:
            key = next(iter(overrides))
            raise SettingsValidationError(str(e), key, overrides[key]) from e

    # save settings to file
    def save(self, settings: HelpSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole settings object
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if key not in {f.name for f in fields(HelpSettings)}:
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        try:
            updated = replace(settings, **{key: value})
        except ValueError as e:
            raise SettingsValidationError(str(e), key, value) from e
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(HelpSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Skin for a settings object: terminal-detected for "auto", else the named preset
def resolve_skin(settings: HelpSettings) -> Skin:
    if settings.style.lower() == AUTO_STYLE:
        return default_for_terminal(detect_terminal_luma())
    return lookup(settings.style).create_skin()
