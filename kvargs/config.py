# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Settings loader for kvargs parsers.

Settings live in a YAML or TOML file:

    # kvargs.yaml
    delimiter: ":"
    strict: false
    log_mode: json
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from kvargs.exceptions import ConfigError
from kvargs.logger import logger
from kvargs.parser.parser_types import DEFAULT_DELIMITER

CONFIG_ENV_VAR = "KVARGS_CONFIG"


class ParserSettings(BaseModel):
    """Validated parser settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    delimiter: str = DEFAULT_DELIMITER
    strict: bool = True
    log_mode: Literal["cli", "json"] | None = None

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value


def find_settings_file() -> Path | None:
    """Return the first settings file found, checking `KVARGS_CONFIG` first."""
    candidates = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path))
    candidates.extend(
        [
            Path.cwd() / "kvargs.yaml",
            Path.cwd() / "kvargs.toml",
            Path.home() / ".config" / "kvargs" / "kvargs.yaml",
            Path.home() / ".config" / "kvargs" / "kvargs.toml",
        ]
    )
    return next((path for path in candidates if path.is_file()), None)


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(config_file)
            if suffix == ".toml":
                return toml.load(config_file)
    except OSError as error:
        raise ConfigError(f"Could not read settings file '{path}': {error}") from error
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse settings file '{path}': {error}") from error
    raise ConfigError(f"Unsupported settings file format: '{path.suffix}'")


def load_settings(path: str | Path | None = None) -> ParserSettings:
    """
    Load parser settings.

    Args:
        path (str | Path | None): Settings file. If None, `find_settings_file()`
            is used and defaults apply when nothing is found.

    Returns:
        ParserSettings: The validated settings.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if path is None:
        path = find_settings_file()
        if path is None:
            logger.debug("No settings file found, using defaults.")
            return ParserSettings()

    path = Path(path)
    raw = _read_raw(path)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file '{path}' must contain a mapping")

    try:
        settings = ParserSettings(**raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid settings in '{path}': {error}") from error
    logger.debug("Loaded settings from '%s': %s", path, settings)
    return settings
