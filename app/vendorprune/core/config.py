"""Prune configuration file I/O.

This module provides functions for loading and saving the prune
configuration in TOML format with validation using Pydantic models.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from vendorprune.core.paths import find_config_path, get_project_config_path
from vendorprune.models.config import Config


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path) -> Config:
    """Load and validate a configuration from a TOML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated Config object.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Config not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def resolve_config(path: Path | None = None, project_dir: Path | None = None) -> Config:
    """Load an explicit config, a discovered config, or the defaults.

    Args:
        path: Explicit configuration file. Must exist when given.
        project_dir: Directory searched for a project-local config.

    Returns:
        Validated Config object; defaults when no file is found.

    Raises:
        ConfigError: If the selected file cannot be loaded.
    """
    if path is not None:
        return load_config(path)

    found = find_config_path(project_dir)
    if found is None:
        return Config()
    return load_config(found)


def save_config(config: Config, path: Path | None = None) -> Path:
    """Save a configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory followed by os.replace().

    Args:
        config: The Config object to save.
        path: Destination. If None, uses the project-local config path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_project_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: Config) -> dict[str, Any]:
    """Convert a Config to a dictionary using the file's key names.

    Unset project overrides are left out.
    """
    prune = config.prune.model_dump(by_alias=True, exclude={"projects"})
    projects = [p.model_dump(by_alias=True, exclude_none=True) for p in config.prune.projects]
    if projects:
        prune["project"] = projects
    return {"prune": prune}
