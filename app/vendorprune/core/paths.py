"""Configuration file locations for vendorprune.

A project-local ``vendorprune.toml`` takes precedence; otherwise the
user-wide file under the XDG configuration directory is used.

XDG defaults:
- Config: ~/.config/vendorprune/config.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "vendorprune"

PROJECT_CONFIG_NAME = "vendorprune.toml"

DEFAULT_LOCK_NAME = "Gopkg.lock"


def get_config_dir() -> Path:
    """Get the user configuration directory path.

    Returns:
        Path to ~/.config/vendorprune/ (or XDG_CONFIG_HOME/vendorprune/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_config_path() -> Path:
    """Get the user-wide configuration file path.

    Returns:
        Path to ~/.config/vendorprune/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """Get the project-local configuration file path.

    Args:
        project_dir: Project directory. If None, uses the current directory.

    Returns:
        Path to <project_dir>/vendorprune.toml.
    """
    return (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME


def find_config_path(project_dir: Path | None = None) -> Path | None:
    """Locate the configuration file to use.

    Args:
        project_dir: Project directory. If None, uses the current directory.

    Returns:
        The project-local file if it exists, else the user-wide file if it
        exists, else None.
    """
    for candidate in (get_project_config_path(project_dir), get_user_config_path()):
        if candidate.is_file():
            return candidate
    return None
