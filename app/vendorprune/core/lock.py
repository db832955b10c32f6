"""Lock file loading.

The lock file is produced by the dependency resolver. It is read-only
here: the packages listed per project are trusted as-is.
"""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from vendorprune.models.lock import Lock


class LockError(Exception):
    """Base exception for lock file errors."""


class LockNotFoundError(LockError):
    """Raised when the lock file is not found."""


class LockParseError(LockError):
    """Raised when the lock file cannot be parsed or validated."""


def load_lock(path: Path) -> Lock:
    """Load and validate a lock file.

    Args:
        path: Path to the TOML lock file.

    Returns:
        Validated Lock object.

    Raises:
        LockNotFoundError: If the file doesn't exist.
        LockParseError: If the file is not valid TOML or not a valid lock.
    """
    if not path.exists():
        raise LockNotFoundError(f"Lock file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise LockParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise LockError(f"Failed to read lock file: {e}") from e

    try:
        return Lock.model_validate(data)
    except ValidationError as e:
        raise LockParseError(f"Invalid lock content: {e}") from e
