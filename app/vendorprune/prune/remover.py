"""Low-level removal primitives shared by the pruning stages.

Every stage removes paths through ``remove_path`` so that a path which is
already gone is never treated as an error.
"""

import logging
import os
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

Remover = Callable[[Path], None]


def remove_path(path: Path) -> None:
    """Remove a single file, symlink, or empty directory.

    Args:
        path: Absolute path to remove.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the path cannot be removed (e.g. a non-empty directory).
    """
    if path.is_dir() and not path.is_symlink():
        path.rmdir()
    else:
        path.unlink()


def remove_tree(path: Path) -> None:
    """Remove a directory tree, or unlink a symlink without following it.

    Args:
        path: Absolute path to remove.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If any entry in the tree cannot be removed.
    """
    if path.is_symlink() or not path.is_dir():
        path.unlink()
        return

    shutil.rmtree(path)


def remove_all(
    paths: Iterable[Path],
    remover: Remover = remove_path,
    log: logging.Logger = logger,
) -> list[Path]:
    """Remove every path, tolerating paths that are already gone.

    Stops at the first error other than a missing path.

    Args:
        paths: Absolute paths to remove, in order.
        remover: Primitive used to remove one path.
        log: Sink for per-path debug messages.

    Returns:
        Paths that were actually removed.

    Raises:
        OSError: On the first removal failure other than FileNotFoundError.
    """
    removed: list[Path] = []

    for path in paths:
        try:
            remover(path)
        except FileNotFoundError:
            log.debug("Already gone: %s", path)
            continue
        log.debug("Removed %s", path)
        removed.append(path)

    return removed


def is_non_empty_dir(path: Path) -> bool:
    """Check whether a directory still holds at least one entry.

    A missing path or a path that is not a directory counts as empty.

    Args:
        path: Directory to check.

    Returns:
        True if the directory exists and has at least one entry.

    Raises:
        OSError: If the directory exists but cannot be read.
    """
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is not None
    except (FileNotFoundError, NotADirectoryError):
        return False
