"""Filesystem snapshot acquisition.

Walks a project directory once and records every directory, regular file
and symbolic link below it. All pruning stages of a run act on this one
frozen listing, even as the tree changes underneath.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from vendorprune.prune.errors import SnapshotError
from vendorprune.prune.models import FilesystemState

logger = logging.getLogger(__name__)

SnapshotProvider = Callable[[Path], FilesystemState]


def derive_filesystem_state(root: Path) -> FilesystemState:
    """Walk a directory tree and capture its contents.

    Entries are visited top-down with names sorted, so parents always
    precede their children. Symbolic links are recorded but not followed.

    Args:
        root: Directory to walk.

    Returns:
        FilesystemState with slash-separated paths relative to root.

    Raises:
        SnapshotError: If root is not a directory or any part of the tree
            cannot be read.
    """
    root = Path(root).absolute()

    if not root.is_dir():
        raise SnapshotError(f"Not a directory: {root}")

    dirs: list[str] = []
    files: list[str] = []
    links: list[str] = []

    def _on_error(error: OSError) -> None:
        raise SnapshotError(f"could not derive filesystem state: {error}") from error

    for current, dirnames, filenames in os.walk(root, onerror=_on_error):
        base = Path(current).relative_to(root)
        dirnames.sort()

        # Symlinked directories show up in dirnames; keep them out of the walk.
        for name in list(dirnames):
            relative = (base / name).as_posix()
            if os.path.islink(os.path.join(current, name)):
                logger.warning("Not following symlinked directory %s in %s", relative, root)
                dirnames.remove(name)
                links.append(relative)
            else:
                dirs.append(relative)

        for name in sorted(filenames):
            relative = (base / name).as_posix()
            if os.path.islink(os.path.join(current, name)):
                links.append(relative)
            else:
                files.append(relative)

    logger.debug(
        "Snapshot of %s: %d dirs, %d files, %d links", root, len(dirs), len(files), len(links)
    )

    return FilesystemState(root=root, dirs=tuple(dirs), files=tuple(files), links=tuple(links))
