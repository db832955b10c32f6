"""Nested vendor directory removal.

A dependency may ship its own vendor tree. Since the consuming project
flattens all dependencies into a single vendor directory, any vendor
directory found below a project root is removed as a whole.
"""

import logging
from collections.abc import Callable
from pathlib import Path, PurePosixPath

from vendorprune.prune.models import FilesystemState
from vendorprune.prune.remover import Remover, remove_all, remove_tree

logger = logging.getLogger(__name__)

VENDOR_DIR_NAME = "vendor"

VendorDirLocator = Callable[[FilesystemState], list[Path]]


def collect_nested_vendor_dirs(state: FilesystemState) -> list[Path]:
    """Locate vendor directories and vendor symlinks below the root.

    A directory or symbolic link qualifies when its base name is exactly
    "vendor". Entries inside an already collected vendor tree are not
    listed, since removing the outer tree removes them too. The root
    itself is never listed.

    Args:
        state: Snapshot to inspect.

    Returns:
        Absolute paths in snapshot order, directories before links.
    """
    found: list[str] = []

    for entry in (*state.dirs, *state.links):
        path = PurePosixPath(entry)
        if path.name != VENDOR_DIR_NAME:
            continue
        if any(PurePosixPath(outer) in path.parents for outer in found):
            continue
        found.append(entry)

    return [state.absolute(entry) for entry in found]


def prune_vendor_dirs(
    state: FilesystemState,
    *,
    locator: VendorDirLocator = collect_nested_vendor_dirs,
    remover: Remover = remove_tree,
    log: logging.Logger = logger,
) -> list[Path]:
    """Delete all nested vendor directories within the snapshot root.

    Directories are removed recursively; symbolic links are unlinked and
    their targets left untouched.

    Args:
        state: Snapshot to prune.
        locator: Finds the vendor paths to remove.
        remover: Primitive used to remove each vendor path.
        log: Sink for progress messages.

    Returns:
        Paths that were removed.

    Raises:
        OSError: On the first removal failure other than a missing path.
    """
    to_delete = locator(state)
    log.info("Pruning %d nested vendor dir(s) in %s", len(to_delete), state.root)
    return remove_all(to_delete, remover, log)
