"""Empty directory sweep.

Stages only ever delete files (or whole vendor trees), so directories they
empty are left behind. The sweep checks each candidate against the live
filesystem and removes the ones with nothing left in them.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from vendorprune.prune.models import FilesystemState
from vendorprune.prune.remover import Remover, is_non_empty_dir, remove_path

logger = logging.getLogger(__name__)

EmptinessOracle = Callable[[Path], bool]


def _sweep(
    candidates: Iterable[Path],
    is_non_empty: EmptinessOracle,
    remover: Remover,
    log: logging.Logger,
) -> list[Path]:
    """Remove each candidate directory that holds no entries.

    Candidates are checked deepest first so a parent emptied by the
    removal of its last child directory is removed in the same sweep.
    """
    removed: list[Path] = []

    for path in sorted(set(candidates), key=lambda p: (-len(p.parts), str(p))):
        if is_non_empty(path):
            continue

        try:
            remover(path)
        except FileNotFoundError:
            continue
        log.debug("Removed empty dir %s", path)
        removed.append(path)

    return removed


def delete_empty_dirs(
    state: FilesystemState,
    *,
    is_non_empty: EmptinessOracle = is_non_empty_dir,
    remover: Remover = remove_path,
    log: logging.Logger = logger,
) -> list[Path]:
    """Remove every snapshot directory that is empty now.

    Uses the directory list captured at snapshot time; the emptiness of
    each directory is checked against the current filesystem. The
    snapshot root is never a candidate.

    Args:
        state: Snapshot whose directories are candidates.
        is_non_empty: Oracle reporting whether a directory has entries.
        remover: Primitive used to remove each directory.
        log: Sink for per-directory debug messages.

    Returns:
        Directories that were removed.

    Raises:
        OSError: If a directory cannot be read or removed.
    """
    return _sweep((state.absolute(d) for d in state.dirs), is_non_empty, remover, log)


def delete_empty_dirs_from_paths(
    deleted_files: Iterable[Path],
    *,
    root: Path | None = None,
    is_non_empty: EmptinessOracle = is_non_empty_dir,
    remover: Remover = remove_path,
    log: logging.Logger = logger,
) -> list[Path]:
    """Remove the parents of just-deleted files when they are now empty.

    Incremental variant of ``delete_empty_dirs`` for callers that only
    hold the list of files they removed.

    Args:
        deleted_files: Absolute paths of files that were deleted.
        root: Directory that must never be removed, if any.
        is_non_empty: Oracle reporting whether a directory has entries.
        remover: Primitive used to remove each directory.
        log: Sink for per-directory debug messages.

    Returns:
        Directories that were removed.

    Raises:
        OSError: If a directory cannot be read or removed.
    """
    candidates = {Path(path).parent for path in deleted_files}
    if root is not None:
        candidates.discard(Path(root))
    return _sweep(candidates, is_non_empty, remover, log)
