"""Unused package detection and removal.

Every directory in a snapshot is treated as a candidate package. A package
is unused when its slash-separated relative path does not appear verbatim
in the project's used package list; ``"."`` stands for the root package.
Membership is a flat string comparison: ``foo/bar/baz`` is judged on its
own, whatever the status of ``foo/bar``.
"""

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from vendorprune.prune.models import FilesystemState
from vendorprune.prune.preserved import DEFAULT_RULE, PreservationRule
from vendorprune.prune.remover import Remover, remove_all, remove_path

logger = logging.getLogger(__name__)

ROOT_PACKAGE = "."


def calculate_unused_packages(used: Iterable[str], state: FilesystemState) -> set[str]:
    """Compute the packages present in the snapshot but not in use.

    Args:
        used: Package paths relative to the project root.
        state: Snapshot to inspect.

    Returns:
        Set of unused package paths, including "." when the root package
        is not used.
    """
    imported = set(used)
    unused: set[str] = set()

    if ROOT_PACKAGE not in imported:
        unused.add(ROOT_PACKAGE)

    for dir_path in state.dirs:
        pkg = PurePosixPath(dir_path).as_posix()
        if pkg not in imported:
            unused.add(pkg)

    return unused


def collect_unused_package_files(
    state: FilesystemState,
    unused: set[str],
    rule: PreservationRule = DEFAULT_RULE,
) -> list[Path]:
    """Collect the files that belong to unused packages.

    Preserved files are kept even when their package is unused.

    Args:
        state: Snapshot to inspect.
        unused: Unused package paths from ``calculate_unused_packages``.
        rule: Preservation rule exempting legal files.

    Returns:
        Absolute paths of files to delete, in snapshot order.
    """
    files: list[Path] = []

    for path in state.files:
        if rule.is_preserved(path):
            continue

        pkg = PurePosixPath(path).parent.as_posix()
        if pkg in unused:
            files.append(state.absolute(path))

    return files


def prune_unused_packages(
    used: Iterable[str],
    state: FilesystemState,
    *,
    rule: PreservationRule = DEFAULT_RULE,
    remover: Remover = remove_path,
    log: logging.Logger = logger,
) -> tuple[set[str], list[Path]]:
    """Delete the files of packages the project does not use.

    Args:
        used: Package paths relative to the project root.
        state: Snapshot to prune.
        rule: Preservation rule exempting legal files.
        remover: Primitive used to remove each file.
        log: Sink for progress messages.

    Returns:
        Tuple of (unused package set, removed paths).

    Raises:
        OSError: On the first removal failure other than a missing file.
    """
    unused = calculate_unused_packages(used, state)
    to_delete = collect_unused_package_files(state, unused, rule)

    log.info(
        "Pruning %d file(s) from %d unused package(s) in %s",
        len(to_delete),
        len(unused),
        state.root,
    )
    return unused, remove_all(to_delete, remover, log)
