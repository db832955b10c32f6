"""File-type based pruning stages.

Provides the non-Go file stage, which keeps only source and native build
inputs plus preserved legal files, and the Go test file stage, which
removes ``*_test.go`` files without any preservation exemption.
"""

import logging
from pathlib import Path, PurePosixPath

from vendorprune.prune.models import FilesystemState
from vendorprune.prune.preserved import DEFAULT_RULE, PreservationRule
from vendorprune.prune.remover import Remover, remove_all, remove_path

logger = logging.getLogger(__name__)

# Extensions the Go toolchain may consume when building a package.
# Comparison is case-sensitive: ".s" and ".S" are distinct entries.
GO_BUILD_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".go",
        ".c",
        ".cc",
        ".cpp",
        ".cxx",
        ".m",
        ".h",
        ".hh",
        ".hpp",
        ".hxx",
        ".f",
        ".F",
        ".for",
        ".f90",
        ".s",
        ".S",
        ".swig",
        ".swigcxx",
        ".syso",
    }
)

GO_TEST_SUFFIX = "_test.go"


def file_ext(name: str) -> str:
    """Return the extension of a file's base name.

    The extension runs from the last "." of the base name to its end,
    dot included. Names without a dot have no extension.

    Args:
        name: File name or slash-separated path.

    Returns:
        The extension, or an empty string.
    """
    base = PurePosixPath(name).name
    index = base.rfind(".")
    if index < 0:
        return ""
    return base[index:]


def is_go_build_file(name: str) -> bool:
    """Check if a file's extension is on the build allow-list."""
    return file_ext(name) in GO_BUILD_EXTENSIONS


def collect_non_go_files(
    state: FilesystemState,
    rule: PreservationRule = DEFAULT_RULE,
) -> list[Path]:
    """Collect files that are neither build inputs nor preserved.

    Args:
        state: Snapshot to inspect.
        rule: Preservation rule exempting legal files.

    Returns:
        Absolute paths of files to delete, in snapshot order.
    """
    to_delete: list[Path] = []

    for path in state.files:
        if is_go_build_file(path):
            continue

        if rule.is_preserved(path):
            continue

        to_delete.append(state.absolute(path))

    return to_delete


def prune_non_go_files(
    state: FilesystemState,
    *,
    rule: PreservationRule = DEFAULT_RULE,
    remover: Remover = remove_path,
    log: logging.Logger = logger,
) -> list[Path]:
    """Delete all non-Go files in the snapshot.

    Files matching the preservation rule are not pruned. Deletion starts
    after the whole snapshot has been classified.

    Args:
        state: Snapshot to prune.
        rule: Preservation rule exempting legal files.
        remover: Primitive used to remove each file.
        log: Sink for progress messages.

    Returns:
        Paths that were removed.

    Raises:
        OSError: On the first removal failure other than a missing file.
    """
    to_delete = collect_non_go_files(state, rule)
    log.info("Pruning %d non-Go file(s) in %s", len(to_delete), state.root)
    return remove_all(to_delete, remover, log)


def collect_go_test_files(state: FilesystemState) -> list[Path]:
    """Collect every ``*_test.go`` file in the snapshot."""
    return [state.absolute(path) for path in state.files if path.endswith(GO_TEST_SUFFIX)]


def prune_go_test_files(
    state: FilesystemState,
    *,
    remover: Remover = remove_path,
    log: logging.Logger = logger,
) -> list[Path]:
    """Delete all Go test files in the snapshot.

    Preserved names get no exemption here: ``license_test.go`` is deleted.

    Args:
        state: Snapshot to prune.
        remover: Primitive used to remove each file.
        log: Sink for progress messages.

    Returns:
        Paths that were removed.

    Raises:
        OSError: On the first removal failure other than a missing file.
    """
    to_delete = collect_go_test_files(state)
    log.info("Pruning %d Go test file(s) in %s", len(to_delete), state.root)
    return remove_all(to_delete, remover, log)
