"""Vendored dependency pruning.

This module provides the pruning engine, its individual stages, the
legal file preservation rule, and the snapshot the stages operate on.
"""

from vendorprune.prune.cleanup import delete_empty_dirs, delete_empty_dirs_from_paths
from vendorprune.prune.engine import PruneEngine, prune_project
from vendorprune.prune.errors import PruneError, SnapshotError, StageError
from vendorprune.prune.filters import (
    GO_BUILD_EXTENSIONS,
    file_ext,
    is_go_build_file,
    prune_go_test_files,
    prune_non_go_files,
)
from vendorprune.prune.models import FilesystemState, PruneOptions, PruneResult, PruneStage
from vendorprune.prune.packages import (
    calculate_unused_packages,
    collect_unused_package_files,
    prune_unused_packages,
)
from vendorprune.prune.preserved import (
    LEGAL_FILE_SUBSTRINGS,
    LICENSE_FILE_PREFIXES,
    PreservationRule,
    is_preserved_file,
)
from vendorprune.prune.snapshot import derive_filesystem_state
from vendorprune.prune.vendor import collect_nested_vendor_dirs, prune_vendor_dirs

__all__ = [
    "GO_BUILD_EXTENSIONS",
    "LEGAL_FILE_SUBSTRINGS",
    "LICENSE_FILE_PREFIXES",
    "FilesystemState",
    "PreservationRule",
    "PruneEngine",
    "PruneError",
    "PruneOptions",
    "PruneResult",
    "PruneStage",
    "SnapshotError",
    "StageError",
    "calculate_unused_packages",
    "collect_nested_vendor_dirs",
    "collect_unused_package_files",
    "delete_empty_dirs",
    "delete_empty_dirs_from_paths",
    "derive_filesystem_state",
    "file_ext",
    "is_go_build_file",
    "is_preserved_file",
    "prune_go_test_files",
    "prune_non_go_files",
    "prune_project",
    "prune_unused_packages",
    "prune_vendor_dirs",
]
