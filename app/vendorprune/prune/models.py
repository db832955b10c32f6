"""Pruning domain models.

This module defines the data structures shared by every pruning stage:
the set of enabled prune options, the stage identifiers used in error
reporting, the frozen filesystem snapshot a run operates on, and the
result returned by a completed run.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from pathlib import Path


class PruneOptions(Flag):
    """Set of independent pruning policies.

    Members combine with ``|`` and never imply each other. An empty set
    (``PruneOptions(0)``) still sweeps empty directories.

    Attributes:
        NESTED_VENDOR_DIRS: Remove vendor trees nested below the project root.
        UNUSED_PACKAGES: Remove files of packages the project does not import.
        NON_GO_FILES: Remove files that are neither source nor legal files.
        GO_TESTS: Remove ``*_test.go`` files.
    """

    NESTED_VENDOR_DIRS = auto()
    UNUSED_PACKAGES = auto()
    NON_GO_FILES = auto()
    GO_TESTS = auto()

    @classmethod
    def all(cls) -> "PruneOptions":
        """Return the set with every policy enabled."""
        return cls.NESTED_VENDOR_DIRS | cls.UNUSED_PACKAGES | cls.NON_GO_FILES | cls.GO_TESTS

    @classmethod
    def from_flags(
        cls,
        *,
        nested_vendor: bool = False,
        unused_packages: bool = False,
        non_go: bool = False,
        go_tests: bool = False,
    ) -> "PruneOptions":
        """Build an option set from individual booleans."""
        options = cls(0)
        if nested_vendor:
            options |= cls.NESTED_VENDOR_DIRS
        if unused_packages:
            options |= cls.UNUSED_PACKAGES
        if non_go:
            options |= cls.NON_GO_FILES
        if go_tests:
            options |= cls.GO_TESTS
        return options

    def describe(self) -> str:
        """Return a comma separated list of enabled policy names."""
        names = [member.name.lower() for member in PruneOptions if member in self and member.name]
        return ", ".join(names) if names else "none"


class PruneStage(str, Enum):
    """Stage of a pruning run, used to tag failures.

    Attributes:
        NESTED_VENDOR_DIRS: Nested vendor directory removal.
        UNUSED_PACKAGES: Unused package removal.
        NON_GO_FILES: Non-Go file removal.
        GO_TESTS: Go test file removal.
        EMPTY_DIRS: Empty directory sweep.
    """

    NESTED_VENDOR_DIRS = "nested_vendor_dirs"
    UNUSED_PACKAGES = "unused_packages"
    NON_GO_FILES = "non_go_files"
    GO_TESTS = "go_tests"
    EMPTY_DIRS = "empty_dirs"

    @property
    def description(self) -> str:
        """Human-readable description of what failed in this stage."""
        return _STAGE_DESCRIPTIONS[self]


_STAGE_DESCRIPTIONS: dict[PruneStage, str] = {
    PruneStage.NESTED_VENDOR_DIRS: "failed to prune nested vendor directories",
    PruneStage.UNUSED_PACKAGES: "failed to prune unused packages",
    PruneStage.NON_GO_FILES: "failed to prune non-Go files",
    PruneStage.GO_TESTS: "failed to prune Go test files",
    PruneStage.EMPTY_DIRS: "could not delete empty dirs",
}


@dataclass(frozen=True, slots=True)
class FilesystemState:
    """Point-in-time listing of a directory tree.

    All paths are slash-separated and relative to ``root``. The root
    itself is never listed. Symbolic links are recorded in ``links`` only
    and are never followed.

    Attributes:
        root: Absolute path of the walked directory.
        dirs: Relative directory paths, parents before children.
        files: Relative regular file paths.
        links: Relative symbolic link paths.
    """

    root: Path
    dirs: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    links: tuple[str, ...] = ()

    def absolute(self, relative: str) -> Path:
        """Join a snapshot-relative path onto the root."""
        return self.root.joinpath(*relative.split("/"))


@dataclass(slots=True)
class PruneResult:
    """Outcome of a completed pruning run.

    Attributes:
        root: Directory that was pruned.
        options: Policies that were applied.
        removed: Absolute paths removed, in removal order.
        unused_packages: Packages judged unused, or None if that stage did not run.
    """

    root: Path
    options: PruneOptions
    removed: list[Path] = field(default_factory=list)
    unused_packages: set[str] | None = None

    @property
    def removed_count(self) -> int:
        """Number of paths removed during the run."""
        return len(self.removed)
