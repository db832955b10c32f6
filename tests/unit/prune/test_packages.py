"""Tests for unused package detection and removal."""

from collections.abc import Callable
from pathlib import Path

import pytest
from vendorprune.prune.models import FilesystemState
from vendorprune.prune.packages import (
    ROOT_PACKAGE,
    calculate_unused_packages,
    collect_unused_package_files,
    prune_unused_packages,
)
from vendorprune.prune.snapshot import derive_filesystem_state

TreeFactory = Callable[[list[str]], Path]


class TestCalculateUnusedPackages:
    """Tests for calculate_unused_packages."""

    def test_flat_listing(self) -> None:
        """used={a, b/c} over {a, b/c, b/d, .} leaves b/d and the root unused."""
        state = FilesystemState(root=Path("/proj"), dirs=("a", "b/c", "b/d", "."))

        assert calculate_unused_packages(["a", "b/c"], state) == {"b/d", "."}

    def test_intermediate_dirs(self) -> None:
        """Directories missing from the used list are unused, root included."""
        state = FilesystemState(root=Path("/proj"), dirs=("a", "b", "b/c", "b/d"))

        unused = calculate_unused_packages(["a", "b/c"], state)

        assert unused == {"b", "b/d", ROOT_PACKAGE}

    def test_root_used(self) -> None:
        """The root package is not unused when "." is listed."""
        state = FilesystemState(root=Path("/proj"), dirs=("a",))

        assert calculate_unused_packages([".", "a"], state) == set()

    def test_no_hierarchy(self) -> None:
        """A used parent does not make its children used, and vice versa."""
        state = FilesystemState(root=Path("/proj"), dirs=("foo", "foo/bar", "foo/bar/baz"))

        unused = calculate_unused_packages([".", "foo/bar"], state)

        assert unused == {"foo", "foo/bar/baz"}

    def test_exact_string_match(self) -> None:
        """Prefixes and globs are not interpreted."""
        state = FilesystemState(root=Path("/proj"), dirs=("foo", "foobar"))

        unused = calculate_unused_packages([".", "foo", "foo*"], state)

        assert unused == {"foobar"}

    def test_empty_used_list(self) -> None:
        """With nothing used, every directory and the root are unused."""
        state = FilesystemState(root=Path("/proj"), dirs=("a", "a/b"))

        assert calculate_unused_packages([], state) == {".", "a", "a/b"}


class TestCollectUnusedPackageFiles:
    """Tests for collect_unused_package_files."""

    def test_collects_files_of_unused_packages(self) -> None:
        """Files whose parent is unused are collected, root-level ones included."""
        state = FilesystemState(
            root=Path("/proj"),
            dirs=("a", "b"),
            files=("doc.go", "a/a.go", "b/b.go", "b/sub.go"),
        )

        files = collect_unused_package_files(state, {".", "b"})

        assert files == [
            Path("/proj/doc.go"),
            Path("/proj/b/b.go"),
            Path("/proj/b/sub.go"),
        ]

    def test_preserved_files_kept(self) -> None:
        """License files in unused packages are not collected."""
        state = FilesystemState(
            root=Path("/proj"),
            dirs=("b",),
            files=("LICENSE", "b/b.go", "b/AUTHORS"),
        )

        files = collect_unused_package_files(state, {".", "b"})

        assert files == [Path("/proj/b/b.go")]


class TestPruneUnusedPackages:
    """Tests for prune_unused_packages against a real tree."""

    def test_prunes_unused(self, make_tree: TreeFactory) -> None:
        """Unused package files are deleted and the unused set is returned."""
        root = make_tree(["doc.go", "LICENSE", "a/a.go", "b/b.go", "b/NOTICE"])
        state = derive_filesystem_state(root)

        unused, removed = prune_unused_packages(["a"], state)

        assert unused == {".", "b"}
        assert set(removed) == {root / "doc.go", root / "b" / "b.go"}
        assert (root / "a" / "a.go").exists()
        assert (root / "LICENSE").exists()
        assert (root / "b" / "NOTICE").exists()

    def test_error_aborts(self, make_tree: TreeFactory) -> None:
        """A removal failure other than not-found propagates."""
        root = make_tree(["b/b.go"])
        state = derive_filesystem_state(root)

        def failing_remover(path: Path) -> None:
            raise IsADirectoryError(str(path))

        with pytest.raises(IsADirectoryError):
            prune_unused_packages([], state, remover=failing_remover)
