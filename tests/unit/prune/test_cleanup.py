"""Tests for the empty directory sweep."""

from collections.abc import Callable
from pathlib import Path

import pytest
from vendorprune.prune.cleanup import delete_empty_dirs, delete_empty_dirs_from_paths
from vendorprune.prune.models import FilesystemState
from vendorprune.prune.snapshot import derive_filesystem_state

TreeFactory = Callable[[list[str]], Path]


class TestDeleteEmptyDirs:
    """Tests for delete_empty_dirs."""

    def test_removes_emptied_dirs(self, make_tree: TreeFactory) -> None:
        """A directory whose files were deleted after the snapshot is removed."""
        root = make_tree(["keep/a.go", "gone/b.md"])
        state = derive_filesystem_state(root)
        (root / "gone" / "b.md").unlink()

        removed = delete_empty_dirs(state)

        assert removed == [root / "gone"]
        assert (root / "keep").is_dir()

    def test_nested_empty_dirs_removed_in_one_sweep(self, make_tree: TreeFactory) -> None:
        """Parents emptied by removing their child directories go too."""
        root = make_tree(["a/b/c/", "x.go"])
        state = derive_filesystem_state(root)

        removed = delete_empty_dirs(state)

        assert removed == [root / "a" / "b" / "c", root / "a" / "b", root / "a"]
        assert (root / "x.go").exists()

    def test_root_never_removed(self, make_tree: TreeFactory) -> None:
        """The snapshot root survives even when empty."""
        root = make_tree(["only/"])
        state = derive_filesystem_state(root)

        delete_empty_dirs(state)

        assert root.is_dir()
        assert list(root.iterdir()) == []

    def test_already_gone_tolerated(self, make_tree: TreeFactory) -> None:
        """Directories removed before the sweep are skipped."""
        root = make_tree(["a/"])
        state = derive_filesystem_state(root)
        (root / "a").rmdir()

        assert delete_empty_dirs(state) == []

    def test_oracle_error_propagates(self) -> None:
        """Failures reading a directory abort the sweep."""
        state = FilesystemState(root=Path("/proj"), dirs=("a",))

        def broken_oracle(path: Path) -> bool:
            raise PermissionError(str(path))

        with pytest.raises(PermissionError):
            delete_empty_dirs(state, is_non_empty=broken_oracle)

    def test_injected_collaborators(self) -> None:
        """The sweep only removes what the oracle reports as empty."""
        state = FilesystemState(root=Path("/proj"), dirs=("full", "empty"))
        removed_paths: list[Path] = []

        removed = delete_empty_dirs(
            state,
            is_non_empty=lambda path: path.name == "full",
            remover=removed_paths.append,
        )

        assert removed == [Path("/proj/empty")]
        assert removed_paths == [Path("/proj/empty")]


class TestDeleteEmptyDirsFromPaths:
    """Tests for the incremental sweep variant."""

    def test_parents_of_deleted_files(self, make_tree: TreeFactory) -> None:
        """Only the parents of deleted files are candidates."""
        root = make_tree(["a/x.md", "b/y.md", "b/keep.go", "c/"])
        (root / "a" / "x.md").unlink()
        (root / "b" / "y.md").unlink()

        removed = delete_empty_dirs_from_paths([root / "a" / "x.md", root / "b" / "y.md"])

        assert removed == [root / "a"]
        assert (root / "b").is_dir()
        # Not a candidate, although empty.
        assert (root / "c").is_dir()

    def test_root_excluded(self, make_tree: TreeFactory) -> None:
        """The given root is never removed."""
        root = make_tree(["x.md"])
        (root / "x.md").unlink()

        removed = delete_empty_dirs_from_paths([root / "x.md"], root=root)

        assert removed == []
        assert root.is_dir()
