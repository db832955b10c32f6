"""Tests for nested vendor directory removal."""

from collections.abc import Callable
from pathlib import Path

import pytest
from vendorprune.prune.models import FilesystemState
from vendorprune.prune.snapshot import derive_filesystem_state
from vendorprune.prune.vendor import collect_nested_vendor_dirs, prune_vendor_dirs

TreeFactory = Callable[[list[str]], Path]


class TestCollectNestedVendorDirs:
    """Tests for the nested vendor locator."""

    def test_finds_vendor_dirs_at_any_depth(self) -> None:
        """Directories named exactly "vendor" are found below the root."""
        state = FilesystemState(
            root=Path("/proj"),
            dirs=("pkg", "pkg/vendor", "vendor", "vendors", "myvendor"),
        )

        assert collect_nested_vendor_dirs(state) == [
            Path("/proj/pkg/vendor"),
            Path("/proj/vendor"),
        ]

    def test_vendor_within_vendor_collapsed(self) -> None:
        """A vendor tree inside a collected vendor tree is not listed."""
        state = FilesystemState(
            root=Path("/proj"),
            dirs=("vendor", "vendor/x", "vendor/x/vendor"),
        )

        assert collect_nested_vendor_dirs(state) == [Path("/proj/vendor")]

    def test_vendor_links_included(self) -> None:
        """Symlinks named vendor are listed after directories."""
        state = FilesystemState(
            root=Path("/proj"),
            dirs=("a", "a/vendor"),
            links=("b/vendor",),
        )

        assert collect_nested_vendor_dirs(state) == [
            Path("/proj/a/vendor"),
            Path("/proj/b/vendor"),
        ]

    def test_files_named_vendor_ignored(self) -> None:
        """Regular files called vendor are not vendor trees."""
        state = FilesystemState(root=Path("/proj"), files=("vendor",))

        assert collect_nested_vendor_dirs(state) == []


class TestPruneVendorDirs:
    """Tests for prune_vendor_dirs against a real tree."""

    def test_removes_non_empty_vendor_tree(self, make_tree: TreeFactory) -> None:
        """Nested vendor trees are removed with their contents."""
        root = make_tree(["a.go", "vendor/github.com/x/y/y.go", "sub/vendor/z.go"])
        state = derive_filesystem_state(root)

        removed = prune_vendor_dirs(state)

        assert removed == [root / "vendor", root / "sub" / "vendor"]
        assert not (root / "vendor").exists()
        assert not (root / "sub" / "vendor").exists()
        assert (root / "sub").is_dir()
        assert (root / "a.go").exists()

    def test_vendor_symlink_unlinked(self, make_tree: TreeFactory, tmp_path: Path) -> None:
        """A vendor symlink is removed without touching its target."""
        root = make_tree(["a.go"])
        target = tmp_path / "elsewhere"
        target.mkdir()
        (target / "keep.go").write_text("package keep")
        (root / "vendor").symlink_to(target, target_is_directory=True)
        state = derive_filesystem_state(root)

        removed = prune_vendor_dirs(state)

        assert removed == [root / "vendor"]
        assert not (root / "vendor").is_symlink()
        assert (target / "keep.go").exists()

    def test_missing_vendor_tolerated(self, make_tree: TreeFactory) -> None:
        """A vendor tree removed after the snapshot is skipped."""
        root = make_tree(["vendor/x.go"])
        state = derive_filesystem_state(root)
        (root / "vendor" / "x.go").unlink()
        (root / "vendor").rmdir()

        assert prune_vendor_dirs(state) == []

    def test_custom_locator_and_remover(self) -> None:
        """Injected collaborators replace the defaults."""
        state = FilesystemState(root=Path("/proj"))
        seen: list[Path] = []

        removed = prune_vendor_dirs(
            state,
            locator=lambda _state: [Path("/proj/third/vendor")],
            remover=seen.append,
        )

        assert seen == [Path("/proj/third/vendor")]
        assert removed == seen

    def test_remove_failure_propagates(self) -> None:
        """Errors other than not-found abort the stage."""
        state = FilesystemState(root=Path("/proj"), dirs=("vendor",))

        def failing_remover(path: Path) -> None:
            raise PermissionError(str(path))

        with pytest.raises(PermissionError):
            prune_vendor_dirs(state, remover=failing_remover)
