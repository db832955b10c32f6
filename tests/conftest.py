"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

TreeFactory = Callable[[list[str]], Path]
TreeLister = Callable[[Path], set[str]]


@pytest.fixture
def list_tree() -> TreeLister:
    """Return every file, link, and directory below a root as relative posix paths."""

    def _list(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*")}

    return _list


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create a project tree from relative paths.

    Paths ending in "/" become (possibly empty) directories; all others
    become files containing their own name.
    """

    def _make(paths: list[str]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel in paths:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(rel)
        return root

    return _make


@pytest.fixture
def sample_project(make_tree: TreeFactory) -> Path:
    """A small vendored project with sources, tests, docs, and a nested vendor tree."""
    return make_tree(
        [
            "LICENSE",
            "README.md",
            "doc.go",
            "pkg/a.go",
            "pkg/a_test.go",
            "pkg/README.md",
            "pkg/asm_amd64.s",
            "internal/util/util.go",
            "internal/util/NOTICE.txt",
            "examples/main.go",
            "examples/data/input.json",
            "vendor/github.com/dep/x/x.go",
            "testdata/",
        ]
    )
