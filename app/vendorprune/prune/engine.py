"""Pruning run orchestration.

Applies the enabled pruning stages to one project directory in a fixed
order against a single snapshot, then sweeps empty directories. The first
unrecoverable error aborts the run; files removed by earlier stages stay
removed.
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from vendorprune.prune.cleanup import delete_empty_dirs
from vendorprune.prune.errors import StageError
from vendorprune.prune.filters import prune_go_test_files, prune_non_go_files
from vendorprune.prune.models import FilesystemState, PruneOptions, PruneResult, PruneStage
from vendorprune.prune.packages import prune_unused_packages
from vendorprune.prune.preserved import DEFAULT_RULE, PreservationRule
from vendorprune.prune.remover import Remover, remove_path, remove_tree
from vendorprune.prune.snapshot import SnapshotProvider, derive_filesystem_state
from vendorprune.prune.vendor import VendorDirLocator, collect_nested_vendor_dirs, prune_vendor_dirs

logger = logging.getLogger(__name__)


class PruneEngine:
    """Removes files a project's build does not need.

    Collaborators are injected so that runs can be exercised against
    fake snapshots, locators, and removal primitives.

    Args:
        snapshot: Produces the frozen listing of a project directory.
        vendor_locator: Finds nested vendor directories in a snapshot.
        remover: Removes a single file or empty directory.
        tree_remover: Removes a nested vendor tree.
        rule: Preservation rule exempting legal files.
        log: Sink for progress and warnings.
    """

    def __init__(
        self,
        *,
        snapshot: SnapshotProvider = derive_filesystem_state,
        vendor_locator: VendorDirLocator = collect_nested_vendor_dirs,
        remover: Remover = remove_path,
        tree_remover: Remover = remove_tree,
        rule: PreservationRule = DEFAULT_RULE,
        log: logging.Logger | None = None,
    ) -> None:
        self._snapshot = snapshot
        self._vendor_locator = vendor_locator
        self._remover = remover
        self._tree_remover = tree_remover
        self._rule = rule
        self._log = log or logger

    def prune(
        self,
        root: Path,
        used_packages: Iterable[str],
        options: PruneOptions,
    ) -> PruneResult:
        """Prune a project directory in place.

        Args:
            root: Project directory to prune.
            used_packages: Package paths the consuming project imports.
            options: Policies to apply.

        Returns:
            PruneResult listing what was removed.

        Raises:
            SnapshotError: If the directory cannot be enumerated.
            StageError: If a stage fails; carries the stage and cause.
        """
        state = self._snapshot(Path(root))
        result = PruneResult(root=state.root, options=options)

        self._log.info("Pruning %s (%s)", state.root, options.describe())

        if PruneOptions.NESTED_VENDOR_DIRS in options:
            with _stage(PruneStage.NESTED_VENDOR_DIRS):
                result.removed.extend(
                    prune_vendor_dirs(
                        state,
                        locator=self._vendor_locator,
                        remover=self._tree_remover,
                        log=self._log,
                    )
                )

        if PruneOptions.UNUSED_PACKAGES in options:
            with _stage(PruneStage.UNUSED_PACKAGES):
                unused, removed = prune_unused_packages(
                    list(used_packages),
                    state,
                    rule=self._rule,
                    remover=self._remover,
                    log=self._log,
                )
                result.unused_packages = unused
                result.removed.extend(removed)

        if PruneOptions.NON_GO_FILES in options:
            with _stage(PruneStage.NON_GO_FILES):
                result.removed.extend(
                    prune_non_go_files(
                        state, rule=self._rule, remover=self._remover, log=self._log
                    )
                )

        if PruneOptions.GO_TESTS in options:
            with _stage(PruneStage.GO_TESTS):
                result.removed.extend(
                    prune_go_test_files(state, remover=self._remover, log=self._log)
                )

        # Runs regardless of options: any stage may have emptied a directory.
        result.removed.extend(self._delete_empty_dirs(state))

        self._log.info("Pruned %s: removed %d path(s)", state.root, result.removed_count)
        return result

    def _delete_empty_dirs(self, state: FilesystemState) -> list[Path]:
        with _stage(PruneStage.EMPTY_DIRS):
            return delete_empty_dirs(state, remover=self._remover, log=self._log)


@contextmanager
def _stage(stage: PruneStage) -> Iterator[None]:
    """Wrap an OSError raised inside a stage in a StageError."""
    logger.debug("Starting stage %s", stage.value)
    try:
        yield
    except OSError as e:
        raise StageError(stage, e) from e


def prune_project(
    root: Path,
    used_packages: Iterable[str],
    options: PruneOptions,
    log: logging.Logger | None = None,
) -> PruneResult:
    """Prune a project directory with the default collaborators.

    Args:
        root: Project directory to prune.
        used_packages: Package paths the consuming project imports.
        options: Policies to apply.
        log: Optional sink for progress and warnings.

    Returns:
        PruneResult listing what was removed.

    Raises:
        SnapshotError: If the directory cannot be enumerated.
        StageError: If a stage fails.
    """
    return PruneEngine(log=log).prune(root, used_packages, options)
