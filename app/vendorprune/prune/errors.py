"""Exceptions raised by pruning runs."""

from vendorprune.prune.models import PruneStage


class PruneError(Exception):
    """Base exception for pruning errors."""


class SnapshotError(PruneError):
    """Raised when the directory tree cannot be enumerated."""


class StageError(PruneError):
    """Raised when a pruning stage hits an unrecoverable filesystem error.

    Attributes:
        stage: Stage that failed.
        cause: Underlying OS error.
    """

    def __init__(self, stage: PruneStage, cause: OSError) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage.description}: {cause}")
