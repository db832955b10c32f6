"""Configuration and lock file models for vendorprune."""

from vendorprune.models.config import Config, ProjectPruneConfig, PruneConfig
from vendorprune.models.lock import Lock, LockedProject

__all__ = [
    "Config",
    "Lock",
    "LockedProject",
    "ProjectPruneConfig",
    "PruneConfig",
]
