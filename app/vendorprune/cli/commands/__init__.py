"""CLI commands for vendorprune.

This package contains all subcommand implementations.
"""

from vendorprune.cli.commands import check, init, prune

__all__ = ["check", "init", "prune"]
