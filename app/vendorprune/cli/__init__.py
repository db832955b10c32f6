"""CLI package for vendorprune.

This package contains the Typer application and all subcommands.
"""

from vendorprune.cli.main import app

__all__ = ["app"]
