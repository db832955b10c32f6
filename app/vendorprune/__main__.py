"""Allow running vendorprune with ``python -m vendorprune``."""

from vendorprune.cli.main import app

app(prog_name="vendorprune")
