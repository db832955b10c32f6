"""vendorprune - prune vendored Go dependencies down to what a build needs."""

__version__ = "0.1.0"
