"""Configuration, lock file, and path handling for vendorprune."""
