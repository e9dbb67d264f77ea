"""AidMap: humanitarian aid location tracking service."""

__version__ = "0.1.0"
