"""Historify: search over digitized historical documents."""

__version__ = "0.1.0"
