"""Connector catalog — local catalog path resolution."""

__version__ = "0.1.0"
