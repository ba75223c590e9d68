"""Publish WMS capabilities into QWC2 theme configuration files."""

__version__ = "0.1.0"
