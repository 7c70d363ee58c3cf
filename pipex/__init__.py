"""Command lookup along PATH and small text, number, buffer, list and line-reading utilities."""

__version__ = "0.1.0"