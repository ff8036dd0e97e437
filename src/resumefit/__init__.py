"""Fit a resume layout onto one printable page with links and a searchable text layer."""

__version__ = "0.1.0"
