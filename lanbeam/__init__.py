"""Serve files to other devices on the local network."""

__version__ = "0.1.0"
