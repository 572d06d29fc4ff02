"""Endless runner game: jump over and duck under incoming obstacles."""

__version__ = "0.1.0"