"""A sparse two-dimensional text board with an interactive command."""

__version__ = "0.1.0"
__all__ = ["board", "cli"]