"""Reference-count trace logs, circular memory logs, debug print channels and helpers."""

__version__ = "0.1.0"