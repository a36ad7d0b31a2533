"""C-style string routines and printf/scanf-style formatting and parsing."""

__version__ = "0.1.0"