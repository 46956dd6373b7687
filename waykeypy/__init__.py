"""Keyboard state monitor publishing key states to a JSON file and a named pipe."""

__version__ = "0.1.0"

__all__ = ["__version__"]