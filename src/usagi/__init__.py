"""Usagi - an interactive command-line shopping list."""

__version__ = "0.1.0"
