"""Command-line interface for Usagi."""
