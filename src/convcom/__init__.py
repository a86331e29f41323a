"""Compose Conventional Commits from an interactive terminal menu."""

__version__ = "0.1.0"
