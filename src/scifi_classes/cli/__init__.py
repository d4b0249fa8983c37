"""
CLI package for scifi_classes.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from scifi_classes.cli.app import app, main

__all__ = [
    "app",
    "main",
]
