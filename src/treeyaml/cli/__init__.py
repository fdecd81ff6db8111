"""
CLI package for treeyaml.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from treeyaml.cli.app import app, main

__all__ = [
    "app",
    "main",
]
