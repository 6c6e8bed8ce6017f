"""
CLI package for the newsroom markup engine.

Provides the typer application and its console-script entry point.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]
