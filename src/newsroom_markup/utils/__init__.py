"""
Utilities package for the newsroom markup engine.

This package contains configuration and logging helpers used by the CLI
and by applications embedding the engine.
"""

from .config import ConfigManager, ConfigPaths
from .logging_config import LogFormat, LogLevel, setup_logging

__all__ = [
    "ConfigManager",
    "ConfigPaths",
    "LogFormat",
    "LogLevel",
    "setup_logging",
]
