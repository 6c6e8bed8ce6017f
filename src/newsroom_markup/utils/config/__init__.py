"""Configuration management package.

This package provides a modular configuration system with support for:
- Built-in defaults
- JSON configuration files
- Environment variable overrides (with .env support)
- JSON schema validation

Usage:
    from newsroom_markup.utils.config import ConfigManager

    config = ConfigManager()
    budget = config.get("metadata.content_budget", 2000)
"""

from .defaults import DEFAULT_CONFIG
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .manager import ConfigManager, merge_configs
from .paths import ConfigPaths
from .schema_validation import SchemaValidator

__all__ = [
    'DEFAULT_CONFIG',
    'ConfigManager',
    'ConfigPaths',
    'EnvironmentHandler',
    'FileOperations',
    'SchemaValidator',
    'merge_configs',
]
