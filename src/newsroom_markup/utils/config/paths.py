"""
Configuration file paths and constants for the newsroom markup engine.
"""

from dataclasses import dataclass
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass
class ConfigPaths:
    """Configuration file paths and constants."""

    DEFAULT_CONFIG_FILE: str = "newsroom_markup.config.json"
    ENV_FILE: str = ".env"
    SCHEMA_FILE: str = str(_PACKAGE_DIR / "config_schema.json")
