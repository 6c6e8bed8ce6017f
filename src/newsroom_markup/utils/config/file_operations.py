"""
Reading configuration sources from disk.

Paths given to the config layer are relative to the project root unless
absolute. The ``.env`` file is optional; a JSON file that was asked for but
is missing, unreadable or not an object raises a configuration error.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


logger = logging.getLogger(__name__)


class FileOperations:
    """Disk access for one project root: JSON config files and the ``.env`` file."""

    def __init__(self, project_root: Path, env_file: str) -> None:
        self.project_root = project_root
        self.env_file = env_file
        self.logger = logger

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Anchor ``path`` at the project root unless it is already absolute."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return (self.project_root / candidate).resolve()

    def load_environment_variables(self) -> bool:
        """
        Export the variables of the project's ``.env`` file, if there is one.

        Variables already present in the process environment win.

        Returns:
            True if a .env file was found and loaded
        """
        env_path = self.resolve_path(self.env_file)
        if not env_path.is_file():
            self.logger.debug(f"No {self.env_file} at {env_path}")
            return False

        load_dotenv(env_path)
        self.logger.debug(f"Loaded environment from {env_path}")
        return True

    def load_json_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read a JSON object from ``file_path``.

        Raises:
            ConfigurationFileNotFoundError: If the file does not exist
            ConfigurationError: If it cannot be read, is not JSON, or is not an object
        """
        path = self.resolve_path(file_path)

        if not path.exists():
            self.logger.error(f"Configuration file not found: {path}")
            raise ConfigurationFileNotFoundError(
                f"Configuration file not found: {path}",
                config_file=str(path),
                searched_paths=[str(self.project_root)],
            )

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON in {path}: {e}")
            raise ConfigurationError(f"Invalid JSON: {e}", config_file=str(path)) from e
        except OSError as e:
            self.logger.error(f"Cannot read {path}: {e}")
            raise ConfigurationError(f"Cannot read file: {e}", config_file=str(path)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Expected a JSON object, got {type(data).__name__}",
                config_file=str(path),
            )

        self.logger.debug(f"Read {path}")
        return data
