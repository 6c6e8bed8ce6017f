"""
Configuration for the markup tooling.

Sources, lowest precedence first:

1. ``DEFAULT_CONFIG``
2. ``newsroom_markup.config.json`` in the project root (or ``--config-path``)
3. ``NEWSROOM_MARKUP_*`` environment variables, with ``.env`` loaded first

The merged result is checked against the bundled JSON schema before use.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)
from .defaults import DEFAULT_CONFIG
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)

_MISSING = object()


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries left to right; later values win, sections merge key by key."""
    merged: Dict[str, Any] = {}
    for layer in configs:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(value, dict) and isinstance(current, dict):
                merged[key] = merge_configs(current, value)
            else:
                merged[key] = deepcopy(value)
    return merged


class ConfigManager:
    """
    Loads, validates and serves configuration with dot-notation lookups.

    Without an explicit ``config_file`` the default file is optional and
    built-in defaults are used when it is absent. A file named explicitly
    must exist.

    Usage:
        >>> manager = ConfigManager()
        >>> manager.get("metadata.content_budget")
        2000
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Args:
            config_file: JSON file to read instead of ``newsroom_markup.config.json``
            project_root: Directory relative paths resolve against (default: cwd)
            load_env: Read the project's ``.env`` file into the environment
        """
        self.paths = ConfigPaths()
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.explicit_config_file = config_file is not None
        self.config_file = config_file or self.paths.DEFAULT_CONFIG_FILE

        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.schema_validator = SchemaValidator(self.file_ops, self.paths)
        self.env_handler = EnvironmentHandler()
        self.logger = logger

        self._config: Dict[str, Any] = {}
        self._loaded = False
        self._loaded_from_file = False

        if load_env:
            self.file_ops.load_environment_variables()

    @property
    def config(self) -> Dict[str, Any]:
        """A copy of the merged configuration, loading it on first access."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def loaded_from_file(self) -> bool:
        """Whether a JSON file contributed to the current configuration."""
        return self._loaded_from_file

    def _read_file_layer(self) -> Dict[str, Any]:
        try:
            layer = self.file_ops.load_json_file(self.config_file)
        except ConfigurationFileNotFoundError:
            if self.explicit_config_file:
                raise
            self.logger.debug(f"{self.config_file} not present; using built-in defaults")
            return {}
        self._loaded_from_file = True
        return layer

    def load_config(self, force_reload: bool = False, validate: bool = True) -> Dict[str, Any]:
        """
        Merge every source into the active configuration.

        Args:
            force_reload: Re-read sources even when already loaded
            validate: Check the result against the bundled schema

        Returns:
            A copy of the merged configuration

        Raises:
            ConfigurationError: If a source cannot be read or the result is invalid
        """
        if self._loaded and not force_reload:
            return deepcopy(self._config)

        self._loaded = False
        self._loaded_from_file = False

        try:
            merged = merge_configs(DEFAULT_CONFIG, self._read_file_layer())
            merged = self.env_handler.apply_environment_overrides(merged)
            if validate:
                self.schema_validator.validate_config(merged, config_file=self.config_file)
        except ConfigurationError as e:
            self.logger.error(f"Could not load configuration: {e.message}")
            raise

        self._config = merged
        self._loaded = True
        self.logger.debug(f"Configuration ready (from file: {self._loaded_from_file})")
        return deepcopy(self._config)

    def reload_config(self) -> Dict[str, Any]:
        return self.load_config(force_reload=True)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``preview.placeholder``; ``default`` if absent."""
        node: Any = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def has(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def reset(self) -> None:
        """Forget the loaded configuration; the next access loads it again."""
        self._config = {}
        self._loaded = False
        self._loaded_from_file = False
