"""
``NEWSROOM_MARKUP_*`` environment overrides.

Each recognised variable maps to one dotted configuration key and a target
type. Unset or blank variables are ignored.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Tuple

from ...exceptions.config_exceptions import EnvironmentVariableError


logger = logging.getLogger(__name__)


class EnvironmentHandler:
    """Applies environment overrides on top of a configuration dictionary."""

    ENV_MAPPING: Dict[str, Tuple[str, str]] = {
        'NEWSROOM_MARKUP_LOG_LEVEL': ('logging.level', 'string'),
        'NEWSROOM_MARKUP_LOG_FORMAT': ('logging.format', 'string'),
        'NEWSROOM_MARKUP_CONTENT_BUDGET': ('metadata.content_budget', 'integer'),
        'NEWSROOM_MARKUP_EXCERPT_LENGTH': ('excerpt.max_length', 'integer'),
    }

    def __init__(self) -> None:
        self.logger = logger

    def convert_env_value(self, var_name: str, value: str, target_type: str = 'string') -> Any:
        """
        Convert a raw variable value to ``target_type`` (``string`` or ``integer``).

        Raises:
            EnvironmentVariableError: If an integer variable does not hold an integer
        """
        value = value.strip()
        if target_type != 'integer':
            return value
        try:
            return int(value)
        except ValueError as e:
            raise EnvironmentVariableError(
                f"{var_name}={value!r} is not an integer", var_name
            ) from e

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``config`` with every set variable applied."""
        overridden = deepcopy(config)

        for var_name, (dotted_key, target_type) in self.ENV_MAPPING.items():
            raw = os.getenv(var_name)
            if raw is None or not raw.strip():
                continue
            self._assign(overridden, dotted_key, self.convert_env_value(var_name, raw, target_type))
            self.logger.debug(f"{var_name} overrides {dotted_key}")

        return overridden

    @staticmethod
    def _assign(config: Dict[str, Any], dotted_key: str, value: Any) -> None:
        *sections, leaf = dotted_key.split('.')
        target = config
        for section in sections:
            if not isinstance(target.get(section), dict):
                target[section] = {}
            target = target[section]
        target[leaf] = value
