"""
JSON-schema checks for the merged configuration.

The schema ships inside the package (``config_schema.json``) and is
validated itself before first use.
"""

import logging
from typing import Any, Dict, List, Optional

import jsonschema

from ...exceptions.config_exceptions import (
    ConfigurationFileNotFoundError,
    ConfigurationSchemaError,
    ConfigurationValidationError,
)
from .file_operations import FileOperations
from .paths import ConfigPaths


logger = logging.getLogger(__name__)


def _dotted(error: jsonschema.ValidationError) -> str:
    return ".".join(str(part) for part in error.path) or "<root>"


class SchemaValidator:
    """Validates configuration dictionaries with a Draft 7 validator."""

    def __init__(self, file_ops: FileOperations, paths: ConfigPaths) -> None:
        self.file_ops = file_ops
        self.paths = paths
        self.logger = logger
        self._schema: Optional[Dict[str, Any]] = None

    def load_schema(self, schema_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Read and check a schema; the bundled one is cached after the first load.

        Raises:
            ConfigurationSchemaError: If the schema is missing or malformed
        """
        if schema_file is None and self._schema is not None:
            return self._schema

        location = schema_file or self.paths.SCHEMA_FILE
        try:
            schema = self.file_ops.load_json_file(location)
        except ConfigurationFileNotFoundError as e:
            raise ConfigurationSchemaError(f"Schema not found: {location}", str(location)) from e

        try:
            jsonschema.Draft7Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ConfigurationSchemaError(
                f"Schema is not valid Draft 7: {e.message}", str(location), [e.message]
            ) from e

        if schema_file is None:
            self._schema = schema
        return schema

    def validate_config(
        self,
        config: Dict[str, Any],
        schema_file: Optional[str] = None,
        config_file: str = "unknown"
    ) -> bool:
        """
        Check ``config`` against the schema and report every violation at once.

        Raises:
            ConfigurationValidationError: Listing each message and dotted field
        """
        validator = jsonschema.Draft7Validator(self.load_schema(schema_file))
        errors: List[jsonschema.ValidationError] = sorted(
            validator.iter_errors(config), key=lambda error: list(error.path)
        )

        if errors:
            raise ConfigurationValidationError(
                f"{len(errors)} configuration value(s) do not match the schema",
                config_file=config_file,
                validation_errors=[error.message for error in errors],
                invalid_fields=[_dotted(error) for error in errors],
            )

        self.logger.debug("Configuration matches schema")
        return True
