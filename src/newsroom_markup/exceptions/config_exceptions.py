"""
Configuration exceptions.

Raised while reading ``newsroom_markup.config.json``, the ``.env`` file and
``NEWSROOM_MARKUP_*`` variables, or while checking them against the
bundled schema. None of these are raised by the grammar engine itself.
"""

from typing import List, Optional

from .markup_exceptions import NewsroomMarkupError


class ConfigurationError(NewsroomMarkupError):
    """A configuration source could not be used."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        details = [f"Config file: {config_file}"] if config_file else []
        super().__init__(message, suggestions, details)
        self.config_file = config_file


class ConfigurationFileNotFoundError(ConfigurationError):
    """An explicitly requested configuration file does not exist."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        searched_paths: Optional[List[str]] = None
    ) -> None:
        self.searched_paths = searched_paths or []
        hints = [
            "Pass --config-path with an existing file, or omit it to use defaults",
            "Relative paths are resolved against the project root",
        ]
        if self.searched_paths:
            hints.append(f"Searched in: {', '.join(self.searched_paths)}")
        super().__init__(message, config_file, hints)


class ConfigurationValidationError(ConfigurationError):
    """The merged configuration does not match the bundled schema."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        """
        Args:
            message: Summary of the failure
            config_file: File the configuration was read from
            validation_errors: One message per schema violation
            invalid_fields: Dotted key of each violation (``<root>`` for top-level)
        """
        self.validation_errors = validation_errors or []
        self.invalid_fields = invalid_fields or []

        hints = ["Compare the file with utils/config/config_schema.json"]
        if self.invalid_fields:
            hints.append(f"Fix these fields: {', '.join(self.invalid_fields)}")
        super().__init__(message, config_file, hints)

        if self.validation_errors:
            self.details.append("Validation errors:")
            self.details.extend(
                f"  {n}. {error}" for n, error in enumerate(self.validation_errors, 1)
            )


class ConfigurationSchemaError(ConfigurationError):
    """The bundled schema is missing or is not a valid JSON schema."""

    def __init__(
        self,
        message: str,
        schema_file: Optional[str] = None,
        schema_errors: Optional[List[str]] = None
    ) -> None:
        self.schema_errors = schema_errors or []
        super().__init__(
            message,
            schema_file,
            ["Reinstall newsroom-markup to restore the bundled schema"],
        )


class EnvironmentVariableError(ConfigurationError):
    """A ``NEWSROOM_MARKUP_*`` variable holds a value of the wrong type."""

    def __init__(self, message: str, variable_name: Optional[str] = None) -> None:
        self.variable_name = variable_name
        hints = ["Check the .env file in the project root"]
        if variable_name:
            hints.append(f"Fix or unset {variable_name}")
        super().__init__(message, None, hints)
