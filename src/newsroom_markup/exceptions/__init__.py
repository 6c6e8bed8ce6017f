"""
Exceptions package for the newsroom markup engine.

This package contains custom exception classes for pattern definition,
metadata responses and configuration handling.
"""

from .markup_exceptions import (
    NewsroomMarkupError,
    MarkupPatternError,
    MetadataResponseError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    ConfigurationSchemaError,
    EnvironmentVariableError,
)

__all__ = [
    # Markup exceptions
    "NewsroomMarkupError",
    "MarkupPatternError",
    "MetadataResponseError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "ConfigurationSchemaError",
    "EnvironmentVariableError",
]
