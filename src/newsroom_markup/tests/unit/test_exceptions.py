"""
Tests for the exception hierarchy and its formatted messages.
"""

import pytest

from newsroom_markup.exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationSchemaError,
    ConfigurationValidationError,
    EnvironmentVariableError,
    MarkupPatternError,
    MetadataResponseError,
    NewsroomMarkupError,
)


class TestHierarchy:

    @pytest.mark.parametrize("cls", [
        MarkupPatternError,
        MetadataResponseError,
        ConfigurationError,
        ConfigurationFileNotFoundError,
        ConfigurationValidationError,
        ConfigurationSchemaError,
        EnvironmentVariableError,
    ])
    def test_all_derive_from_base(self, cls):
        assert issubclass(cls, NewsroomMarkupError)

    def test_configuration_subclasses(self):
        for cls in (ConfigurationFileNotFoundError, ConfigurationValidationError,
                    ConfigurationSchemaError, EnvironmentVariableError):
            assert issubclass(cls, ConfigurationError)


class TestMessages:

    def test_base_without_suggestions(self):
        assert str(NewsroomMarkupError("boom")) == "boom"

    def test_base_with_suggestions(self):
        error = NewsroomMarkupError("boom", ["try this", "or that"])
        assert str(error) == "boom\n\nSuggestions:\n  1. try this\n  2. or that"

    def test_pattern_error_attributes(self, caplog):
        with caplog.at_level("ERROR"):
            error = MarkupPatternError("bad regex", pattern_name="BOLD", regex="[")
        assert error.pattern_name == "BOLD"
        assert error.regex == "["
        assert "MarkupPatternError: bad regex" in caplog.text

    def test_config_error_includes_file(self):
        message = str(ConfigurationError("broken", config_file="a.json"))
        assert message.startswith("broken\nConfig file: a.json")

    def test_file_not_found_lists_searched_paths(self):
        error = ConfigurationFileNotFoundError("missing", searched_paths=["/x", "/y"])
        assert "Searched in: /x, /y" in str(error)

    def test_validation_error_lists_details(self):
        error = ConfigurationValidationError(
            "invalid", validation_errors=["'x' is not an integer"], invalid_fields=["metadata.content_budget"]
        )
        message = str(error)
        assert "Fix these fields: metadata.content_budget" in message
        assert "Validation errors:\n  1. 'x' is not an integer" in message

    def test_environment_error_names_variable(self):
        error = EnvironmentVariableError("bad", variable_name="NEWSROOM_MARKUP_LOG_LEVEL")
        assert "Fix or unset NEWSROOM_MARKUP_LOG_LEVEL" in str(error)
