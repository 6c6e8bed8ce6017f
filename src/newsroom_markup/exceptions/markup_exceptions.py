"""
Markup-related exceptions for the newsroom markup engine.

The grammar itself is total: ``parse`` never raises for string input.
These exceptions cover the edges around it, namely tag pattern definition
and the SEO-metadata response handed back by the text-generation service.
"""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class NewsroomMarkupError(Exception):
    """
    Base exception for all newsroom markup errors.

    The rendered message is the error description, followed by any detail
    lines and then a numbered list of suggested fixes.
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        details: Optional[List[str]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.suggestions = list(suggestions or [])
        self.details = list(details or [])

    def __str__(self) -> str:
        lines = [self.message, *self.details]
        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            lines.extend(f"  {n}. {hint}" for n, hint in enumerate(self.suggestions, 1))
        return "\n".join(lines)


class MarkupPatternError(NewsroomMarkupError):
    """
    Raised when a tag pattern cannot be compiled.

    Attributes:
        pattern_name: Name of the pattern that caused the error
        regex: The regex pattern string that failed
    """

    def __init__(
        self,
        message: str,
        pattern_name: Optional[str] = None,
        regex: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.pattern_name = pattern_name
        self.regex = regex

        logger.error(
            f"MarkupPatternError: {message}",
            extra={
                "pattern_name": pattern_name,
                "regex": regex,
                "error_type": "markup_pattern"
            }
        )


class MetadataResponseError(NewsroomMarkupError):
    """Raised when a generated SEO-metadata response cannot be used."""

    def __init__(
        self,
        message: str,
        raw_response: Optional[str] = None,
        missing_fields: Optional[List[str]] = None
    ) -> None:
        """
        Initialize metadata response error.

        Args:
            message: Error description
            raw_response: The response text that failed to parse
            missing_fields: Required fields absent from the response
        """
        suggestions = [
            "Ask the generator to respond with a single JSON object only",
            "Check that tags, meta_description and seo_keywords are strings",
        ]

        if missing_fields:
            suggestions.append(f"Missing fields: {', '.join(missing_fields)}")

        super().__init__(message, suggestions)
        self.raw_response = raw_response
        self.missing_fields = missing_fields or []
