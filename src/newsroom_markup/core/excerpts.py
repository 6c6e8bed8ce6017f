"""
Excerpt helpers built on the plain-text projection.

The CMS fills an article's excerpt from the author's excerpt field when it
has content, and otherwise falls back to a prefix of the title. Listing
pages further cut long text by word count.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .markup.builder import parse
from .renderers.plain_text import project_plain_text

ELLIPSIS = "..."
DEFAULT_EXCERPT_LENGTH = 200
DEFAULT_MAX_WORDS = 200
WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class TruncationResult:
    """Outcome of a word-count truncation."""
    truncated: str
    word_count: int
    is_truncated: bool


def truncate_words(text: str, max_words: int = DEFAULT_MAX_WORDS) -> TruncationResult:
    """
    Keep the first ``max_words`` words of ``text``.

    Args:
        text: Plain text (already projected)
        max_words: Maximum number of words to keep

    Returns:
        TruncationResult; truncated text ends with an ellipsis when cut
    """
    if max_words < 0:
        raise ValueError(f"max_words must be non-negative, got {max_words}")

    words = text.split()
    if len(words) <= max_words:
        return TruncationResult(truncated=" ".join(words), word_count=len(words), is_truncated=False)

    return TruncationResult(
        truncated=" ".join(words[:max_words]) + ELLIPSIS,
        word_count=len(words),
        is_truncated=True,
    )


def truncate_chars(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, appending an ellipsis when cut."""
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def excerpt_from_title(title: str, limit: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Fallback excerpt: a prefix of the title followed by an ellipsis."""
    return title[:limit] + ELLIPSIS


def build_excerpt(raw_excerpt: Optional[str], title: str, limit: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """
    Produce the stored excerpt for an article.

    The author's excerpt markup is projected to plain text; when nothing is
    left the title fallback is used instead.
    """
    projected = project_plain_text(parse(raw_excerpt or ""))
    if projected:
        return projected
    return excerpt_from_title(title, limit)


def reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    return max(1, math.ceil(len(text.split()) / words_per_minute))
