"""
Tokenizer Module

Finds every well-formed occurrence of each tag in raw author text and
returns them as a flat list of ``Match`` objects, grouped by tag family in
scan order and, within a family, in left-to-right order. No sorting or
overlap handling happens here; that is the resolver's job.

Tokenization never fails. A tag with no well-formed occurrence simply
contributes no matches.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .grammar import BLOCK_SCAN_ORDER, INLINE_SCAN_ORDER, Tag, get_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """
    A located occurrence of a tag.

    Attributes:
        tag: The tag that matched
        start: Offset of the opening delimiter in the source text
        end: Offset just past the closing delimiter
        inner_text: Content captured between the delimiters
    """
    tag: Tag
    start: int
    end: int
    inner_text: str

    def __post_init__(self):
        if not isinstance(self.tag, Tag):
            raise ValueError(f"tag must be a Tag, got {type(self.tag)}")
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"end ({self.end}) must be greater than start ({self.start})")

    @property
    def inner_start(self) -> int:
        return self.start + len(self.tag.open_delimiter)

    @property
    def inner_end(self) -> int:
        return self.end - len(self.tag.close_delimiter)

    def overlaps(self, other: "Match") -> bool:
        """Check whether two outer spans share at least one position."""
        return self.start < other.end and other.start < self.end

    def shifted(self, offset: int) -> "Match":
        """Return a copy positioned ``offset`` characters further right."""
        return Match(self.tag, self.start + offset, self.end + offset, self.inner_text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag.tag_name,
            "start": self.start,
            "end": self.end,
            "inner_text": self.inner_text,
        }


def tokenize(text: str, tags: Optional[Iterable[Tag]] = None) -> List[Match]:
    """
    Scan ``text`` once per tag and collect every match.

    Args:
        text: Raw source text
        tags: Tags to scan for, in scan order. Defaults to every block tag
              followed by every inline tag.

    Returns:
        Flat list of matches, family by family in scan order
    """
    if tags is None:
        tags = BLOCK_SCAN_ORDER + INLINE_SCAN_ORDER

    matches: List[Match] = []
    if not text:
        return matches

    for tag in tags:
        found = 0
        for m in get_pattern(tag).finditer(text):
            matches.append(Match(tag=tag, start=m.start(), end=m.end(), inner_text=m.group(1)))
            found += 1
        if found:
            logger.debug(f"Tokenized {found} {tag} match(es)")

    return matches


def tokenize_blocks(text: str) -> List[Match]:
    """Tokenize block tags only (HEADING, QUOTE, TIMELINE, TRANSCRIPT)."""
    return tokenize(text, BLOCK_SCAN_ORDER)


def tokenize_inline(text: str) -> List[Match]:
    """Tokenize inline tags only (HIGHLIGHT, BOLD, ITALIC)."""
    return tokenize(text, INLINE_SCAN_ORDER)
