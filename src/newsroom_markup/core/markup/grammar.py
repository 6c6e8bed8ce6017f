"""
Tag Grammar Module

Static definition of the bracket-tag markup that authors type into the
article editor. Seven fixed, case-sensitive tags are recognised, each with
an ``[NAME]`` opening and ``[/NAME]`` closing delimiter:

- Inline: BOLD, ITALIC, HIGHLIGHT
- Block: HEADING, QUOTE, TIMELINE, TRANSCRIPT

A tag occurrence is well-formed only when its closing delimiter appears
somewhere after the opening one. Matching is non-greedy: the first opening
delimiter pairs with the first closing delimiter after it, and ``.``
matches newlines so blocks may span several lines.

Usage:
    >>> pattern = get_pattern(Tag.BOLD)
    >>> [m.group(1) for m in pattern.finditer("a [BOLD]b[/BOLD] c")]
    ['b']
"""

import logging
import re
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from ...exceptions.markup_exceptions import MarkupPatternError

logger = logging.getLogger(__name__)


class TagClass(Enum):
    """Nesting class of a tag."""
    INLINE = "inline"
    BLOCK = "block"

    def __str__(self) -> str:
        return self.value


class Tag(Enum):
    """The seven supported markup tags."""
    BOLD = ("BOLD", TagClass.INLINE)
    ITALIC = ("ITALIC", TagClass.INLINE)
    HIGHLIGHT = ("HIGHLIGHT", TagClass.INLINE)
    HEADING = ("HEADING", TagClass.BLOCK)
    QUOTE = ("QUOTE", TagClass.BLOCK)
    TIMELINE = ("TIMELINE", TagClass.BLOCK)
    TRANSCRIPT = ("TRANSCRIPT", TagClass.BLOCK)

    def __init__(self, tag_name: str, tag_class: TagClass) -> None:
        self.tag_name = tag_name
        self.tag_class = tag_class

    @property
    def open_delimiter(self) -> str:
        return f"[{self.tag_name}]"

    @property
    def close_delimiter(self) -> str:
        return f"[/{self.tag_name}]"

    @property
    def is_block(self) -> bool:
        return self.tag_class is TagClass.BLOCK

    @property
    def is_inline(self) -> bool:
        return self.tag_class is TagClass.INLINE

    @classmethod
    def from_name(cls, name: str) -> Optional["Tag"]:
        """Look up a tag by its exact (case-sensitive) name."""
        for tag in cls:
            if tag.tag_name == name:
                return tag
        return None

    def __str__(self) -> str:
        return self.tag_name


# Discovery order used for tie-breaks between families.
BLOCK_SCAN_ORDER: Tuple[Tag, ...] = (Tag.HEADING, Tag.QUOTE, Tag.TIMELINE, Tag.TRANSCRIPT)
INLINE_SCAN_ORDER: Tuple[Tag, ...] = (Tag.HIGHLIGHT, Tag.BOLD, Tag.ITALIC)


class TagPattern:
    """
    Compiled matcher for one tag.

    Wraps the ``[NAME](.*?)[/NAME]`` regex for a tag and exposes the
    matching operations used by the tokenizer. Each call works on its own
    iterator, so a pattern can be shared freely across threads.

    Attributes:
        tag: The tag this pattern recognises
        regex_pattern: Raw regex string
        compiled_regex: Pre-compiled regex object
    """

    def __init__(self, tag: Tag) -> None:
        """
        Compile the pattern for ``tag``.

        Raises:
            MarkupPatternError: If the regex cannot be compiled
        """
        if not isinstance(tag, Tag):
            raise TypeError(f"tag must be a Tag, got {type(tag)}")

        self.tag = tag
        self.regex_pattern = (
            re.escape(tag.open_delimiter) + r"(.*?)" + re.escape(tag.close_delimiter)
        )

        try:
            self.compiled_regex = re.compile(self.regex_pattern, re.DOTALL)
            logger.debug(f"Compiled pattern '{tag}': {self.regex_pattern}")
        except re.error as e:
            raise MarkupPatternError(
                f"Invalid regex pattern for '{tag}': {e}",
                pattern_name=tag.tag_name,
                regex=self.regex_pattern
            )

    @property
    def name(self) -> str:
        return self.tag.tag_name

    def finditer(self, text: str) -> Iterator["re.Match[str]"]:
        """Iterate over every non-overlapping well-formed occurrence."""
        return self.compiled_regex.finditer(text)

    def findall(self, text: str) -> List[str]:
        """Return the inner text of every occurrence."""
        if not text:
            return []
        return self.compiled_regex.findall(text)

    def __repr__(self) -> str:
        return f"TagPattern(name='{self.name}', regex='{self.regex_pattern}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagPattern):
            return NotImplemented
        return self.tag is other.tag

    def __hash__(self) -> int:
        return hash(self.tag)


def _delimiter_regex(tags: Tuple[Tag, ...]) -> "re.Pattern[str]":
    names = "|".join(re.escape(tag.tag_name) for tag in tags)
    return re.compile(r"\[/?(?:" + names + r")\]")


TAG_PATTERNS: Dict[Tag, TagPattern] = {tag: TagPattern(tag) for tag in Tag}

# Any single opening or closing delimiter, well-formed or not.
DELIMITER_PATTERN = _delimiter_regex(tuple(Tag))
INLINE_DELIMITER_PATTERN = _delimiter_regex(INLINE_SCAN_ORDER)


def get_pattern(tag: Tag) -> TagPattern:
    """Return the shared compiled pattern for ``tag``."""
    return TAG_PATTERNS[tag]


def strip_delimiters(text: str, inline_only: bool = False) -> str:
    """
    Remove every tag delimiter from ``text``.

    Removal repeats until no delimiter is left, since deleting one token can
    bring the halves of another together (``[BO[BOLD]LD]``).
    """
    pattern = INLINE_DELIMITER_PATTERN if inline_only else DELIMITER_PATTERN
    previous = None
    while previous != text:
        previous = text
        text = pattern.sub("", text)
    return text
