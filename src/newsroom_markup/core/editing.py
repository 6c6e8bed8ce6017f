"""
Editor text-splicing helpers.

Toolbar buttons in the article editor wrap the current selection in a tag
or drop a block skeleton at the caret. Both are plain string splices that
return the new buffer and the caret position to restore; they do not parse.
"""

from dataclasses import dataclass
from typing import Tuple

from .markup.grammar import Tag

TIMELINE_TEMPLATE = """[TIMELINE]
January 15, 2024
First event description
January 20, 2024
Second event description
January 25, 2024
Third event description
[/TIMELINE]"""

TRANSCRIPT_TEMPLATE = """[TRANSCRIPT]
What is your view on this topic?
I believe this is a significant development that will impact the industry.
Can you elaborate on that?
Certainly, the key factors include economic changes and technological advances.
[/TRANSCRIPT]"""

BLOCK_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class EditResult:
    """New buffer contents and caret offset."""
    text: str
    cursor: int


def _clamp(text: str, start: int, end: int) -> Tuple[int, int]:
    start = min(max(start, 0), len(text))
    end = min(max(end, 0), len(text))
    if start > end:
        start, end = end, start
    return start, end


def insert_tag(text: str, start: int, end: int, tag: Tag) -> EditResult:
    """
    Wrap ``text[start:end]`` in ``tag``'s delimiters.

    The caret lands just after the closing delimiter.
    """
    start, end = _clamp(text, start, end)
    wrapped = tag.open_delimiter + text[start:end] + tag.close_delimiter
    return EditResult(text=text[:start] + wrapped + text[end:], cursor=start + len(wrapped))


def insert_template(text: str, offset: int, template: str) -> EditResult:
    """
    Insert a block skeleton at ``offset``, surrounded by blank lines.

    The caret lands just after the template.
    """
    offset, _ = _clamp(text, offset, offset)
    inserted = BLOCK_SEPARATOR + template + BLOCK_SEPARATOR
    return EditResult(
        text=text[:offset] + inserted + text[offset:],
        cursor=offset + len(BLOCK_SEPARATOR) + len(template),
    )
