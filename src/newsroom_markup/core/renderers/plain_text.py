"""
Plain-Text Projector

Lossy projection of a document to prose, used for excerpts and for the
SEO-metadata prompt. Formatting is dropped, timeline and transcript nodes
are dropped entirely, node texts are joined with single spaces, whitespace
runs collapse to one space and the result is trimmed.

Stray delimiters left behind by malformed markup are removed as well, so
the projection never contains tag syntax and projecting a projection is a
no-op.
"""

import re

from ..markup.document import Document, HeadingNode, QuoteNode, TextNode
from ..markup.grammar import strip_delimiters

_WHITESPACE = re.compile(r"\s+")

_PROSE_NODES = (TextNode, HeadingNode, QuoteNode)


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def project_plain_text(doc: Document) -> str:
    """Project ``doc`` to a single line of plain prose."""
    pieces = [
        strip_delimiters(node.text)
        for node in doc
        if isinstance(node, _PROSE_NODES)
    ]
    return collapse_whitespace(" ".join(pieces))
