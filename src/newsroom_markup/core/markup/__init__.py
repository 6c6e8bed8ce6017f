"""
Markup grammar engine.

Components (leaf first):
- grammar: tag definitions and compiled patterns
- tokenizer: flat match lists per tag family
- resolver: ordering, overlap policy and inline run resolution
- document: immutable document model
- builder: walks resolved spans into a Document
"""

from .grammar import (
    BLOCK_SCAN_ORDER,
    DELIMITER_PATTERN,
    INLINE_SCAN_ORDER,
    Tag,
    TagClass,
    TagPattern,
    get_pattern,
    strip_delimiters,
)
from .tokenizer import Match, tokenize, tokenize_blocks, tokenize_inline
from .document import (
    LINE_BREAK,
    Document,
    DocumentNode,
    HeadingNode,
    InlineKind,
    InlineRun,
    NodeType,
    QuoteNode,
    TextNode,
    TimelineEvent,
    TimelineNode,
    TranscriptNode,
    TranscriptPair,
)
from .resolver import ResolvedSpan, Segment, resolve, resolve_inline, segment
from .builder import DocumentBuilder, parse

__all__ = [
    # Grammar
    "BLOCK_SCAN_ORDER",
    "DELIMITER_PATTERN",
    "INLINE_SCAN_ORDER",
    "Tag",
    "TagClass",
    "TagPattern",
    "get_pattern",
    "strip_delimiters",
    # Tokenizer
    "Match",
    "tokenize",
    "tokenize_blocks",
    "tokenize_inline",
    # Document model
    "LINE_BREAK",
    "Document",
    "DocumentNode",
    "HeadingNode",
    "InlineKind",
    "InlineRun",
    "NodeType",
    "QuoteNode",
    "TextNode",
    "TimelineEvent",
    "TimelineNode",
    "TranscriptNode",
    "TranscriptPair",
    # Resolver
    "ResolvedSpan",
    "Segment",
    "resolve",
    "resolve_inline",
    "segment",
    # Builder
    "DocumentBuilder",
    "parse",
]
