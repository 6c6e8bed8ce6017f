"""
Document Builder Module

Walks the resolved block spans and the gap text between them and produces
a ``Document`` in source order:

- HEADING / QUOTE: inner text trimmed, blank lines dropped, each line
  inline-resolved, lines joined with line-break runs
- TIMELINE / TRANSCRIPT: non-empty trimmed lines paired sequentially
  (date/description, question/answer); an odd trailing line is dropped
- Gap text: whitespace-only lines separate paragraphs; consecutive
  non-blank lines form one ``TextNode``

Usage:
    >>> doc = parse("[HEADING]Title[/HEADING]\\nBody with [BOLD]bold[/BOLD] text")
    >>> [node.node_type.value for node in doc]
    ['heading', 'text']
"""

import logging
from typing import Iterable, List, Tuple

from .document import (
    LINE_BREAK,
    Document,
    DocumentNode,
    HeadingNode,
    InlineKind,
    InlineRun,
    QuoteNode,
    TextNode,
    TimelineEvent,
    TimelineNode,
    TranscriptNode,
    TranscriptPair,
)
from .grammar import Tag
from .resolver import ResolvedSpan, resolve, resolve_inline, segment
from .tokenizer import tokenize_blocks

logger = logging.getLogger(__name__)

_LINE_BREAK_RUN = InlineRun(InlineKind.PLAIN, LINE_BREAK)


def _join_lines(lines: Iterable[str]) -> Tuple[InlineRun, ...]:
    runs: List[InlineRun] = []
    for line in lines:
        line_runs = resolve_inline(line)
        if not line_runs:
            continue
        if runs:
            runs.append(_LINE_BREAK_RUN)
        runs.extend(line_runs)
    return tuple(runs)


def _pair_lines(text: str) -> List[Tuple[str, str]]:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) % 2:
        logger.debug(f"Dropping unpaired trailing line: {lines[-1]!r}")
    return list(zip(lines[0::2], lines[1::2]))


class DocumentBuilder:
    """Builds a ``Document`` from raw author text."""

    def build(self, source: str) -> Document:
        """
        Parse ``source`` into a document.

        Args:
            source: Raw author text

        Returns:
            Document whose nodes appear in the same order as their source spans
        """
        spans = resolve(tokenize_blocks(source))
        nodes: List[DocumentNode] = []

        for part in segment(source, spans):
            if part.is_gap:
                nodes.extend(self.build_paragraphs(part.text))
            else:
                nodes.append(self.build_block(part.span))

        logger.debug(f"Built document with {len(nodes)} node(s) from {len(spans)} block span(s)")
        return Document(nodes=tuple(nodes))

    def build_block(self, span: ResolvedSpan) -> DocumentNode:
        """Build the node for one resolved block span."""
        inner = span.inner_text

        if span.tag is Tag.HEADING:
            return HeadingNode(runs=self._block_runs(inner))
        if span.tag is Tag.QUOTE:
            return QuoteNode(runs=self._block_runs(inner))
        if span.tag is Tag.TIMELINE:
            events = tuple(TimelineEvent(date=d, description=desc) for d, desc in _pair_lines(inner))
            return TimelineNode(events=events)
        if span.tag is Tag.TRANSCRIPT:
            pairs = tuple(TranscriptPair(question=q, answer=a) for q, a in _pair_lines(inner))
            return TranscriptNode(pairs=pairs)

        raise ValueError(f"{span.tag} is not a block tag")

    def build_paragraphs(self, text: str) -> List[TextNode]:
        """Split gap text into paragraph nodes on whitespace-only lines."""
        paragraphs: List[TextNode] = []
        current: List[str] = []

        for line in text.splitlines() + [""]:
            if line.strip():
                current.append(line)
                continue
            if current:
                runs = _join_lines(current)
                if runs:
                    paragraphs.append(TextNode(runs=runs))
                current = []

        return paragraphs

    @staticmethod
    def _block_runs(inner: str) -> Tuple[InlineRun, ...]:
        return _join_lines(line.strip() for line in inner.strip().splitlines() if line.strip())


_default_builder = DocumentBuilder()


def parse(raw: str) -> Document:
    """
    Parse raw markup into a ``Document``.

    Every string produces a document; malformed markup degrades to literal
    text. The empty string produces an empty document.

    Raises:
        TypeError: If ``raw`` is not a string
    """
    if not isinstance(raw, str):
        raise TypeError(f"raw must be a string, got {type(raw)}")
    if not raw:
        return Document()
    return _default_builder.build(raw)
