"""
Resolver Module

Turns the tokenizer's unordered, possibly overlapping matches into a single
left-to-right sequence.

Block policy:
    Matches are stably sorted by ``start`` (equal starts keep scan order:
    HEADING, QUOTE, TIMELINE, TRANSCRIPT). A match starting inside an
    already accepted span is discarded; its delimiters stay literal text.

Inline policy (applied to one line at a time):
    Same ordering, with scan order HIGHLIGHT, BOLD, ITALIC. The earliest
    match wins the whole overlapping region. Nothing inside a formatted run
    is resolved again, and every inline delimiter found inside it is
    consumed, so ``[HIGHLIGHT]a[BOLD]b[/BOLD]c[/HIGHLIGHT]`` resolves to a
    single highlight run ``"abc"``. Delimiters of a discarded match that lie
    outside the winner are left as plain text.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .document import InlineKind, InlineRun
from .grammar import Tag, strip_delimiters
from .tokenizer import Match, tokenize_inline

logger = logging.getLogger(__name__)

INLINE_KINDS = {
    Tag.BOLD: InlineKind.BOLD,
    Tag.ITALIC: InlineKind.ITALIC,
    Tag.HIGHLIGHT: InlineKind.HIGHLIGHT,
}


@dataclass(frozen=True)
class ResolvedSpan:
    """A match together with its position in the resolved sequence."""
    match: Match
    position: int

    @property
    def tag(self) -> Tag:
        return self.match.tag

    @property
    def start(self) -> int:
        return self.match.start

    @property
    def end(self) -> int:
        return self.match.end

    @property
    def inner_text(self) -> str:
        return self.match.inner_text


@dataclass(frozen=True)
class Segment:
    """A slice of the source: either a resolved block span or the gap text between spans."""
    text: str
    span: Optional[ResolvedSpan] = None

    @property
    def is_gap(self) -> bool:
        return self.span is None


def _accept_non_overlapping(matches: Sequence[Match]) -> List[Match]:
    # sorted() is stable, so equal starts keep scan order
    ordered = sorted(matches, key=lambda m: m.start)
    accepted: List[Match] = []
    cursor = 0
    for match in ordered:
        if match.start < cursor:
            logger.debug(
                f"Discarding {match.tag} at {match.start}: overlaps span ending at {cursor}"
            )
            continue
        accepted.append(match)
        cursor = match.end
    return accepted


def resolve(block_matches: Sequence[Match]) -> List[ResolvedSpan]:
    """
    Order block matches and drop the ones that overlap an earlier span.

    Args:
        block_matches: Matches from the tokenizer, in discovery order

    Returns:
        Spans sorted by ``start`` with no two spans overlapping
    """
    accepted = _accept_non_overlapping(block_matches)
    return [ResolvedSpan(match=match, position=i) for i, match in enumerate(accepted)]


def segment(source: str, spans: Sequence[ResolvedSpan]) -> List[Segment]:
    """
    Split ``source`` into gap segments and span segments in source order.

    Empty gaps are omitted.
    """
    segments: List[Segment] = []
    cursor = 0
    for span in spans:
        if span.start > cursor:
            segments.append(Segment(text=source[cursor:span.start]))
        segments.append(Segment(text=source[span.start:span.end], span=span))
        cursor = span.end
    if cursor < len(source):
        segments.append(Segment(text=source[cursor:]))
    return segments


def resolve_inline(line: str) -> List[InlineRun]:
    """
    Resolve inline formatting within a single line.

    Args:
        line: Text to resolve; normally one visual line

    Returns:
        Alternating plain and formatted runs covering the line. Runs with
        empty text are omitted.
    """
    runs: List[InlineRun] = []
    if not line:
        return runs

    cursor = 0
    for match in _accept_non_overlapping(tokenize_inline(line)):
        if match.start > cursor:
            runs.append(InlineRun(InlineKind.PLAIN, line[cursor:match.start]))

        text = strip_delimiters(match.inner_text, inline_only=True)
        if text:
            runs.append(InlineRun(INLINE_KINDS[match.tag], text))
        cursor = match.end

    if cursor < len(line):
        runs.append(InlineRun(InlineKind.PLAIN, line[cursor:]))

    return runs
