"""
Preview Renderer

Maps a ``Document`` onto a tree of display elements for the editor's live
preview. The tree is structured data, never an HTML string: text values are
kept raw so that whichever layer draws the tree escapes them by
construction (see ``render_html``).

An empty document renders as a single placeholder element.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..markup.document import (
    Document,
    DocumentNode,
    HeadingNode,
    InlineKind,
    InlineRun,
    QuoteNode,
    TextNode,
    TimelineNode,
    TranscriptNode,
)

logger = logging.getLogger(__name__)


class PreviewKind(Enum):
    """Kinds of display element in a preview tree."""
    DOCUMENT = "document"
    PLACEHOLDER = "placeholder"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    HIGHLIGHT = "highlight"
    LINE_BREAK = "line_break"
    TIMELINE = "timeline"
    TIMELINE_HEADER = "timeline_header"
    TIMELINE_EVENT = "timeline_event"
    TIMELINE_DATE = "timeline_date"
    TIMELINE_DESCRIPTION = "timeline_description"
    TRANSCRIPT = "transcript"
    TRANSCRIPT_HEADER = "transcript_header"
    TRANSCRIPT_PAIR = "transcript_pair"
    QUESTION = "question"
    ANSWER = "answer"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PreviewElement:
    """
    One display element.

    Attributes:
        kind: What the element represents
        text: Raw (unescaped) text content for leaf elements
        css_class: Presentation class used by the editor stylesheet
        children: Child elements in display order
    """
    kind: PreviewKind
    text: Optional[str] = None
    css_class: Optional[str] = None
    children: Tuple["PreviewElement", ...] = field(default_factory=tuple)

    def walk(self) -> Iterator["PreviewElement"]:
        """Depth-first iteration over this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, kind: PreviewKind) -> List["PreviewElement"]:
        return [element for element in self.walk() if element.kind is kind]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.text is not None:
            data["text"] = self.text
        if self.css_class:
            data["css_class"] = self.css_class
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


PreviewTree = PreviewElement


@dataclass(frozen=True)
class PreviewOptions:
    """Labels used by the preview renderer."""
    placeholder: str = "Start typing to see preview..."
    timeline_header: str = "📅 Timeline"
    transcript_header: str = "💬 Interview Transcript"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "PreviewOptions":
        """Build options from the ``preview`` section of a configuration dict."""
        defaults = cls()
        return cls(
            placeholder=config.get("placeholder", defaults.placeholder),
            timeline_header=config.get("timeline_header", defaults.timeline_header),
            transcript_header=config.get("transcript_header", defaults.transcript_header),
        )


_RUN_ELEMENTS = {
    InlineKind.BOLD: (PreviewKind.STRONG, None),
    InlineKind.ITALIC: (PreviewKind.EMPHASIS, None),
    InlineKind.HIGHLIGHT: (PreviewKind.HIGHLIGHT, "preview-highlight"),
}


def _render_run(run: InlineRun) -> PreviewElement:
    if run.is_line_break:
        return PreviewElement(PreviewKind.LINE_BREAK)
    if run.kind is InlineKind.PLAIN:
        return PreviewElement(PreviewKind.TEXT, text=run.text)
    kind, css_class = _RUN_ELEMENTS[run.kind]
    return PreviewElement(kind, text=run.text, css_class=css_class)


def _render_runs(runs: Tuple[InlineRun, ...]) -> Tuple[PreviewElement, ...]:
    return tuple(_render_run(run) for run in runs)


def _render_timeline(node: TimelineNode, options: PreviewOptions) -> PreviewElement:
    events = tuple(
        PreviewElement(
            PreviewKind.TIMELINE_EVENT,
            css_class="timeline-event",
            children=(
                PreviewElement(PreviewKind.TIMELINE_DATE, text=event.date, css_class="timeline-date"),
                PreviewElement(
                    PreviewKind.TIMELINE_DESCRIPTION, text=event.description, css_class="timeline-desc"
                ),
            ),
        )
        for event in node.events
    )
    header = PreviewElement(
        PreviewKind.TIMELINE_HEADER, text=options.timeline_header, css_class="timeline-header"
    )
    return PreviewElement(PreviewKind.TIMELINE, css_class="preview-timeline", children=(header,) + events)


def _render_transcript(node: TranscriptNode, options: PreviewOptions) -> PreviewElement:
    pairs = tuple(
        PreviewElement(
            PreviewKind.TRANSCRIPT_PAIR,
            css_class="interview-pair",
            children=(
                PreviewElement(PreviewKind.QUESTION, text=pair.question, css_class="interview-q"),
                PreviewElement(PreviewKind.ANSWER, text=pair.answer, css_class="interview-a"),
            ),
        )
        for pair in node.pairs
    )
    header = PreviewElement(
        PreviewKind.TRANSCRIPT_HEADER, text=options.transcript_header, css_class="interview-header"
    )
    return PreviewElement(PreviewKind.TRANSCRIPT, css_class="preview-interview", children=(header,) + pairs)


def render_node(node: DocumentNode, options: Optional[PreviewOptions] = None) -> PreviewElement:
    """Render a single document node."""
    options = options or PreviewOptions()

    if isinstance(node, TextNode):
        return PreviewElement(PreviewKind.PARAGRAPH, children=_render_runs(node.runs))
    if isinstance(node, HeadingNode):
        return PreviewElement(PreviewKind.HEADING, css_class="preview-heading", children=_render_runs(node.runs))
    if isinstance(node, QuoteNode):
        return PreviewElement(PreviewKind.BLOCKQUOTE, css_class="preview-quote", children=_render_runs(node.runs))
    if isinstance(node, TimelineNode):
        return _render_timeline(node, options)
    if isinstance(node, TranscriptNode):
        return _render_transcript(node, options)

    raise TypeError(f"Unsupported document node: {type(node).__name__}")


def render_preview(doc: Document, options: Optional[PreviewOptions] = None) -> PreviewTree:
    """
    Render a document into a preview tree.

    Args:
        doc: Parsed document (left untouched)
        options: Optional labels; defaults match the editor

    Returns:
        Root element of kind ``DOCUMENT``. For an empty document its only
        child is a ``PLACEHOLDER`` element.
    """
    options = options or PreviewOptions()

    if doc.is_empty:
        placeholder = PreviewElement(
            PreviewKind.PLACEHOLDER, text=options.placeholder, css_class="empty-preview-text"
        )
        return PreviewElement(PreviewKind.DOCUMENT, children=(placeholder,))

    children = tuple(render_node(node, options) for node in doc)
    logger.debug(f"Rendered preview with {len(children)} top-level element(s)")
    return PreviewElement(PreviewKind.DOCUMENT, children=children)
