"""
Document Model

Immutable value types produced by a parse: inline runs, timeline events,
transcript pairs, the five node variants and the ``Document`` container.
A document is built fresh for every parse and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Tuple, Union

LINE_BREAK = "\n"


class InlineKind(Enum):
    """Formatting applied to an inline run."""
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    HIGHLIGHT = "highlight"

    def __str__(self) -> str:
        return self.value


class NodeType(Enum):
    """Top-level node variants of a document."""
    TEXT = "text"
    HEADING = "heading"
    QUOTE = "quote"
    TIMELINE = "timeline"
    TRANSCRIPT = "transcript"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InlineRun:
    """
    A run of text with a single formatting kind.

    Runs never nest. A ``PLAIN`` run whose text is exactly ``"\\n"`` marks
    a line break between two visual lines.
    """
    kind: InlineKind
    text: str

    def __post_init__(self):
        if not isinstance(self.kind, InlineKind):
            raise ValueError(f"kind must be an InlineKind, got {type(self.kind)}")
        if not isinstance(self.text, str):
            raise ValueError(f"text must be a string, got {type(self.text)}")

    @property
    def is_line_break(self) -> bool:
        return self.kind is InlineKind.PLAIN and self.text == LINE_BREAK

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class TimelineEvent:
    """One dated entry of a timeline block."""
    date: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "description": self.description}


@dataclass(frozen=True)
class TranscriptPair:
    """One question/answer exchange of an interview transcript."""
    question: str
    answer: str

    def to_dict(self) -> Dict[str, Any]:
        return {"question": self.question, "answer": self.answer}


def _runs_text(runs: Tuple[InlineRun, ...]) -> str:
    return "".join(run.text for run in runs)


@dataclass(frozen=True)
class TextNode:
    """A paragraph of top-level prose."""
    runs: Tuple[InlineRun, ...] = field(default_factory=tuple)

    node_type = NodeType.TEXT

    @property
    def text(self) -> str:
        return _runs_text(self.runs)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.node_type.value, "runs": [run.to_dict() for run in self.runs]}


@dataclass(frozen=True)
class HeadingNode:
    """A sub-heading inside the article body."""
    runs: Tuple[InlineRun, ...] = field(default_factory=tuple)

    node_type = NodeType.HEADING

    @property
    def text(self) -> str:
        return _runs_text(self.runs)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.node_type.value, "runs": [run.to_dict() for run in self.runs]}


@dataclass(frozen=True)
class QuoteNode:
    """A pull quote."""
    runs: Tuple[InlineRun, ...] = field(default_factory=tuple)

    node_type = NodeType.QUOTE

    @property
    def text(self) -> str:
        return _runs_text(self.runs)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.node_type.value, "runs": [run.to_dict() for run in self.runs]}


@dataclass(frozen=True)
class TimelineNode:
    """A sequence of dated events."""
    events: Tuple[TimelineEvent, ...] = field(default_factory=tuple)

    node_type = NodeType.TIMELINE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.node_type.value, "events": [event.to_dict() for event in self.events]}


@dataclass(frozen=True)
class TranscriptNode:
    """An interview transcript of question/answer pairs."""
    pairs: Tuple[TranscriptPair, ...] = field(default_factory=tuple)

    node_type = NodeType.TRANSCRIPT

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.node_type.value, "pairs": [pair.to_dict() for pair in self.pairs]}


DocumentNode = Union[TextNode, HeadingNode, QuoteNode, TimelineNode, TranscriptNode]


@dataclass(frozen=True)
class Document:
    """Ordered sequence of nodes, in source order."""
    nodes: Tuple[DocumentNode, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[DocumentNode]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> DocumentNode:
        return self.nodes[index]

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": [node.to_dict() for node in self.nodes]}
