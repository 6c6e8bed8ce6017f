"""
Tests for the document builder and the ``parse`` entry point.

Covers node construction per block tag, paragraph splitting of gap text,
the documented lossy behaviours and the reference cases authors rely on.
"""

import pytest

from newsroom_markup.core.markup import (
    Document,
    DocumentBuilder,
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
    parse,
)
from newsroom_markup.core.markup.document import LINE_BREAK

BREAK = InlineRun(InlineKind.PLAIN, LINE_BREAK)


def plain(text):
    return InlineRun(InlineKind.PLAIN, text)


class TestParseReferenceCases:
    """Behaviour authors depend on in the editor."""

    def test_unterminated_tag_is_literal(self):
        """Test an unterminated tag falls back to plain text."""
        doc = parse("Hello [BOLD]world")
        assert doc.nodes == (TextNode(runs=(plain("Hello [BOLD]world"),)),)

    def test_timeline_pairing(self):
        doc = parse("[TIMELINE]\nJan 1\nEvent A\nJan 2\nEvent B\n[/TIMELINE]")
        assert doc.nodes == (
            TimelineNode(events=(
                TimelineEvent(date="Jan 1", description="Event A"),
                TimelineEvent(date="Jan 2", description="Event B"),
            )),
        )

    def test_odd_timeline_line_dropped(self):
        doc = parse("[TIMELINE]\nJan 1\nEvent A\nJan 2\n[/TIMELINE]")
        assert doc.nodes == (
            TimelineNode(events=(TimelineEvent(date="Jan 1", description="Event A"),)),
        )

    def test_nested_inline_highlight_wins(self):
        doc = parse("[HIGHLIGHT]a[BOLD]b[/BOLD]c[/HIGHLIGHT]")
        assert doc.nodes == (TextNode(runs=(InlineRun(InlineKind.HIGHLIGHT, "abc"),)),)

    def test_empty_input(self):
        doc = parse("")
        assert isinstance(doc, Document)
        assert len(doc) == 0
        assert doc.is_empty


class TestBlocks:
    """Tests for block node construction."""

    def test_heading_with_inline(self):
        doc = parse("[HEADING]Vote [BOLD]passes[/BOLD][/HEADING]")
        assert doc.nodes == (
            HeadingNode(runs=(plain("Vote "), InlineRun(InlineKind.BOLD, "passes"))),
        )

    def test_quote_lines_trimmed_and_joined(self):
        """Test multi-line quotes keep one run list joined by line breaks."""
        doc = parse("[QUOTE]\n  First line  \n\n   Second [ITALIC]line[/ITALIC]\n[/QUOTE]")
        (node,) = doc.nodes
        assert isinstance(node, QuoteNode)
        assert node.runs == (
            plain("First line"),
            BREAK,
            plain("Second "),
            InlineRun(InlineKind.ITALIC, "line"),
        )
        assert node.text == "First line\nSecond line"

    def test_empty_heading_still_produces_node(self):
        assert parse("[HEADING]   [/HEADING]").nodes == (HeadingNode(runs=()),)

    def test_transcript_pairing(self):
        doc = parse("[TRANSCRIPT]\nWhy?\nBecause.\n\n  How?  \n  Carefully.\nExtra\n[/TRANSCRIPT]")
        assert doc.nodes == (
            TranscriptNode(pairs=(
                TranscriptPair(question="Why?", answer="Because."),
                TranscriptPair(question="How?", answer="Carefully."),
            )),
        )

    def test_timeline_lines_kept_verbatim(self):
        """Test timeline entries are not inline-resolved."""
        (node,) = parse("[TIMELINE]\n[BOLD]May[/BOLD]\nLaunch\n[/TIMELINE]").nodes
        assert node.events == (TimelineEvent(date="[BOLD]May[/BOLD]", description="Launch"),)

    def test_empty_timeline(self):
        assert parse("[TIMELINE][/TIMELINE]").nodes == (TimelineNode(events=()),)

    def test_overlapping_block_loser_literal_inside_winner(self):
        """Test a block opening inside another block degrades to literal text."""
        doc = parse("[HEADING]a [QUOTE]b[/HEADING] c[/QUOTE]")
        assert [node.node_type for node in doc] == [NodeType.HEADING, NodeType.TEXT]
        assert doc[0].text == "a [QUOTE]b"
        assert doc[1].text == " c[/QUOTE]"

    def test_build_block_rejects_inline_span(self):
        from newsroom_markup.core.markup import Match, ResolvedSpan, Tag

        span = ResolvedSpan(match=Match(Tag.BOLD, 0, 13, "x"), position=0)
        with pytest.raises(ValueError):
            DocumentBuilder().build_block(span)


class TestParagraphs:
    """Tests for gap text paragraph splitting."""

    def test_consecutive_lines_form_one_paragraph(self):
        (node,) = parse("line one\nline [BOLD]two[/BOLD]").nodes
        assert node.runs == (
            plain("line one"),
            BREAK,
            plain("line "),
            InlineRun(InlineKind.BOLD, "two"),
        )

    def test_whitespace_only_line_splits_paragraphs(self):
        doc = parse("first\n   \nsecond\n\n\nthird")
        assert [node.text for node in doc] == ["first", "second", "third"]

    def test_inline_tags_do_not_cross_lines(self):
        """Test inline resolution runs one visual line at a time."""
        (node,) = parse("[BOLD]a\nb[/BOLD]").nodes
        assert node.runs == (plain("[BOLD]a"), BREAK, plain("b[/BOLD]"))

    def test_paragraph_with_only_empty_runs_is_dropped(self):
        assert parse("[BOLD][/BOLD]").nodes == ()

    def test_whitespace_only_input(self):
        assert parse("  \n\t\n ").is_empty

    def test_gap_text_around_blocks(self):
        doc = parse("Intro\n[HEADING]Title[/HEADING]\nBody")
        assert [node.node_type for node in doc] == [NodeType.TEXT, NodeType.HEADING, NodeType.TEXT]
        assert [node.text for node in doc] == ["Intro", "Title", "Body"]


class TestParse:
    """Tests for the parse entry point."""

    def test_node_order_follows_source(self, sample_article):
        doc = parse(sample_article)
        assert [node.node_type for node in doc] == [
            NodeType.HEADING,
            NodeType.TEXT,
            NodeType.QUOTE,
            NodeType.TIMELINE,
            NodeType.TRANSCRIPT,
            NodeType.TEXT,
        ]

    def test_parse_is_pure(self, sample_article):
        assert parse(sample_article) == parse(sample_article)

    @pytest.mark.parametrize("value", [None, 42, b"[BOLD]x[/BOLD]"])
    def test_non_string_rejected(self, value):
        with pytest.raises(TypeError):
            parse(value)

    def test_to_dict(self):
        doc = parse("[HEADING]T[/HEADING]\n[TRANSCRIPT]\nQ\nA\n[/TRANSCRIPT]")
        assert doc.to_dict() == {
            "nodes": [
                {"type": "heading", "runs": [{"kind": "plain", "text": "T"}]},
                {"type": "transcript", "pairs": [{"question": "Q", "answer": "A"}]},
            ]
        }

    def test_document_is_immutable(self):
        doc = parse("text")
        with pytest.raises(AttributeError):
            doc.nodes = ()
