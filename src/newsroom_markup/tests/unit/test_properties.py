"""
Property tests for the grammar engine.

Every property is checked against a seeded random corpus of mostly
malformed markup and against a hand-written list of adversarial inputs.
"""

import pytest

from newsroom_markup import parse, project_plain_text, render_html, render_preview
from newsroom_markup.core.markup import resolve, tokenize_blocks
from newsroom_markup.core.markup.document import Document
from newsroom_markup.core.markup.grammar import Tag

ADVERSARIAL = [
    "",
    " ",
    "\n\n\n",
    "[",
    "]",
    "[]",
    "[/]",
    "[BOLD]",
    "[/BOLD]",
    "[BOLD][/BOLD]",
    "[/BOLD][BOLD]",
    "[BOLD][BOLD][/BOLD][/BOLD]",
    "[BO[BOLD]LD]",
    "[BO[BOLD]LD][/BO[/BOLD]LD]",
    "[[HEADING]HEADING][/HEADING]",
    "[HEADING][QUOTE][/HEADING][/QUOTE]",
    "[QUOTE][HEADING][/HEADING][/QUOTE]",
    "[TIMELINE]\n[/TIMELINE]",
    "[TIMELINE]\n[TRANSCRIPT]\n[/TIMELINE]\n[/TRANSCRIPT]",
    "[HIGHLIGHT]a[BOLD]b[/HIGHLIGHT]c[/BOLD]",
    "[HEADING]\n[BOLD]\n[/HEADING][/BOLD]",
    " [BOLD]x y[/BOLD]\x85",
    "[bold]lower[/bold]",
    "".join(tag.open_delimiter for tag in Tag),
    "".join(tag.close_delimiter for tag in Tag),
    "".join(tag.open_delimiter + tag.close_delimiter for tag in Tag),
    "😀 [QUOTE]emoji \U0001F600[/QUOTE]",
    "\x00[ITALIC]\x00[/ITALIC]\x00",
]

DELIMITERS = [tag.open_delimiter for tag in Tag] + [tag.close_delimiter for tag in Tag]


def project(text):
    return project_plain_text(parse(text))


def check_properties(text):
    doc = parse(text)
    assert isinstance(doc, Document)

    tree = render_preview(doc)
    assert tree.children
    assert isinstance(render_html(tree), str)

    projected = project_plain_text(doc)
    for delimiter in DELIMITERS:
        assert delimiter not in projected
    assert projected == projected.strip()
    assert "  " not in projected

    assert project(projected) == projected


class TestProperties:
    """Totality, no leaked syntax and idempotent projection."""

    @pytest.mark.parametrize("text", ADVERSARIAL)
    def test_adversarial_inputs(self, text):
        check_properties(text)

    def test_random_corpus(self, markup_corpus):
        for text in markup_corpus:
            check_properties(text)

    def test_corpus_is_not_trivial(self, markup_corpus):
        assert len(markup_corpus) == 300
        assert any(parse(text).nodes for text in markup_corpus)

    def test_idempotence_on_article(self, sample_article):
        once = project(sample_article)
        assert project(once) == once


class TestOrderPreservation:
    """Nodes appear in the same relative order as their source spans."""

    @pytest.mark.parametrize("text", [
        "[QUOTE]q[/QUOTE]\n[HEADING]h[/HEADING]\n[TRANSCRIPT]\na\nb\n[/TRANSCRIPT]\n[TIMELINE]\nc\nd\n[/TIMELINE]",
        "[TRANSCRIPT]\na\nb\n[/TRANSCRIPT]text[HEADING]h[/HEADING]more[QUOTE]q[/QUOTE]",
        "[HEADING]1[/HEADING][HEADING]2[/HEADING][HEADING]3[/HEADING]",
    ])
    def test_block_order(self, text):
        spans = resolve(tokenize_blocks(text))
        expected = [span.tag.tag_name.lower() for span in spans]
        actual = [node.node_type.value for node in parse(text) if node.node_type.value != "text"]
        assert actual == expected

    def test_heading_texts_in_order(self):
        doc = parse("[HEADING]1[/HEADING][HEADING]2[/HEADING][HEADING]3[/HEADING]")
        assert [node.text for node in doc] == ["1", "2", "3"]

    def test_random_corpus_order(self, markup_corpus):
        for text in markup_corpus:
            spans = resolve(tokenize_blocks(text))
            starts = [span.start for span in spans]
            assert starts == sorted(starts)
            block_nodes = [node for node in parse(text) if node.node_type.value != "text"]
            assert [node.node_type.value for node in block_nodes] == [
                span.tag.tag_name.lower() for span in spans
            ]
