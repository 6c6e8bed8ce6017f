"""
Tests for the editor splicing helpers.
"""

import pytest

from newsroom_markup.core.editing import (
    TIMELINE_TEMPLATE,
    TRANSCRIPT_TEMPLATE,
    insert_tag,
    insert_template,
)
from newsroom_markup.core.markup import NodeType, Tag, parse


class TestInsertTag:
    """Tests for wrapping a selection."""

    def test_wraps_selection(self):
        result = insert_tag("make this bold", 10, 14, Tag.BOLD)
        assert result.text == "make this [BOLD]bold[/BOLD]"
        assert result.cursor == len(result.text)

    def test_empty_selection(self):
        result = insert_tag("ab", 1, 1, Tag.ITALIC)
        assert result.text == "a[ITALIC][/ITALIC]b"
        assert result.cursor == 1 + len("[ITALIC][/ITALIC]")

    def test_reversed_selection_swapped(self):
        assert insert_tag("abcd", 3, 1, Tag.BOLD).text == "a[BOLD]bc[/BOLD]d"

    def test_offsets_clamped(self):
        result = insert_tag("abc", -5, 99, Tag.QUOTE)
        assert result.text == "[QUOTE]abc[/QUOTE]"

    def test_wrapped_selection_parses(self):
        result = insert_tag("Title here", 0, 10, Tag.HEADING)
        assert parse(result.text)[0].node_type is NodeType.HEADING


class TestInsertTemplate:
    """Tests for inserting block skeletons."""

    def test_inserts_with_blank_lines(self):
        result = insert_template("ab", 1, "[QUOTE]q[/QUOTE]")
        assert result.text == "a\n\n[QUOTE]q[/QUOTE]\n\nb"
        assert result.text[:result.cursor].endswith("[/QUOTE]")

    def test_offset_clamped(self):
        result = insert_template("ab", 50, "T")
        assert result.text == "ab\n\nT\n\n"
        assert result.cursor == 2 + 2 + 1

    @pytest.mark.parametrize("template,node_type,count", [
        (TIMELINE_TEMPLATE, NodeType.TIMELINE, 3),
        (TRANSCRIPT_TEMPLATE, NodeType.TRANSCRIPT, 2),
    ])
    def test_templates_parse(self, template, node_type, count):
        """Test the editor skeletons are well-formed blocks."""
        result = insert_template("Intro", 5, template)
        doc = parse(result.text)
        assert [node.node_type for node in doc] == [NodeType.TEXT, node_type]
        block = doc[1]
        entries = block.events if node_type is NodeType.TIMELINE else block.pairs
        assert len(entries) == count
