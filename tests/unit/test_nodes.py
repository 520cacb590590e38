#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST nodes and options."""

import dataclasses

import pytest

from md2docusaurus.ast import (
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Table,
    TableRow,
    Text,
    get_node_children,
    get_text_content,
)
from md2docusaurus.options import DEFAULT_TABLES, MarkdownRendererOptions


@pytest.mark.unit
class TestNodeChildren:
    """Tests for get_node_children."""

    def test_live_list_returned(self):
        """Test that the node's own list is returned, not a copy."""
        para = Paragraph(content=[Text(content="a")])
        children = get_node_children(para)
        children.append(Text(content="b"))

        assert children is para.content
        assert len(para.content) == 2

    @pytest.mark.parametrize(
        "node,attr",
        [
            (Document(), "children"),
            (List(ordered=False), "items"),
            (Table(), "rows"),
            (TableRow(), "cells"),
            (ListItem(), "children"),
            (Link(url="a"), "content"),
        ],
    )
    def test_children_attribute(self, node, attr):
        """Test that each container exposes its own child attribute."""
        assert get_node_children(node) is getattr(node, attr)

    def test_leaf_nodes_have_no_children(self):
        """Test leaves return an empty list."""
        assert get_node_children(Text(content="x")) == []
        assert get_node_children(CodeBlock(content="x")) == []


@pytest.mark.unit
class TestTextContent:
    """Tests for get_text_content."""

    def test_nested_inline(self):
        """Test concatenation across nested inline nodes."""
        para = Paragraph(
            content=[
                Text(content="a "),
                Emphasis(content=[Text(content="b")]),
                Image(url="x.png", alt_text=" c"),
            ]
        )
        assert get_text_content(para) == "a b c"


@pytest.mark.unit
class TestHeadingNode:
    """Tests for Heading validation."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_invalid_level(self, level):
        """Test that levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=level)


@pytest.mark.unit
class TestOptions:
    """Tests for options dataclasses."""

    def test_create_updated(self):
        """Test cloning with a changed field."""
        options = MarkdownRendererOptions()
        updated = options.create_updated(emphasis_symbol="_")

        assert updated.emphasis_symbol == "_"
        assert options.emphasis_symbol == "*"

    def test_invalid_fence_length(self):
        """Test validation of the fence length."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(code_fence_min=2)

    def test_default_tables_frozen(self):
        """Test that the shared tables cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_TABLES.home_title = "Other"  # type: ignore[misc]
        with pytest.raises(TypeError):
            DEFAULT_TABLES.admonition_kinds["Tip"] = "tip"  # type: ignore[index]

    def test_default_tables_content(self):
        """Test the shipped lookup values."""
        assert DEFAULT_TABLES.admonition_kinds == {"Note": "note", "Warning": "caution"}
        assert DEFAULT_TABLES.symbol_labels["✅"] == "Standard"
        assert DEFAULT_TABLES.title_overrides == {"Stylelint": "Home"}
