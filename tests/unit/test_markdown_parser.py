#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown to AST converter."""

import pytest

from md2docusaurus.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableRow,
    Text,
    ThematicBreak,
)
from md2docusaurus.options import MarkdownParserOptions
from md2docusaurus.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


@pytest.mark.unit
class TestMarkdownBasics:
    """Test basic markdown parsing."""

    def test_simple_paragraph(self) -> None:
        """Test parsing a simple paragraph."""
        doc = markdown_to_ast("This is a paragraph.")

        assert isinstance(doc, Document)
        assert len(doc.children) == 1
        para = doc.children[0]
        assert isinstance(para, Paragraph)
        assert para.content == [Text(content="This is a paragraph.")]

    def test_headings(self) -> None:
        """Test heading levels."""
        doc = markdown_to_ast("# One\n\n### Three")

        assert isinstance(doc.children[0], Heading)
        assert doc.children[0].level == 1
        assert doc.children[0].content == [Text(content="One")]
        assert doc.children[1].level == 3

    def test_soft_break_stays_in_text(self) -> None:
        """Test that a soft line break is kept inside one text run."""
        doc = markdown_to_ast("first line\nsecond line")

        assert doc.children[0].content == [Text(content="first line\nsecond line")]

    def test_thematic_break(self) -> None:
        """Test parsing a thematic break."""
        doc = markdown_to_ast("a\n\n---\n\nb")

        assert isinstance(doc.children[1], ThematicBreak)


@pytest.mark.unit
class TestMarkdownInline:
    """Test inline formatting."""

    def test_emphasis_splits_trigger_sentence(self) -> None:
        """Test that emphasis produces three inline runs."""
        doc = markdown_to_ast("The following patterns are *not* considered problems:")
        content = doc.children[0].content

        assert len(content) == 3
        assert content[0] == Text(content="The following patterns are ")
        assert isinstance(content[1], Emphasis)
        assert content[1].content == [Text(content="not")]
        assert content[2] == Text(content=" considered problems:")

    def test_strong(self) -> None:
        """Test parsing bold text."""
        doc = markdown_to_ast("**Note** text")
        content = doc.children[0].content

        assert isinstance(content[0], Strong)
        assert content[0].content == [Text(content="Note")]
        assert content[1] == Text(content=" text")

    def test_link(self) -> None:
        """Test parsing a link with a title."""
        doc = markdown_to_ast('[docs](docs/a.md "Docs")')
        link = doc.children[0].content[0]

        assert isinstance(link, Link)
        assert link.url == "docs/a.md"
        assert link.title == "Docs"
        assert link.content == [Text(content="docs")]

    def test_inline_code(self) -> None:
        """Test parsing inline code."""
        doc = markdown_to_ast("Use `color: red`.")

        assert doc.children[0].content[1] == Code(content="color: red")

    def test_strikethrough(self) -> None:
        """Test parsing strikethrough."""
        doc = markdown_to_ast("~~old~~")

        assert isinstance(doc.children[0].content[0], Strikethrough)


@pytest.mark.unit
class TestMarkdownBlocks:
    """Test block structures."""

    def test_fenced_code_block(self) -> None:
        """Test code block with language."""
        doc = markdown_to_ast("```css\na { color: red; }\n```")
        block = doc.children[0]

        assert isinstance(block, CodeBlock)
        assert block.language == "css"
        assert block.content == "a { color: red; }\n"

    def test_block_quote(self) -> None:
        """Test parsing a block quote."""
        doc = markdown_to_ast("> **Note** Quoted.")
        quote = doc.children[0]

        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)
        assert isinstance(quote.children[0].content[0], Strong)

    def test_bullet_list(self) -> None:
        """Test parsing a tight bullet list."""
        doc = markdown_to_ast("- one\n- two")
        lst = doc.children[0]

        assert isinstance(lst, List)
        assert not lst.ordered
        assert lst.tight
        assert len(lst.items) == 2
        assert isinstance(lst.items[0], ListItem)
        assert lst.items[0].children[0].content == [Text(content="one")]

    def test_ordered_list(self) -> None:
        """Test parsing an ordered list."""
        doc = markdown_to_ast("1. one\n2. two")

        assert doc.children[0].ordered
        assert doc.children[0].start == 1

    def test_task_list(self) -> None:
        """Test parsing task list items."""
        doc = markdown_to_ast("- [x] done\n- [ ] todo")
        items = doc.children[0].items

        assert items[0].task_status == "checked"
        assert items[1].task_status == "unchecked"

    def test_table(self) -> None:
        """Test parsing a pipe table."""
        doc = markdown_to_ast("| Rule | Fix |\n| :--- | ---: |\n| color-named | ✅ |")
        table = doc.children[0]

        assert isinstance(table, Table)
        assert len(table.rows) == 2
        assert isinstance(table.rows[0], TableRow)
        assert table.rows[0].is_header
        assert not table.rows[1].is_header
        assert table.alignments == ["left", "right"]
        assert table.rows[1].cells[1].content == [Text(content="✅")]

    def test_html_block(self) -> None:
        """Test parsing a raw HTML block."""
        doc = markdown_to_ast('<div class="x">\n\ntext')

        assert doc.children[0] == HTMLBlock(content='<div class="x">')

    def test_tables_disabled(self) -> None:
        """Test that tables can be switched off."""
        converter = MarkdownToAstConverter(MarkdownParserOptions(parse_tables=False))
        doc = converter.parse("| a | b |\n| --- | --- |\n| 1 | 2 |")

        assert not any(isinstance(child, Table) for child in doc.children)
