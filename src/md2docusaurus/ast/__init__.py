#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/ast/__init__.py
"""Abstract Syntax Tree for Markdown documents.

This package provides the node family for a parsed Markdown document, the
visitor base class used by the renderer, and the traversal engine used by
the transform passes.

Examples
--------
Build a document and find its links:

    >>> from md2docusaurus.ast import Document, Link, Paragraph, Text, visit
    >>> doc = Document(children=[
    ...     Paragraph(content=[Link(url="docs/a.md", content=[Text("a")])])
    ... ])
    >>> urls = []
    >>> visit(doc, "link", lambda node, index, parent: urls.append(node.url))
    >>> urls
    ['docs/a.md']

"""

from md2docusaurus.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
    get_text_content,
)
from md2docusaurus.ast.traversal import CONTINUE, EXIT, SKIP, Action, convert_test, visit
from md2docusaurus.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "Text",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "Strikethrough",
    "HTMLInline",
    "get_node_children",
    "get_text_content",
    # Traversal
    "Action",
    "CONTINUE",
    "SKIP",
    "EXIT",
    "convert_test",
    "visit",
    # Visitors
    "NodeVisitor",
]
