#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/ast/nodes.py
"""AST node classes for document representation.

This module defines the node family used to represent a parsed Markdown
document. Each node represents a structural or inline element.

Every node class carries a ``kind`` tag (``"root"``, ``"paragraph"``,
``"link"``...) used by the traversal engine for matching, and container
classes name the attribute holding their ordered child list in
``children_attr``. That attribute is the *live* list: passes splice into it
directly and the traversal engine re-reads it after every callback.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Code
    - Link, Image, LineBreak, Strikethrough, HTMLInline

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for rendering.

    Attributes
    ----------
    kind : str
        Node kind tag used for matching during traversal
    children_attr : str or None
        Name of the attribute holding the ordered child list, or None for
        leaf nodes

    """

    kind: ClassVar[str] = "node"
    children_attr: ClassVar[Optional[str]] = None

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    kind: ClassVar[str] = "root"
    children_attr: ClassVar[Optional[str]] = "children"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    kind: ClassVar[str] = "heading"
    children_attr: ClassVar[Optional[str]] = "content"

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    kind: ClassVar[str] = "paragraph"
    children_attr: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown)
    language : str or None, default = None
        Info string of the fence (language plus any attributes)
    metadata : dict, default = empty dict
        Code block metadata

    """

    kind: ClassVar[str] = "code"

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    kind: ClassVar[str] = "blockquote"
    children_attr: ClassVar[Optional[str]] = "children"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata

    """

    kind: ClassVar[str] = "list"
    children_attr: ClassVar[Optional[str]] = "items"

    ordered: bool
    items: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block-level content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the item
    task_status : {"checked", "unchecked"} or None, default = None
        Task list checkbox state, if any
    metadata : dict, default = empty dict
        List item metadata

    """

    kind: ClassVar[str] = "list_item"
    children_attr: ClassVar[Optional[str]] = "children"

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """GFM table node.

    The header row, when present, is the first row and has ``is_header`` set.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table rows, header first
    alignments : list of Alignment or None, default = empty list
        Column alignments from the delimiter row
    metadata : dict, default = empty dict
        Table metadata

    """

    kind: ClassVar[str] = "table"
    children_attr: ClassVar[Optional[str]] = "rows"

    rows: list[Node] = field(default_factory=list)
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row containing cells."""

    kind: ClassVar[str] = "table_row"
    children_attr: ClassVar[Optional[str]] = "cells"

    cells: list[Node] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell containing inline content."""

    kind: ClassVar[str] = "table_cell"
    children_attr: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    kind: ClassVar[str] = "thematic_break"

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Represents a block of raw HTML content, preserved as-is. The example
    wrapping pass emits its ``<div>`` markers as HTML blocks.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML block metadata

    """

    kind: ClassVar[str] = "html"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    kind: ClassVar[str] = "text"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    kind: ClassVar[str] = "emphasis"
    children_attr: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    kind: ClassVar[str] = "strong"
    children_attr: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code node."""

    kind: ClassVar[str] = "inline_code"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata

    """

    kind: ClassVar[str] = "link"
    children_attr: ClassVar[Optional[str]] = "content"

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ""
        Alternative text
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    kind: ClassVar[str] = "image"

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard line break."""

    kind: ClassVar[str] = "break"

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Strikethrough(Node):
    """GFM strikethrough node."""

    kind: ClassVar[str] = "delete"
    children_attr: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class HTMLInline(Node):
    """Inline raw HTML node.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML metadata

    """

    kind: ClassVar[str] = "html_inline"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


def get_node_children(node: Node) -> list[Node]:
    """Get the live child list of a node.

    Unlike a copy, the returned list is the node's own storage, so callers
    may splice into it to insert, delete or replace children in place.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        The node's child list (a fresh empty list for leaf nodes)

    Examples
    --------
    >>> para = Paragraph(content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> get_node_children(para) is para.content
    True

    """
    if node.children_attr is None:
        return []
    return getattr(node, node.children_attr)


def get_text_content(node: Node) -> str:
    """Concatenate the text payloads found under a node, in document order."""
    if isinstance(node, (Text, Code)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text
    return "".join(get_text_content(child) for child in get_node_children(node))
