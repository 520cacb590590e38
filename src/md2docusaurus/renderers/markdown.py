#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which serializes AST nodes
back to GFM Markdown, the dialect the documents were parsed from.

The renderer uses the visitor pattern. Container blocks (block quotes,
list items) render their children to a string first and then prefix every
line, so nested code blocks, HTML and lists keep the right indentation.

"""

from __future__ import annotations

import re

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
)
from md2docusaurus.ast.visitors import NodeVisitor
from md2docusaurus.options import MarkdownRendererOptions

_ORDERED_LIST_MARKER = re.compile(r"\d{1,9}[.)]")
_SETEXT_UNDERLINE = re.compile(r"=+[ \t]*(?:\n|$)")


class MarkdownRenderer(NodeVisitor):
    """Render AST nodes to markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from md2docusaurus.ast import Document, Heading, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> MarkdownRenderer().render_to_string(doc)
        '# Title'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        self.options = options or MarkdownRendererOptions()
        self._output: list[str] = []
        self._list_depth: int = 0
        self._in_table_cell: bool = False
        self._in_heading: bool = False

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to markdown string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Markdown text, without a trailing newline

        """
        self._output = []
        self._list_depth = 0
        self._in_table_cell = False
        self._in_heading = False

        document.accept(self)

        result = "".join(self._output)
        self._output.clear()

        return self._cleanup_output(result)

    def _cleanup_output(self, text: str) -> str:
        """Normalize line endings and trim surrounding blank lines."""
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        return text.strip("\n").rstrip()

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content as a string

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result

    def _render_blocks(self, children: list[Node], separator: str = "\n\n") -> str:
        """Render block nodes to a string, one separator between siblings."""
        saved_output = self._output
        rendered = []

        for child in children:
            self._output = []
            child.accept(self)
            text = "".join(self._output)
            if text:
                rendered.append(text)

        self._output = saved_output
        return separator.join(rendered)

    def _block_marker_index(self, text: str, start: int) -> int | None:
        """Return the index of the character that would open a block at line ``start``.

        Covers bullet and quote markers, ordered list markers (``1.``, ``1)``)
        and ``=`` setext underlines. Heading and table cell text cannot open
        blocks, so nothing is reported there.

        """
        if self._in_heading or self._in_table_cell:
            return None
        if text[start : start + 1] in ("-", "+", ">"):
            return start
        ordered = _ORDERED_LIST_MARKER.match(text, start)
        if ordered:
            return ordered.end() - 1
        if _SETEXT_UNDERLINE.match(text, start):
            return start
        return None

    def _escape_markdown(self, text: str) -> str:
        """Escape special markdown characters with context awareness.

        - Backslash, backticks, asterisks, braces, brackets and ``<`` are
          always escaped.
        - ``#`` is escaped only at the start of a line.
        - ``_`` is escaped only at word boundaries (``snake_case`` is left
          alone).
        - ``|`` is escaped inside table cells.
        - A marker that would start a list, a block quote or a setext
          heading at the start of a line is escaped (``\\- item``,
          ``1\\. item``, ``\\===``).

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text

        """
        if not self.options.escape_special:
            return text

        always_escape = "\\`*{}[]<"
        line_starts = [0] + [i + 1 for i, char in enumerate(text) if char == "\n"]
        block_markers = {self._block_marker_index(text, start) for start in line_starts}

        escaped_chars = []
        for i, char in enumerate(text):
            if char in always_escape:
                escaped_chars.append("\\")
                escaped_chars.append(char)
            elif i in block_markers:
                escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "#":
                if i == 0 or text[i - 1] == "\n":
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "_":
                prev_alnum = i > 0 and text[i - 1].isalnum()
                next_alnum = i < len(text) - 1 and text[i + 1].isalnum()
                if not (prev_alnum and next_alnum):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "|" and self._in_table_cell:
                escaped_chars.append("\\|")
            else:
                escaped_chars.append(char)

        return "".join(escaped_chars)

    @staticmethod
    def _prefix_lines(text: str, first: str, rest: str, blank: str = "") -> str:
        """Prefix the first line with ``first`` and later non-blank lines with ``rest``."""
        lines = text.split("\n")
        prefixed = []
        for i, line in enumerate(lines):
            if i == 0:
                prefixed.append(f"{first}{line}" if line else first.rstrip())
            elif line:
                prefixed.append(f"{rest}{line}")
            else:
                prefixed.append(blank)
        return "\n".join(prefixed)

    def visit_document(self, node: Document) -> None:
        """Render a Document node, blocks separated by blank lines."""
        self._output.append(self._render_blocks(node.children))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node in ATX style."""
        self._in_heading = True
        try:
            content = self._render_inline_content(node.content)
        finally:
            self._in_heading = False
        self._output.append(f"{'#' * node.level} {content}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced block.

        The fence is made longer than any run of the fence character inside
        the code so the block cannot be closed early.

        """
        fence_char = self.options.code_fence_char
        longest_run = max((len(run) for run in re.findall(f"{re.escape(fence_char)}+", node.content)), default=0)
        fence = fence_char * max(self.options.code_fence_min, longest_run + 1)

        code = node.content if node.content.endswith("\n") or not node.content else node.content + "\n"
        self._output.append(f"{fence}{node.language or ''}\n{code}{fence}")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node, quoting every line."""
        quoted = self._render_blocks(node.children)
        self._output.append(self._prefix_lines(quoted, "> ", "> ", ">"))

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        symbols = self.options.bullet_symbols
        bullet = symbols[self._list_depth % len(symbols)]

        self._list_depth += 1
        rendered_items = []
        for i, item in enumerate(node.items):
            marker = f"{node.start + i}. " if node.ordered else f"{bullet} "
            body = self._render_list_item_body(item, node.tight)
            rendered_items.append(self._prefix_lines(body, marker, " " * len(marker)))
        self._list_depth -= 1

        self._output.append(("\n" if node.tight else "\n\n").join(rendered_items))

    def _render_list_item_body(self, item: Node, tight: bool) -> str:
        if not isinstance(item, ListItem):
            return self._render_blocks([item])

        body = self._render_blocks(item.children, "\n" if tight else "\n\n")
        if item.task_status:
            checkbox = "[x]" if item.task_status == "checked" else "[ ]"
            body = f"{checkbox} {body}"
        return body

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node outside a list as a single bullet."""
        body = self._render_list_item_body(node, tight=True)
        self._output.append(self._prefix_lines(body, "- ", "  "))

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a GFM pipe table."""
        if not node.rows:
            return

        rendered_rows = [self._render_row_cells(row) for row in node.rows]
        num_cols = max(len(cells) for cells in rendered_rows)

        lines = []
        for i, cells in enumerate(rendered_rows):
            padded = cells + [""] * (num_cols - len(cells))
            lines.append("| " + " | ".join(padded) + " |")
            if i == 0:
                lines.append(self._generate_alignment_row(node, num_cols))

        self._output.append("\n".join(lines))

    def _render_row_cells(self, row: Node) -> list[str]:
        if not isinstance(row, TableRow):
            return []
        self._in_table_cell = True
        try:
            return [
                self._render_inline_content(cell.content) for cell in row.cells if isinstance(cell, TableCell)
            ]
        finally:
            self._in_table_cell = False

    @staticmethod
    def _generate_alignment_row(node: Table, num_cols: int) -> str:
        """Generate the delimiter row from the column alignments."""
        markers = {"center": ":---:", "right": "---:", "left": ":---"}
        alignments = list(node.alignments[:num_cols])
        alignments += [None] * (num_cols - len(alignments))
        return "| " + " | ".join(markers.get(align or "", "---") for align in alignments) + " |"

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node (rows are rendered by visit_table)."""
        self._output.append("| " + " | ".join(self._render_row_cells(node)) + " |")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node's inline content."""
        self._output.append(self._render_inline_content(node.content))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("---")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node verbatim."""
        self._output.append(node.content)

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape_markdown(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        symbol = self.options.emphasis_symbol
        self._output.append(f"{symbol}{content}{symbol}")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"**{content}**")

    def visit_code(self, node: Code) -> None:
        """Render a Code node, widening the backtick fence when needed."""
        longest_run = max((len(run) for run in re.findall("`+", node.content)), default=0)
        backticks = "`" * (longest_run + 1)
        padding = " " if node.content.startswith("`") or node.content.endswith("`") else ""
        self._output.append(f"{backticks}{padding}{node.content}{padding}{backticks}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node inline."""
        content = self._render_inline_content(node.content)
        url = f"<{node.url}>" if " " in node.url else node.url
        if node.title:
            title = node.title.replace('"', '\\"')
            self._output.append(f'[{content}]({url} "{title}")')
        else:
            self._output.append(f"[{content}]({url})")

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        alt = node.alt_text.replace("[", "\\[").replace("]", "\\]")
        if node.title:
            self._output.append(f'![{alt}]({node.url} "{node.title}")')
        else:
            self._output.append(f"![{alt}]({node.url})")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a hard LineBreak node."""
        self._output.append("\\\n")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"~~{content}~~")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node verbatim."""
        self._output.append(node.content)
