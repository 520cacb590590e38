#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/transforms/builtin.py
"""Built-in transforms turning stylelint Markdown into Docusaurus Markdown.

Each transform rewrites a Document in place through
:func:`md2docusaurus.ast.visit` and returns the same Document. None of them
keeps state between documents; the lookup tables they read are shared,
read-only ``TransformTables``.

Available Transforms
--------------------
- LinkRewriterTransform: Rewrite link URLs with a caller-supplied function
- WrapProblemExamplesTransform: Wrap rule examples in valid/invalid divs
- AdmonitionTransform: Turn ``> **Note**`` quotes into ``:::note`` blocks
- RuleSymbolTransform: Give rule table symbols an accessible title

Examples
--------
Rewrite links:

    >>> transform = LinkRewriterTransform(lambda url: url.replace("README.md", "index.md"))
    >>> doc = transform.transform(doc)

"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from md2docusaurus.ast import (
    SKIP,
    BlockQuote,
    Document,
    Heading,
    HTMLBlock,
    HTMLInline,
    Link,
    Node,
    Paragraph,
    Strong,
    Text,
    get_node_children,
    visit,
)
from md2docusaurus.ast.traversal import VisitorResult
from md2docusaurus.constants import (
    ADMONITION_CLOSER,
    INVALID_PATTERN_CLASS,
    VALID_PATTERN_CLASS,
    VALID_PATTERN_MARKER,
)
from md2docusaurus.options import DEFAULT_TABLES, TransformTables

logger = logging.getLogger(__name__)

UrlRewriter = Callable[[str], str]


class DocumentTransform(ABC):
    """Base class for in-place document transforms.

    Subclasses implement :meth:`transform`; ``name`` identifies the
    transform in logs and errors.

    """

    name: str = "transform"

    @abstractmethod
    def transform(self, document: Document) -> Document:
        """Apply the transform to ``document`` and return it."""
        pass


class LinkRewriterTransform(DocumentTransform):
    """Rewrite every link URL with a caller-supplied function.

    The rewriter is applied to every Link node, including links with an
    empty URL; validating URLs is the rewriter's job. No other attribute
    and no tree structure is touched.

    Parameters
    ----------
    rewriter : callable
        Pure function mapping an URL to its replacement

    Examples
    --------
        >>> transform = LinkRewriterTransform(str.lower)
        >>> doc = transform.transform(doc)

    """

    name = "rewrite-links"

    def __init__(self, rewriter: UrlRewriter):
        """Initialize with the URL rewriting function."""
        self.rewriter = rewriter

    def transform(self, document: Document) -> Document:
        """Rewrite the URL of every link in ``document``."""
        rewritten = 0

        def rewrite(node: Node, index: Optional[int], parent: Optional[Node]) -> None:
            nonlocal rewritten
            assert isinstance(node, Link)
            new_url = self.rewriter(node.url)
            if new_url != node.url:
                rewritten += 1
            node.url = new_url

        visit(document, Link, rewrite)
        logger.debug("Rewrote %d link URLs", rewritten)
        return document


class WrapProblemExamplesTransform(DocumentTransform):
    """Wrap the examples that follow a "considered problems" sentence.

    A trigger is a paragraph reading "The following patterns are considered
    problems:" (or the singular form). Rule docs write the valid-example
    form as "The following patterns are *not* considered problems:", so the
    text compared is the first inline run (right-trimmed) plus the third,
    skipping the emphasis in between.

    After each trigger an opening ``<div class="...">`` is inserted; the
    matching ``</div>`` goes before the next trigger or heading among the
    trigger's siblings, or at the end of the parent. The class is
    ``valid-pattern`` when the trigger's second run is an emphasis reading
    "not", otherwise ``invalid-pattern``.

    Parameters
    ----------
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables holding the trigger sentences

    """

    name = "wrap-problem-examples"

    def __init__(self, tables: TransformTables = DEFAULT_TABLES):
        """Initialize with the lookup tables."""
        self.tables = tables

    def is_trigger(self, node: Node) -> bool:
        """Return True if ``node`` is a problem-statement paragraph."""
        if not isinstance(node, Paragraph) or not node.content:
            return False

        first = _text_value(node.content, 0)
        last = _text_value(node.content, 2)
        return first.rstrip() + last in self.tables.trigger_sentences

    def transform(self, document: Document) -> Document:
        """Insert wrapper markers around every example block."""
        wrapped = 0

        def wrap(node: Node, index: Optional[int], parent: Optional[Node]) -> VisitorResult:
            nonlocal wrapped
            if parent is None or index is None:
                return None

            assert isinstance(node, Paragraph)
            siblings = get_node_children(parent)
            css_class = VALID_PATTERN_CLASS if self._is_valid_example(node) else INVALID_PATTERN_CLASS

            siblings.insert(index + 1, HTMLBlock(content=f'<div class="{css_class}">'))

            end_index = index + 2
            while end_index < len(siblings):
                sibling = siblings[end_index]
                if self.is_trigger(sibling) or isinstance(sibling, Heading):
                    break
                end_index += 1

            siblings.insert(end_index, HTMLBlock(content="</div>"))
            wrapped += 1
            return SKIP

        visit(document, self.is_trigger, wrap)
        logger.debug("Wrapped %d example blocks", wrapped)
        return document

    @staticmethod
    def _is_valid_example(trigger: Paragraph) -> bool:
        if len(trigger.content) < 2:
            return False
        marker = trigger.content[1]
        marker_children = get_node_children(marker)
        return bool(marker_children) and _text_value(marker_children, 0) == VALID_PATTERN_MARKER


class AdmonitionTransform(DocumentTransform):
    """Convert GFM note/warning quotes to Docusaurus admonitions.

    A block quote whose first paragraph starts with a bold label found in
    ``tables.admonition_kinds`` (``> **Note** text``) is replaced by::

        :::note Note

        text

        :::

    Leading whitespace is trimmed from the first run after the label only.
    Further blocks of the quote are kept between the text and the closer
    and are themselves converted, so a nested note becomes a nested
    admonition.
    Quotes with any other shape are left alone.

    Parameters
    ----------
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables holding the admonition kinds

    """

    name = "convert-admonitions"

    def __init__(self, tables: TransformTables = DEFAULT_TABLES):
        """Initialize with the lookup tables."""
        self.tables = tables

    def transform(self, document: Document) -> Document:
        """Replace every matching block quote with an admonition."""
        converted = 0

        def convert(node: Node, index: Optional[int], parent: Optional[Node]) -> VisitorResult:
            nonlocal converted
            if parent is None or index is None:
                return None

            assert isinstance(node, BlockQuote)
            label = self._admonition_label(node)
            if label is None:
                return None

            first_paragraph = node.children[0]
            assert isinstance(first_paragraph, Paragraph)
            rest = first_paragraph.content[1:]
            if rest and isinstance(getattr(rest[0], "content", None), str):
                rest[0].content = rest[0].content.lstrip()  # type: ignore[attr-defined]

            replacement: list[Node] = [
                Paragraph(content=[Text(content=f":::{self.tables.admonition_kinds[label]} {label}")]),
                Paragraph(content=rest),
                *node.children[1:],
                Paragraph(content=[Text(content=ADMONITION_CLOSER)]),
            ]
            get_node_children(parent)[index : index + 1] = replacement
            converted += 1
            # Continue with the kept blocks so nested quotes are converted too
            return index + 2

        visit(document, BlockQuote, convert)
        logger.debug("Converted %d admonitions", converted)
        return document

    def _admonition_label(self, blockquote: BlockQuote) -> Optional[str]:
        """Return the bold label of an admonition quote, or None."""
        if not blockquote.children or not isinstance(blockquote.children[0], Paragraph):
            return None

        paragraph = blockquote.children[0]
        if not paragraph.content or not isinstance(paragraph.content[0], Strong):
            return None

        label = _text_value(paragraph.content[0].content, 0)
        return label if label in self.tables.admonition_kinds else None


class RuleSymbolTransform(DocumentTransform):
    """Give the rule table symbols an accessible title.

    A text run consisting of exactly one known symbol (the checkmark for
    standard rules, the wrench for autofixable ones) is replaced by
    ``<span title="Label">symbol</span>``. A symbol inside a longer run is
    not matched.

    Parameters
    ----------
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables holding the symbol labels

    """

    name = "rule-symbols"

    def __init__(self, tables: TransformTables = DEFAULT_TABLES):
        """Initialize with the lookup tables."""
        self.tables = tables

    def is_symbol(self, node: Node) -> bool:
        """Return True if ``node`` is a text run holding exactly one known symbol."""
        return isinstance(node, Text) and node.content in self.tables.symbol_labels

    def transform(self, document: Document) -> Document:
        """Replace every symbol run with a titled span."""
        replaced = 0

        def annotate(node: Node, index: Optional[int], parent: Optional[Node]) -> VisitorResult:
            nonlocal replaced
            if parent is None or index is None:
                return None

            assert isinstance(node, Text)
            label = html.escape(self.tables.symbol_labels[node.content], quote=True)
            get_node_children(parent)[index] = HTMLInline(content=f'<span title="{label}">{node.content}</span>')
            replaced += 1
            return None

        visit(document, self.is_symbol, annotate)
        logger.debug("Annotated %d rule symbols", replaced)
        return document


def _text_value(nodes: list[Node], position: int) -> str:
    """Return the text of ``nodes[position]`` if it is a Text run, else ""."""
    if position < len(nodes) and isinstance(nodes[position], Text):
        return nodes[position].content  # type: ignore[attr-defined]
    return ""
