#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/transforms/pipeline.py
"""Pipeline turning one Markdown source into a Docusaurus document.

The pipeline parses the source, runs the transform passes in a fixed order,
serializes the tree and prepends the front matter::

    parse -> rewrite links -> wrap examples -> admonitions -> rule symbols
          -> render -> front matter

Each call builds a fresh tree, so concurrent calls on different inputs do
not interact.

Examples
--------
    >>> from md2docusaurus.transforms import process_markdown
    >>> text = process_markdown("# Stylelint\\n\\nSee [docs](docs/a.md).\\n", lambda url: url)
    >>> print(text.splitlines()[1])
    title: Home

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from md2docusaurus.ast import Document
from md2docusaurus.exceptions import Md2DocusaurusError, TransformError
from md2docusaurus.options import DEFAULT_TABLES, MarkdownParserOptions, MarkdownRendererOptions, TransformTables
from md2docusaurus.parsers.markdown import MarkdownToAstConverter
from md2docusaurus.renderers.markdown import MarkdownRenderer
from md2docusaurus.transforms.builtin import (
    AdmonitionTransform,
    DocumentTransform,
    LinkRewriterTransform,
    RuleSymbolTransform,
    WrapProblemExamplesTransform,
)
from md2docusaurus.utils.metadata import prepend_front_matter

logger = logging.getLogger(__name__)


def default_transforms(
    rewriter: Callable[[str], str], tables: TransformTables = DEFAULT_TABLES
) -> list[DocumentTransform]:
    """Return the standard passes in execution order.

    Parameters
    ----------
    rewriter : callable
        URL rewriting function for the link pass
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables shared by the passes

    Returns
    -------
    list of DocumentTransform
        Link rewrite, example wrapping, admonitions and rule symbols

    """
    return [
        LinkRewriterTransform(rewriter),
        WrapProblemExamplesTransform(tables),
        AdmonitionTransform(tables),
        RuleSymbolTransform(tables),
    ]


def apply_transforms(document: Document, transforms: Sequence[DocumentTransform]) -> Document:
    """Apply transforms in order.

    Parameters
    ----------
    document : Document
        Document to transform in place
    transforms : sequence of DocumentTransform
        Passes to run

    Returns
    -------
    Document
        The transformed document

    Raises
    ------
    TransformError
        If a pass fails or does not return a Document

    """
    result = document
    for transformer in transforms:
        logger.debug(f"Applying transform: {transformer.name}")
        try:
            transformed = transformer.transform(result)
        except Md2DocusaurusError:
            raise
        except Exception as e:
            logger.error(f"Transform {transformer.name} failed: {e}", exc_info=True)
            raise TransformError(
                f"Transform {transformer.name} failed: {e}", transform_name=transformer.name, original_error=e
            ) from e

        if not isinstance(transformed, Document):
            raise TransformError(
                f"Transform {transformer.name} must return Document, got {type(transformed).__name__}",
                transform_name=transformer.name,
            )
        result = transformed

    return result


def process_markdown(
    text: str,
    rewriter: Callable[[str], str],
    tables: TransformTables = DEFAULT_TABLES,
    file_path: Optional[str] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
) -> str:
    """Convert one Markdown source into a Docusaurus document.

    Parameters
    ----------
    text : str
        Markdown source
    rewriter : callable
        URL rewriting function for the link pass
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables for the passes and the front matter
    file_path : str, optional
        Source path, used in log and error messages
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : MarkdownRendererOptions, optional
        Renderer configuration

    Returns
    -------
    str
        Front matter, a blank line, then the transformed Markdown ending in
        a newline

    Raises
    ------
    ParsingError
        If the source cannot be tokenized
    MissingTitleError
        If the transformed document has no top-level heading
    TransformError
        If a pass fails

    """
    label = file_path or "<string>"
    logger.debug(f"Processing {label}")

    document = MarkdownToAstConverter(parser_options).parse(text)
    document = apply_transforms(document, default_transforms(rewriter, tables))
    body = MarkdownRenderer(renderer_options).render_to_string(document) + "\n"

    return prepend_front_matter(body, tables, file_path)
