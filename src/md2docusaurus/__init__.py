"""md2docusaurus - Turn the stylelint Markdown docs into a Docusaurus site tree.

md2docusaurus parses each Markdown source into an AST, runs a fixed series
of in-place passes over it and serializes the result with a YAML front
matter block that Docusaurus reads.

The passes are:

- link rewriting, with a rewriter chosen per source group
- wrapping of rule examples in ``valid-pattern``/``invalid-pattern`` divs
- conversion of ``> **Note**`` quotes into ``:::note`` admonitions
- accessible titles for the rule table symbols

Requirements
------------
- Python 3.10+
- mistune 3 for Markdown tokenizing
- PyYAML for the front matter

Examples
--------
Convert one document:

    >>> from md2docusaurus import process_markdown
    >>> output = process_markdown(text, lambda url: url.replace("README.md", "index.md"))

Generate the whole site tree:

    >>> from md2docusaurus import generate_docs
    >>> report = generate_docs("website/docs", source_dir="node_modules/stylelint")
    >>> len(report.written)
    120

"""

from __future__ import annotations

from md2docusaurus.ast import Document, visit
from md2docusaurus.exceptions import (
    FileError,
    Md2DocusaurusError,
    MissingTitleError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    TransformError,
)
from md2docusaurus.generator import GenerationReport, generate_docs
from md2docusaurus.options import (
    DEFAULT_TABLES,
    MarkdownParserOptions,
    MarkdownRendererOptions,
    TransformTables,
)
from md2docusaurus.parsers.markdown import markdown_to_ast
from md2docusaurus.renderers.markdown import MarkdownRenderer
from md2docusaurus.transforms.pipeline import process_markdown

__version__ = "1.0.0"

__all__ = [
    "Document",
    "visit",
    "markdown_to_ast",
    "MarkdownRenderer",
    "process_markdown",
    "generate_docs",
    "GenerationReport",
    "DEFAULT_TABLES",
    "TransformTables",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "Md2DocusaurusError",
    "FileError",
    "ParsingError",
    "MissingTitleError",
    "TransformError",
    "RenderingError",
    "OutputWriteError",
    "__version__",
]
