#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/parsers/__init__.py
"""Parsers turning Markdown sources into the AST."""

from md2docusaurus.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["MarkdownToAstConverter", "markdown_to_ast"]
