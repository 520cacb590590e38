#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/renderers/__init__.py
"""Renderers serializing the AST back to Markdown."""

from md2docusaurus.renderers.markdown import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
