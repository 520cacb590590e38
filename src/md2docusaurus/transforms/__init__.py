#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/transforms/__init__.py
"""Transform passes and the per-document pipeline.

Examples
--------
Run the whole pipeline on a string:

    >>> from md2docusaurus.transforms import process_markdown
    >>> output = process_markdown(markdown_text, lambda url: url)

Run a single pass on a parsed document:

    >>> from md2docusaurus.transforms import AdmonitionTransform
    >>> doc = AdmonitionTransform().transform(doc)

"""

from __future__ import annotations

from .builtin import (
    AdmonitionTransform,
    DocumentTransform,
    LinkRewriterTransform,
    RuleSymbolTransform,
    WrapProblemExamplesTransform,
)
from .pipeline import apply_transforms, default_transforms, process_markdown

__all__ = [
    "DocumentTransform",
    "LinkRewriterTransform",
    "WrapProblemExamplesTransform",
    "AdmonitionTransform",
    "RuleSymbolTransform",
    "apply_transforms",
    "default_transforms",
    "process_markdown",
]
