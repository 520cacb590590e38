#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/utils/__init__.py
"""Utility modules for md2docusaurus.

This package holds the front matter helpers used after rendering.
"""

from md2docusaurus.utils.metadata import (
    FrontMatter,
    TitleResult,
    build_front_matter,
    extract_title,
    format_yaml_frontmatter,
    prepend_front_matter,
)

__all__ = [
    "FrontMatter",
    "TitleResult",
    "build_front_matter",
    "extract_title",
    "format_yaml_frontmatter",
    "prepend_front_matter",
]
