#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/utils/metadata.py
"""Front matter derivation for Docusaurus documents.

The title of a document is taken from its first top-level ``# `` heading in
the serialized Markdown. From it we derive the sidebar label (through the
override table) and, for the home document, a root slug. The result is
prepended to the body as a YAML front matter block::

    ---
    title: Home
    sidebar_label: Home
    slug: /
    ---

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from md2docusaurus.constants import FRONTMATTER_DELIMITER
from md2docusaurus.exceptions import MissingTitleError
from md2docusaurus.options import DEFAULT_TABLES, TransformTables

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"^# ([^\n]+)$", re.MULTILINE)


@dataclass(frozen=True)
class TitleResult:
    """Outcome of looking for a document title.

    Exactly one of ``title`` and ``error`` is set.

    Parameters
    ----------
    title : str or None
        The heading text, when found
    error : str or None
        Why no title could be extracted

    """

    title: Optional[str] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        """Whether a title was extracted."""
        return self.title is not None


@dataclass(frozen=True)
class FrontMatter:
    """Docusaurus front matter fields for one document."""

    title: str
    sidebar_label: str
    slug: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the fields in output order, omitting an unset slug."""
        data: Dict[str, Any] = {"title": self.title, "sidebar_label": self.sidebar_label}
        if self.slug is not None:
            data["slug"] = self.slug
        return data


def extract_title(markdown_text: str) -> TitleResult:
    """Find the first top-level heading in serialized Markdown.

    Parameters
    ----------
    markdown_text : str
        Markdown text as produced by the renderer

    Returns
    -------
    TitleResult
        The heading text, or an error when the text has no ``# `` heading

    Examples
    --------
    >>> extract_title("# Stylelint\\n\\nBody\\n").title
    'Stylelint'
    >>> extract_title("No heading here\\n").found
    False

    """
    match = TITLE_PATTERN.search(markdown_text)
    if match is None:
        return TitleResult(error="no top-level heading")
    return TitleResult(title=match.group(1).strip())


def build_front_matter(title: str, tables: TransformTables = DEFAULT_TABLES) -> FrontMatter:
    """Derive the front matter fields from a document title.

    The sidebar label comes from ``tables.title_overrides`` and defaults to
    the title. The home document takes its sidebar label as title and gets
    the home slug.

    Parameters
    ----------
    title : str
        Title extracted from the document
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables holding the overrides and home sentinel

    Returns
    -------
    FrontMatter
        Derived fields

    """
    sidebar_label = tables.title_overrides.get(title, title)

    if title == tables.home_title:
        return FrontMatter(title=sidebar_label, sidebar_label=sidebar_label, slug=tables.home_slug)

    return FrontMatter(title=title, sidebar_label=sidebar_label)


def format_yaml_frontmatter(front_matter: FrontMatter) -> str:
    """Format front matter as a delimited YAML block.

    Parameters
    ----------
    front_matter : FrontMatter
        Fields to serialize

    Returns
    -------
    str
        YAML between ``---`` lines, without a trailing newline

    """
    yaml_content = yaml.safe_dump(
        front_matter.to_dict(),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=float("inf"),
    )

    if not yaml_content.endswith("\n"):
        yaml_content += "\n"

    return f"{FRONTMATTER_DELIMITER}\n{yaml_content}{FRONTMATTER_DELIMITER}"


def prepend_front_matter(
    content: str, tables: TransformTables = DEFAULT_TABLES, file_path: Optional[str] = None
) -> str:
    """Prepend Docusaurus front matter derived from the content's title.

    Parameters
    ----------
    content : str
        Serialized Markdown body
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables holding the overrides and home sentinel
    file_path : str, optional
        Source path, used in the error message

    Returns
    -------
    str
        Front matter block, a blank line, then the body

    Raises
    ------
    MissingTitleError
        If the content has no top-level heading

    """
    result = extract_title(content)
    if not result.found:
        raise MissingTitleError(file_path)

    front_matter = build_front_matter(result.title, tables)  # type: ignore[arg-type]
    logger.debug("Front matter for %s: %s", file_path or "<string>", front_matter.to_dict())

    return f"{format_yaml_frontmatter(front_matter)}\n\n{content}"
