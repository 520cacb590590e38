#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/rewriters.py
"""Link rewriters for the three groups of stylelint Markdown sources.

The stylelint package links between its documents with repository-relative
paths. Once the documents move into the site tree those links have to point
at the generated pages instead. Each group of sources gets its own rewriter;
every step replaces the first occurrence only and steps run in order.

- Root documents (``README.md``, ``CHANGELOG.md``, ...) link into ``docs/``.
- Documents under ``docs/`` link up into ``lib/rules/`` and the root.
- Rule documents under ``lib/rules/<rule>/README.md`` link to sibling rules
  and into ``docs/user-guide/``.
"""

from __future__ import annotations

import re

from md2docusaurus.constants import RULES_INDEX_URL

_ROOT_DOCS_PREFIX = re.compile(r"^/?docs/")
_SIBLING_RULE = re.compile(r"\.\./([a-z-]+)/README\.md")
_USER_GUIDE_PAGE = re.compile(r"\.\./\.\./\.\./docs/user-guide/([a-z-/]+)\.md")

DOCS_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("../../lib/rules/index.js", RULES_INDEX_URL),
    ("../../CHANGELOG.md", "../CHANGELOG.md"),
    ("../../VISION.md", "../VISION.md"),
    ("../../lib/rules/", "/user-guide/rules/"),
    ("/README.md", ".md"),
    ("CONTRIBUTING.md", "CONTRIBUTING"),
)


def rewrite_root_link(url: str) -> str:
    """Rewrite a link found in a root document.

    Examples
    --------
    >>> rewrite_root_link("docs/user-guide/get-started.md")
    '/user-guide/get-started.md'
    >>> rewrite_root_link("README.md")
    'index.md'

    """
    url = _ROOT_DOCS_PREFIX.sub("/", url, count=1)
    return url.replace("README.md", "index.md", 1)


def rewrite_docs_link(url: str) -> str:
    """Rewrite a link found in a document under ``docs/``.

    Examples
    --------
    >>> rewrite_docs_link("../../lib/rules/color-named/README.md")
    '/user-guide/rules/color-named.md'
    >>> rewrite_docs_link("../../CHANGELOG.md")
    '../CHANGELOG.md'

    """
    for old, new in DOCS_REPLACEMENTS:
        url = url.replace(old, new, 1)
    return url


def rewrite_rule_link(url: str) -> str:
    """Rewrite a link found in a rule document.

    Examples
    --------
    >>> rewrite_rule_link("../color-no-invalid-hex/README.md")
    'color-no-invalid-hex.md'
    >>> rewrite_rule_link("../../../docs/user-guide/configure.md#rules")
    '../configure.md#rules'

    """
    url = _SIBLING_RULE.sub(r"\1.md", url, count=1)
    return _USER_GUIDE_PAGE.sub(r"../\1.md", url, count=1)
