#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2docusaurus.

This module centralizes the fixed strings, lookup values and defaults used
across the package. Constants are organized by category:
1. Type Definitions
2. Markdown Formatting Defaults
3. Transform Lookup Values
4. Front Matter
5. Site Generation
6. Exit Codes
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisSymbol = Literal["*", "_"]
CodeFenceChar = Literal["`", "~"]

# =============================================================================
# Markdown Formatting Defaults
# =============================================================================

DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_BULLET_SYMBOLS = "-"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_ESCAPE_SPECIAL = True

# =============================================================================
# Transform Lookup Values
# =============================================================================

PROBLEM_TRIGGER_SENTENCES: tuple[str, ...] = (
    "The following patterns are considered problems:",
    "The following pattern is considered a problem:",
)

# Text of the emphasis run that flips a trigger to the valid-example form
VALID_PATTERN_MARKER = "not"
VALID_PATTERN_CLASS = "valid-pattern"
INVALID_PATTERN_CLASS = "invalid-pattern"

ADMONITION_KINDS: Mapping[str, str] = MappingProxyType(
    {
        "Note": "note",
        "Warning": "caution",
    }
)
ADMONITION_CLOSER = ":::"

RULE_SYMBOL_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "✅": "Standard",
        "\U0001f527": "Autofixable",
    }
)

# =============================================================================
# Front Matter
# =============================================================================

HOME_TITLE = "Stylelint"
HOME_SLUG = "/"

TITLE_TO_SIDEBAR_LABEL: Mapping[str, str] = MappingProxyType(
    {
        "Stylelint": "Home",
    }
)

FRONTMATTER_DELIMITER = "---"

# =============================================================================
# Site Generation
# =============================================================================

DEFAULT_SOURCE_DIR = "node_modules/stylelint"
RULES_INDEX_URL = "https://github.com/stylelint/stylelint/blob/main/lib/rules/index.js"
MARKDOWN_ENCODING = "utf-8"

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
