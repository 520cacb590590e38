#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing, rendering and transforming documents.

All options classes are frozen dataclasses. Use ``create_updated`` to derive
a modified copy:

    >>> options = MarkdownRendererOptions()
    >>> underscored = options.create_updated(emphasis_symbol="_")

``TransformTables`` bundles the fixed lookup tables the passes and the
metadata injector read. ``DEFAULT_TABLES`` is built once at import time and
shared by reference; it is never mutated.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2docusaurus.constants import (
    ADMONITION_KINDS,
    DEFAULT_BULLET_SYMBOLS,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ESCAPE_SPECIAL,
    HOME_SLUG,
    HOME_TITLE,
    PROBLEM_TRIGGER_SENTENCES,
    RULE_SYMBOL_LABELS,
    TITLE_TO_SIDEBAR_LABEL,
    CodeFenceChar,
    EmphasisSymbol,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse table syntax (GFM pipe tables)"})
    parse_strikethrough: bool = field(default=True, metadata={"help": "Parse strikethrough syntax (~~text~~)"})
    parse_task_lists: bool = field(default=True, metadata={"help": "Parse task list checkboxes"})


@dataclass(frozen=True)
class MarkdownRendererOptions(CloneFrozenMixin):
    """Configuration options for AST-to-Markdown rendering.

    Parameters
    ----------
    escape_special : bool, default True
        Escape characters with Markdown meaning in text runs.
    emphasis_symbol : {"*", "_"}, default "*"
        Symbol used for emphasis.
    bullet_symbols : str, default "-"
        Bullet characters cycled through by nesting depth.
    code_fence_char : {"`", "~"}, default "`"
        Fence character for code blocks.
    code_fence_min : int, default 3
        Minimum fence length; longer fences are used when the code contains
        runs of the fence character.

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL, metadata={"help": "Escape special Markdown characters in text"}
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL, metadata={"help": "Symbol for emphasis", "choices": ["*", "_"]}
    )
    bullet_symbols: str = field(
        default=DEFAULT_BULLET_SYMBOLS, metadata={"help": "Bullet characters cycled by nesting depth"}
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR, metadata={"help": "Code fence character", "choices": ["`", "~"]}
    )
    code_fence_min: int = field(default=DEFAULT_CODE_FENCE_MIN, metadata={"help": "Minimum code fence length"})

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If bullet_symbols is empty or code_fence_min is below 3

        """
        if not self.bullet_symbols:
            raise ValueError("bullet_symbols must contain at least one character")
        if self.code_fence_min < 3:
            raise ValueError(f"code_fence_min must be at least 3, got {self.code_fence_min}")


@dataclass(frozen=True)
class TransformTables(CloneFrozenMixin):
    """Read-only lookup tables consumed by the transform passes.

    Parameters
    ----------
    trigger_sentences : tuple of str
        Paragraph texts that open an example block.
    admonition_kinds : Mapping[str, str]
        Bold label of a quote (e.g. "Note") to admonition kind (e.g. "note").
    symbol_labels : Mapping[str, str]
        Rule table symbol to its accessible label.
    title_overrides : Mapping[str, str]
        Document title to sidebar label, for titles that need a different one.
    home_title : str
        Title of the document served at the site root.
    home_slug : str
        Slug assigned to the home document.

    """

    trigger_sentences: tuple[str, ...] = PROBLEM_TRIGGER_SENTENCES
    admonition_kinds: Mapping[str, str] = field(default_factory=lambda: ADMONITION_KINDS)
    symbol_labels: Mapping[str, str] = field(default_factory=lambda: RULE_SYMBOL_LABELS)
    title_overrides: Mapping[str, str] = field(default_factory=lambda: TITLE_TO_SIDEBAR_LABEL)
    home_title: str = HOME_TITLE
    home_slug: str = HOME_SLUG


DEFAULT_TABLES = TransformTables()
