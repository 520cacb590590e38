"""Pytest configuration and shared fixtures for the md2docusaurus test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

from pathlib import Path

import pytest

# Smallest valid PNG: signature plus IHDR/IDAT/IEND for a 1x1 image
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
    b"\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def rule_document() -> str:
    """Provide a rule document in the shape stylelint ships.

    Returns
    -------
    str
        Markdown text with options, examples, a note and links.

    """
    return """# color-named

Require (where possible) or disallow named colors.

> **Note** Named colors are only checked in declaration values.

See [the other rule](../color-no-invalid-hex/README.md).

## Options

The following patterns are considered problems:

```css
a { color: black; }
```

The following patterns are *not* considered problems:

```css
a { color: #000; }
```

## Optional secondary options
"""


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def stylelint_package(tmp_path: Path) -> Path:
    """Create a minimal stylelint package layout.

    Returns
    -------
    Path
        Root of the package, holding root docs, ``docs/``, ``lib/rules/``
        and a logo.

    """
    root = tmp_path / "node_modules" / "stylelint"
    _write(root / "README.md", "# Stylelint\n\nRead the [guide](docs/user-guide/get-started.md).\n")
    _write(root / "CHANGELOG.md", "# Changelog\n\n- Fixed a bug.\n")
    _write(
        root / "docs" / "user-guide" / "get-started.md",
        "# Getting started\n\nSee [color-named](../../lib/rules/color-named/README.md) "
        "and the [changelog](../../CHANGELOG.md).\n",
    )
    _write(
        root / "docs" / "user-guide" / "rules.md",
        "# Rules\n\n| Rule | Standard |\n| --- | --- |\n| color-named | ✅ |\n",
    )
    _write(root / "docs" / "toc.md", "# Table of contents\n")
    _write(
        root / "lib" / "rules" / "color-named" / "README.md",
        "# color-named\n\nSee [hex](../color-no-invalid-hex/README.md).\n\n"
        "The following patterns are considered problems:\n\n```css\na { color: black; }\n```\n",
    )
    (root / "logo.png").write_bytes(PNG_BYTES)
    return root
