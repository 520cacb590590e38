#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for title extraction and front matter injection."""

import pytest
import yaml

from md2docusaurus.exceptions import MissingTitleError, ParsingError
from md2docusaurus.options import TransformTables
from md2docusaurus.utils.metadata import (
    FrontMatter,
    build_front_matter,
    extract_title,
    format_yaml_frontmatter,
    prepend_front_matter,
)


@pytest.mark.unit
class TestExtractTitle:
    """Tests for extract_title."""

    def test_first_h1(self):
        """Test that the first top-level heading is used."""
        result = extract_title("# Rules\n\nText\n\n# Other\n")
        assert result.found
        assert result.title == "Rules"
        assert result.error is None

    def test_h1_not_at_start(self):
        """Test that a heading after other content is found."""
        assert extract_title("Intro\n\n# Later\n").title == "Later"

    def test_lower_levels_ignored(self):
        """Test that a level-2 heading is not mistaken for a title."""
        assert extract_title("## Sub\n\n# Real\n").title == "Real"

    def test_missing_title(self):
        """Test the explicit failure result."""
        result = extract_title("No heading here\n\n## Only h2\n")
        assert not result.found
        assert result.title is None
        assert result.error


@pytest.mark.unit
class TestBuildFrontMatter:
    """Tests for build_front_matter."""

    def test_home_document(self):
        """Test that the home title becomes Home with the root slug."""
        assert build_front_matter("Stylelint") == FrontMatter(title="Home", sidebar_label="Home", slug="/")

    def test_regular_document(self):
        """Test that other titles are used as-is without a slug."""
        assert build_front_matter("Foo") == FrontMatter(title="Foo", sidebar_label="Foo")

    def test_custom_overrides(self):
        """Test a sidebar label override for a non-home title."""
        tables = TransformTables(title_overrides={"Getting started": "Start"})
        assert build_front_matter("Getting started", tables) == FrontMatter(
            title="Getting started", sidebar_label="Start"
        )

    def test_to_dict_omits_missing_slug(self):
        """Test field order and slug omission."""
        assert list(FrontMatter(title="A", sidebar_label="B").to_dict()) == ["title", "sidebar_label"]


@pytest.mark.unit
class TestFormatYamlFrontmatter:
    """Tests for format_yaml_frontmatter."""

    def test_home_block(self):
        """Test the exact block for the home document."""
        block = format_yaml_frontmatter(FrontMatter(title="Home", sidebar_label="Home", slug="/"))
        assert block == "---\ntitle: Home\nsidebar_label: Home\nslug: /\n---"

    def test_special_characters_quoted(self):
        """Test that titles with YAML syntax are still loadable."""
        block = format_yaml_frontmatter(FrontMatter(title="Rules: all", sidebar_label="Rules: all"))
        loaded = yaml.safe_load(block.strip("-\n"))
        assert loaded == {"title": "Rules: all", "sidebar_label": "Rules: all"}


@pytest.mark.unit
class TestPrependFrontMatter:
    """Tests for prepend_front_matter."""

    def test_prepends_block(self):
        """Test the preamble, blank line and body layout."""
        output = prepend_front_matter("# Foo\n\nBody\n")
        assert output == "---\ntitle: Foo\nsidebar_label: Foo\n---\n\n# Foo\n\nBody\n"

    def test_missing_title_raises(self):
        """Test that a document without a title is rejected."""
        with pytest.raises(MissingTitleError) as exc_info:
            prepend_front_matter("Body only\n", file_path="docs/a.md")

        assert isinstance(exc_info.value, ParsingError)
        assert exc_info.value.file_path == "docs/a.md"
        assert "docs/a.md" in exc_info.value.message
