#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the per-document pipeline."""

import pytest

from md2docusaurus.ast import Document
from md2docusaurus.exceptions import MissingTitleError, TransformError
from md2docusaurus.rewriters import rewrite_root_link, rewrite_rule_link
from md2docusaurus.transforms import DocumentTransform, apply_transforms, process_markdown


def _identity(url):
    return url


@pytest.mark.integration
class TestProcessMarkdown:
    """End-to-end tests for process_markdown."""

    def test_home_document(self):
        """Test the home document gets the Home title and root slug."""
        output = process_markdown("# Stylelint\n\nSee [docs](docs/a.md).\n", rewrite_root_link)

        assert output == (
            "---\ntitle: Home\nsidebar_label: Home\nslug: /\n---\n\n# Stylelint\n\nSee [docs](/a.md).\n"
        )

    def test_regular_document(self):
        """Test a regular document keeps its title and has no slug."""
        output = process_markdown("# Foo\n\nBody\n", _identity)

        assert output == "---\ntitle: Foo\nsidebar_label: Foo\n---\n\n# Foo\n\nBody\n"

    def test_missing_title(self):
        """Test that a document without a title is rejected."""
        with pytest.raises(MissingTitleError):
            process_markdown("Just text.\n\n## Not a title\n", _identity, file_path="a.md")

    def test_rule_document(self, rule_document):
        """Test all passes on a typical rule document."""
        output = process_markdown(rule_document, rewrite_rule_link)

        assert output.startswith("---\ntitle: color-named\nsidebar_label: color-named\n---\n\n# color-named\n")
        assert ":::note Note\n\nNamed colors are only checked in declaration values.\n\n:::" in output
        assert "[the other rule](color-no-invalid-hex.md)" in output
        assert (
            'The following patterns are considered problems:\n\n<div class="invalid-pattern">\n\n'
            "```css\na { color: black; }\n```\n\n</div>\n\n"
            "The following patterns are *not* considered problems:\n\n"
            '<div class="valid-pattern">\n\n```css\na { color: #000; }\n```\n\n</div>\n\n'
            "## Optional secondary options\n"
        ) in output

    def test_rule_symbols_in_table(self):
        """Test that symbol cells of a table become titled spans."""
        source = "# Rules\n\n| Rule | Standard |\n| --- | --- |\n| color-named | ✅ \U0001f527 |\n| a | ✅ |\n"
        output = process_markdown(source, _identity)

        assert '| a | <span title="Standard">✅</span> |' in output
        assert "| color-named | ✅ \U0001f527 |" in output

    def test_output_ends_with_newline(self):
        """Test the serialized body ends with exactly one newline."""
        assert process_markdown("# Foo\n\n\n\n", _identity).endswith("# Foo\n")


class _FailingTransform(DocumentTransform):
    name = "failing"

    def transform(self, document):
        raise RuntimeError("boom")


class _NoneTransform(DocumentTransform):
    name = "returns-none"

    def transform(self, document):
        return None


@pytest.mark.integration
class TestApplyTransforms:
    """Tests for transform error handling."""

    def test_failure_wrapped(self):
        """Test unexpected errors become TransformError."""
        with pytest.raises(TransformError) as exc_info:
            apply_transforms(Document(), [_FailingTransform()])

        assert exc_info.value.transform_name == "failing"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_non_document_result_rejected(self):
        """Test a transform must return a Document."""
        with pytest.raises(TransformError, match="must return Document"):
            apply_transforms(Document(), [_NoneTransform()])
