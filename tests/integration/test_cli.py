#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the command-line interface."""

import logging

import pytest

from md2docusaurus.cli import create_parser, get_exit_code_for_exception, main
from md2docusaurus.constants import (
    DEFAULT_SOURCE_DIR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
)
from md2docusaurus.exceptions import (
    FileError,
    MissingTitleError,
    OutputWriteError,
    TransformError,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logging handlers replaced by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.cli
@pytest.mark.integration
class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default option values."""
        args = create_parser().parse_args(["out"])

        assert args.output_dir == "out"
        assert args.source == DEFAULT_SOURCE_DIR
        assert not args.keep_going
        assert args.log_level == "WARNING"
        assert not args.trace

    def test_output_dir_required(self):
        """Test that the output directory is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])


@pytest.mark.cli
@pytest.mark.integration
class TestExitCodes:
    """Tests for exception to exit code mapping."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (FileError("x"), EXIT_FILE_ERROR),
            (MissingTitleError("a.md"), EXIT_PARSING_ERROR),
            (OutputWriteError("x"), EXIT_RENDERING_ERROR),
            (TransformError("x", transform_name="t"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, error, code):
        """Test each exception family maps to its code."""
        assert get_exit_code_for_exception(error) == code


@pytest.mark.cli
@pytest.mark.integration
class TestMain:
    """Tests for the main entry point."""

    def test_success(self, stylelint_package, tmp_path, capsys):
        """Test a successful run prints the completion message."""
        output_dir = tmp_path / "out"

        exit_code = main([str(output_dir), "--source", str(stylelint_package)])

        assert exit_code == EXIT_SUCCESS
        assert "Documents have been generated." in capsys.readouterr().out
        assert (output_dir / "index.md").exists()

    def test_missing_source(self, tmp_path, capsys):
        """Test a missing source directory exits with the file error code."""
        exit_code = main([str(tmp_path / "out"), "--source", str(tmp_path / "nowhere")])

        assert exit_code == EXIT_FILE_ERROR
        assert "Source directory not found" in capsys.readouterr().err

    def test_missing_title(self, stylelint_package, tmp_path, capsys):
        """Test a document without a title exits with the parsing error code."""
        (stylelint_package / "docs" / "broken.md").write_text("No title.\n", encoding="utf-8")

        exit_code = main([str(tmp_path / "out"), "--source", str(stylelint_package)])

        assert exit_code == EXIT_PARSING_ERROR
        assert "Documents have been generated." not in capsys.readouterr().out

    def test_keep_going(self, stylelint_package, tmp_path, capsys):
        """Test keep-going converts the rest and reports the failure."""
        (stylelint_package / "docs" / "broken.md").write_text("No title.\n", encoding="utf-8")
        output_dir = tmp_path / "out"

        exit_code = main([str(output_dir), "--source", str(stylelint_package), "--keep-going"])

        assert exit_code == EXIT_PARSING_ERROR
        assert "broken.md" in capsys.readouterr().err
        assert (output_dir / "index.md").exists()

    def test_log_file(self, stylelint_package, tmp_path):
        """Test that --log-file receives log output."""
        log_file = tmp_path / "run.log"

        args = [str(tmp_path / "out"), "--source", str(stylelint_package), "--log-level", "INFO"]

        main([*args, "--log-file", str(log_file)])

        assert "Generating 5 documents" in log_file.read_text(encoding="utf-8")

    def test_unopenable_log_file(self, stylelint_package, tmp_path, capsys):
        """Test that a log file in a missing directory exits with the file error code."""
        log_file = tmp_path / "missing" / "run.log"

        exit_code = main([str(tmp_path / "out"), "--source", str(stylelint_package), "--log-file", str(log_file)])

        assert exit_code == EXIT_FILE_ERROR
        assert "Cannot open log file" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_trace_enables_debug(self, stylelint_package, tmp_path):
        """Test that --trace overrides the log level and writes timestamped records."""
        log_file = tmp_path / "trace.log"

        main([str(tmp_path / "out"), "--source", str(stylelint_package), "--trace", "--log-file", str(log_file)])

        assert logging.getLogger().level == logging.DEBUG
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert any("[DEBUG] [md2docusaurus.generator] Wrote" in line for line in lines)
        assert all(line.startswith("[") for line in lines)
