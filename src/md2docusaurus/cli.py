#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/cli.py
"""Command-line interface for generating the Docusaurus docs tree.

Examples
--------
Generate from the installed package::

    $ md2docusaurus website/docs

Use another checkout and convert as much as possible::

    $ md2docusaurus build/docs --source ../stylelint --keep-going

Debug a failing document::

    $ md2docusaurus build/docs --trace --log-file generate.log

"""

from __future__ import annotations

import argparse
import logging
import sys

from md2docusaurus import __version__
from md2docusaurus.constants import (
    DEFAULT_SOURCE_DIR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
)
from md2docusaurus.exceptions import FileError, Md2DocusaurusError, ParsingError, RenderingError
from md2docusaurus.generator import format_failures, generate_docs

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Documents have been generated."
LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2docusaurus",
        description="Convert the stylelint Markdown docs into a Docusaurus docs tree.",
    )
    parser.add_argument("output_dir", metavar="OUTPUT_DIR", help="Directory to generate (existing content is removed)")
    parser.add_argument(
        "--source",
        default=DEFAULT_SOURCE_DIR,
        help=f"Root of the stylelint package (default: {DEFAULT_SOURCE_DIR})",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip documents that fail to convert instead of stopping",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Send log records to stderr and, with ``--log-file``, to that file too.

    ``--trace`` forces DEBUG and adds timestamps and logger names.

    Raises
    ------
    FileError
        If the log file cannot be opened. Console logging is already set up
        at that point so the error is still reported.

    """
    level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    log_format = TRACE_LOG_FORMAT if parsed_args.trace else LOG_FORMAT
    date_format = TRACE_DATE_FORMAT if parsed_args.trace else None

    logging.basicConfig(level=level, format=log_format, datefmt=date_format, stream=sys.stderr, force=True)

    if not parsed_args.log_file:
        return

    try:
        file_handler = logging.FileHandler(parsed_args.log_file, encoding="utf-8")
    except OSError as e:
        raise FileError(
            f"Cannot open log file {parsed_args.log_file}: {e}", file_path=parsed_args.log_file, original_error=e
        ) from e
    file_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    logging.getLogger().addHandler(file_handler)
    logger.debug(f"Logging to file: {parsed_args.log_file}")


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        _setup_logging_level(parsed_args)
        report = generate_docs(parsed_args.output_dir, parsed_args.source, keep_going=parsed_args.keep_going)
    except Md2DocusaurusError as e:
        logger.error(e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    summary = format_failures(report)
    if summary is not None:
        print(f"Some documents could not be generated:\n{summary}", file=sys.stderr)
        return max(get_exit_code_for_exception(error) for _path, error in report.failures)

    print(SUCCESS_MESSAGE)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
