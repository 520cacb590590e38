#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/generator.py
"""Generate the Docusaurus docs tree from an installed stylelint package.

The generator resets the output directory, converts three groups of
Markdown sources and copies the root images:

- ``<source>/*.md`` to the output root, ``README.md`` becoming ``index.md``
- ``<source>/docs/**/*.md`` (except ``toc.md``) keeping their path under
  ``docs/``
- ``<source>/lib/rules/**/*.md`` to ``user-guide/rules/``, each
  ``<rule>/README.md`` becoming ``<rule>.md``
- ``<source>/*.png`` to the output root

Groups are written in that order, so a later group overwrites an earlier
file with the same output path.

Examples
--------
    >>> report = generate_docs("website/docs", source_dir="node_modules/stylelint")
    >>> report.ok
    True

"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from md2docusaurus.constants import DEFAULT_SOURCE_DIR, MARKDOWN_ENCODING
from md2docusaurus.exceptions import FileError, Md2DocusaurusError, OutputWriteError
from md2docusaurus.options import DEFAULT_TABLES, TransformTables
from md2docusaurus.rewriters import rewrite_docs_link, rewrite_root_link, rewrite_rule_link
from md2docusaurus.transforms.pipeline import process_markdown

logger = logging.getLogger(__name__)

EXCLUDED_DOC_NAMES = frozenset({"toc.md"})


@dataclass(frozen=True)
class DocumentJob:
    """One Markdown source to convert.

    Parameters
    ----------
    source : Path
        Markdown file to read
    output : Path
        Destination, relative to the output directory
    rewriter : callable
        Link rewriter for the source's group

    """

    source: Path
    output: Path
    rewriter: Callable[[str], str]


@dataclass
class GenerationReport:
    """Outcome of a generation run.

    Attributes
    ----------
    written : list of Path
        Markdown files written, in order
    copied : list of Path
        Images copied
    failures : list of (Path, Md2DocusaurusError)
        Sources that could not be converted (only with ``keep_going``)

    """

    written: List[Path] = field(default_factory=list)
    copied: List[Path] = field(default_factory=list)
    failures: List[Tuple[Path, Md2DocusaurusError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether every source was converted."""
        return not self.failures


def _root_output(relative: Path) -> Path:
    return relative.with_name(relative.name.replace("README.md", "index.md", 1))


def _rule_output(relative: Path) -> Path:
    posix = f"user-guide/rules/{relative.as_posix()}"
    return Path(posix.replace("/README.md", ".md", 1))


def discover_documents(source_dir: Union[str, Path]) -> List[DocumentJob]:
    """List the Markdown sources of a stylelint package in generation order.

    Parameters
    ----------
    source_dir : str or Path
        Root of the stylelint package

    Returns
    -------
    list of DocumentJob
        Root documents, then ``docs/`` documents, then rule documents,
        each group sorted by path

    """
    source_dir = Path(source_dir)
    jobs: List[DocumentJob] = []

    for path in sorted(source_dir.glob("*.md")):
        jobs.append(DocumentJob(path, _root_output(path.relative_to(source_dir)), rewrite_root_link))

    docs_dir = source_dir / "docs"
    for path in sorted(docs_dir.rglob("*.md")):
        if path.name in EXCLUDED_DOC_NAMES:
            continue
        jobs.append(DocumentJob(path, path.relative_to(docs_dir), rewrite_docs_link))

    rules_dir = source_dir / "lib" / "rules"
    for path in sorted(rules_dir.rglob("*.md")):
        jobs.append(DocumentJob(path, _rule_output(path.relative_to(rules_dir)), rewrite_rule_link))

    return jobs


def reset_output_dir(output_dir: Path) -> None:
    """Remove ``output_dir`` if present and create it empty.

    Raises
    ------
    OutputWriteError
        If the directory cannot be removed or created

    """
    try:
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True)
    except OSError as e:
        raise OutputWriteError(
            f"Failed to reset output directory {output_dir}: {e}", file_path=str(output_dir), original_error=e
        ) from e


def convert_document(job: DocumentJob, output_dir: Path, tables: TransformTables = DEFAULT_TABLES) -> Path:
    """Convert one source and write it under ``output_dir``.

    Parameters
    ----------
    job : DocumentJob
        Source, destination and rewriter
    output_dir : Path
        Root of the generated tree
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables for the passes

    Returns
    -------
    Path
        The written file

    Raises
    ------
    FileError
        If the source cannot be read
    MissingTitleError
        If the source has no top-level heading
    OutputWriteError
        If the destination cannot be written

    """
    try:
        text = job.source.read_text(encoding=MARKDOWN_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Failed to read {job.source}: {e}", file_path=str(job.source), original_error=e) from e

    output = process_markdown(text, job.rewriter, tables, file_path=str(job.source))

    destination = output_dir / job.output
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(output, encoding=MARKDOWN_ENCODING)
    except OSError as e:
        raise OutputWriteError(
            f"Failed to write {destination}: {e}", file_path=str(destination), original_error=e
        ) from e

    logger.debug(f"Wrote {job.source} -> {destination}")
    return destination


def copy_images(source_dir: Path, output_dir: Path) -> List[Path]:
    """Copy the root ``*.png`` files of the package into ``output_dir``.

    Raises
    ------
    OutputWriteError
        If an image cannot be copied

    """
    copied: List[Path] = []
    for image_path in sorted(source_dir.glob("*.png")):
        dest_path = output_dir / image_path.name
        try:
            shutil.copy2(image_path, dest_path)
        except OSError as e:
            raise OutputWriteError(
                f"Failed to copy image {image_path}: {e}", file_path=str(dest_path), original_error=e
            ) from e
        logger.debug(f"Copied asset: {image_path} -> {dest_path}")
        copied.append(dest_path)
    return copied


def generate_docs(
    output_dir: Union[str, Path],
    source_dir: Union[str, Path] = DEFAULT_SOURCE_DIR,
    tables: TransformTables = DEFAULT_TABLES,
    keep_going: bool = False,
) -> GenerationReport:
    """Generate the docs tree from a stylelint package.

    Parameters
    ----------
    output_dir : str or Path
        Directory to (re)create; existing content is removed
    source_dir : str or Path, default "node_modules/stylelint"
        Root of the stylelint package
    tables : TransformTables, default DEFAULT_TABLES
        Lookup tables for the passes
    keep_going : bool, default False
        Record per-file failures in the report instead of raising

    Returns
    -------
    GenerationReport
        Written files, copied images and failures

    Raises
    ------
    FileError
        If ``source_dir`` is not a directory, or a source cannot be read
    Md2DocusaurusError
        The first per-file failure, unless ``keep_going`` is set

    """
    output_dir = Path(output_dir)
    source_dir = Path(source_dir)

    if not source_dir.is_dir():
        raise FileError(f"Source directory not found: {source_dir}", file_path=str(source_dir))

    jobs = discover_documents(source_dir)
    logger.info(f"Generating {len(jobs)} documents from {source_dir} into {output_dir}")

    reset_output_dir(output_dir)
    report = GenerationReport()

    for job in jobs:
        try:
            report.written.append(convert_document(job, output_dir, tables))
        except Md2DocusaurusError as e:
            if not keep_going:
                raise
            logger.error(f"Skipping {job.source}: {e}")
            report.failures.append((job.source, e))

    report.copied.extend(copy_images(source_dir, output_dir))

    logger.info(
        f"Wrote {len(report.written)} documents, copied {len(report.copied)} images, "
        f"{len(report.failures)} failures"
    )
    return report


def format_failures(report: GenerationReport) -> Optional[str]:
    """Return a one-line-per-file summary of the failures, or None."""
    if report.ok:
        return None
    return "\n".join(f"{path}: {error.message}" for path, error in report.failures)
