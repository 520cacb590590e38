#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2docusaurus library.

This module defines the exception classes raised while turning Markdown
sources into Docusaurus documents. They carry more specific information
than generic built-ins so the per-file caller can decide whether to abort
the run or skip the file.

Exception Hierarchy
-------------------
- Md2DocusaurusError (base exception)

  - FileError (file access and I/O)

  - ParsingError (input document parsing failures)
    - MissingTitleError (no top-level heading to derive a title from)

  - TransformError (AST transformation failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from __future__ import annotations


class Md2DocusaurusError(Exception):
    """Base exception class for all md2docusaurus-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class FileError(Md2DocusaurusError):
    """Exception raised when a source file cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path of the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(Md2DocusaurusError):
    """Exception raised when a Markdown source cannot be turned into a document.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    file_path : str, optional
        Path of the file being processed, when known
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class MissingTitleError(ParsingError):
    """Exception raised when a document has no top-level ``# `` heading.

    A title is required to build the front matter, so this error is fatal
    for the file being processed. It never affects other files.

    """

    def __init__(self, file_path: str | None = None):
        """Initialize the error, naming the file when known."""
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"No top-level heading found{location}", file_path=file_path)


class TransformError(Md2DocusaurusError):
    """Exception raised when an AST transformation fails.

    Parameters
    ----------
    message : str
        Description of the transform failure
    transform_name : str, optional
        Name of the transform that failed
    original_error : Exception, optional
        The underlying exception that caused the transform failure

    Attributes
    ----------
    transform_name : str or None
        Name of the transform that failed

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name


class RenderingError(Md2DocusaurusError):
    """Exception raised when producing the output text fails."""


class OutputWriteError(RenderingError):
    """Exception raised when an output file cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    file_path : str, optional
        Destination that could not be written
    original_error : Exception, optional
        The underlying OS error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the write error with the destination path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path
