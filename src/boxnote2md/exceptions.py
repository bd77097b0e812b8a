#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the boxnote2md library.

This module defines specialized exception classes for the error conditions
that can occur while decoding Box Notes and writing Markdown. The renderer
itself only fails on trees nested deeper than the interpreter can recurse,
so errors come from decoding input and from file access around it.

Exception Hierarchy
-------------------
- Boxnote2MdError (base exception)

  - ValidationError (configuration/option validation)

  - FileError (file access and I/O)
    - FileAccessError (unreadable input files)
    - OverwriteDeclinedError (existing output not confirmed for overwrite)

  - ParsingError (malformed Box Notes JSON)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class Boxnote2MdError(Exception):
    """Base exception class for all boxnote2md-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(Boxnote2MdError):
    """Exception raised for invalid options or configuration values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(Boxnote2MdError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileAccessError(FileError):
    """Exception raised when an input file cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"failed to read: {original_error}" if original_error else f"failed to read: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OverwriteDeclinedError(FileError):
    """Exception raised when an existing output file may not be replaced.

    Raised when the overwrite confirmation is refused, or when no
    confirmation callback is available and overwriting was not forced.

    """

    def __init__(self, file_path: str, message: str | None = None):
        """Initialize the overwrite declined error."""
        super().__init__(message or "overwrite declined", file_path=file_path)


class ParsingError(Boxnote2MdError):
    """Exception raised when Box Notes input cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
        (e.g. ``"json_parsing"``, ``"document_validation"``)
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Boxnote2MdError):
    """Exception raised when Markdown output cannot be produced or delivered.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when rendered Markdown cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        Destination that could not be written
    original_error : Exception, optional
        The underlying I/O exception

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.output_path = output_path
