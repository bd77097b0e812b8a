#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/utils/io_utils.py
"""I/O utilities for reading Box Notes input and writing Markdown output."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union

from boxnote2md.constants import DECODE_ERRORS, DEFAULT_ENCODING


def decode_text(raw: bytes) -> str:
    """Decode UTF-8 input, replacing invalid byte sequences with U+FFFD.

    Examples
    --------
        >>> decode_text(b"a\\xffb") == "a\\ufffdb"
        True

    """
    return raw.decode(DEFAULT_ENCODING, errors=DECODE_ERRORS)


def read_text_source(source: Union[str, Path, bytes, IO[bytes], IO[str]]) -> str:
    """Read text from a path, raw bytes or a file-like object.

    A ``str`` is treated as already-loaded text, not as a path; pass a
    :class:`~pathlib.Path` to read from disk. Bytes that are not valid UTF-8
    are replaced, so a stray byte inside a string value does not reject the
    whole note.

    Raises
    ------
    TypeError
        If the source type is not supported
    OSError
        If a path cannot be read

    """
    if isinstance(source, str):
        return source
    if isinstance(source, Path):
        return source.read_text(encoding=DEFAULT_ENCODING, errors=DECODE_ERRORS)
    if isinstance(source, (bytes, bytearray)):
        return decode_text(bytes(source))
    if hasattr(source, "read"):
        raw = source.read()
        return decode_text(bytes(raw)) if isinstance(raw, (bytes, bytearray)) else str(raw)
    raise TypeError(f"Unsupported input type: {type(source).__name__}")


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive UTF-8
        bytes and text streams receive the string unchanged.

    Raises
    ------
    TypeError
        If the output type is not supported
    OSError
        If the destination cannot be written

    Examples
    --------
        >>> buffer = io.BytesIO()
        >>> write_content("# Title", buffer)
        >>> buffer.getvalue()
        b'# Title'

    """
    if isinstance(output, (str, Path)):
        # bytes, so newlines are written verbatim on every platform
        Path(output).write_bytes(content.encode(DEFAULT_ENCODING))
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, io.TextIOBase):
        output.write(content)
    elif "b" in getattr(output, "mode", "") or isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        output.write(content.encode(DEFAULT_ENCODING))  # type: ignore[arg-type]
    else:
        output.write(content)  # type: ignore[arg-type]
