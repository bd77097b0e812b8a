#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/parsers/boxnote.py
"""Box Notes JSON to document tree parser.

This module provides a parser for ``.boxnote`` files: JSON objects whose
top-level ``doc`` field holds a ProseMirror-style document tree.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from boxnote2md.ast.nodes import Node
from boxnote2md.ast.serialization import document_from_dict, json_to_document
from boxnote2md.exceptions import FileAccessError
from boxnote2md.utils.io_utils import read_text_source

logger = logging.getLogger(__name__)

BoxNoteSource = Union[str, Path, bytes, IO[bytes], IO[str], dict[str, Any]]


def is_blank_input(text: str) -> bool:
    """Return True for input that holds nothing but whitespace."""
    return not text.strip()


class BoxNoteParser:
    """Convert Box Notes JSON into a document tree.

    Examples
    --------
    Parse from a file:
        >>> from pathlib import Path
        >>> doc = BoxNoteParser().parse(Path("meeting.boxnote"))

    Parse from a string:
        >>> doc = BoxNoteParser().parse('{"doc": {"type": "doc", "content": []}}')
        >>> doc.type
        'doc'

    """

    def parse(self, input_data: BoxNoteSource) -> Node:
        """Parse Box Notes input into its ``doc`` node.

        Parameters
        ----------
        input_data : str, Path, bytes, IO or dict
            JSON text, a path to a ``.boxnote`` file, raw bytes, a file-like
            object, or an already-decoded JSON object

        Returns
        -------
        Node
            The document root

        Raises
        ------
        FileAccessError
            If a path cannot be read
        ParsingError
            If the input is not valid JSON or has no document root

        """
        if isinstance(input_data, dict):
            return document_from_dict(input_data)

        text = self.read(input_data)
        doc = json_to_document(text)
        logger.debug("Parsed Box Notes document with %d top-level nodes", len(doc.content))
        return doc

    @staticmethod
    def read(input_data: Union[str, Path, bytes, IO[bytes], IO[str]]) -> str:
        """Read raw JSON text from any supported source.

        Raises
        ------
        FileAccessError
            If a path cannot be read

        """
        try:
            return read_text_source(input_data)
        except OSError as e:
            raise FileAccessError(str(input_data), original_error=e) from e
