#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/ast/serialization.py
"""Deserialization of Box Notes JSON into AST nodes.

A ``.boxnote`` file is a JSON object whose ``doc`` field holds the document
tree. Decoding is deliberately lenient: missing or ``null`` ``attrs``,
``content``, ``marks`` and ``text`` fields fall back to empty values and
children that are not JSON objects are skipped, so files written by other
Box Notes versions still render. Only a missing document root is an error.

Examples
--------
Decode a JSON string:

    >>> from boxnote2md.ast.serialization import json_to_document
    >>> doc = json_to_document('{"doc": {"type": "doc", "content": []}}')
    >>> doc.type
    'doc'

"""

from __future__ import annotations

import json
import logging
from typing import Any

from boxnote2md.ast.nodes import Mark, Node
from boxnote2md.constants import NESTING_TOO_DEEP
from boxnote2md.exceptions import ParsingError

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def mark_from_dict(data: dict[str, Any]) -> Mark:
    """Build a :class:`Mark` from its decoded JSON object."""
    return Mark(type=_as_str(data.get("type")), attrs=_as_dict(data.get("attrs")))


def node_from_dict(data: dict[str, Any]) -> Node:
    """Build a :class:`Node` tree from its decoded JSON object.

    Parameters
    ----------
    data : dict
        Decoded JSON object of a single node

    Returns
    -------
    Node
        The node with all of its descendants

    """
    content: list[Node] = []
    for child in _as_list(data.get("content")):
        if isinstance(child, dict):
            content.append(node_from_dict(child))
        else:
            logger.debug("Skipping non-object child of %r node: %r", data.get("type"), child)

    marks = [mark_from_dict(mark) for mark in _as_list(data.get("marks")) if isinstance(mark, dict)]

    return Node(
        type=_as_str(data.get("type")),
        attrs=_as_dict(data.get("attrs")),
        content=content,
        text=_as_str(data.get("text")),
        marks=marks,
    )


def document_from_dict(data: Any) -> Node:
    """Extract and build the document root from a decoded ``.boxnote`` object.

    Parameters
    ----------
    data : Any
        Decoded top-level JSON value

    Returns
    -------
    Node
        The ``doc`` node

    Raises
    ------
    ParsingError
        If the top-level value is not an object, it has no ``doc`` object
        carrying a non-empty ``type`` tag, or the tree is nested too deeply
        to build

    """
    if not isinstance(data, dict):
        raise ParsingError("failed to parse JSON", parsing_stage="json_parsing")

    doc_data = data.get("doc")
    if not isinstance(doc_data, dict) or not _as_str(doc_data.get("type")):
        raise ParsingError("missing doc node", parsing_stage="document_validation")

    try:
        return node_from_dict(doc_data)
    except RecursionError as e:
        raise ParsingError(NESTING_TOO_DEEP, parsing_stage="document_validation", original_error=e) from e


def json_to_document(json_str: str | bytes) -> Node:
    """Decode ``.boxnote`` JSON text and return the document root.

    Raises
    ------
    ParsingError
        If the text is not valid JSON or holds no document root, or it is
        nested too deeply to decode

    """
    try:
        data = json.loads(json_str)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParsingError("failed to parse JSON", parsing_stage="json_parsing", original_error=e) from e
    except RecursionError as e:
        raise ParsingError(NESTING_TOO_DEEP, parsing_stage="json_parsing", original_error=e) from e
    return document_from_dict(data)


__all__ = [
    "document_from_dict",
    "json_to_document",
    "mark_from_dict",
    "node_from_dict",
]
