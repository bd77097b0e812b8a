#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Box Notes documents.

The module consists of:

- nodes: the generic ``Node``/``Mark`` tree and the closed ``NodeType`` and
  ``MarkType`` tag sets
- utils: best-effort typed accessors for the open ``attrs`` mapping
- serialization: decoding of ``.boxnote`` JSON into the tree

Examples
--------
    >>> from boxnote2md.ast import Node
    >>> from boxnote2md.renderers.markdown import MarkdownRenderer
    >>>
    >>> doc = Node(type="doc", content=[
    ...     Node(type="paragraph", content=[Node(type="text", text="Hello")])
    ... ])
    >>> MarkdownRenderer().render_to_string(doc)
    'Hello'

"""

from __future__ import annotations

from boxnote2md.ast.nodes import Mark, MarkType, Node, NodeType
from boxnote2md.ast.serialization import document_from_dict, json_to_document, mark_from_dict, node_from_dict
from boxnote2md.ast.utils import get_bool_attr, get_int_attr, get_string_attr

__all__ = [
    "Mark",
    "MarkType",
    "Node",
    "NodeType",
    "document_from_dict",
    "get_bool_attr",
    "get_int_attr",
    "get_string_attr",
    "json_to_document",
    "mark_from_dict",
    "node_from_dict",
]
