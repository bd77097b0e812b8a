#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/ast/nodes.py
"""AST node classes for Box Notes document representation.

Box Notes store their content as a ProseMirror-style tree: every element is a
node with a string ``type`` tag, an open ``attrs`` mapping, ordered child
``content`` and, for text leaves, ``text`` plus inline ``marks``.

The tag stays a plain string so unknown node types survive decoding
untouched. The closed set of tags the renderer understands is exposed through
:class:`NodeType` and :class:`MarkType`; any other tag maps to the ``UNKNOWN``
member, which selects the generic "render children" fallback.

Node Types
----------
Block-level nodes:
    - doc, heading, paragraph, blockquote, call_out_box, horizontal_rule
    - bullet_list, ordered_list, list_item, check_list, check_list_item
    - table, table_row, table_header, table_cell

Inline nodes:
    - text, hard_break

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeType(str, Enum):
    """Node type tags understood by the renderer."""

    DOC = "doc"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    HARD_BREAK = "hard_break"
    BULLET_LIST = "bullet_list"
    ORDERED_LIST = "ordered_list"
    LIST_ITEM = "list_item"
    CHECK_LIST = "check_list"
    CHECK_LIST_ITEM = "check_list_item"
    HORIZONTAL_RULE = "horizontal_rule"
    BLOCKQUOTE = "blockquote"
    CALL_OUT_BOX = "call_out_box"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_HEADER = "table_header"
    TABLE_CELL = "table_cell"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> NodeType:
        """Map a raw ``type`` tag to its member, or ``UNKNOWN``.

        The literal tag ``"unknown"`` is not a real Box Notes type, so it
        also maps to ``UNKNOWN``.

        """
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


class MarkType(str, Enum):
    """Mark type tags understood by the renderer."""

    LINK = "link"
    STRONG = "strong"
    EM = "em"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    AUTHOR_ID = "author_id"
    FONT_SIZE = "font_size"
    FONT_COLOR = "font_color"
    HIGHLIGHT = "highlight"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> MarkType:
        """Map a raw mark ``type`` tag to its member, or ``UNKNOWN``."""
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class Mark:
    """Inline formatting directive attached to a text node.

    Parameters
    ----------
    type : str
        Mark tag (``"strong"``, ``"link"``, ...)
    attrs : dict, default = empty dict
        Mark attributes, e.g. ``href`` for links

    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> MarkType:
        """Closed-set view of :attr:`type`."""
        return MarkType.from_tag(self.type)


@dataclass
class Node:
    """A typed element of the Box Notes document tree.

    Parameters
    ----------
    type : str
        Node tag selecting rendering behaviour
    attrs : dict, default = empty dict
        Open attribute mapping; values may be strings, numbers or booleans
        and their meaning depends on ``type``
    content : list of Node, default = empty list
        Ordered child nodes
    text : str, default = ""
        Text of a ``text`` leaf
    marks : list of Mark, default = empty list
        Inline marks of a ``text`` leaf

    Examples
    --------
        >>> heading = Node(
        ...     type="heading",
        ...     attrs={"level": 2},
        ...     content=[Node(type="text", text="Title")],
        ... )
        >>> heading.kind
        <NodeType.HEADING: 'heading'>

    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)
    content: list[Node] = field(default_factory=list)
    text: str = ""
    marks: list[Mark] = field(default_factory=list)

    @property
    def kind(self) -> NodeType:
        """Closed-set view of :attr:`type`."""
        return NodeType.from_tag(self.type)
