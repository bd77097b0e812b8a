#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/renderers/markdown.py
"""Markdown rendering of Box Notes document trees.

This module provides the MarkdownRenderer class which converts a decoded Box
Notes tree into GitHub-Flavored Markdown. Rendering is a single top-down pass:
block nodes are dispatched through a lookup table keyed by
:class:`~boxnote2md.ast.nodes.NodeType`, inline content is concatenated, and
each text run is formatted from its marks.

Blocks are joined with exactly one blank line. Every node controls its own
internal newlines; the blank-line join is the only separator added between
siblings.

The only state threaded through the recursion is a :class:`RenderContext`
holding the current indentation, passed by value.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from boxnote2md.ast.nodes import Mark, MarkType, Node, NodeType
from boxnote2md.ast.utils import clamp, get_bool_attr, get_int_attr, get_string_attr
from boxnote2md.constants import (
    BLOCK_SEPARATOR,
    BLOCKQUOTE_PREFIX,
    BULLET_LIST_PREFIX,
    CHECKED_ITEM_PREFIX,
    DEFAULT_EMPHASIS_SYMBOL,
    HARD_BREAK,
    HORIZONTAL_RULE,
    IGNORED_MARK_TYPES,
    LIST_INDENT_STEP,
    MARK_ORDER,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    NESTED_EMPHASIS_SYMBOL,
    NESTING_TOO_DEEP,
    ORDERED_LIST_PREFIX,
    TABLE_CELL_BREAK,
    TABLE_SEPARATOR_CELL,
    UNCHECKED_ITEM_PREFIX,
    UNKNOWN_MARK_ORDER,
    EmphasisSymbol,
)
from boxnote2md.exceptions import ParsingError, RenderingError
from boxnote2md.renderers.base import BaseRenderer
from boxnote2md.utils.escape import escape_link_text, escape_markdown_emphasis, escape_table_cell, wrap_inline_code
from boxnote2md.utils.text import indent_all_lines, indent_continuation_lines, pad_with_zero_width_space, prefix_lines

logger = logging.getLogger(__name__)

BlockHandler = Callable[[Node, "RenderContext"], "str | None"]

_TABLE_CELL_TYPES = frozenset({NodeType.TABLE_HEADER, NodeType.TABLE_CELL})


@dataclass(frozen=True)
class RenderContext:
    """Indentation state for one level of the recursion.

    Parameters
    ----------
    indent : int, default = 0
        Number of leading spaces for list nesting

    """

    indent: int = 0

    def nested(self) -> RenderContext:
        """Return the context for content one list level deeper."""
        return RenderContext(indent=self.indent + LIST_INDENT_STEP)


def check_item_prefix(node: Node) -> str:
    """Return the task list marker for a ``check_list_item``."""
    return CHECKED_ITEM_PREFIX if get_bool_attr(node.attrs, "checked") else UNCHECKED_ITEM_PREFIX


def _normalize_row(row: list[str], col_count: int) -> list[str]:
    if len(row) >= col_count:
        return row[:col_count]
    return row + [""] * (col_count - len(row))


def _format_table_row(row: list[str]) -> str:
    return "| " + " | ".join(cell.strip() for cell in row) + " |"


def _format_table_separator(col_count: int) -> str:
    return _format_table_row([TABLE_SEPARATOR_CELL] * col_count)


class MarkdownRenderer(BaseRenderer):
    """Render Box Notes document trees to GitHub-Flavored Markdown.

    The renderer holds no per-document state, so one instance can render any
    number of documents, including concurrently.

    Examples
    --------
    Basic usage:

        >>> from boxnote2md.ast import Mark, Node
        >>> from boxnote2md.renderers.markdown import MarkdownRenderer
        >>> doc = Node(type="doc", content=[
        ...     Node(type="heading", attrs={"level": 2}, content=[Node(type="text", text="Title")]),
        ...     Node(type="paragraph", content=[
        ...         Node(type="text", text="Hello "),
        ...         Node(type="text", text="world", marks=[Mark(type="strong")]),
        ...     ]),
        ... ])
        >>> print(MarkdownRenderer().render_to_string(doc))
        ## Title
        <BLANKLINE>
        Hello **world**

    """

    def __init__(self) -> None:
        """Initialize the renderer and its dispatch tables."""
        self._list_handlers: dict[NodeType, BlockHandler] = {
            NodeType.BULLET_LIST: self._render_bullet_list,
            NodeType.ORDERED_LIST: self._render_ordered_list,
            NodeType.CHECK_LIST: self._render_check_list,
        }
        self._block_handlers: dict[NodeType, BlockHandler] = {
            NodeType.HEADING: self._render_heading,
            NodeType.PARAGRAPH: self._render_paragraph,
            NodeType.HARD_BREAK: lambda node, ctx: HARD_BREAK,
            NodeType.HORIZONTAL_RULE: lambda node, ctx: HORIZONTAL_RULE,
            NodeType.LIST_ITEM: self._render_list_item_block,
            NodeType.CHECK_LIST_ITEM: self._render_list_item_block,
            NodeType.BLOCKQUOTE: self._render_blockquote,
            NodeType.CALL_OUT_BOX: self._render_blockquote,
            NodeType.TABLE: self._render_table,
            **self._list_handlers,
        }

    def render_to_string(self, doc: Node) -> str:
        """Render a document tree to Markdown.

        Parameters
        ----------
        doc : Node
            Document root. Its own type is not interpreted; its children are
            rendered as a block sequence.

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        ParsingError
            If the root carries no type tag
        RenderingError
            If the tree is nested too deeply to render

        """
        if not doc.type:
            raise ParsingError("missing doc node", parsing_stage="document_validation")
        try:
            return self.render_blocks(doc.content, RenderContext())
        except RecursionError as e:
            raise RenderingError(NESTING_TOO_DEEP, rendering_stage="blocks", original_error=e) from e

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def render_blocks(self, nodes: list[Node], ctx: RenderContext) -> str:
        """Render nodes as blocks and join the kept ones with a blank line."""
        blocks = []
        for node in nodes:
            block = self.render_block(node, ctx)
            if block is not None:
                blocks.append(block)
        return BLOCK_SEPARATOR.join(blocks)

    def render_block(self, node: Node, ctx: RenderContext) -> str | None:
        """Render a single block node.

        Parameters
        ----------
        node : Node
            Node to render
        ctx : RenderContext
            Current indentation

        Returns
        -------
        str or None
            The block text, or None when the node contributes nothing and must
            be left out of its parent's block sequence. An empty string is a
            real (empty) block.

        """
        handler = self._block_handlers.get(node.kind)
        if handler is not None:
            return handler(node, ctx)
        return self._render_fallback(node, ctx)

    def _render_fallback(self, node: Node, ctx: RenderContext) -> str | None:
        if not node.content:
            return None
        logger.debug("Rendering children of unsupported node type %r", node.type)
        return self.render_blocks(node.content, ctx)

    def _render_heading(self, node: Node, ctx: RenderContext) -> str:
        level = clamp(get_int_attr(node.attrs, "level"), MIN_HEADING_LEVEL, MAX_HEADING_LEVEL)
        return f"{'#' * level} {self.render_inline(node.content)}"

    def _render_paragraph(self, node: Node, ctx: RenderContext) -> str:
        if not node.content:
            return ""
        return self.render_inline(node.content)

    def _render_blockquote(self, node: Node, ctx: RenderContext) -> str:
        body = self.render_blocks(node.content, ctx)
        if not body:
            return BLOCKQUOTE_PREFIX.rstrip()
        return prefix_lines(body, BLOCKQUOTE_PREFIX)

    def _render_list_item_block(self, node: Node, ctx: RenderContext) -> str:
        if node.kind is NodeType.CHECK_LIST_ITEM:
            prefix = check_item_prefix(node)
        else:
            prefix = BULLET_LIST_PREFIX
        return "\n".join(self.render_list_item(node, ctx, prefix))

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _render_bullet_list(self, node: Node, ctx: RenderContext) -> str:
        return self._render_list(node, ctx, NodeType.LIST_ITEM, lambda item: BULLET_LIST_PREFIX)

    def _render_ordered_list(self, node: Node, ctx: RenderContext) -> str:
        return self._render_list(node, ctx, NodeType.LIST_ITEM, lambda item: ORDERED_LIST_PREFIX)

    def _render_check_list(self, node: Node, ctx: RenderContext) -> str:
        return self._render_list(node, ctx, NodeType.CHECK_LIST_ITEM, check_item_prefix)

    def _render_list(
        self,
        node: Node,
        ctx: RenderContext,
        item_type: NodeType,
        prefix_for: Callable[[Node], str],
    ) -> str:
        """Render the direct children of a list node as lines.

        Box Notes stores a nested list as a sibling that follows the item it
        belongs to, rather than inside that item. Such a nested list is
        rendered one level deeper, but only after an item has been emitted at
        this level; a nested list that comes before any item is dropped.

        Parameters
        ----------
        node : Node
            The list node
        ctx : RenderContext
            Indentation of this list's items
        item_type : NodeType
            Child type treated as an item (``list_item`` or ``check_list_item``)
        prefix_for : callable
            Returns the marker for a given item

        Returns
        -------
        str
            Newline-joined list lines

        """
        lines: list[str] = []
        has_item = False
        for child in node.content:
            kind = child.kind
            if kind is item_type:
                lines.extend(self.render_list_item(child, ctx, prefix_for(child)))
                has_item = True
            elif kind in self._list_handlers and has_item:
                nested = self._list_handlers[kind](child, ctx.nested())
                if nested:
                    lines.extend(nested.split("\n"))
        return "\n".join(lines)

    def render_list_item(self, node: Node, ctx: RenderContext, prefix: str) -> list[str]:
        """Render one list item as a sequence of lines.

        When the item starts with a paragraph, its inline text goes right after
        the marker and its continuation lines align under the text. All other
        children are rendered as blocks one level deeper and indented.

        Parameters
        ----------
        node : Node
            ``list_item`` or ``check_list_item`` node
        ctx : RenderContext
            Indentation of the marker
        prefix : str
            Item marker, e.g. ``"- "``, ``"1. "`` or ``"- [x] "``

        Returns
        -------
        list of str
            Output lines; a single entry may itself span several lines

        """
        prefix_line = " " * ctx.indent + prefix
        children = node.content
        if not children:
            return [prefix_line]

        lines: list[str] = []
        first = children[0]
        if first.kind is NodeType.PARAGRAPH:
            text = indent_continuation_lines(self.render_inline(first.content), len(prefix_line))
            lines.append(prefix_line + text)
            children = children[1:]
        else:
            lines.append(prefix_line)

        child_ctx = ctx.nested()
        for child in children:
            block = self.render_block(child, child_ctx)
            if block is None:
                continue
            if not block:
                lines.append(" " * child_ctx.indent)
                continue
            lines.append(indent_all_lines(block, child_ctx.indent))

        return lines

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _render_table(self, node: Node, ctx: RenderContext) -> str:
        """Render a table as a GFM pipe table.

        The first row is always the header row, whatever its cell types. Rows
        are padded or truncated to the widest row. A table without rows or
        cells renders as an empty string.

        """
        rows = [self._render_table_row(row) for row in node.content if row.kind is NodeType.TABLE_ROW]
        col_count = max((len(row) for row in rows), default=0)
        if col_count == 0:
            return ""

        lines = [_format_table_row(_normalize_row(rows[0], col_count)), _format_table_separator(col_count)]
        lines.extend(_format_table_row(_normalize_row(row, col_count)) for row in rows[1:])
        return "\n".join(lines)

    def _render_table_row(self, row: Node) -> list[str]:
        return [self._render_table_cell(cell) for cell in row.content if cell.kind in _TABLE_CELL_TYPES]

    def _render_table_cell(self, cell: Node) -> str:
        text = self._render_cell_content(cell.content)
        text = text.replace("\n", TABLE_CELL_BREAK)
        return escape_table_cell(text)

    def _render_cell_content(self, nodes: list[Node]) -> str:
        parts = []
        for node in nodes:
            kind = node.kind
            if kind is NodeType.PARAGRAPH:
                if node.content:
                    parts.append(self.render_inline(node.content))
            elif kind is NodeType.TEXT:
                parts.append(self.apply_marks(node.text, node.marks))
            elif node.content:
                parts.append(self._render_cell_content(node.content))
        return TABLE_CELL_BREAK.join(parts)

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def render_inline(self, nodes: list[Node]) -> str:
        """Concatenate inline content.

        Text runs are formatted from their marks and hard breaks become a
        backslash line break. Any other node is flattened into its children.

        """
        parts = []
        for node in nodes:
            kind = node.kind
            if kind is NodeType.TEXT:
                parts.append(self.apply_marks(node.text, node.marks))
            elif kind is NodeType.HARD_BREAK:
                parts.append(HARD_BREAK)
            elif node.content:
                parts.append(self.render_inline(node.content))
        return "".join(parts)

    def apply_marks(self, text: str, marks: list[Mark]) -> str:
        """Format a text run according to its marks.

        Escaping and zero-width space padding are decided once from the whole
        mark set; the marks are then applied as nested wrappers in a fixed
        order, outermost first: link, strong, em, underline, strikethrough,
        code. When both strong and em are present, em uses ``_`` so the
        output reads ``**_text_**`` rather than ``***text***``.

        Parameters
        ----------
        text : str
            Raw text of the run
        marks : list of Mark
            Marks in document order; presentation-only marks are ignored

        Returns
        -------
        str
            Inline Markdown

        Examples
        --------
            >>> MarkdownRenderer().apply_marks("hi", [Mark(type="em"), Mark(type="strong")])
            '**_hi_**'

        """
        marks = [mark for mark in marks if mark.type not in IGNORED_MARK_TYPES]
        if not marks:
            return text

        present = {mark.kind for mark in marks}
        has_strong = MarkType.STRONG in present
        has_em = MarkType.EM in present
        has_strikethrough = MarkType.STRIKETHROUGH in present
        has_code = MarkType.CODE in present
        has_link = MarkType.LINK in present

        emphasis: EmphasisSymbol = NESTED_EMPHASIS_SYMBOL if has_strong and has_em else DEFAULT_EMPHASIS_SYMBOL

        if not has_code:
            text = escape_markdown_emphasis(text, emphasis, has_strong, has_strikethrough)
        if (has_strong or has_em or has_strikethrough or has_code) and not has_link:
            text = pad_with_zero_width_space(text)

        ordered = sorted(marks, key=lambda mark: MARK_ORDER.get(mark.type, UNKNOWN_MARK_ORDER))
        for mark in reversed(ordered):
            text = self._wrap_mark(text, mark, emphasis)
        return text

    @staticmethod
    def _wrap_mark(text: str, mark: Mark, emphasis: EmphasisSymbol) -> str:
        kind = mark.kind
        if kind is MarkType.LINK:
            href = get_string_attr(mark.attrs, "href")
            if not href:
                return text
            return f"[{escape_link_text(text)}]({href})"
        if kind is MarkType.STRONG:
            return f"**{text}**"
        if kind is MarkType.EM:
            return f"{emphasis}{text}{emphasis}"
        if kind is MarkType.UNDERLINE:
            return f"<u>{text}</u>"
        if kind is MarkType.STRIKETHROUGH:
            return f"~~{text}~~"
        if kind is MarkType.CODE:
            return wrap_inline_code(text)
        return text
