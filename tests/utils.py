"""Builders for Box Notes trees used across the test suite.

Each helper returns a :class:`~boxnote2md.ast.nodes.Node` shaped like the
decoded JSON a ``.boxnote`` file contains, so tests read close to the
documents they describe.
"""

from boxnote2md.ast.nodes import Mark, Node


def mark(type_: str, **attrs) -> Mark:
    return Mark(type=type_, attrs=attrs)


def link(href) -> Mark:
    return Mark(type="link", attrs={"href": href})


def text(value: str, *marks) -> Node:
    """Text leaf; marks may be given as tag strings or Mark instances."""
    return Node(type="text", text=value, marks=[m if isinstance(m, Mark) else Mark(type=m) for m in marks])


def node(type_: str, *content: Node, **attrs) -> Node:
    return Node(type=type_, attrs=attrs, content=list(content))


def hard_break() -> Node:
    return Node(type="hard_break")


def doc(*content: Node) -> Node:
    return node("doc", *content)


def paragraph(*content) -> Node:
    """Paragraph; plain strings become unmarked text leaves."""
    return node("paragraph", *(text(c) if isinstance(c, str) else c for c in content))


def heading(level, *content) -> Node:
    return Node(
        type="heading",
        attrs={"level": level},
        content=[text(c) if isinstance(c, str) else c for c in content],
    )


def list_item(*content) -> Node:
    """List item; plain strings become single-text paragraphs."""
    return node("list_item", *(paragraph(c) if isinstance(c, str) else c for c in content))


def check_list_item(checked, *content) -> Node:
    return Node(
        type="check_list_item",
        attrs={"checked": checked},
        content=[paragraph(c) if isinstance(c, str) else c for c in content],
    )


def bullet_list(*items) -> Node:
    return node("bullet_list", *(list_item(i) if isinstance(i, str) else i for i in items))


def ordered_list(*items) -> Node:
    return node("ordered_list", *(list_item(i) if isinstance(i, str) else i for i in items))


def check_list(*items: Node) -> Node:
    return node("check_list", *items)


def table(*rows: Node) -> Node:
    return node("table", *rows)


def header_row(*cells) -> Node:
    return node("table_row", *(node("table_header", paragraph(c)) if isinstance(c, str) else c for c in cells))


def row(*cells) -> Node:
    return node("table_row", *(node("table_cell", paragraph(c)) if isinstance(c, str) else c for c in cells))
