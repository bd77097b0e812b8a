#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/utils/text.py
"""Text and line manipulation helpers used by the Markdown renderer."""

from __future__ import annotations

from boxnote2md.constants import YAKUMONO_CHARACTERS, ZERO_WIDTH_SPACE


def is_yakumono(char: str) -> bool:
    """Return True if ``char`` is CJK punctuation, quotation or dash (or ``!``/``?``)."""
    return char in YAKUMONO_CHARACTERS


def pad_with_zero_width_space(text: str) -> str:
    """Add zero-width spaces where a Yakumono character touches a text boundary.

    CommonMark only treats ``**`` as an emphasis delimiter when it is
    left/right-flanking, and full-width punctuation next to the delimiter
    breaks that rule for CJK text. A zero-width space between the delimiter
    and the punctuation restores it.

    Parameters
    ----------
    text : str
        Text that is about to be wrapped in emphasis delimiters

    Returns
    -------
    str
        Text with U+200B prepended and/or appended as needed

    Examples
    --------
        >>> pad_with_zero_width_space("「引用」")
        '\\u200b「引用」\\u200b'
        >>> pad_with_zero_width_space("plain")
        'plain'

    """
    if not text:
        return text

    first = text[0]
    if not text.startswith(ZERO_WIDTH_SPACE) and not first.isspace() and is_yakumono(first):
        text = ZERO_WIDTH_SPACE + text

    last = text[-1]
    if not text.endswith(ZERO_WIDTH_SPACE) and not last.isspace() and is_yakumono(last):
        text = text + ZERO_WIDTH_SPACE

    return text


def indent_continuation_lines(text: str, indent: int) -> str:
    """Indent every line of ``text`` except the first by ``indent`` spaces."""
    lines = text.split("\n")
    padding = " " * indent
    return "\n".join([lines[0], *(padding + line for line in lines[1:])])


def indent_all_lines(text: str, indent: int) -> str:
    """Indent every line of ``text``; empty lines become pure indentation."""
    if not text:
        return ""
    padding = " " * indent
    return "\n".join(padding + line for line in text.split("\n"))


def prefix_lines(text: str, prefix: str) -> str:
    """Prefix every line of ``text``; empty lines get the prefix without trailing spaces."""
    bare_prefix = prefix.rstrip(" ")
    return "\n".join(prefix + line if line else bare_prefix for line in text.split("\n"))
