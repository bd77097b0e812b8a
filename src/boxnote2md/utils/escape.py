#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/utils/escape.py
"""Markdown escaping utilities.

Each helper escapes only what its context needs: formatted text runs
escape the delimiters that are in play for that run, link text escapes the
link syntax characters, and table cells escape pipes.

"""

from __future__ import annotations

from boxnote2md.constants import DEFAULT_EMPHASIS_SYMBOL, EmphasisSymbol

_LINK_TEXT_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "[": "\\[",
        "]": "\\]",
        "(": "\\(",
        ")": "\\)",
    }
)


def escape_markdown_emphasis(
    text: str,
    emphasis_symbol: EmphasisSymbol = DEFAULT_EMPHASIS_SYMBOL,
    has_strong: bool = False,
    has_strikethrough: bool = False,
) -> str:
    r"""Escape delimiter characters inside a formatted text run.

    Backslashes are always escaped. Asterisks are escaped when they could
    close the emphasis (``*`` delimiter) or the bold (``**``) wrapper,
    underscores when ``_`` is the emphasis delimiter, and tildes when the run
    is struck through.

    Parameters
    ----------
    text : str
        Text to escape
    emphasis_symbol : {'*', '_'}, default = '*'
        Delimiter chosen for ``em`` on this run
    has_strong : bool, default = False
        Whether the run is bold
    has_strikethrough : bool, default = False
        Whether the run is struck through

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown_emphasis("a*b", "*")
        'a\\*b'
        >>> escape_markdown_emphasis("snake_case", "_", has_strong=True)
        'snake\\_case'

    """
    text = text.replace("\\", "\\\\")
    if emphasis_symbol == "*" or has_strong:
        text = text.replace("*", "\\*")
    if emphasis_symbol == "_":
        text = text.replace("_", "\\_")
    if has_strikethrough:
        text = text.replace("~", "\\~")
    return text


def escape_link_text(text: str) -> str:
    r"""Escape ``\``, ``[``, ``]``, ``(`` and ``)`` in link text.

    Examples
    --------
        >>> escape_link_text("see [docs]")
        'see \\[docs\\]'

    """
    return text.translate(_LINK_TEXT_ESCAPES)


def escape_table_cell(text: str) -> str:
    """Escape pipe characters so they do not split a table cell."""
    return text.replace("|", "\\|")


def max_consecutive_backticks(text: str) -> int:
    """Return the length of the longest run of backticks in ``text``."""
    longest = 0
    current = 0
    for char in text:
        if char == "`":
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def wrap_inline_code(code: str) -> str:
    """Wrap ``code`` in a backtick fence one longer than its longest backtick run.

    Examples
    --------
        >>> wrap_inline_code("x = 1")
        '`x = 1`'
        >>> wrap_inline_code("a``b")
        '```a``b```'

    """
    fence = "`" * (max_consecutive_backticks(code) + 1)
    return f"{fence}{code}{fence}"
