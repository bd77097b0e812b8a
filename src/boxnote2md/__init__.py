"""boxnote2md - convert Box Notes documents to GitHub-Flavored Markdown.

A ``.boxnote`` file is a JSON object whose ``doc`` field holds a
ProseMirror-style tree of typed nodes with attributes and inline marks.
boxnote2md renders that tree to Markdown in a single pure pass, keeping
structure (headings, lists, checklists, tables, quotes) and inline
formatting (bold, italic, underline, strikethrough, links, code) while
dropping presentation-only metadata such as fonts, colours and highlights.

Requirements
------------
- Python 3.10+

Examples
--------
Convert a file to a Markdown string:

    >>> from pathlib import Path
    >>> from boxnote2md import to_markdown
    >>> markdown = to_markdown(Path("meeting.boxnote"))

Convert a file next to itself (``meeting.boxnote`` -> ``meeting.md``):

    >>> from boxnote2md import convert_file
    >>> convert_file("meeting.boxnote")

Render an already-decoded tree:

    >>> from boxnote2md import Node, render
    >>> render(Node(type="doc", content=[Node(type="horizontal_rule")]))
    '---'

"""

from boxnote2md.api import convert_file, output_path_for, render, title_from_path, to_markdown
from boxnote2md.ast import Mark, MarkType, Node, NodeType
from boxnote2md.exceptions import (
    Boxnote2MdError,
    FileAccessError,
    FileError,
    OutputWriteError,
    OverwriteDeclinedError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from boxnote2md.options import ConversionOptions
from boxnote2md.parsers import BoxNoteParser
from boxnote2md.renderers import MarkdownRenderer

__all__ = [
    "Boxnote2MdError",
    "BoxNoteParser",
    "ConversionOptions",
    "FileAccessError",
    "FileError",
    "Mark",
    "MarkType",
    "MarkdownRenderer",
    "Node",
    "NodeType",
    "OutputWriteError",
    "OverwriteDeclinedError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "convert_file",
    "output_path_for",
    "render",
    "title_from_path",
    "to_markdown",
]
