#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/api.py
"""Public conversion API.

The functions here tie the parser and the Markdown renderer together and
handle the file-level concerns around them: output paths, titles derived
from file names, and overwrite confirmation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from boxnote2md.ast.nodes import Node
from boxnote2md.constants import BOXNOTE_EXTENSION, MARKDOWN_EXTENSION
from boxnote2md.exceptions import FileAccessError, OutputWriteError, OverwriteDeclinedError
from boxnote2md.options import ConversionOptions
from boxnote2md.parsers.boxnote import BoxNoteParser, BoxNoteSource, is_blank_input
from boxnote2md.renderers.markdown import MarkdownRenderer
from boxnote2md.utils.io_utils import write_content

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[Path], bool]

_renderer = MarkdownRenderer()


def render(document: Node) -> str:
    """Render a decoded document tree to Markdown.

    Raises
    ------
    ParsingError
        If the root carries no type tag
    RenderingError
        If the tree is nested too deeply to render

    """
    return _renderer.render_to_string(document)


def with_title(markdown: str, title: Optional[str]) -> str:
    """Prefix ``markdown`` with ``# title`` and a blank line when ``title`` is non-empty."""
    if not title:
        return markdown
    return f"# {title}\n\n{markdown}"


def to_markdown(source: BoxNoteSource, *, title: Optional[str] = None) -> str:
    """Convert Box Notes input to Markdown.

    Parameters
    ----------
    source : str, Path, bytes, IO or dict
        JSON text, a path to a ``.boxnote`` file, raw bytes, a file-like
        object, or an already-decoded JSON object
    title : str, optional
        When given, the output starts with ``# {title}`` and a blank line

    Returns
    -------
    str
        Markdown text. Whitespace-only input yields an empty string.

    Raises
    ------
    ParsingError
        If the input is not valid JSON or has no document root
    RenderingError
        If the tree is nested too deeply to render
    FileAccessError
        If a path cannot be read

    Examples
    --------
        >>> to_markdown('{"doc": {"type": "doc", "content": [{"type": "horizontal_rule"}]}}')
        '---'

    """
    if isinstance(source, dict):
        document = BoxNoteParser().parse(source)
    else:
        text = BoxNoteParser.read(source)
        if is_blank_input(text):
            return ""
        document = BoxNoteParser().parse(text)
    return with_title(render(document), title)


def title_from_path(input_path: Union[str, Path]) -> str:
    """Return the file name without a trailing ``.boxnote`` extension."""
    return Path(input_path).name.removesuffix(BOXNOTE_EXTENSION)


def output_path_for(input_path: Union[str, Path], output_dir: Optional[Path] = None) -> Path:
    """Return the Markdown path for ``input_path``.

    A trailing ``.boxnote`` is replaced by ``.md``; any other name simply gets
    ``.md`` appended. With ``output_dir`` the file lands in that directory
    instead of next to the input.

    Examples
    --------
        >>> output_path_for("notes/standup.boxnote").as_posix()
        'notes/standup.md'
        >>> output_path_for("notes/readme.txt").as_posix()
        'notes/readme.txt.md'

    """
    path = Path(input_path)
    name = path.name.removesuffix(BOXNOTE_EXTENSION) + MARKDOWN_EXTENSION
    return (output_dir if output_dir is not None else path.parent) / name


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    *,
    options: Optional[ConversionOptions] = None,
    confirm: Optional[ConfirmCallback] = None,
) -> Path:
    """Convert a ``.boxnote`` file into a Markdown file.

    Parameters
    ----------
    input_path : str or Path
        File to convert
    output_path : str, Path or None, default = None
        Destination; derived with :func:`output_path_for` when omitted
    options : ConversionOptions, optional
        Overwrite, title and output directory settings
    confirm : callable, optional
        Asked with the output path when that file already exists and
        ``options.force`` is false. Without a callback, existing files are
        never replaced.

    Returns
    -------
    Path
        The written output path

    Raises
    ------
    FileAccessError
        If the input cannot be read
    OverwriteDeclinedError
        If the output exists and replacing it was not confirmed
    ParsingError
        If the input is not a valid Box Note
    RenderingError
        If the tree is nested too deeply to render
    OutputWriteError
        If the output cannot be written

    """
    options = options or ConversionOptions()
    source = Path(input_path)

    try:
        raw = source.read_bytes()
    except OSError as e:
        raise FileAccessError(str(source), original_error=e) from e

    target = Path(output_path) if output_path is not None else output_path_for(source, options.output_dir)
    if target.exists() and not options.force:
        if confirm is None or not confirm(target):
            raise OverwriteDeclinedError(str(target))

    text = BoxNoteParser.read(raw)
    if is_blank_input(text):
        logger.info("%s is empty, writing empty output", source)
        markdown = ""
    else:
        markdown = render(BoxNoteParser().parse(text))
        if options.include_title:
            markdown = with_title(markdown, title_from_path(source))

    try:
        write_content(markdown, target)
    except OSError as e:
        raise OutputWriteError(f"failed to write: {e}", output_path=str(target), original_error=e) from e

    logger.debug("Wrote %s (%d characters)", target, len(markdown))
    return target
