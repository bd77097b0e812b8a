#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/cli/processors.py
"""Input processing for the boxnote2md CLI.

Two modes are supported: converting stdin to stdout, and converting a list
of files, each to a Markdown file next to it (or in ``--output-dir``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

from boxnote2md.api import convert_file, to_markdown
from boxnote2md.cli.builder import EXIT_ERROR, EXIT_SUCCESS
from boxnote2md.cli.output import StatusReporter
from boxnote2md.constants import OVERWRITE_ANSWERS, OVERWRITE_PROMPT
from boxnote2md.exceptions import Boxnote2MdError, FileError
from boxnote2md.options import ConversionOptions
from boxnote2md.parsers.boxnote import is_blank_input
from boxnote2md.utils.io_utils import decode_text

logger = logging.getLogger(__name__)


def build_conversion_options(parsed_args: argparse.Namespace) -> ConversionOptions:
    """Create :class:`ConversionOptions` from parsed arguments.

    Raises
    ------
    ValidationError
        If ``--output-dir`` points at an existing non-directory

    """
    return ConversionOptions(
        force=parsed_args.force,
        include_title=not parsed_args.no_title,
        output_dir=Path(parsed_args.output_dir) if parsed_args.output_dir else None,
    )


def make_overwrite_prompt(stdin: TextIO | None = None, stderr: TextIO | None = None) -> Callable[[Path], bool]:
    """Return a callback asking on stderr whether an existing file may be replaced.

    The answer is one line read from stdin; ``y`` or ``yes`` (any case)
    confirms and anything else, including end of input, declines.

    """

    def confirm(path: Path) -> bool:
        out = stderr or sys.stderr
        out.write(OVERWRITE_PROMPT.format(path=path))
        out.flush()
        try:
            line = (stdin or sys.stdin).readline()
        except OSError as e:
            raise FileError(
                f"failed to read overwrite confirmation: {e}", file_path=str(path), original_error=e
            ) from e
        return line.strip().lower() in OVERWRITE_ANSWERS

    return confirm


def process_stdin(stdin: TextIO | None = None, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Convert a Box Note read from stdin and print Markdown to stdout.

    Whitespace-only input produces no output. No title is added.

    Returns
    -------
    int
        Exit code

    """
    source = stdin or sys.stdin
    raw = getattr(source, "buffer", source).read()

    text = decode_text(raw) if isinstance(raw, bytes) else raw
    if is_blank_input(text):
        return EXIT_SUCCESS

    try:
        output = to_markdown(text)
    except Boxnote2MdError as e:
        logger.debug("stdin conversion failed", exc_info=True)
        print(e.message, file=stderr or sys.stderr)
        return EXIT_ERROR

    (stdout or sys.stdout).write(output)
    return EXIT_SUCCESS


def process_files(
    inputs: list[str],
    options: ConversionOptions,
    reporter: StatusReporter,
    confirm: Callable[[Path], bool] | None = None,
) -> int:
    """Convert each input file, reporting one status line per file.

    A failure is reported and processing continues with the next file.

    Returns
    -------
    int
        ``EXIT_ERROR`` if any file failed, otherwise ``EXIT_SUCCESS``

    """
    had_error = False
    for input_path in inputs:
        try:
            output_path = convert_file(input_path, options=options, confirm=confirm)
        except Boxnote2MdError as e:
            logger.debug("Conversion of %s failed", input_path, exc_info=True)
            reporter.error(input_path, e.message)
            had_error = True
            continue
        logger.info("Converted %s -> %s", input_path, output_path)
        reporter.ok(input_path)

    return EXIT_ERROR if had_error else EXIT_SUCCESS
