"""Status line output for the CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/boxnote2md/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Stream the output goes to; uses sys.stderr unless otherwise specified.

    Returns
    -------
    bool
        True if rich output should be used

    Notes
    -----
    Rich output is used when ``--force-rich`` is set, or when ``--rich`` is
    set and the stream is a TTY.

    """
    if getattr(args, "force_rich", False):
        return True
    if not getattr(args, "rich", False):
        return False

    target = stream or sys.stderr
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False
    return False


class StatusReporter:
    """Print one ``OK``/``ERROR`` line per processed file to stderr.

    Parameters
    ----------
    use_rich : bool, default False
        Colour the status word with rich
    stream : TextIO, optional
        Destination; resolved to ``sys.stderr`` at print time when omitted

    """

    def __init__(self, use_rich: bool = False, stream: TextIO | None = None):
        self._stream = stream
        self._console: Console | None = None
        if use_rich:
            self._console = Console(file=stream, stderr=stream is None, highlight=False, force_terminal=True)

    def ok(self, path: str) -> None:
        if self._console is not None:
            self._console.print(f"[bold green]OK[/bold green]: {escape(path)}", soft_wrap=True)
        else:
            print(f"OK: {path}", file=self._stream or sys.stderr)

    def error(self, path: str, message: str) -> None:
        if self._console is not None:
            self._console.print(f"[bold red]ERROR[/bold red]: {escape(path)}: {escape(message)}", soft_wrap=True)
        else:
            print(f"ERROR: {path}: {message}", file=self._stream or sys.stderr)
