#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/cli/builder.py
"""Argument parser construction for the boxnote2md CLI."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from importlib.metadata import PackageNotFoundError, version

from boxnote2md.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_TRUE_VALUES = ("true", "1", "yes", "on")

# Options that must not be defaulted from the environment
_ENV_EXCLUDED_DESTS = frozenset({"help", "version", "inputs", "config", "no_config"})


def get_version() -> str:
    """Get the installed version of boxnote2md."""
    try:
        return version("boxnote2md")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``boxnote2md`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="boxnote2md",
        description=(
            "Convert Box Notes (.boxnote) files to GitHub-Flavored Markdown. "
            "With no input files, reads a Box Note from stdin and writes Markdown to stdout."
        ),
        epilog=(
            "Each FILE.boxnote is written to FILE.md with a '# FILE' title heading. "
            f"Options can also be set through {ENV_PREFIX}<OPTION> environment variables "
            "or a .boxnote2md.toml/.yaml/.json config file."
        ),
    )
    parser.add_argument("inputs", nargs="*", metavar="FILE", help="Box Notes files to convert")
    parser.add_argument(
        "-f", "--force", action="store_true", help="Overwrite output files without prompting"
    )
    parser.add_argument(
        "--output-dir", metavar="DIR", help="Write output files to DIR instead of next to each input file"
    )
    parser.add_argument(
        "--no-title", action="store_true", help="Do not add a title heading derived from the file name"
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", metavar="PATH", help="Load options from a TOML, YAML or JSON config file")
    config_group.add_argument(
        "--no-config", action="store_true", help="Ignore config files and the BOXNOTE2MD_CONFIG variable"
    )

    output_group = parser.add_argument_group("logging and output")
    output_group.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    output_group.add_argument("--log-file", metavar="PATH", help="Also write log records to PATH")
    output_group.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names"
    )
    output_group.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    output_group.add_argument(
        "--rich", action="store_true", help="Colour status lines and log records when stderr is a terminal"
    )
    output_group.add_argument(
        "--force-rich", action="store_true", help="Use rich output even when stderr is not a terminal"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    return parser


def apply_env_vars_to_parser(parser: argparse.ArgumentParser, environ: Mapping[str, str] | None = None) -> None:
    """Use ``BOXNOTE2MD_<OPTION>`` environment variables as argument defaults.

    Command-line arguments still take precedence over environment values.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify
    environ : mapping, optional
        Environment to read; defaults to ``os.environ``

    """
    env = os.environ if environ is None else environ
    for action in parser._actions:
        if not action.dest or action.dest in _ENV_EXCLUDED_DESTS:
            continue

        env_key = f"{ENV_PREFIX}{action.dest.upper()}"
        env_value = env.get(env_key)
        if env_value is None:
            continue

        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.strip().lower() in _TRUE_VALUES
        elif action.choices:
            normalized = env_value.upper() if action.type is str.upper else env_value
            if normalized in action.choices:
                action.default = normalized
            else:
                logger.warning("Invalid choice for %s: %s. Choices: %s", env_key, env_value, list(action.choices))
        else:
            action.default = env_value
