"""Command-line interface for boxnote2md.

Converts Box Notes files to GitHub-Flavored Markdown.

Environment Variable Support
----------------------------
All CLI options support environment variable defaults using the pattern
BOXNOTE2MD_<OPTION_NAME> where option names are converted to uppercase with
hyphens replaced by underscores. A configuration file (``--config``,
``BOXNOTE2MD_CONFIG`` or a discovered ``.boxnote2md.toml``) overrides the
environment, and CLI arguments override both.

Examples
--------
Convert stdin to stdout::

    $ boxnote2md < meeting.boxnote > meeting.md

Convert files next to themselves::

    $ boxnote2md meeting.boxnote retro.boxnote

Overwrite existing output without prompting::

    $ boxnote2md -f *.boxnote

Collect output in one directory without title headings::

    $ boxnote2md *.boxnote --output-dir ./markdown --no-title

Use environment variables for defaults::

    $ export BOXNOTE2MD_FORCE=true
    $ export BOXNOTE2MD_OUTPUT_DIR=./markdown
    $ boxnote2md *.boxnote

"""

import argparse
import logging
import os
import sys

from boxnote2md.cli.builder import EXIT_VALIDATION_ERROR, apply_env_vars_to_parser, create_parser
from boxnote2md.cli.config import apply_config_to_parser, find_config_in_parents
from boxnote2md.cli.output import StatusReporter, should_use_rich_output
from boxnote2md.cli.processors import build_conversion_options, make_overwrite_prompt, process_files, process_stdin
from boxnote2md.constants import CONFIG_ENV_VAR
from boxnote2md.exceptions import ValidationError
from boxnote2md.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace, use_rich: bool) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace or parsed_args.verbose:
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace, use_rich=use_rich)


def _resolve_config_path(parsed_args: argparse.Namespace) -> str | None:
    """Pick the config file: --config, then BOXNOTE2MD_CONFIG, then discovery."""
    if parsed_args.no_config:
        return None
    if parsed_args.config:
        return parsed_args.config
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return env_config
    discovered = find_config_in_parents()
    return str(discovered) if discovered else None


def main(args: list[str] | None = None) -> int:
    """Execute the boxnote2md command line.

    Parameters
    ----------
    args : list of str, optional
        Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    apply_env_vars_to_parser(parser)

    preliminary, _ = parser.parse_known_args(args)
    config_path = _resolve_config_path(preliminary)
    if config_path:
        try:
            apply_config_to_parser(parser, config_path)
        except argparse.ArgumentTypeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    parsed_args = parser.parse_args(args)

    use_rich = should_use_rich_output(parsed_args)
    _setup_logging_level(parsed_args, use_rich)
    if config_path:
        logger.debug("Using configuration file %s", config_path)

    if not parsed_args.inputs:
        return process_stdin()

    try:
        options = build_conversion_options(parsed_args)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if options.output_dir is not None:
        try:
            options.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Error: cannot create output directory {options.output_dir}: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    return process_files(
        parsed_args.inputs,
        options,
        StatusReporter(use_rich=use_rich),
        confirm=make_overwrite_prompt(),
    )


if __name__ == "__main__":
    sys.exit(main())
