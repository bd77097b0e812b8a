#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the boxnote2md CLI.

This module finds configuration files, loads them from TOML, YAML or JSON,
validates the recognised keys and turns them into argument parser defaults
so that command-line flags still win.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from boxnote2md.cli.builder import LOG_LEVEL_CHOICES
from boxnote2md.constants import CONFIG_FILENAMES, CONFIG_KEYS, PYPROJECT_TOOL_SECTION

logger = logging.getLogger(__name__)

_BOOLEAN_KEYS = frozenset({"force", "no_title", "rich"})


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.boxnote2md]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching the start directory and its parents.

    In each directory, dedicated files are checked first
    (``.boxnote2md.toml``, ``.boxnote2md.yaml``, ``.boxnote2md.yml``,
    ``.boxnote2md.json``), then ``pyproject.toml`` if it has a
    ``[tool.boxnote2md]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Raw configuration mapping

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed or of an unknown type

    Examples
    --------
    >>> config = load_config_file(".boxnote2md.toml")
    >>> config.get("force")
    True

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except argparse.ArgumentTypeError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(
            f"Configuration in {config_path} must be a mapping, got {type(data).__name__}"
        )
    return data


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check value types of recognised keys and drop unknown ones.

    Keys may use dashes or underscores (``no-title`` or ``no_title``).

    Returns
    -------
    dict
        Configuration keyed by argparse destination names

    Raises
    ------
    argparse.ArgumentTypeError
        If a recognised key has a value of the wrong type

    """
    validated: Dict[str, Any] = {}
    for raw_key, value in config.items():
        key = str(raw_key).replace("-", "_")
        if key not in CONFIG_KEYS:
            logger.warning("Ignoring unknown configuration key: %s", raw_key)
            continue

        if key in _BOOLEAN_KEYS:
            if not isinstance(value, bool):
                raise argparse.ArgumentTypeError(f"Configuration key '{raw_key}' must be true or false, got {value!r}")
        elif key == "log_level":
            if not isinstance(value, str) or value.upper() not in LOG_LEVEL_CHOICES:
                raise argparse.ArgumentTypeError(
                    f"Configuration key 'log_level' must be one of {', '.join(LOG_LEVEL_CHOICES)}, got {value!r}"
                )
            value = value.upper()
        elif not isinstance(value, str):
            raise argparse.ArgumentTypeError(f"Configuration key '{raw_key}' must be a string, got {value!r}")

        validated[key] = value
    return validated


def apply_config_to_parser(parser: argparse.ArgumentParser, config_path: Path | str) -> Dict[str, Any]:
    """Load a config file and install its values as parser defaults.

    Returns
    -------
    dict
        The validated values that were applied

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be loaded or holds invalid values

    """
    config = validate_config(load_config_file(config_path))
    if config:
        parser.set_defaults(**config)
        logger.debug("Applied configuration from %s: %s", config_path, sorted(config))
    return config
