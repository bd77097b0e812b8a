"""Pytest configuration and shared fixtures for the boxnote2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from boxnote2md.renderers.markdown import MarkdownRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """Provide a fresh Markdown renderer."""
    return MarkdownRenderer()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample .boxnote documents and expected output."""
    return FIXTURES_DIR


@pytest.fixture
def write_boxnote(tmp_path):
    """Write a ``.boxnote`` file into ``tmp_path`` and return its path.

    Accepts a decoded document (dumped as JSON) or raw text.
    """

    def _write(name: str, content) -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_cli_env(tmp_path, monkeypatch):
    """Run the CLI from an empty directory with no BOXNOTE2MD_* variables set."""
    for key in list(os.environ):
        if key.startswith("BOXNOTE2MD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = list(root_logger.handlers)
    yield tmp_path
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
