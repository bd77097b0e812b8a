#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for CLI logging setup, status output and input processing helpers."""

import argparse
import io
import json
import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from boxnote2md.cli.builder import EXIT_ERROR, EXIT_SUCCESS
from boxnote2md.cli.output import StatusReporter, should_use_rich_output
from boxnote2md.cli.processors import build_conversion_options, make_overwrite_prompt, process_files, process_stdin
from boxnote2md.exceptions import FileError
from boxnote2md.logging_utils import PLAIN_FORMAT, TRACE_FORMAT, configure_logging, resolve_log_level
from boxnote2md.options import ConversionOptions

NOTE = {"doc": {"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "hi"}]}]}}


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = list(root_logger.handlers)
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


@pytest.mark.unit
class TestConfigureLogging:
    """Test root logger configuration."""

    @pytest.mark.parametrize(
        "value,expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (logging.ERROR, logging.ERROR), ("bogus", logging.INFO)],
    )
    def test_resolve_log_level(self, value, expected):
        assert resolve_log_level(value) == expected

    def test_plain_handler(self, restore_root_logger):
        root_logger = configure_logging("INFO")

        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert type(handler) is logging.StreamHandler
        assert handler.formatter._fmt == PLAIN_FORMAT

    def test_trace_format(self, restore_root_logger):
        root_logger = configure_logging(logging.DEBUG, trace_mode=True)

        assert root_logger.handlers[0].formatter._fmt == TRACE_FORMAT

    def test_rich_handler(self, restore_root_logger):
        root_logger = configure_logging("WARNING", use_rich=True)

        assert isinstance(root_logger.handlers[0], RichHandler)

    def test_existing_handlers_are_replaced(self, restore_root_logger):
        configure_logging("INFO")
        root_logger = configure_logging("INFO")

        assert len(root_logger.handlers) == 1

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "run.log"

        root_logger = configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("boxnote2md.test").info("hello file")

        assert len(root_logger.handlers) == 2
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, restore_root_logger, tmp_path):
        root_logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))

        assert len(root_logger.handlers) == 1


@pytest.mark.unit
@pytest.mark.cli
class TestStatusOutput:
    """Test status lines and rich detection."""

    def test_plain_lines(self):
        stream = io.StringIO()
        reporter = StatusReporter(stream=stream)

        reporter.ok("a.boxnote")
        reporter.error("b.boxnote", "missing doc node")

        assert stream.getvalue() == "OK: a.boxnote\nERROR: b.boxnote: missing doc node\n"

    def test_rich_lines_keep_brackets(self):
        """Test that markup-like text in paths and messages is printed literally."""
        stream = io.StringIO()
        reporter = StatusReporter(use_rich=True, stream=stream)

        reporter.ok("[draft].boxnote")
        reporter.error("[x].boxnote", "failed [bad]")

        output = stream.getvalue()
        assert "[draft].boxnote" in output
        assert "[x].boxnote" in output
        assert "failed [bad]" in output

    def test_no_rich_by_default(self):
        assert should_use_rich_output(argparse.Namespace(rich=False, force_rich=False), FakeTTY()) is False

    def test_rich_requires_tty(self):
        args = argparse.Namespace(rich=True, force_rich=False)

        assert should_use_rich_output(args, io.StringIO()) is False
        assert should_use_rich_output(args, FakeTTY()) is True

    def test_force_rich(self):
        assert should_use_rich_output(argparse.Namespace(rich=False, force_rich=True), io.StringIO()) is True


@pytest.mark.unit
@pytest.mark.cli
class TestProcessors:
    """Test the stdin and file processing helpers."""

    def test_build_conversion_options(self, tmp_path):
        args = argparse.Namespace(force=True, no_title=True, output_dir=str(tmp_path))

        assert build_conversion_options(args) == ConversionOptions(force=True, include_title=False, output_dir=tmp_path)

    def test_build_conversion_options_without_output_dir(self):
        args = argparse.Namespace(force=False, no_title=False, output_dir=None)

        assert build_conversion_options(args) == ConversionOptions()

    @pytest.mark.parametrize("answer,expected", [("y\n", True), ("Yes\n", True), ("no\n", False), ("", False)])
    def test_overwrite_prompt(self, answer, expected):
        err = io.StringIO()
        confirm = make_overwrite_prompt(stdin=io.StringIO(answer), stderr=err)

        assert confirm(Path("out.md")) is expected
        assert err.getvalue() == "overwrite out.md? [y/N]: "

    def test_overwrite_prompt_read_failure(self):
        class BrokenStdin:
            def readline(self):
                raise OSError("closed")

        confirm = make_overwrite_prompt(stdin=BrokenStdin(), stderr=io.StringIO())

        with pytest.raises(FileError, match="failed to read overwrite confirmation"):
            confirm(Path("out.md"))

    def test_process_stdin(self):
        out, err = io.StringIO(), io.StringIO()

        assert process_stdin(io.StringIO(json.dumps(NOTE)), out, err) == EXIT_SUCCESS
        assert out.getvalue() == "hi"
        assert err.getvalue() == ""

    def test_process_stdin_error(self):
        out, err = io.StringIO(), io.StringIO()

        assert process_stdin(io.StringIO("[]"), out, err) == EXIT_ERROR
        assert out.getvalue() == ""
        assert err.getvalue() == "failed to parse JSON\n"

    def test_process_files(self, write_boxnote):
        good = write_boxnote("good.boxnote", NOTE)
        bad = write_boxnote("bad.boxnote", "{")
        stream = io.StringIO()

        result = process_files([str(good), str(bad)], ConversionOptions(), StatusReporter(stream=stream))

        assert result == EXIT_ERROR
        assert stream.getvalue() == f"OK: {good}\nERROR: {bad}: failed to parse JSON\n"
        assert good.with_name("good.md").read_text(encoding="utf-8") == "# good\n\nhi"

    def test_process_files_all_ok(self, write_boxnote):
        files = [str(write_boxnote(f"n{i}.boxnote", NOTE)) for i in range(3)]

        assert process_files(files, ConversionOptions(), StatusReporter(stream=io.StringIO())) == EXIT_SUCCESS
