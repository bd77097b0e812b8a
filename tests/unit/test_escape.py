#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for escaping and text layout helpers."""

import pytest

from boxnote2md.constants import ZERO_WIDTH_SPACE
from boxnote2md.utils.escape import (
    escape_link_text,
    escape_markdown_emphasis,
    escape_table_cell,
    max_consecutive_backticks,
    wrap_inline_code,
)
from boxnote2md.utils.text import (
    indent_all_lines,
    indent_continuation_lines,
    is_yakumono,
    pad_with_zero_width_space,
    prefix_lines,
)


@pytest.mark.unit
class TestEscapeMarkdownEmphasis:
    """Test escape_markdown_emphasis."""

    def test_default_symbol_escapes_asterisk(self):
        assert escape_markdown_emphasis("a*b_c") == "a\\*b_c"

    def test_underscore_symbol_without_strong(self):
        """Test that asterisks are left alone when neither delimiter uses them."""
        assert escape_markdown_emphasis("a*b_c", "_") == "a*b\\_c"

    def test_underscore_symbol_with_strong(self):
        assert escape_markdown_emphasis("a*b_c", "_", has_strong=True) == "a\\*b\\_c"

    def test_backslash_escaped_first(self):
        """Test that escape backslashes are not themselves re-escaped."""
        assert escape_markdown_emphasis("\\*") == "\\\\\\*"

    def test_tilde_only_with_strikethrough(self):
        assert escape_markdown_emphasis("~") == "~"
        assert escape_markdown_emphasis("~", has_strikethrough=True) == "\\~"

    def test_other_characters_untouched(self):
        assert escape_markdown_emphasis("# [x](y) `z` | <u>") == "# [x](y) `z` | <u>"


@pytest.mark.unit
class TestSimpleEscapes:
    """Test link text and table cell escaping."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("plain", "plain"),
            ("[a]", "\\[a\\]"),
            ("f(x)", "f\\(x\\)"),
            ("a\\b", "a\\\\b"),
            ("*_~", "*_~"),
        ],
    )
    def test_escape_link_text(self, value, expected):
        assert escape_link_text(value) == expected

    def test_escape_table_cell(self):
        assert escape_table_cell("a|b||c") == "a\\|b\\|\\|c"


@pytest.mark.unit
class TestInlineCode:
    """Test backtick fencing."""

    @pytest.mark.parametrize(
        "value,expected",
        [("", 0), ("abc", 0), ("`", 1), ("a``b`", 2), ("```x``", 3)],
    )
    def test_max_consecutive_backticks(self, value, expected):
        assert max_consecutive_backticks(value) == expected

    def test_wrap_plain(self):
        assert wrap_inline_code("x = 1") == "`x = 1`"

    def test_wrap_no_space_padding(self):
        """Test that code starting with a backtick is fenced without padding."""
        assert wrap_inline_code("`a") == "``" + "`a" + "``"


@pytest.mark.unit
class TestYakumono:
    """Test CJK punctuation detection and padding."""

    @pytest.mark.parametrize("char", ["、", "。", "「", "」", "！", "？", "!", "?", "…", "ー", "（"])
    def test_is_yakumono(self, char):
        assert is_yakumono(char)

    @pytest.mark.parametrize("char", ["a", "漢", "あ", ".", ",", " ", "*"])
    def test_is_not_yakumono(self, char):
        assert not is_yakumono(char)

    def test_pad_both_ends(self):
        assert pad_with_zero_width_space("「x」") == f"{ZERO_WIDTH_SPACE}「x」{ZERO_WIDTH_SPACE}"

    def test_pad_leading_only(self):
        assert pad_with_zero_width_space("！x") == f"{ZERO_WIDTH_SPACE}！x"

    def test_no_pad_for_plain_text(self):
        assert pad_with_zero_width_space("plain") == "plain"

    def test_empty_text(self):
        assert pad_with_zero_width_space("") == ""

    def test_single_yakumono_character(self):
        assert pad_with_zero_width_space("!") == f"{ZERO_WIDTH_SPACE}!{ZERO_WIDTH_SPACE}"


@pytest.mark.unit
class TestLineHelpers:
    """Test indentation and prefixing helpers."""

    def test_indent_continuation_lines(self):
        assert indent_continuation_lines("a\nb\nc", 3) == "a\n   b\n   c"

    def test_indent_continuation_single_line(self):
        assert indent_continuation_lines("a", 3) == "a"

    def test_indent_all_lines(self):
        assert indent_all_lines("a\n\nb", 2) == "  a\n  \n  b"

    def test_indent_all_lines_empty(self):
        assert indent_all_lines("", 2) == ""

    def test_prefix_lines(self):
        assert prefix_lines("a\n\nb", "> ") == "> a\n>\n> b"
