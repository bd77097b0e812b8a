#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for boxnote2md.

This module centralizes the fixed tables used by the renderer (mark ordering,
ignored marks, Yakumono characters) and the defaults used by the CLI and the
file conversion helpers.

Constants are organized by category:
1. Type Definitions
2. Markdown Rendering
3. File Handling
4. CLI and Configuration
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisSymbol = Literal["*", "_"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Markdown Rendering
# =============================================================================

# Presentation-only marks; they never affect the output
IGNORED_MARK_TYPES: frozenset[str] = frozenset({"author_id", "font_size", "font_color", "highlight"})

# Outer -> inner wrapping order for marks
MARK_ORDER: dict[str, int] = {
    "link": 0,
    "strong": 1,
    "em": 2,
    "underline": 3,
    "strikethrough": 4,
    "code": 5,
}
UNKNOWN_MARK_ORDER = 100

DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
NESTED_EMPHASIS_SYMBOL: EmphasisSymbol = "_"

BULLET_LIST_PREFIX = "- "
ORDERED_LIST_PREFIX = "1. "
CHECKED_ITEM_PREFIX = "- [x] "
UNCHECKED_ITEM_PREFIX = "- [ ] "
LIST_INDENT_STEP = 2

HARD_BREAK = "\\\n"
HORIZONTAL_RULE = "---"
BLOCK_SEPARATOR = "\n\n"
BLOCKQUOTE_PREFIX = "> "
TABLE_CELL_BREAK = "<br>"
TABLE_SEPARATOR_CELL = "---"

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

ZERO_WIDTH_SPACE = "\u200b"

# CJK punctuation, quotation and dash characters (plus ASCII ! and ?) that
# need zero-width space padding when they sit at an emphasis boundary
YAKUMONO_CHARACTERS: frozenset[str] = frozenset(
    "、。，．｡､･・"
    "：；！？!?"
    "「」『』（）［］【】"
    "〈〉《》“”‘’"
    "…‥〜～ー—―‐‑ｰ"
)

# =============================================================================
# File Handling
# =============================================================================

BOXNOTE_EXTENSION = ".boxnote"
MARKDOWN_EXTENSION = ".md"
DEFAULT_ENCODING = "utf-8"
# Invalid input bytes become U+FFFD instead of failing the whole note
DECODE_ERRORS = "replace"

# Reported when a tree is nested deeper than the interpreter can recurse
NESTING_TOO_DEEP = "document nesting too deep"

# =============================================================================
# CLI and Configuration
# =============================================================================

ENV_PREFIX = "BOXNOTE2MD_"
CONFIG_ENV_VAR = "BOXNOTE2MD_CONFIG"
CONFIG_FILENAMES = [".boxnote2md.toml", ".boxnote2md.yaml", ".boxnote2md.yml", ".boxnote2md.json"]
PYPROJECT_TOOL_SECTION = "boxnote2md"
CONFIG_KEYS: frozenset[str] = frozenset({"force", "no_title", "output_dir", "rich", "log_level"})

DEFAULT_LOG_LEVEL: LogLevelName = "WARNING"
OVERWRITE_PROMPT = "overwrite {path}? [y/N]: "
OVERWRITE_ANSWERS: frozenset[str] = frozenset({"y", "yes"})
