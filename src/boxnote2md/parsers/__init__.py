#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input parsers producing Box Notes document trees."""

from boxnote2md.parsers.boxnote import BoxNoteParser, is_blank_input

__all__ = ["BoxNoteParser", "is_blank_input"]
