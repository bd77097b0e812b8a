#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/renderers/__init__.py
"""Renderers for Box Notes document trees."""

from boxnote2md.renderers.base import BaseRenderer
from boxnote2md.renderers.markdown import MarkdownRenderer, RenderContext

__all__ = ["BaseRenderer", "MarkdownRenderer", "RenderContext"]
