#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for escaping, text manipulation and I/O."""
