#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/ast/utils.py
"""Typed accessors for the open ``attrs`` mapping of nodes and marks.

Box Notes attribute values arrive straight from JSON, so an integer field
such as a heading level may be decoded as ``2`` or ``2.0``, and any field may
hold an unexpected type. These helpers return a default on a missing key or a
type mismatch instead of raising, so a single odd attribute never fails the
whole render.

Functions
---------
get_int_attr : Read an integer attribute (int or finite float)
get_bool_attr : Read a boolean attribute
get_string_attr : Read a string attribute

Examples
--------
    >>> get_int_attr({"level": 3.0}, "level")
    3
    >>> get_bool_attr({"checked": "true"}, "checked")
    False
    >>> get_string_attr({"href": "https://example.com"}, "href")
    'https://example.com'

"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def get_int_attr(attrs: Mapping[str, Any] | None, key: str, default: int = 0) -> int:
    """Read an integer attribute.

    Integers are returned as-is and finite floats are truncated toward zero.
    Booleans, strings, non-finite floats and missing keys yield ``default``.

    Parameters
    ----------
    attrs : Mapping or None
        Attribute mapping
    key : str
        Attribute name
    default : int, default = 0
        Value returned when the attribute is absent or not numeric

    Returns
    -------
    int
        The attribute value or ``default``

    """
    if not attrs:
        return default
    value = attrs.get(key)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return default


def get_bool_attr(attrs: Mapping[str, Any] | None, key: str) -> bool:
    """Return True only when the attribute is the boolean ``True``."""
    if not attrs:
        return False
    return attrs.get(key) is True


def get_string_attr(attrs: Mapping[str, Any] | None, key: str) -> str | None:
    """Return the attribute if it is a string, otherwise None."""
    if not attrs:
        return None
    value = attrs.get(key)
    return value if isinstance(value, str) else None


def clamp(value: int, min_value: int, max_value: int) -> int:
    """Clamp ``value`` into the inclusive range [min_value, max_value]."""
    return max(min_value, min(max_value, value))
