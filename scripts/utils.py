"""Shared utility functions for format parsers.

This module provides the numeric-literal helpers used across the interval
and motif parsers so every field is converted with the same rules.
"""

import math
import re
from typing import Any

INTEGER_PATTERN = re.compile(r"[+-]?\d+")
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_int(text: str) -> int:
    """Parse text as an integer, accepting only an optional sign and digits.

    Unlike ``int()``, surrounding whitespace and digit-group underscores
    are rejected.

    Raises:
        ValueError: If text is not an integer literal

    Examples:
        >>> parse_int("42")
        42
        >>> parse_int("-7")
        -7
        >>> parse_int("4.0")
        Traceback (most recent call last):
            ...
        ValueError: Not an integer: '4.0'
    """
    if not isinstance(text, str) or not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"Not an integer: {text!r}")
    return int(text)


def parse_number(text: str) -> int | float:
    """Parse a numeric literal, keeping integer form for integral text.

    Integral literals stay ``int`` so they render back without a trailing
    ``.0``; other decimal literals become ``float``. Only plain decimal
    and exponent notation is accepted: ``nan``, ``inf`` and digit-group
    underscores are rejected.

    Raises:
        ValueError: If text is not a decimal literal

    Examples:
        >>> parse_number("10")
        10
        >>> parse_number("5.30")
        5.3
        >>> parse_number("1e-3")
        0.001
    """
    if not isinstance(text, str) or not DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"Not a number: {text!r}")
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    return float(text)


def format_number(value: Any) -> str:
    """Render a number parsed by ``parse_number`` back to text.

    NaN renders as ``nan``; floats use their shortest round-tripping repr.

    Examples:
        >>> format_number(10)
        '10'
        >>> format_number(5.3)
        '5.3'
        >>> format_number(float("nan"))
        'nan'
    """
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    return repr(value) if isinstance(value, float) else str(int(value))


def split_fields(line: str, sep: str = "\t") -> list[str]:
    """Split a raw line into fields after dropping the line terminator."""
    return line.rstrip("\r\n").split(sep)


def partition(items, predicate) -> tuple[list, list]:
    """Split items into (matching, rest) in one pass, preserving order.

    Example:
        >>> partition([1, 2, 3, 4], lambda n: n % 2 == 0)
        ([2, 4], [1, 3])
    """
    matching, rest = [], []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest
