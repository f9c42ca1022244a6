"""Signed 32-bit integer parsing for line-oriented input.

Accepted form after trimming surrounding whitespace: an optional leading
``-`` followed by one or more ASCII digits.  ``+``, underscores, inner
spaces, and non-ASCII digits are rejected even though ``int()`` would
take them.
"""

from __future__ import annotations

import re
from enum import StrEnum

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_I32_PATTERN = re.compile(r"-?[0-9]+")


class ParseFailure(StrEnum):
    """Why a line was not a number."""

    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    OUT_OF_RANGE = "out_of_range"


class NumberParseError(ValueError):
    """Raised by :func:`parse_i32` for text that is not a 32-bit integer."""

    def __init__(self, text: str, reason: ParseFailure) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{text!r} is not a 32-bit integer ({reason})")


def in_i32_range(value: int) -> bool:
    return I32_MIN <= value <= I32_MAX


def parse_i32(text: str) -> int:
    """Parse *text* as a base-10 signed 32-bit integer.

    Examples:
        >>> parse_i32("  -42 ")
        -42
        >>> parse_i32("2147483648")
        Traceback (most recent call last):
        ...
        vecmin.domain.numbers.NumberParseError: '2147483648' is not a 32-bit integer (out_of_range)

    Raises:
        NumberParseError: With ``reason`` set to the failure category.
    """
    trimmed = text.strip()
    if not trimmed:
        raise NumberParseError(trimmed, ParseFailure.EMPTY)
    if _I32_PATTERN.fullmatch(trimmed) is None:
        raise NumberParseError(trimmed, ParseFailure.INVALID_DIGIT)
    value = int(trimmed)
    if not in_i32_range(value):
        raise NumberParseError(trimmed, ParseFailure.OUT_OF_RANGE)
    return value
