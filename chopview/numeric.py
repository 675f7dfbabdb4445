"""Signed integer and decimal scanning.

Grammar: an optional single ``+`` or ``-``, a run of ASCII digits, and for
floats an optional ``.`` followed by another digit run. Scanning stops at
the first code point that doesn't fit.

Each scanner works on ``text[start:end]`` without slicing it and returns
``(value, consumed, found_digit)``. Whether a scan that found no digits is
a failure (``chop_int``/``chop_float``) or a silent zero
(``to_int``/``to_float``) is up to the caller.
"""

from __future__ import annotations

from .constants import DECIMAL_POINT
from .segmenter import is_digit


def scan_sign(text: str, start: int, end: int) -> tuple[int, int]:
    if start < end:
        if text[start] == "-":
            return -1, start + 1
        if text[start] == "+":
            return 1, start + 1
    return 1, start


def scan_digits(text: str, start: int, end: int) -> tuple[int, int, int]:
    """Returns (value, position after the run, number of digits)."""
    value = 0
    i = start
    while i < end and is_digit(text[i]):
        value = value * 10 + (ord(text[i]) - 48)
        i += 1
    return value, i, i - start


def scan_int(text: str, start: int = 0, end: int | None = None) -> tuple[int, int, bool]:
    if end is None:
        end = len(text)
    sign, i = scan_sign(text, start, end)
    value, i, count = scan_digits(text, i, end)
    return value * sign, i - start, count > 0


def scan_float(text: str, start: int = 0, end: int | None = None) -> tuple[float, int, bool]:
    if end is None:
        end = len(text)
    sign, i = scan_sign(text, start, end)

    _, i, int_count = scan_digits(text, i, end)

    frac_count = 0
    if i < end and text[i] == DECIMAL_POINT:
        _, i, frac_count = scan_digits(text, i + 1, end)

    found_digit = int_count + frac_count > 0
    if not found_digit:
        return sign * 0.0, i - start, False
    # float() takes "7." and ".5", keeps -0.0 and overflows to inf
    return float(text[start:i]), i - start, True
