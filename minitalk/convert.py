"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32
_INT_SPAN = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)


def _wrap_int32(value: int) -> int:
    return (value + _INT_HALF) % _INT_SPAN - _INT_HALF


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text with no digits
    yields 0. The result wraps around like a 32-bit signed int.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1

    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1

    start = position
    while position < length and "0" <= text[position] <= "9":
        position += 1

    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal text of ``number``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return f"{number:d}"