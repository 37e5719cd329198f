"""A small printf-style formatter supporting c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT32_HALF = 1 << 31
_BYTE_MASK = 0xFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    return ((value + _INT32_HALF) & _UINT32_MASK) - _INT32_HALF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & _BYTE_MASK)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    return str(_int32(_as_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT32_MASK)


def _hex_lower(value: Any) -> str:
    return f"{_as_int(value, 'x') & _UINT32_MASK:x}"


def _hex_upper(value: Any) -> str:
    return f"{_as_int(value, 'X') & _UINT32_MASK:X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return converter(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    Unknown conversions produce nothing; a lone trailing ``%`` is dropped.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)