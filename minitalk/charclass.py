"""ASCII character classification and case conversion.

Each function takes either an integer character code or a one-character
string. Classifiers return a bool. Case converters return the same kind
of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(code: CharLike) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int or a single character, got {type(code).__name__}")
    return code


def isalpha(code: CharLike) -> bool:
    """True for ASCII letters."""
    value = _code(code)
    return value in _UPPER or value in _LOWER


def isdigit(code: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return _code(code) in _DIGITS


def isalnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(code) or isdigit(code)


def isascii(code: CharLike) -> bool:
    """True for codes 0 through 127."""
    return _code(code) in _ASCII


def isprint(code: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return _code(code) in _PRINTABLE


def _convert(code: CharLike, source: range, shift: int) -> CharLike:
    value = _code(code)
    if value in source:
        value += shift
    return chr(value) if isinstance(code, str) else value


def tolower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    return _convert(code, _UPPER, _CASE_OFFSET)


def toupper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    return _convert(code, _LOWER, -_CASE_OFFSET)