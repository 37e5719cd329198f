"""String searching, slicing and splitting helpers."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a single character, got {type(char).__name__}")
    return chr(char)


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, separator: CharLike) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    sep = _char(separator)
    if sep == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` within the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    or 0 if the compared parts are equal. The end of a string compares as
    a NUL character.
    """
    _non_negative(limit, "limit")
    for left, right in zip_longest(first[:limit], second[:limit], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            return 0
    return 0


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    wanted = _char(char)
    if wanted == _NUL:
        return len(text)
    index = text.find(wanted)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    wanted = _char(char)
    if wanted == _NUL:
        return len(text)
    index = text.rfind(wanted)
    return None if index < 0 else index