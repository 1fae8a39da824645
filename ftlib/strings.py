"""String searching, comparison, slicing, joining, trimming and splitting.

The search functions treat a NUL character as the end of the string. They
return an index into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _cstr(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.partition("\0")[0]


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the end of the string.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL finds the end of the string.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    hay = _cstr(haystack)
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = hay.find(pattern, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns zero when they match, otherwise the difference between the codes
    of the first differing characters; the end of a string counts as code 0.
    """
    _non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``s``."""
    _non_negative(n, "n")
    return s[:n]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    return s.strip(charset) if charset else s


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between separators."""
    delimiter = _char(sep)
    return [word for word in s.split(delimiter) if word]


def word_count(s: str, sep: int | str) -> int:
    """Return the number of words ``split`` would return."""
    delimiter = _char(sep)
    return sum(1 for word in s.split(delimiter) if word)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` for every character of ``chars``.

    A character that ``func`` returns replaces the one at that index;
    ``None`` leaves it unchanged.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = _char(replacement)