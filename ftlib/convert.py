"""Conversion between integers and their decimal text."""

from __future__ import annotations

from itertools import takewhile

from .chars import isdigit

_INT64_MAX = (1 << 63) - 1
_MASK64 = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading optionally signed decimal number from ``text``.

    Leading whitespace is not skipped; parsing stops at the first non-digit.
    A magnitude beyond the signed 64-bit range gives -1 for a positive number
    and 0 for a negative one. Other results are wrapped into the signed
    32-bit range.
    """
    negative = False
    rest = text
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        rest = text[1:]
    result = 0
    for ch in takewhile(isdigit, rest):
        result = (result * 10 + ord(ch) - 48) & _MASK64
    if result > _INT64_MAX:
        return 0 if negative else -1
    return _to_int32(-result if negative else result)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return f"{n:d}"