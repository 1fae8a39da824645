"""A small formatted-output routine with the conversions c, s, p, d, i, u, x, X and %.

Numbers follow fixed-width C integer types: ``%d``, ``%i``, ``%u``, ``%x`` and
``%X`` take 32-bit values and ``%p`` takes a 64-bit address. Wider values
wrap. A ``%`` followed by any other character prints that character. A
lone ``%`` at the end of the format is dropped.
"""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .convert import itoa

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _require_int(value: object, conversion: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def format_hex(num: int, upper: bool = False) -> str:
    """Return ``num`` as an unsigned hexadecimal number without prefix."""
    text = f"{_require_int(num, 'x') & _MASK64:x}"
    return text.upper() if upper else text


def format_pointer(address: int) -> str:
    """Return ``address`` as ``0x`` followed by lower-case hexadecimal digits."""
    return "0x" + format_hex(_require_int(address, "p") & _MASK64)


def format_unsigned(num: int) -> str:
    """Return ``num`` as an unsigned 32-bit decimal number."""
    return f"{_require_int(num, 'u') & _MASK32:d}"


def _format_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_string(value: object) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _convert(conversion: str, args: Iterator[object]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return conversion
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string(value)
    if conversion == "p":
        return format_pointer(value)
    if conversion in "di":
        return itoa(_to_int32(_require_int(value, conversion)))
    if conversion == "u":
        return format_unsigned(value)
    return format_hex(_require_int(value, conversion) & _MASK32, conversion == "X")


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is not None:
            yield _convert(conversion, remaining)


def sprintf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: object, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)