"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Predicates return a bool; the case converters return the same kind of value
they were given.
"""

from __future__ import annotations

_SPACE_CODES = frozenset(map(ord, " \t\r\n\v\f\0"))


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for a decimal digit ``0``-``9``."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or decimal digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: int | str) -> bool:
    """True for a code between 0 and 127 inclusive."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def isspace(c: int | str) -> bool:
    """True for ASCII whitespace; the NUL character also counts."""
    return _code(c) in _SPACE_CODES


def toupper(c: int | str) -> int | str:
    """Convert a lower-case ASCII letter to upper case; leave anything else."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Convert an upper-case ASCII letter to lower case; leave anything else."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code