"""Writing characters, strings and numbers to a text stream.

``stream`` defaults to standard output, looked up at call time.
"""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s:
        _target(stream).write(s)


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline."""
    putstr(s, stream)
    putchar("\n", stream)


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(f"{n:d}")