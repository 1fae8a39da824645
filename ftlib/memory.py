"""Byte-buffer primitives: filling, copying, searching and comparing.

Buffers written to are ``bytearray`` (or any mutable bytes-like object that
supports slice assignment). Buffers only read from may be any bytes-like
object. Lengths and offsets are checked against the buffers. A ``ValueError``
is raised where the access would run past the end.
"""

from __future__ import annotations

from typing import Optional

Buffer = "bytes | bytearray | memoryview"


def _as_bytes(data) -> bytes | bytearray:
    if isinstance(data, (bytes, bytearray)):
        return data
    return bytes(data)


def _check_span(buf, length: int, offset: int = 0, name: str = "buffer") -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if offset + length > len(buf):
        raise ValueError(
            f"{name} of size {len(buf)} is too small for {length} bytes at offset {offset}"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` as an unsigned byte."""
    _check_span(buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` objects of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_span(dst, length, name="destination")
    _check_span(src, length, name="source")
    dst[:length] = _as_bytes(src)[:length]
    return dst


def memccpy(dst: bytearray, src, stop: int, length: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` until ``stop`` has been copied.

    Returns the index in ``dst`` just after the copied ``stop`` byte, or
    ``None`` when ``stop`` is not among the first ``length`` bytes, in which
    case all ``length`` bytes have been copied.
    """
    _check_span(dst, length, name="destination")
    _check_span(src, length, name="source")
    data = _as_bytes(src)
    found = data.find(stop & 0xFF, 0, length)
    count = length if found < 0 else found + 1
    dst[:count] = data[:count]
    return None if found < 0 else count


def memmove(buf: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buf``; the two regions may overlap."""
    _check_span(buf, length, dst_offset, name="destination region")
    _check_span(buf, length, src_offset, name="source region")
    buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def memchr(data, value: int, length: int) -> Optional[int]:
    """Return the index of the first ``value`` byte among the first ``length``."""
    _check_span(data, length)
    index = _as_bytes(data).find(value & 0xFF, 0, length)
    return None if index < 0 else index


def memcmp(a, b, length: int) -> int:
    """Compare the first ``length`` bytes of ``a`` and ``b``.

    Returns zero when they are equal, otherwise the difference between the
    first two differing bytes.
    """
    _check_span(a, length, name="first buffer")
    _check_span(b, length, name="second buffer")
    first = _as_bytes(a)[:length]
    second = _as_bytes(b)[:length]
    return next((x - y for x, y in zip(first, second) if x != y), 0)


def cstrlen(buf) -> int:
    """Return the number of bytes before the first NUL, or the whole length."""
    data = _as_bytes(buf)
    index = data.find(0)
    return len(data) if index < 0 else index


def strlcpy(dst: bytearray, src, dstsize: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dst`` of capacity ``dstsize``.

    At most ``dstsize - 1`` bytes are copied and the result is NUL-terminated
    when ``dstsize`` is not zero. Returns the length of ``src``.
    """
    _check_span(dst, dstsize, name="destination")
    data = _as_bytes(src)
    len_src = cstrlen(data)
    if dstsize > 0:
        count = min(len_src, dstsize - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len_src


def strlcat(dst: bytearray, src, dstsize: int) -> int:
    """Append the NUL-terminated ``src`` to the string in ``dst``.

    At most ``dstsize - strlen(dst) - 1`` bytes are appended and the result is
    NUL-terminated. Returns the length the full concatenation would have had,
    or ``dstsize`` plus the length of ``src`` when ``dst`` holds no room.
    """
    _check_span(dst, dstsize, name="destination")
    data = _as_bytes(src)
    len_src = cstrlen(data)
    len_dst = cstrlen(dst)
    if dstsize <= len_dst:
        return dstsize + len_src
    count = min(len_src, dstsize - len_dst - 1)
    dst[len_dst:len_dst + count] = data[:count]
    dst[len_dst + count] = 0
    return len_dst + len_src