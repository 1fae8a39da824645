"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included.

    The stream is read ``buffer_size`` units at a time until a newline is
    buffered or the stream is exhausted. The last line has no newline when
    the stream does not end with one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _find_newline(data: AnyStr) -> int:
        return data.find("\n" if isinstance(data, str) else b"\n")

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when the stream has no more data."""
        while self._pending is None or self._find_newline(self._pending) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            self._pending = None
            return None
        index = self._find_newline(self._pending)
        end = len(self._pending) if index < 0 else index + 1
        line = self._pending[:end]
        rest = self._pending[end:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> "LineReader[AnyStr]":
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line