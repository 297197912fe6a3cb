"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

BUFFER_SIZE = 128


def _newline(data: str | bytes | bytearray) -> str | bytes:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader(Generic[AnyStr]):
    """Returns successive lines of a text or binary stream.

    Lines keep their trailing newline; the last line may lack one. The
    stream is read ``buffer_size`` characters or bytes at a time, and only
    until a newline is available.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and _newline(pending) in pending

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        while not self._has_line():
            chunk = self._stream.read(self._size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(_newline(pending))
        end = len(pending) if end < 0 else end + 1
        line, self._pending = pending[:end], pending[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline."""
    yield from LineReader(stream, buffer_size)