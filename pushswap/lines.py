"""Line-by-line reading from streams and file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr, Generic, Protocol

BUFFER_SIZE = 42
MAX_FD = 1024


class _Readable(Protocol):
    def read(self, size: int) -> Any: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a stream in chunks of buffer_size.

    Each line keeps its trailing newline; the final line may lack one.
    Works with binary streams (yielding bytes) and text streams (yielding str).
    """

    def __init__(self, stream: _Readable, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._separator: Any = None

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and self._separator in pending

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing left."""
        while not self._has_line():
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            if self._separator is None:
                self._separator = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            return None
        index = pending.find(self._separator)
        end = index + 1 if index >= 0 else len(pending)
        line, self._pending = pending[:end], pending[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)


class _DescriptorStream:
    """Minimal readable wrapper over an operating-system file descriptor."""

    def __init__(self, fd: int) -> None:
        self.fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)


_readers: dict[int, LineReader[bytes]] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from file descriptor fd.

    State is kept per descriptor between calls. None is returned at end of
    input, on a read error, or for a descriptor outside 0..MAX_FD-1.
    """
    if not 0 <= fd < MAX_FD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(_DescriptorStream(fd), BUFFER_SIZE)
    try:
        line = reader.read_line()
    except OSError:
        return None
    if line is None:
        del _readers[fd]
    return line