"""Reading a byte stream one line at a time."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import BinaryIO

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Read newline-terminated lines from a file descriptor or binary stream.

    Data is pulled in chunks of *buffer_size* bytes. Each line keeps its
    trailing newline; the last line of the stream may lack one.
    """

    def __init__(self, source: int | BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._buffer_size = buffer_size
        self._pending = bytearray()
        self._read: Callable[[int], bytes]
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"invalid file descriptor: {source}")
            self._read = lambda size: os.read(source, size)
        else:
            self._read = source.read

    def read_line(self) -> bytes | None:
        """Return the next line, or None when the stream has no more data."""
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return line
            chunk = self._read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line = bytes(self._pending)
        self._pending.clear()
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line