"""Writing characters, strings and integers straight to file descriptors."""

from __future__ import annotations

import os

from pipex.chars import itoa

_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of *data* to *fd*, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str | int, fd: int) -> None:
    """Write one character to *fd*.

    A string must hold exactly one character; an integer is written as a
    single byte and must lie in 0..255.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or a byte value, got bool")
    if isinstance(c, int):
        if not 0 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        _write_all(fd, bytes((c,)))
        return
    if not isinstance(c, str):
        raise TypeError(f"expected a character or a byte value, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode(_ENCODING))


def put_str_fd(s: str, fd: int) -> None:
    """Write *s* to *fd*, stopping at the first NUL character."""
    text = s.split("\0", 1)[0]
    _write_all(fd, text.encode(_ENCODING))


def put_endl_fd(s: str, fd: int) -> None:
    """Write *s* followed by a newline to *fd*."""
    text = s.split("\0", 1)[0]
    _write_all(fd, (text + "\n").encode(_ENCODING))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a signed 32-bit integer to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))