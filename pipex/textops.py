"""String searching, slicing, splitting and comparison helpers."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]
_NUL = "\0"


def _as_char(c: str | int) -> str:
    """Return *c* as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _codes(text: str | BytesLike) -> list[int]:
    """Return the character codes of *text*, up to its first NUL."""
    if isinstance(text, str):
        codes = [ord(ch) for ch in text]
    elif isinstance(text, (bytes, bytearray, memoryview)):
        codes = list(bytes(text))
    else:
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    if 0 in codes:
        codes = codes[: codes.index(0)]
    return codes


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty fields."""
    sep = _as_char(sep)
    if sep == _NUL:
        return [text] if text else []
    return [part for part in text.split(sep) if part]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in *charset* from both ends of *text*.

    With no charset the text is returned unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end of the text gives an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of *needle* lying wholly within the first *limit* characters.

    An empty needle is found at index 0. Returns None when absent.
    """
    _require_non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of *needle*, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def strncmp(a: str | BytesLike, b: str | BytesLike, n: int) -> int:
    """Compare at most *n* characters, stopping at the end of either text.

    Returns the difference of the first differing character codes, the end
    of a text counting as code 0, or 0 when the compared parts are equal.
    """
    _require_non_negative("n", n)
    left, right = _codes(a), _codes(b)
    for i in range(n):
        ca = left[i] if i < len(left) else 0
        cb = right[i] if i < len(right) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    _require_non_negative("n", n)
    left, right = bytes(memoryview(a)), bytes(memoryview(b))
    if n > len(left) or n > len(right):
        raise ValueError(f"cannot compare {n} bytes: a buffer is shorter")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def strchr(text: str, c: str | int) -> int | None:
    """Index of the first *c* in *text*, or None.

    Searching for NUL finds the end of the text.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Index of the last *c* in *text*, or None.

    Searching for NUL finds the end of the text.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index