"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from pipex.chars import itoa

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_INT_SIGN = 1 << 31


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0 and isinstance(value, int) and not isinstance(value, bool):
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format(address & _ULONG_MASK, "x")


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in ("d", "i"):
        return itoa(_signed32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_as_int(value, conversion) & _UINT_MASK)
    if conversion == "x":
        return format(_as_int(value, conversion) & _UINT_MASK, "x")
    if conversion == "X":
        return format(_as_int(value, conversion) & _UINT_MASK, "X")
    if conversion == "p":
        return _pointer(value)
    raise AssertionError(f"unhandled conversion {conversion!r}")


_TAKES_ARGUMENT = frozenset("csdiuxXp")


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by *args*.

    An unknown conversion produces nothing and consumes no argument; a lone
    trailing ``%`` produces nothing. Integers wrap like their C counterparts.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, "")
        if conversion == "%":
            pieces.append("%")
        elif conversion in _TAKES_ARGUMENT:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{conversion}") from None
            pieces.append(_convert(conversion, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)