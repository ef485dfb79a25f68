"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import overload

_INT_BITS = 32
_INT_MODULUS = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_WHITESPACE = frozenset(chr(code) for code in (*range(9, 14), 32))


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, wrapping on overflow."""
    value %= _INT_MODULUS
    return value - _INT_MODULUS if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace (tab through carriage return, and space) is skipped,
    a single optional sign is accepted, and digits are read until the first
    non-digit. Text without digits gives 0. The result wraps like a signed
    32-bit integer.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    number = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...
def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...
def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code