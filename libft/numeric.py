"""Integer parsing, formatting and small numeric helpers."""

from __future__ import annotations

import math

from libft.chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(s: str | None) -> int:
    """Parse a leading decimal integer as C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text with no digits yields
    0, as does ``None``. The result wraps to a 32-bit signed integer.
    """
    if s is None:
        return 0
    pos = 0
    length = len(s)
    while pos < length and is_space(s[pos]):
        pos += 1
    sign = 1
    if pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(s[pos]):
        result = result * 10 + (ord(s[pos]) - ord("0"))
        pos += 1
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def nbrlen(n: int) -> int:
    """Number of characters in the decimal form of ``n``, sign included."""
    return nbrlen_base(n, 10)


def nbrlen_base(n: int, base: int) -> int:
    """Number of characters in the form of ``n`` in ``base``, sign included.

    A base of zero or less gives 0.
    """
    if base <= 0:
        return 0
    length = 1
    if n < 0:
        n = -n
        length += 1
    if base == 1:
        if n >= 1:
            raise ValueError("base 1 cannot represent a non-zero number")
        return length
    while n >= base:
        length += 1
        n //= base
    return length


def to_radian(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * math.pi / 180