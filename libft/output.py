"""Writing characters, strings and numbers to text streams.

Every function writes to ``stream``, which defaults to standard output at
the time of the call, and returns the number of characters it wrote. As
elsewhere in the package, a string ends at its first NUL character.
Integers are taken as 32-bit C values: signed ones wrap to the signed
range and unsigned ones to the unsigned range.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

NULL_STRING = "(null)"
NULL_ADDRESS = "(nil)"
ADDRESS_PREFIX = "0x"

_UINT32_MASK = 0xFFFFFFFF
_UINTPTR_MASK = 2**64 - 1


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _as_int32(n: int) -> int:
    n &= _UINT32_MASK
    return n - 2**32 if n >= 2**31 else n


def _as_uint32(n: int) -> int:
    return n & _UINT32_MASK


def _digits(value: int, charset: str) -> str:
    """``value`` (not negative) written with the digits of ``charset``."""
    base = len(charset)
    if value < base:
        return charset[value]
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(charset[remainder])
    return "".join(reversed(digits))


def _write(text: str, stream: Optional[TextIO]) -> int:
    _out(stream).write(text)
    return len(text)


def _check_charset(charset: str) -> None:
    if len(charset) < 2:
        raise ValueError("a base needs at least two digits")


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character; an integer code is taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return _write(c, stream)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return _write(chr(c & 0xFF), stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``; ``None`` is written as ``(null)``."""
    if s is None:
        return _write(NULL_STRING, stream)
    return _write(_terminated(s), stream)


def put_err(msg: Optional[str]) -> int:
    """Write ``msg`` to standard error; ``None`` writes nothing."""
    if msg is None:
        return 0
    return _write(_terminated(msg), sys.stderr)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline; ``None`` writes nothing."""
    if s is None:
        return 0
    return _write(_terminated(s) + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return put_nbr_base(n, DECIMAL, stream)


def put_unbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit integer in decimal."""
    return put_unbr_base(n, DECIMAL, stream)


def put_nbr_base(n: int, charset: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in the base whose digits are ``charset``.

    An empty or ``None`` charset writes nothing.
    """
    if not charset:
        return 0
    _check_charset(charset)
    value = _as_int32(n)
    sign = "-" if value < 0 else ""
    return _write(sign + _digits(abs(value), charset), stream)


def put_unbr_base(n: int, charset: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit integer in the base whose digits are ``charset``.

    An empty or ``None`` charset writes nothing.
    """
    if not charset:
        return 0
    _check_charset(charset)
    return _write(_digits(_as_uint32(n), charset), stream)


def put_addr_hex(addr: int, stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` and lower-case hex; zero is ``(nil)``."""
    value = addr & _UINTPTR_MASK
    if value == 0:
        return _write(NULL_ADDRESS, stream)
    return _write(ADDRESS_PREFIX + _digits(value, HEX_LOWER), stream)