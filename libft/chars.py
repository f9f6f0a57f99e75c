"""ASCII character classification and case conversion.

Every function takes either a single-character string or an integer
character code. The predicates return ``bool``. The converters return a
value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_upper(c: Char) -> bool:
    """True for 'A' to 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def is_lower(c: Char) -> bool:
    """True for 'a' to 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    return is_upper(c) or is_lower(c)


def is_digit(c: Char) -> bool:
    """True for '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space included (32 to 126)."""
    return 32 <= _code(c) < 127


def is_space(c: Char) -> bool:
    """True for space and the control characters 9 to 13."""
    code = _code(c)
    return 9 <= code <= 13 or code == ord(" ")


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    if is_lower(c):
        return _same_kind(c, _code(c) - ord("a") + ord("A"))
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    if is_upper(c):
        return _same_kind(c, _code(c) - ord("A") + ord("a"))
    return c


def to_lower_str(s: str) -> str:
    """Return ``s`` with its ASCII upper-case letters lower-cased."""
    return "".join(to_lower(ch) for ch in s)