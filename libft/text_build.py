"""Building new strings from existing ones.

These helpers work on ``str``. As elsewhere in the package, a string ends
at its first NUL character, or at its end if it holds none. Functions
that received a null pointer return ``None`` when given ``None``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union


def _terminated(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"{name} must be a single character")
    return c


def strdup(s: Optional[str]) -> Optional[str]:
    """A copy of ``s`` up to its first NUL."""
    if s is None:
        return None
    return _terminated(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from index ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    if s is None:
        return None
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _terminated(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; ``None`` if either is ``None``."""
    if s1 is None or s2 is None:
        return None
    return _terminated(s1) + _terminated(s2)


def strnjoin(s1: Optional[str], s2: Optional[str], n: int) -> Optional[str]:
    """``s1`` followed by at most ``n`` characters of ``s2``.

    Returns ``None`` only when both are ``None``; a single ``None`` is
    taken as an empty string.
    """
    if s1 is None and s2 is None:
        return None
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    head = _terminated(s1) if s1 is not None else ""
    tail = _terminated(s2) if s2 is not None else ""
    return head + tail[:n]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without the characters of ``charset`` at either end.

    A ``None`` charset trims nothing.
    """
    if s is None:
        return None
    text = _terminated(s)
    chars = _terminated(charset) if charset is not None else ""
    if not chars:
        return text
    return text.strip(chars)


def split(s: Optional[str], sep: str) -> Optional[list[str]]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    if s is None:
        return None
    _single_char(sep, "separator")
    text = _terminated(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """A new string made of ``f(index, char)`` for every character of ``s``.

    The result ends at the first NUL that ``f`` produces.
    """
    if s is None:
        return None
    mapped = "".join(
        _single_char(f(index, ch), "mapped value") for index, ch in enumerate(_terminated(s))
    )
    return _terminated(mapped)


CharSequence = Union[str, MutableSequence[str]]


def striteri(
    s: Optional[CharSequence], f: Callable[[int, str], Optional[str]]
) -> Optional[CharSequence]:
    """Call ``f(index, char)`` on every character of ``s``.

    When ``f`` returns a character, it replaces the one it was given. A
    mutable sequence of characters is changed in place and returned; a
    ``str`` gives a new string.
    """
    if s is None:
        return None
    if isinstance(s, str):
        chars = list(_terminated(s))
        _apply(chars, f)
        return "".join(chars)
    _apply(s, f)
    return s


def _apply(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    for index, ch in enumerate(list(chars)):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = _single_char(replacement, "replacement")