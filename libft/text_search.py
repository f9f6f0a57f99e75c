"""Measuring, comparing, searching and copying NUL-terminated strings.

Strings may be ``str`` or bytes-like. A string ends at its first NUL
character, or at its end if it holds none. Positions are returned as
indexes rather than pointers, and ``None`` stands for "not found".

The copying functions write into a ``bytearray`` destination. A ``str``
source is encoded as UTF-8 first. A size that reaches past the end of
the destination raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
Char = Union[str, int]


def _terminated(s: Text) -> Union[str, bytes]:
    """The part of ``s`` before its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        s = bytes(s)
        end = s.find(0)
    return s if end < 0 else s[:end]


def _codes(s: Text) -> list[int]:
    text = _terminated(s)
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def _target(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c & 0xFF


def _source_bytes(src: Text) -> bytes:
    if isinstance(src, str):
        src = src.encode("utf-8")
    return bytes(_terminated(src))


def strlen(s: Optional[Text]) -> int:
    """Length of ``s`` up to its first NUL; ``None`` has length 0."""
    if s is None:
        return 0
    return len(_terminated(s))


def strcmp(s1: Optional[Text], s2: Optional[Text]) -> int:
    """Difference between the first pair of characters that differ.

    The end of a string counts as a character of code 0. Returns 0 when
    the strings are equal or either is ``None``.
    """
    if s1 is None or s2 is None:
        return 0
    return strncmp(s1, s2, max(strlen(s1), strlen(s2)) + 1)


def strncmp(s1: Optional[Text], s2: Optional[Text], n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if s1 is None or s2 is None or n <= 0:
        return 0
    a = _codes(s1) + [0]
    b = _codes(s2) + [0]
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strchr(s: Optional[Text], c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for NUL gives the length of ``s``. An integer ``c`` is taken
    modulo 256.
    """
    if s is None:
        return None
    target = _target(c)
    codes = _codes(s)
    if target == 0:
        return len(codes)
    try:
        return codes.index(target)
    except ValueError:
        return None


def strrchr(s: Optional[Text], c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL gives the length of ``s``."""
    if s is None:
        return None
    target = _target(c)
    codes = _codes(s)
    if target == 0:
        return len(codes)
    for index in range(len(codes) - 1, -1, -1):
        if codes[index] == target:
            return index
    return None


def strnstr(big: Optional[Text], little: Text, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first
    ``length`` characters of ``big``.

    An empty ``little`` is found at 0.
    """
    little_text = _terminated(little)
    if not little_text:
        return None if big is None else 0
    if length <= 0 or big is None:
        return None
    if len(little_text) > length:
        return None
    big_text = _terminated(big)
    if isinstance(big_text, str) != isinstance(little_text, str):
        raise TypeError("cannot search text and bytes in one another")
    end = min(length, len(big_text))
    index = big_text.find(little_text, 0, end)
    return None if index < 0 else index


def _check_size(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} reaches past the end of the destination ({len(dst)} bytes)")


def strlcpy(dst: Optional[bytearray], src: Optional[Text], size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes, NUL included.

    Returns the length of ``src``, so a result of ``size`` or more means
    the copy was cut short.
    """
    if src is None:
        return 0
    data = _source_bytes(src)
    if dst is None or size == 0:
        return len(data)
    _check_size(dst, size)
    count = min(len(data), size - 1)
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: Optional[bytearray], src: Optional[Text], size: int) -> int:
    """Append ``src`` to the string in ``dst`` so that the whole, NUL
    included, fits in ``size`` bytes.

    Returns the length of ``src`` plus the smaller of the length of
    ``dst`` and ``size``: the length the result would have had with room
    enough.
    """
    src_len = strlen(_source_bytes(src)) if src is not None else 0
    dst_len = strlen(dst)
    if size != 0 and dst is not None and src is not None:
        _check_size(dst, size)
        data = _source_bytes(src)
        count = max(0, min(len(data), size - 1 - dst_len))
        dst[dst_len:dst_len + count] = data[:count]
        end = dst_len + count
        if end < len(dst):
            dst[end] = 0
    return src_len + min(dst_len, size)


def strcpy(dst: Optional[bytearray], src: Optional[Text]) -> Optional[bytearray]:
    """Copy ``src`` and a closing NUL into ``dst``; return ``dst``."""
    if dst is None or src is None:
        return dst
    data = _source_bytes(src)
    if len(data) + 1 > len(dst):
        raise ValueError(
            f"{len(data) + 1} bytes do not fit in a destination of {len(dst)} bytes"
        )
    dst[:len(data)] = data
    dst[len(data)] = 0
    return dst