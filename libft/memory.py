"""Byte-buffer helpers working on ``bytearray`` and other writable buffers.

Offsets are returned as indexes rather than pointers. A length that
reaches past the end of a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(buf: ReadableBuffer, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"length {n} reaches past the end of the {name} ({len(buf)} bytes)")


def memset(buf: Optional[Buffer], c: int, n: int) -> Optional[Buffer]:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256).

    Returns ``buf``; a ``None`` buffer is returned as is.
    """
    if buf is None:
        return None
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Optional[Buffer], n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    if buf is None:
        return
    _check_length(buf, n)
    buf[:n] = bytes(n)


def memcpy(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``.

    Returns ``dest``. Nothing is copied when either buffer is ``None``.
    """
    if dest is None or src is None:
        return dest
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap.

    Returns ``dest``, or ``None`` when either buffer is ``None``.
    """
    if dest is None or src is None:
        return None
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: Optional[ReadableBuffer], c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (modulo 256) among the first ``n``.

    Returns ``None`` when there is no such byte or ``buf`` is ``None``.
    """
    if buf is None:
        return None
    _check_length(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Optional[ReadableBuffer], s2: Optional[ReadableBuffer], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of bytes that differ,
    or 0 when they all match, when ``n`` is 0 or a buffer is ``None``.
    """
    if s1 is None or s2 is None or n == 0:
        return 0
    _check_length(s1, n, "first buffer")
    _check_length(s2, n, "second buffer")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Raises ``OverflowError`` when the product does not fit in a size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes do not fit in a size")
    return bytearray(nmemb * size)


def realloc(buf: Optional[ReadableBuffer], old_size: int, new_size: int) -> bytearray:
    """Return a new zero-filled buffer of ``new_size`` bytes holding the
    first ``old_size`` bytes of ``buf``.
    """
    new_buf = calloc(new_size, 1)
    if buf is not None:
        if old_size > new_size:
            raise ValueError(f"old size {old_size} exceeds new size {new_size}")
        memcpy(new_buf, buf, old_size)
    return new_buf