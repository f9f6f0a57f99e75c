"""A small ``printf`` supporting the ``c s d i u x X p %`` conversions.

Any other character after ``%`` is consumed and produces nothing, and a
``%`` at the very end of the format is dropped. The format ends at its
first NUL character. Extra arguments are ignored; too few raise
``TypeError``.
"""

from __future__ import annotations

import io
from typing import Any, Callable, Iterator, Optional, TextIO

from libft.output import (
    HEX_LOWER,
    HEX_UPPER,
    put_addr_hex,
    put_char,
    put_nbr,
    put_str,
    put_unbr,
    put_unbr_base,
)

_Writer = Callable[[Any, Optional[TextIO]], int]

_CONVERSIONS: dict[str, _Writer] = {
    "c": put_char,
    "s": put_str,
    "d": put_nbr,
    "i": put_nbr,
    "u": put_unbr,
    "x": lambda value, stream: put_unbr_base(value, HEX_LOWER, stream),
    "X": lambda value, stream: put_unbr_base(value, HEX_UPPER, stream),
    "p": put_addr_hex,
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for the %{spec} conversion") from None


def _render(fmt: str, args: tuple[Any, ...], stream: TextIO) -> int:
    if fmt is None:
        raise TypeError("format must not be None")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    end = fmt.find("\0")
    if end >= 0:
        fmt = fmt[:end]
    arguments = iter(args)
    chars = iter(fmt)
    count = 0
    for ch in chars:
        if ch != "%":
            count += put_char(ch, stream)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            count += put_char("%", stream)
            continue
        writer = _CONVERSIONS.get(spec)
        if writer is not None:
            count += writer(_next_argument(arguments, spec), stream)
    return count


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    buffer = io.StringIO()
    _render(fmt, args, buffer)
    return buffer.getvalue()


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default)
    and return the number of characters written.
    """
    text = format_string(fmt, *args)
    if stream is None:
        import sys

        stream = sys.stdout
    stream.write(text)
    return len(text)