# libft

This is a small library of utilities with no dependencies. It covers ASCII characters, integers, byte buffers, NUL-terminated strings, a singly linked list and printf-style output.

## Modules

- **`libft.chars`** tests ASCII characters and changes their case: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `is_upper`, `is_lower`, `to_upper`, `to_lower` and `to_lower_str`.
  - Each function takes either a single-character string or an integer code.
  - The converters return a value of the same kind they were given.
- **`libft.numeric`** holds the integer helpers.
  - `atoi` parses an integer C-style: it skips leading whitespace, takes one optional sign, and wraps the result to 32 bits.
  - `itoa` formats a 32-bit signed integer. It raises `OverflowError` outside that range.
  - `nbrlen` and `nbrlen_base` give the number of characters in a number, sign included.
  - `to_radian` converts degrees to radians.
- **`libft.memory`** works on `bytearray` and `memoryview` buffers: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` and `realloc`.
  - `memchr` returns positions as indexes.
  - A length that reaches past the end of a buffer raises `ValueError`.
  - `calloc` raises `OverflowError` when the requested size does not fit.
- **`libft.text_search`** measures, compares and searches strings: `strlen`, `strcmp`, `strncmp`, `strchr`, `strrchr` and `strnstr`. It also copies them with a bound: `strlcpy`, `strlcat` and `strcpy`.
  - Strings may be `str` or bytes-like, and each one ends at its first NUL.
  - Search results are indexes, or `None` when nothing is found.
  - The copy functions write into a `bytearray`.
- **`libft.text_build`** builds new strings: `strdup`, `substr`, `strjoin`, `strnjoin`, `strtrim`, `split`, `strmapi` and `striteri`.
- **`libft.linkedlist`** provides `LinkedList`, made of `Node` cells.
  - It supports `len()`, iteration, `push_front`, `push_back`, `last`, `clear(delete)`, `for_each(f)` and `map(f, delete)`.
  - If `f` raises during `map`, the contents built so far are passed to `delete` and the exception propagates.
- **`libft.output`** writes to a text stream, which is standard output by default. Each function returns the number of characters it wrote.
  - `put_char`, `put_str` and `put_endl` write characters and strings. `put_str(None)` writes `(null)`.
  - `put_nbr`, `put_unbr`, `put_nbr_base` and `put_unbr_base` write 32-bit numbers in any digit set.
  - `put_addr_hex` writes an address as `0x` followed by hex digits, or `(nil)` for zero.
  - `put_err` writes to standard error.
- **`libft.printf`** provides `printf(fmt, *args, stream=None)` and `format_string(fmt, *args)`.
  - It supports `%c %s %d %i %u %x %X %p %%`.
  - Any other character after `%` is consumed and produces nothing.
  - Too few arguments raise `TypeError`.

## Installation

```
pip install .
```

## Examples

```python
from libft.numeric import atoi, itoa
from libft.text_build import split, strtrim
from libft.printf import format_string

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  a b  c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"
format_string("%s is %d (%x)", "n", 255, 255)   # "n is 255 (ff)"
```

```python
from libft.linkedlist import LinkedList

lst = LinkedList([1, 2, 3])
lst.push_front(0)
doubled = lst.map(lambda x: x * 2, lambda x: None)
list(doubled)              # [0, 2, 4, 6]
```

## What it does not do

The package has no helper for reading a file or stream one line at a time. Use Python's own file iteration for that. It also offers no command-line program.

## Running the tests

```
pip install .[test]
pytest
```