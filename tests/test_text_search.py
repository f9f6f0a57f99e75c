import pytest

from libft.text_search import (
    strchr,
    strcmp,
    strcpy,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")


def test_strlen_none_and_empty():
    assert strlen(None) == 0
    assert strlen("") == 0


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == 2
    assert strlen(bytearray(b"xyz\0\0\0")) == 3


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0


def test_strcmp_difference():
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("abd", "abc") == ord("d") - ord("c")


def test_strcmp_prefix():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_unsigned_bytes():
    assert strcmp(b"\xff", b"a") > 0


def test_strcmp_none():
    assert strcmp(None, "abc") == 0
    assert strcmp("abc", None) == 0


def test_strncmp_within_limit():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_past_end():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 10) == -ord("c")


def test_strchr_first_occurrence():
    assert strchr("hello", "l") == 2
    assert strchr("hello", "z") is None


def test_strchr_nul_gives_length():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_integer_wraps():
    assert strchr("hello", 256 + ord("h")) == 0


def test_strchr_none():
    assert strchr(None, "a") is None


def test_strrchr_last_occurrence():
    assert strrchr("hello", "l") == 3
    assert strrchr("hello", "h") == 0
    assert strrchr("hello", "z") is None


def test_strrchr_nul_gives_length():
    assert strrchr("hello", "\0") == len("hello")


def test_strchr_and_strrchr_agree_on_single_occurrence():
    s = "abcdef"
    for ch in s:
        assert strchr(s, ch) == strrchr(s, ch) == s.index(ch)


def test_strnstr_found():
    assert strnstr("Foo Bar Baz", "Bar", 11) == 4


def test_strnstr_limit_cuts_match():
    assert strnstr("Foo Bar Baz", "Bar", 6) is None
    assert strnstr("Foo Bar Baz", "Bar", 7) == 4


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length_and_long_needle():
    assert strnstr("abc", "a", 0) is None
    assert strnstr("abc", "abcd", 3) is None
    assert strnstr(None, "a", 3) is None


def test_strnstr_bytes():
    assert strnstr(b"xxneedle", b"needle", 8) == 2


def test_strlcpy_full_copy():
    buf = bytearray(10)
    assert strlcpy(buf, "hello", 10) == 5
    assert buf[:6] == b"hello\0"


def test_strlcpy_truncates():
    buf = bytearray(b"zzzzzzzz")
    assert strlcpy(buf, "hello", 3) == 5
    assert buf[:3] == b"he\0"
    assert buf[3:] == b"zzzzz"


def test_strlcpy_size_zero_leaves_dst():
    buf = bytearray(b"keep")
    assert strlcpy(buf, "hello", 0) == 5
    assert buf == bytearray(b"keep")


def test_strlcpy_none_source():
    assert strlcpy(bytearray(4), None, 4) == 0


def test_strlcpy_size_past_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(3), "hello", 6)


def test_strlcat_appends():
    buf = bytearray(b"abc" + bytes(7))
    assert strlcat(buf, "def", 10) == 6
    assert buf[:7] == b"abcdef\0"


def test_strlcat_truncates():
    buf = bytearray(b"abc" + bytes(7))
    assert strlcat(buf, "def", 5) == 6
    assert buf[:5] == b"abcd\0"


def test_strlcat_size_below_dst_length():
    buf = bytearray(b"abc" + bytes(7))
    assert strlcat(buf, "def", 2) == 3 + 2
    assert buf[:4] == b"abc\0"


def test_strlcat_size_past_buffer():
    with pytest.raises(ValueError):
        strlcat(bytearray(b"ab\0"), "cd", 8)


def test_strcpy_round_trip():
    buf = bytearray(16)
    result = strcpy(buf, "copy me")
    assert result is buf
    assert strlen(buf) == len("copy me")
    assert strcmp(buf, b"copy me") == 0


def test_strcpy_too_small():
    with pytest.raises(ValueError):
        strcpy(bytearray(3), "abc")


def test_strcpy_none_source_returns_dst():
    buf = bytearray(b"same")
    assert strcpy(buf, None) is buf
    assert buf == bytearray(b"same")