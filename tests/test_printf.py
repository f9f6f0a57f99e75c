import io

import pytest

from libft.printf import format_string, printf


def test_plain_text_is_copied():
    assert format_string("no conversions here") == "no conversions here"


def test_decimal_and_string():
    assert format_string("%d %s", 42, "hi") == f"{42} hi"


def test_i_matches_d():
    assert format_string("%i", -17) == format_string("%d", -17) == str(-17)


def test_char_from_code_and_string():
    assert format_string("%c%c", 65, "b") == chr(65) + "b"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_pointer_nil_and_hex():
    assert format_string("%p", 0) == "(nil)"
    out = format_string("%p", 0xABC)
    assert out.startswith("0x")
    assert int(out, 16) == 0xABC


def test_hex_lower_and_upper():
    assert format_string("%x", 255) == format(255, "x")
    assert format_string("%X", 255) == format(255, "X")


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 2**32 - 1


def test_unknown_conversion_is_dropped():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_format_stops_at_nul():
    assert format_string("keep\0drop %d") == "keep"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d and %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_extra_arguments_ignored():
    assert format_string("%d", 5, 6, 7) == str(5)


def test_printf_returns_count_and_writes_stream():
    stream = io.StringIO()
    count = printf("%s=%d %x", "n", 10, 10, stream=stream)
    text = stream.getvalue()
    assert text == format_string("%s=%d %x", "n", 10, 10)
    assert count == len(text)


def test_printf_defaults_to_stdout(capsys):
    count = printf("value %d", 5)
    assert capsys.readouterr().out == "value 5"
    assert count == len("value 5")


def test_printf_none_format_raises():
    with pytest.raises(TypeError):
        printf(None, stream=io.StringIO())