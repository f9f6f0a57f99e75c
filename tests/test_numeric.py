import math

import pytest

from libft.numeric import atoi, itoa, nbrlen, nbrlen_base, to_radian

SAMPLES = [0, 1, -1, 7, -9, 10, -10, 99, 100, 12345, -67890, 2147483647, -2147483648]


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("  \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", " - 5", None])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("n", SAMPLES)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648
    assert atoi(str(2**32 + 5)) == 5


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_is_decimal_form(n):
    assert itoa(n) == str(n)


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


@pytest.mark.parametrize("n", SAMPLES + [10**15, -(10**15)])
def test_nbrlen_matches_decimal_length(n):
    assert nbrlen(n) == len(str(n))


@pytest.mark.parametrize("n", SAMPLES)
@pytest.mark.parametrize("base, fmt", [(2, "b"), (8, "o"), (16, "x")])
def test_nbrlen_base_matches_formatted_length(n, base, fmt):
    assert nbrlen_base(n, base) == len(format(n, fmt))


@pytest.mark.parametrize("base", [0, -3])
def test_nbrlen_base_non_positive_base(base):
    assert nbrlen_base(123, base) == 0


def test_nbrlen_base_one_with_zero():
    assert nbrlen_base(0, 1) == 1


def test_nbrlen_base_one_with_nonzero():
    with pytest.raises(ValueError):
        nbrlen_base(5, 1)


def test_to_radian_half_turn():
    assert to_radian(180) == pytest.approx(math.pi)


def test_to_radian_zero():
    assert to_radian(0) == 0


def test_to_radian_is_linear():
    assert to_radian(90) * 2 == pytest.approx(to_radian(180))
    assert to_radian(-45) == pytest.approx(-to_radian(45))