import pytest

from pushswap.numbers import atoi, atol, itoa


def test_atoi_negative_example():
    assert atoi("-422796") == -422796


@pytest.mark.parametrize("value", [53727, -155, 634527, 0, -2147483648, 2147483647])
def test_itoa_values(value):
    assert itoa(value) == str(value)


@pytest.mark.parametrize("value", [53727, -155, 634527, 0, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(value):
    assert atoi(itoa(value)) == value
    assert atol(itoa(value)) == value


def test_atoi_skips_whitespace_and_plus_sign():
    assert atoi(" \t\n+42abc") == 42


def test_atoi_stops_at_first_non_digit():
    assert atoi("9878j7") == 9878


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atol("") == 0


def test_atoi_double_sign_reads_nothing():
    assert atoi("++7") == 0


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


def test_atol_keeps_values_past_int_range():
    assert atol("2147483648") == 2147483648
    assert atol("-2147483649") == -2147483649


def test_atol_wraps_past_long_range():
    assert atol("9223372036854775808") == -9223372036854775808