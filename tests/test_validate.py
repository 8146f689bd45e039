import pytest

from pushswap.validate import (
    INT_MAX,
    INT_MIN,
    InputError,
    all_unique,
    check_tokens,
    in_bounds,
    is_numeric,
    parse_numbers,
    split_arguments,
)


def test_split_single_argument_on_spaces():
    assert split_arguments(["1 2  3 "]) == ["1", "2", "3"]


def test_split_several_arguments_kept_verbatim():
    assert split_arguments(["1", "2 3", "-4"]) == ["1", "2 3", "-4"]


def test_split_no_arguments_is_silent_error():
    with pytest.raises(InputError) as info:
        split_arguments([])
    assert info.value.report is False


def test_split_blank_argument_gives_no_tokens():
    assert split_arguments(["   "]) == []


@pytest.mark.parametrize("text", ["0", "42", "-7", "+15", "007"])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", "+", "-", "1-", "+-5", "12a", "1 2", "\t3", "++1"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_in_bounds_limits():
    assert in_bounds([str(INT_MAX), str(INT_MIN)]) is True
    assert in_bounds([str(INT_MAX + 1)]) is False
    assert in_bounds([str(INT_MIN - 1)]) is False


def test_in_bounds_long_token_with_leading_zeros():
    assert in_bounds(["+00000000000000042"]) is True
    assert in_bounds(["-0000000000000" + str(INT_MAX)]) is True


def test_in_bounds_too_many_digits():
    assert in_bounds(["9" * 13]) is False


def test_all_unique():
    assert all_unique(["1", "2", "3"]) is True
    assert all_unique(["1", "01"]) is False
    assert all_unique(["-0", "+0"]) is False


def test_check_tokens_errors_are_reported():
    for tokens in ([], ["1", "x"], ["1", str(INT_MAX + 1)], ["5", "5"]):
        with pytest.raises(InputError) as info:
            check_tokens(tokens)
        assert info.value.report is True


def test_parse_numbers_round_trip():
    assert parse_numbers(["3 -1 0"]) == [3, -1, 0]
    assert parse_numbers(["+8", "-2"]) == [8, -2]


def test_parse_numbers_empty_string_is_error():
    with pytest.raises(InputError) as info:
        parse_numbers([""])
    assert info.value.report is True