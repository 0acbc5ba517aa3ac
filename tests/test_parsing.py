import pytest

from pushswap.parsing import (
    ParseError,
    extract_tokens,
    is_valid_int,
    long_atoi,
    parse_arguments,
)


def test_long_atoi_skips_whitespace_and_stops_at_non_digit():
    assert long_atoi("  -42abc") == -42


def test_long_atoi_beyond_int_range():
    assert long_atoi("2147483648") == 2147483648


def test_long_atoi_without_digits_is_zero():
    assert long_atoi("abc") == 0


@pytest.mark.parametrize(
    "token, expected",
    [
        ("2147483647", True),
        ("-2147483648", True),
        ("2147483648", False),
        ("-2147483649", False),
        ("+5", True),
        ("12a", False),
        ("--3", False),
        ("\t5", False),
        ("-", True),
    ],
)
def test_is_valid_int(token, expected):
    assert is_valid_int(token) is expected


def test_extract_tokens_splits_on_spaces():
    assert extract_tokens(["1 2", "3", "  4  "]) == ["1", "2", "3", "4"]


def test_extract_tokens_drops_empty_arguments():
    assert extract_tokens(["", "  "]) == []


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 2", "1"]) == [3, 2, 1]


def test_parse_arguments_limits():
    assert parse_arguments(["-2147483648", "2147483647"]) == [-2147483648, 2147483647]


def test_parse_arguments_leading_zeros():
    assert parse_arguments(["007", "+8"]) == [7, 8]


def test_parse_arguments_empty():
    assert parse_arguments([""]) == []


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(ParseError):
        parse_arguments(["1", "2", "1"])


def test_parse_arguments_signed_zero_is_duplicate():
    with pytest.raises(ParseError):
        parse_arguments(["+0", "-0"])


def test_parse_arguments_rejects_non_numbers():
    with pytest.raises(ParseError):
        parse_arguments(["1", "abc"])


def test_parse_arguments_rejects_overflow():
    with pytest.raises(ParseError):
        parse_arguments(["2147483648"])


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1 x"])