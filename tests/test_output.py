import io

import pytest

from pushswap.libft.output import (
    LOWER_HEX,
    UPPER_HEX,
    format_printf,
    number_in_base,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 429496729, 4294967295])
def test_number_in_base_matches_builtin_hex(n):
    assert number_in_base(n, LOWER_HEX) == format(n, "x")
    assert number_in_base(n, UPPER_HEX) == format(n, "X")


def test_number_in_base_decimal_round_trip():
    assert int(number_in_base(987654, "0123456789")) == 987654


def test_number_in_base_rejects_negative():
    with pytest.raises(ValueError):
        number_in_base(-1, LOWER_HEX)


def test_number_in_base_rejects_short_alphabet():
    with pytest.raises(ValueError):
        number_in_base(5, "0")


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_null_string():
    assert format_printf("%s \n", None) == "(null) \n"


def test_nil_pointer():
    assert format_printf("%p %p \n", 0, 0) == "(nil) (nil) \n"


def test_pointer_prefix_and_digits():
    out = format_printf("%p", 0xDEADBEEF)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0xDEADBEEF


def test_signed_min_int():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_signed_values_and_i():
    assert format_printf("%d %i", -2147483647, 42) == f"{-2147483647} {42}"


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_upper_and_lower():
    assert format_printf("%x|%X", 429496729, 255) == (
        format(429496729, "x") + "|" + format(255, "X")
    )


def test_mixed_conversions():
    expected = "&1oui1" + format(1245, "x") + "%%%%t"
    assert format_printf("%c%d%s%i%x%%%%%%%%t", "&", 1, "oui", 1, 1245) == expected


def test_char_from_int():
    assert format_printf("%c", ord("c")) == "c"


def test_unknown_conversion_drops_percent():
    assert format_printf("a%qb") == "aqb"


def test_trailing_percent_dropped():
    assert format_printf("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "1")


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s-%d\n", "pb", 7, file=buf)
    assert buf.getvalue() == "pb-7\n"
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    printf("%s\n", "sa")
    assert capsys.readouterr().out == "sa\n"


def test_put_functions():
    buf = io.StringIO()
    put_char("x", file=buf)
    put_str("yz", file=buf)
    put_endl("w", file=buf)
    put_nbr(-2147483648, file=buf)
    assert buf.getvalue() == "xyzw\n-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, file=io.StringIO())