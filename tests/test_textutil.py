import math

import pytest

from contestkit.textutil import (
    NumberFormatError,
    compress,
    double_compare,
    double_delta,
    english_ending,
    equals_integer,
    join,
    lower_case,
    parse_double,
    parse_long,
    parse_strict_double,
    remove_trailing_zeroes,
    trim,
    upper_case,
)


def test_remove_trailing_zeroes_keeps_one_zero():
    assert remove_trailing_zeroes("1.0000000000") == "1.0"
    result = remove_trailing_zeroes("3.1400000000")
    assert result.startswith("3.14")
    assert result.endswith("0")


def test_case_conversion_is_ascii_only():
    s = "abcXYZ-1\u00e9"
    up = upper_case(s)
    assert up[:6] == "ABCXYZ"
    assert up[-1] == "\u00e9"
    assert lower_case(up) == lower_case(s)
    assert upper_case(lower_case(s)) == up


def test_compress_short_and_long():
    short = "x" * 64
    assert compress(short) == short
    long = "a" * 30 + "b" * 40 + "c" * 31
    result = compress(long)
    assert result == "a" * 30 + "..." + "c" * 31
    assert len(result) == 64


@pytest.mark.parametrize(
    "x, ending",
    [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"),
     (13, "th"), (21, "st"), (103, "rd"), (111, "th"), (122, "nd")],
)
def test_english_ending(x, ending):
    assert english_ending(x) == ending


def test_trim_removes_blanks_only():
    assert trim(" \t a b \r\n") == "a b"
    assert trim(" \n\t") == ""
    assert trim("") == ""


def test_join_default_and_custom_separator():
    assert join([1, 2, 3]) == "1 2 3"
    assert join(["a", "b"], ",") == "a,b"
    assert join([]) == ""


def test_double_compare_absolute_and_relative():
    assert double_compare(1.0, 1.0 + 1e-7, 1e-6)
    assert not double_compare(1.0, 1.1, 1e-6)
    assert double_compare(1e9, 1e9 + 100, 1e-6)
    assert not double_compare(1e9, 1e9 + 1e4, 1e-6)


def test_double_compare_special_values():
    assert double_compare(math.nan, math.nan, 1e-6)
    assert not double_compare(math.nan, 1.0, 1e-6)
    assert double_compare(1e200, 1e150, 1e-6)
    assert not double_compare(1e200, -1e150, 1e-6)
    assert not double_compare(1.0, math.nan, 1e-6)
    assert not double_compare(1.0, 1e150, 1e-6)


def test_double_delta():
    assert double_delta(0.0, 0.5) == 0.5
    assert double_delta(100.0, 101.0) == pytest.approx(1.0 / 100.0)
    assert double_delta(2.0, 2.0) == 0.0


def test_equals_integer():
    assert equals_integer(-42, "-42")
    assert not equals_integer(42, "042")
    assert equals_integer(0, "0")
    assert not equals_integer(0, "-0")
    assert equals_integer(-9223372036854775808, "-9223372036854775808")


def test_parse_long_values():
    assert parse_long("123") == 123
    assert parse_long("-17") == -17
    assert parse_long("0") == 0
    assert parse_long("-9223372036854775808") == -9223372036854775808
    assert parse_long("9223372036854775807") == 9223372036854775807


@pytest.mark.parametrize("text", ["00", "-0", "01", "-01", "1a", "-", "+5", "1 2", "1" * 21])
def test_parse_long_rejects_malformed(text):
    with pytest.raises(NumberFormatError, match="Expected integer"):
        parse_long(text)


def test_parse_long_rejects_out_of_range():
    with pytest.raises(NumberFormatError, match="Expected int64"):
        parse_long("9223372036854775808")


def test_parse_double_values():
    assert parse_double("1.5") == 1.5
    assert parse_double("-2") == -2.0
    assert parse_double(".5") == 0.5
    assert parse_double("1e3") == 1000.0


@pytest.mark.parametrize("text", ["abc", "1e", "1.2.3", "1e200", "--1", "1-2", ".", "e5", "nan"])
def test_parse_double_rejects(text):
    with pytest.raises(NumberFormatError, match="Expected double"):
        parse_double(text)


def test_parse_strict_double_values():
    assert parse_strict_double("-0.50", 2, 2) == -0.5
    assert parse_strict_double("5", 0, 3) == 5.0
    assert parse_strict_double("10.125", 0, 3) == 10.125


@pytest.mark.parametrize("text", [".5", "01.5", "1.", "-.5", "1e5", "+1", "", "1.2.3"])
def test_parse_strict_double_rejects_form(text):
    with pytest.raises(NumberFormatError):
        parse_strict_double(text, 0, 5)


def test_parse_strict_double_rejects_digit_count():
    with pytest.raises(NumberFormatError, match=r"range \[2,3\]"):
        parse_strict_double("0.5", 2, 3)


def test_parse_strict_double_bad_bounds():
    with pytest.raises(ValueError):
        parse_strict_double("1.0", 3, 1)
    with pytest.raises(ValueError):
        parse_strict_double("1.0", -1, 1)