"""Text and number helpers shared by checkers, validators and generators."""

from __future__ import annotations

import math
import re
from typing import Iterable

BLANKS = " \t\r\n"
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_DIGITS = frozenset("0123456789")
_DOUBLE_CHARS = _DIGITS | frozenset(".eE-+")
_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class NumberFormatError(ValueError):
    """Raised when a token is not a number of the expected form."""


def _is_infinite(x: float) -> bool:
    return x > 1e100 or x < -1e100


def remove_trailing_zeroes(value: str) -> str:
    """Strip trailing zeroes of a decimal fraction, then append a single '0'."""
    if "." in value:
        value = value.rstrip("0")
    return value + "0"


def upper_case(s: str) -> str:
    """Upper-case ASCII letters only."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in s)


def lower_case(s: str) -> str:
    """Lower-case ASCII letters only."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in s)


def compress(s: str) -> str:
    """Shorten strings longer than 64 characters, keeping both ends."""
    if len(s) <= 64:
        return s
    return s[:30] + "..." + s[-31:]


def english_ending(x: int) -> str:
    """Ordinal suffix for ``x``: 'st', 'nd', 'rd' or 'th'."""
    x = int(math.fmod(x, 100))
    if int(x / 10) == 1:
        return "th"
    last = int(math.fmod(x, 10))
    if last == 1:
        return "st"
    if last == 2:
        return "nd"
    if last == 3:
        return "rd"
    return "th"


def trim(s: str) -> str:
    """Remove spaces, tabs and line breaks from both ends."""
    return s.strip(BLANKS)


def join(items: Iterable[object], separator: object = " ") -> str:
    """Join the string forms of ``items`` with ``separator``."""
    return str(separator).join(str(item) for item in items)


def double_compare(expected: float, result: float, max_error: float) -> bool:
    """Compare two reals with an absolute or relative tolerance."""
    if math.isnan(expected):
        return math.isnan(result)
    if _is_infinite(expected):
        if expected > 0:
            return result > 0 and _is_infinite(result)
        return result < 0 and _is_infinite(result)
    if math.isnan(result) or _is_infinite(result):
        return False
    if abs(result - expected) <= max_error + 1e-15:
        return True
    bounds = (expected * (1.0 - max_error), expected * (1.0 + max_error))
    return result + 1e-15 >= min(bounds) and result <= max(bounds) + 1e-15


def double_delta(expected: float, result: float) -> float:
    """The smaller of the absolute and relative differences."""
    absolute = abs(result - expected)
    if abs(expected) > 1e-9:
        return min(absolute, abs(absolute / expected))
    return absolute


def equals_integer(value: int, text: str) -> bool:
    """Whether ``text`` is exactly the canonical decimal form of ``value``."""
    return text == str(value)


def _integer_error(text: str) -> NumberFormatError:
    return NumberFormatError(f'Expected integer, but "{compress(text)}" found')


def parse_long(text: str) -> int:
    """Parse a canonical 64-bit signed integer."""
    if text == "-9223372036854775808":
        return LLONG_MIN
    minus = len(text) > 1 and text[0] == "-"
    if len(text) > 20:
        raise _integer_error(text)
    digits = text[1:] if minus else text
    if not set(digits) <= _DIGITS:
        raise _integer_error(text)
    zeroes = len(digits) - len(digits.lstrip("0"))
    value = int(digits) if digits else 0
    if (zeroes > 0 and (value != 0 or minus)) or zeroes > 1:
        raise _integer_error(text)
    if minus:
        value = -value
    if not LLONG_MIN <= value <= LLONG_MAX:
        raise NumberFormatError(f'Expected int64, but "{compress(text)}" found')
    return value


def _double_error(text: str) -> NumberFormatError:
    return NumberFormatError(f'Expected double, but "{compress(text)}" found')


def _finish_double(text: str) -> float:
    if not _DOUBLE_RE.fullmatch(text):
        raise _double_error(text)
    value = float(text)
    if math.isnan(value) or _is_infinite(value):
        raise _double_error(text)
    return value


def parse_double(text: str) -> float:
    """Parse a real number in plain or exponent notation."""
    if not set(text) <= _DOUBLE_CHARS:
        raise _double_error(text)
    digit_count = sum(c in _DIGITS for c in text)
    if (
        digit_count == 0
        or text.count("-") > 2
        or text.count("+") > 2
        or text.count(".") > 1
        or text.count("e") + text.count("E") > 1
    ):
        raise _double_error(text)
    return _finish_double(text)


def parse_strict_double(text: str, min_after_point: int, max_after_point: int) -> float:
    """Parse a real of the form ``[-]digits[.digits]`` with a bounded fraction length."""
    if min_after_point < 0:
        raise ValueError("min_after_point should be non-negative")
    if min_after_point > max_after_point:
        raise ValueError("min_after_point should be less or equal to max_after_point")

    def error() -> NumberFormatError:
        return NumberFormatError(f'Expected strict double, but "{compress(text)}" found')

    length = len(text)
    if length == 0 or length > 1000:
        raise error()
    if text[0] != "-" and text[0] not in _DIGITS:
        raise error()

    point_pos = -1
    for i, c in enumerate(text[1:-1], start=1):
        if c == ".":
            if point_pos > -1:
                raise error()
            point_pos = i
        elif c not in _DIGITS:
            raise error()

    if text[-1] not in _DIGITS:
        raise error()

    after_digits = 0 if point_pos == -1 else length - point_pos - 1
    if not min_after_point <= after_digits <= max_after_point:
        raise NumberFormatError(
            "Expected strict double with number of digits after point in range "
            f'[{min_after_point},{max_after_point}], but "{compress(text)}" found'
        )

    first_digit = next((i for i, c in enumerate(text) if c in _DIGITS), -1)
    if first_digit == -1 or first_digit > 1:
        raise error()
    if (
        text[first_digit] == "0"
        and first_digit + 1 < length
        and text[first_digit + 1] in _DIGITS
    ):
        raise error()

    return _finish_double(text)