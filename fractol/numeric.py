"""Parsing of the numeric command-line arguments and name matching."""

from __future__ import annotations

_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648
_WHITESPACE = frozenset("\t\n\v\f\r ")


class NumberRangeError(ValueError):
    """Raised when the integer part of a number does not fit in 32 bits."""


def _check_overflow(digit: int, result: int, sign: int) -> None:
    limit = _INT_MIN_MAGNITUDE if sign == -1 else _INT_MAX
    if result > (limit - digit) // 10:
        raise NumberRangeError(f"value out of 32-bit range (sign {sign})")


def _split_sign(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign; return (sign, rest)."""
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, stopping at the first non-digit.

    Raises NumberRangeError when the value leaves the 32-bit signed range.
    """
    sign, rest = _split_sign(text)
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        digit = ord(char) - ord("0")
        _check_overflow(digit, result, sign)
        result = result * 10 + digit
    return result * sign


def parse_double(text: str) -> float:
    """Parse a decimal number of the form ``[sign]int[.frac]``.

    Every character before the decimal point is taken as a digit, exactly as
    the command line has always read it; the fraction stops at the first
    non-digit. Raises NumberRangeError when the integer part overflows.
    """
    sign, rest = _split_sign(text)
    integer_text, dot, fraction_text = rest.partition(".")
    integer_part = 0
    for char in integer_text:
        digit = ord(char) - ord("0")
        _check_overflow(digit, integer_part, sign)
        integer_part = integer_part * 10 + digit

    fractional_part = 0.0
    power = 1.0
    if dot:
        for char in fraction_text:
            if not "0" <= char <= "9":
                break
            power /= 10
            fractional_part += (ord(char) - ord("0")) * power
    return (integer_part + fractional_part) * sign


def matches_name(text: str, name: str) -> bool:
    """Return True when ``text`` begins with ``name``."""
    return text.startswith(name)