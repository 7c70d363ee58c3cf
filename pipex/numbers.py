"""Conversions between integers and their decimal or hexadecimal text."""

from __future__ import annotations

import string

INT_MIN = -2147483648
INT_MAX = 2147483647
UINT_MAX = 4294967295
ULONG_MAX = 18446744073709551615

_SPACES = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` width, two's complement."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in string.digits:
            break
        digits.append(ch)
    return sign * int("".join(digits) or "0")


def atoi(text: str) -> int:
    """Parse a leading decimal integer: spaces, one optional sign, then digits.

    Anything after the digits is ignored; text without digits gives 0.
    The result wraps to a 32-bit signed integer.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Like :func:`atoi`, wrapping to a 64-bit signed integer."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed integer")
    return str(n)


def uint_to_str(number: int) -> str:
    """Decimal text of a 32-bit unsigned integer."""
    if not 0 <= number <= UINT_MAX:
        raise OverflowError(f"{number} does not fit a 32-bit unsigned integer")
    return str(number)


def ulong_to_hex(number: int) -> str:
    """Lower-case hexadecimal text, without prefix, of a 64-bit unsigned integer."""
    if not 0 <= number <= ULONG_MAX:
        raise OverflowError(f"{number} does not fit a 64-bit unsigned integer")
    return format(number, "x")