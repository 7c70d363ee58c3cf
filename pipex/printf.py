"""A small printf: %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from pipex.numbers import itoa, uint_to_str, ulong_to_hex

NULL_PTR = "(null)"

_CONVERSIONS = frozenset("cspdiuUxX%")
_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def is_conversion(text: str | None) -> bool:
    """True if ``text`` starts with ``%`` followed by a recognised conversion letter."""
    if not text or text[0] != "%":
        return False
    return text[1:2] in _CONVERSIONS and len(text) > 1


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >> 31 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects an int or a character, got {type(value).__name__}")


def _as_number(value: Any, spec: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return NULL_PTR if value is None else str(value)
    if spec in ("d", "i"):
        return itoa(_as_int32(_as_number(value, spec)))
    if spec == "p":
        address = 0 if value is None else _as_number(value, spec) & _ULONG_MASK
        if address == 0:
            return NULL_PTR
        return "0x" + ulong_to_hex(address)
    if spec == "u":
        return uint_to_str(_as_number(value, spec) & _UINT_MASK)
    if spec in ("x", "X"):
        digits = ulong_to_hex(_as_number(value, spec) & _UINT_MASK)
        return digits.upper() if spec == "X" else digits
    raise ValueError(f"unsupported conversion %{spec}")


def format_string(fmt: str, *args: Any) -> str:
    """The text ``printf`` would write for ``fmt`` and ``args``.

    Raises TypeError for a missing format or missing arguments and
    ValueError for a recognised but unsupported conversion (``%U``).
    Surplus arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        if is_conversion(fmt[pos : pos + 2]):
            pieces.append(_convert(fmt[pos + 1], values))
            pos += 2
        else:
            pieces.append(fmt[pos])
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default) and return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)