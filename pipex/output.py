"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from pipex.numbers import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: TextIO | None = None) -> int:
    """Write one character and return the number written.

    An integer is taken as a byte: only its low eight bits are used.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    _target(stream).write(ch)
    return 1


def put_str(text: str, stream: TextIO | None = None) -> int:
    """Write ``text`` and return the number of characters written."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")
    _target(stream).write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; nothing at all for missing text."""
    if text is None:
        return
    out = _target(stream)
    put_str(text, out)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal form of a 32-bit signed integer and return its length."""
    return put_str(itoa(n), stream)