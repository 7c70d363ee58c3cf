"""Splitting text into words on a separator, and printing the resulting tables."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


def _require_char(sep: object) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _require_separator(sep: object) -> str:
    if not isinstance(sep, str) or not sep:
        raise ValueError(f"separator must be a non-empty string, got {sep!r}")
    return sep


def split_words(text: str, sep: str) -> list[str]:
    """The non-empty runs of ``text`` between occurrences of the character ``sep``."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")
    return [word for word in text.split(_require_char(sep)) if word]


def count_words(text: str | None, sep: str) -> int:
    """Number of words :func:`split_words` finds; 0 for missing text."""
    if text is None:
        return 0
    return len(split_words(text, sep))


def split_str(text: str, sep: str) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of the string ``sep``."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")
    return [piece for piece in text.split(_require_separator(sep)) if piece]


def count_words_str(text: str | None, sep: str) -> int:
    """Number of pieces :func:`split_str` finds; 0 for missing text."""
    if text is None:
        return 0
    return len(split_str(text, sep))


def display_table(table: Iterable[str] | None, stream: TextIO | None = None) -> None:
    """Write each string of ``table`` on its own line; nothing for a missing table."""
    if table is None:
        return
    out = sys.stdout if stream is None else stream
    for item in table:
        print(item, file=out)