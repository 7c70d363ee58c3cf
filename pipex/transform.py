"""Building new strings from existing ones: copies, slices, joins, trims and maps."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return str(_require_text(text, "text"))


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string; the length is clipped
    to what remains after ``start``.
    """
    _require_text(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return _require_text(first, "first") + _require_text(second, "second")


def join_table(table: Iterable[str], sep: str) -> str:
    """The strings of ``table`` joined with ``sep`` between each pair."""
    if table is None:
        raise TypeError("table must not be None")
    _require_text(sep, "sep")
    return sep.join(_require_text(item, "table item") for item in table)


def strtrim(text: str, charset: str | None) -> str:
    """``text`` without the leading and trailing characters found in ``charset``.

    Without a charset the text is returned as is.
    """
    _require_text(text, "text")
    if charset is None:
        return text
    return text.strip(_require_text(charset, "charset"))


def _check_char(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"mapping function must return a single character, got {value!r}")
    return value


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``text``."""
    _require_text(text, "text")
    if func is None:
        raise TypeError("func must not be None")
    return "".join(_check_char(func(index, ch)) for index, ch in enumerate(text))


def striteri(
    buffer: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character of ``buffer`` in place.

    When ``func`` returns a character it replaces the one at that index;
    ``None`` leaves it unchanged.
    """
    if buffer is None or func is None:
        raise TypeError("buffer and func must not be None")
    for index, ch in enumerate(buffer):
        replacement = func(index, ch)
        if replacement is not None:
            buffer[index] = _check_char(replacement)