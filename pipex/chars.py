"""Character classification and case conversion for ASCII codes."""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, which may be an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c):
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c):
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def absolute(x: int) -> int:
    """Absolute value of an integer."""
    return -x if x < 0 else x


def absolute_long(x: int) -> int:
    """Absolute value of a long integer."""
    return -x if x < 0 else x