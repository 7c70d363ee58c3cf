"""Searching, comparing, copying and testing text the way C strings behave.

Positions are returned as indices into the text, and ``None`` stands for
"not found". Searching for the NUL character finds the terminator, which
sits just past the last character.
"""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _char_code(c: int | str) -> int:
    """Return the integer code of ``c``, an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``text``.

    Codes above 255 are reduced modulo 256. Searching for NUL gives the
    index of the terminator, ``len(text)``.
    """
    code = _char_code(c)
    if code > 255:
        code %= 256
    if code < 0:
        return None
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c`` in ``text``.

    The code is taken as an unsigned byte. Searching for NUL gives
    ``len(text)``.
    """
    code = _char_code(c) & 0xFF
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    limit = min(max(length, 0), len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, a
    missing character counting as 0; equal prefixes give 0.
    """
    if n <= 0:
        return 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters, NUL included.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``. A size of 0 copies nothing.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` characters, NUL included.

    Returns the resulting text and the length the full concatenation would
    have. When ``size`` leaves no room past ``dst``, ``dst`` is returned
    unchanged with ``len(src) + size``.
    """
    if size <= 0 or size <= len(dst):
        return dst, len(src) + max(size, 0)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def begins_with(text: str | None, prefix: str | None) -> bool:
    """True if ``text`` starts with ``prefix``; False if either is missing."""
    if text is None or prefix is None:
        return False
    return text.startswith(prefix)


def ends_with(text: str | None, suffix: str | None) -> bool:
    """True if ``text`` ends with ``suffix``; False if either is missing."""
    if text is None or suffix is None:
        return False
    return text.endswith(suffix)


def strrev(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]