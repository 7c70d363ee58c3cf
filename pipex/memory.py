"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check_span(buffer: bytes | bytearray, start: int, length: int) -> None:
    if start < 0 or length < 0:
        raise ValueError("offsets and lengths must not be negative")
    if start + length > len(buffer):
        raise IndexError(
            f"span of {length} bytes at {start} exceeds buffer of {len(buffer)} bytes"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` as an unsigned byte."""
    _check_span(buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count`` elements of ``size`` bytes.

    Raises OverflowError when the total size does not fit a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes overflows the size type")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span(src, 0, n)
    _check_span(dst, 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Copy ``length`` bytes within ``buffer``, correct when the regions overlap."""
    _check_span(buffer, src_offset, length)
    _check_span(buffer, dst_offset, length)
    if dst_offset != src_offset:
        buffer[dst_offset : dst_offset + length] = bytes(
            buffer[src_offset : src_offset + length]
        )
    return buffer


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` as an unsigned byte, within ``n`` bytes."""
    _check_span(data, 0, n)
    index = data.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes, or 0."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0