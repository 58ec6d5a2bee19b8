"""Byte-buffer helpers working on bytes-like objects.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). A count larger than a buffer is an error.
"""

from __future__ import annotations

from typing import Optional


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def memset(buffer: bytearray, value: int, count: int):
    """Fill the first *count* bytes of *buffer* with ``value`` truncated to a byte."""
    if buffer is None:
        raise TypeError("buffer must not be None")
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first *count* bytes of *buffer*."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src, count: int):
    """Copy *count* bytes from *src* to the start of *dest*; return *dest*."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(dest: Optional[bytearray], src, count: int):
    """Copy *count* bytes from *src* into *dest*, safe when they are the same buffer.

    Returns *dest*, or ``None`` when both *dest* and *src* are ``None``.
    """
    if dest is None and src is None:
        return None
    if count == 0:
        return dest
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def memchr(data, value: int, count: int) -> Optional[int]:
    """Return the index of the first of *count* bytes equal to *value*, or None.

    Bytes are compared as signed characters, so bytes from 128 upward match
    the negative values -128..-1 rather than 128..255.
    """
    _check_count(count, data)
    return next(
        (index for index, byte in enumerate(bytes(data[:count])) if _signed(byte) == value),
        None,
    )


def memcmp(first, second, count: int) -> int:
    """Compare *count* bytes; return the difference of the first unequal pair, else 0."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)