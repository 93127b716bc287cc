"""Byte-buffer operations on bytes-like objects."""

from __future__ import annotations


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for size in sizes:
        if length > size:
            raise IndexError(f"length {length} exceeds buffer of {size} bytes")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` (taken modulo 256)."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, len(data))
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare ``length`` bytes; the difference of the first unequal pair, or 0."""
    _check_length(length, len(first), len(second))
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes of ``src`` over the start of ``dest``."""
    _check_length(length, len(dest), len(src))
    dest[:length] = src[:length]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dest, len(buffer) - src)
    if length == 0 or dest == src:
        return buffer
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer