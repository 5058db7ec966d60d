"""Byte-buffer helpers: filling, allocation, searching, comparing and copying."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1

Buffer = bytearray | memoryview


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError("n exceeds the buffer length")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buffer with value truncated to a byte."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError("requested size overflows")
    return bytearray(count * size)


def memchr(data: bytes | bytearray | memoryview, value: int, n: int) -> int | None:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare n bytes; return the difference at the first mismatch, else 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy n bytes from src to the start of dest and return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy n bytes inside buffer from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("n must not be negative")
    if max(dest, src) + n > len(buffer):
        raise IndexError("region exceeds the buffer length")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer