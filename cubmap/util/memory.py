"""Byte-buffer operations on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional

_ALLOC_LIMIT = 2147483647

Buffer = bytes | bytearray | memoryview


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer`` in place."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the total exceeds 2147483647 bytes.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _ALLOC_LIMIT:
        raise MemoryError(f"allocation of {total} bytes exceeds the limit")
    return bytearray(total)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` (mod 256) in the first ``n`` bytes, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    _check_count(n, len(dst), len(src))
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buffer`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(length, len(buffer) - dst, len(buffer) - src)
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (mod 256) and return it."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer