"""Byte-buffer helpers: filling, allocation, searching, comparing and copying."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize


def _check_length(name: str, length: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > length:
        raise ValueError(f"{name} holds {length} bytes, fewer than {n}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_length("buffer", len(buffer), n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    _check_length("data", len(data), n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length("first", len(first), n)
    _check_length("second", len(second), n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_length("dest", len(dest), n)
    _check_length("src", len(src), n)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were copied
    aside first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length("buffer", len(buffer) - min(dest, src), n)
    _check_length("buffer", len(buffer) - max(dest, src), n)
    if n == 0 or dest == src:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer