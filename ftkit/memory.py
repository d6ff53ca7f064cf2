"""Byte-buffer helpers working on bytearray and bytes-like objects."""

from __future__ import annotations

import sys
from typing import Optional

_BYTE_MASK = 0xFF


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of value; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([value & _BYTE_MASK]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    mem_set(buf, 0, n)


def mem_copy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside buf from src_offset to dest_offset, overlap-safe."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def mem_chr(data, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value's low byte in data[:n], or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & _BYTE_MASK)
    return None if index < 0 else index


def mem_cmp(a, b, n: int) -> int:
    """Difference of the first differing bytes in a[:n] and b[:n], else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {count} * {size} bytes")
    return bytearray(total)