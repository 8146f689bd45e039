"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

from typing import Optional


def _check(buffer_len: int, start: int, n: int) -> None:
    if n < 0 or start < 0 or start + n > buffer_len:
        raise ValueError(
            f"range {start}..{start + n} outside buffer of length {buffer_len}"
        )


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within the first n bytes."""
    target = c & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch."""
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest and return dest."""
    if n == 0:
        return dest
    _check(len(dest), 0, n)
    _check(len(src), 0, n)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes from offset src to offset dest within buffer, overlap-safe."""
    _check(len(buffer), dest, n)
    _check(len(buffer), src, n)
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with c and return buffer."""
    _check(len(buffer), 0, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer