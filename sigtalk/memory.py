"""Byte-buffer helpers: filling, copying, searching and comparing.

Buffers that are written to must be mutable byte sequences such as
``bytearray``. Counts that reach past the end of a buffer raise
``ValueError`` instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]


def _check_count(name: str, n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _check_span(n: int, length: int, what: str) -> None:
    if n > length:
        raise ValueError(f"count {n} exceeds the {length} bytes of {what}")


def _byte_value(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte value must be an int, got {type(value).__name__}")
    return value & 0xFF


def fill(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` reduced to a byte."""
    _check_count("n", n)
    _check_span(n, len(buf), "the buffer")
    buf[:n] = bytes([_byte_value(value)]) * n
    return buf


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return fill(buf, 0, n)


def copy(dst: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    _check_count("n", n)
    _check_span(n, len(dst), "the destination")
    _check_span(n, len(src), "the source")
    dst[:n] = bytes(src[:n])
    return dst


def move(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source bytes were
    read in full before any were written.
    """
    _check_count("n", n)
    _check_count("dst_offset", dst_offset)
    _check_count("src_offset", src_offset)
    _check_span(dst_offset + n, len(buf), "the buffer")
    _check_span(src_offset + n, len(buf), "the buffer")
    buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf


def find_byte(data: ByteSource, value: int, n: int) -> Optional[int]:
    """Return the index of the first ``value`` byte among the first ``n``, or ``None``."""
    _check_count("n", n)
    _check_span(n, len(data), "the data")
    index = bytes(data[:n]).find(_byte_value(value))
    return None if index < 0 else index


def compare(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns zero when they are equal, otherwise the difference of the first
    pair of bytes that differ.
    """
    _check_count("n", n)
    _check_span(n, len(a), "the first buffer")
    _check_span(n, len(b), "the second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes."""
    _check_count("count", count)
    _check_count("size", size)
    return bytearray(count * size)