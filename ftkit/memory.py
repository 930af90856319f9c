"""Byte-buffer operations and bounded C-string copying.

Buffers are mutable bytes-like objects such as ``bytearray`` or writable
``memoryview`` slices. A C string inside a buffer ends at its first zero
byte, or at the end of the buffer when there is none.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadBuffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: ReadBuffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def _cstrlen(buf: ReadBuffer) -> int:
    """Length of the C string held in ``buf``."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index < 0 else index


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > sys.maxsize // size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def memcpy(dst: Buffer, src: ReadBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: Buffer, src: ReadBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to ``dst``; overlapping views are safe."""
    _check_length(length, dst, src)
    # Snapshot the source first so an overlapping view is read before it is written.
    dst[:length] = bytes(src[:length])
    return dst


def memchr(buf: ReadBuffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, buf)
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadBuffer, second: ReadBuffer, length: int) -> int:
    """Compare ``length`` bytes; the difference of the first unequal pair, else 0."""
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def strlcpy(dst: Buffer, src: ReadBuffer, size: int) -> int:
    """Copy the C string ``src`` into ``dst``, writing at most ``size`` bytes.

    The copy is always zero-terminated when ``size`` is positive. Returns the
    length of ``src``, so a result of ``size`` or more means it was cut short.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    if count + 1 > len(dst):
        raise ValueError("destination buffer is too small")
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: Buffer, src: ReadBuffer, size: int) -> int:
    """Append the C string ``src`` to the one in ``dst``, within ``size`` bytes total.

    Returns the length of the string it tried to build: the length of ``dst``
    plus that of ``src``, or ``size`` plus the length of ``src`` when ``size``
    does not exceed the length of ``dst``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _cstrlen(src)
    dst_len = _cstrlen(dst)
    if size <= dst_len:
        return size + src_len
    count = min(src_len, size - dst_len - 1)
    end = dst_len + count
    if end + 1 > len(dst):
        raise ValueError("destination buffer is too small")
    dst[dst_len:end] = bytes(src[:count])
    dst[end] = 0
    return dst_len + src_len