"""Byte-buffer operations: filling, searching, comparing, copying and
bounded copying of NUL-terminated strings.

Buffers written to are mutable byte sequences (``bytearray``). Every
operation checks that it stays within the buffer and raises ``ValueError``
otherwise.
"""

from __future__ import annotations

from typing import Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def _check_span(buffer: Bytes, start: int, n: int) -> None:
    _check_count(n)
    if start < 0 or start + n > len(buffer):
        raise ValueError(
            f"range [{start}, {start + n}) lies outside a buffer of {len(buffer)} bytes"
        )


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    _check_count(count)
    _check_count(size)
    return bytearray(count * size)


def memchr(data: Bytes, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first
    ``n`` bytes, or None if there is none."""
    _check_span(data, 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    differing pair, or 0 when they are equal."""
    _check_span(first, 0, n)
    _check_span(second, 0, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    if dst is src or n == 0:
        return dst
    _check_span(dst, 0, n)
    _check_span(src, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dst``; the two ranges may overlap."""
    _check_span(buffer, dst, n)
    _check_span(buffer, src, n)
    if dst != src:
        buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the byte ``c``."""
    _check_span(buffer, 0, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def strlen(data: Bytes | str) -> int:
    """Return the length up to the first NUL, or the whole length if none."""
    if isinstance(data, str):
        index = data.find("\0")
    else:
        index = bytes(data).find(0)
    return len(data) if index < 0 else index


def strlcpy(dst: bytearray, src: Bytes, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dst`` and
    NUL-terminate it; return the length of ``src``."""
    _check_count(size)
    src_length = strlen(src)
    if size > 0:
        count = min(src_length, size - 1)
        _check_span(dst, 0, count + 1)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return src_length


def strlcat(dst: bytearray, src: Bytes, size: int) -> int:
    """Append ``src`` to the string in ``dst`` so that the result, with its
    NUL, takes at most ``size`` bytes; return the length it tried to make."""
    _check_count(size)
    src_length = strlen(src)
    dst_length = strlen(dst)
    if size > 0 and dst_length < size - 1:
        count = min(src_length, size - 1 - dst_length)
        _check_span(dst, dst_length, count + 1)
        dst[dst_length:dst_length + count] = bytes(src[:count])
        dst[dst_length + count] = 0
    if dst_length >= size:
        dst_length = size
    return dst_length + src_length