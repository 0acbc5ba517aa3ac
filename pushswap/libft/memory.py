"""Byte-buffer operations over bytearray objects."""

from __future__ import annotations


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if n < 0 or start < 0 or start + n > length:
        raise ValueError(f"{what}: range {start}..{start + n} outside buffer of {length} bytes")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf and return buf."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c in data[:n], or None."""
    _check_span(len(data), 0, n, "memchr")
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch or 0."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest and return dest."""
    _check_span(len(src), 0, n, "memcpy")
    _check_span(len(dest), 0, n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes from offset src to offset dest within buf, overlap allowed."""
    _check_span(len(buf), src, n, "memmove")
    _check_span(len(buf), dest, n, "memmove")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf