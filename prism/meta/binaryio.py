"""Helpers for reading and writing big-endian integers on binary streams.

A reader is any object with a ``read(size)`` method returning ``bytes``;
a writer is any object with a ``write(data)`` method.
"""

from __future__ import annotations

from typing import IO

_U32_MAX = 0xFFFFFFFF


def read_byte(r: IO[bytes]) -> int:
    """Read a single byte, raising EOFError at the end of the stream."""
    chunk = r.read(1)
    if not chunk:
        raise EOFError("EOF")
    return chunk[0]


def _read_uint(r: IO[bytes], size: int) -> int:
    value = 0
    for _ in range(size):
        value = (value << 8) | read_byte(r)
    return value


def read_u16_big(r: IO[bytes]) -> int:
    """Read an unsigned 16-bit big-endian integer."""
    return _read_uint(r, 2)


def read_u32_big(r: IO[bytes]) -> int:
    """Read an unsigned 32-bit big-endian integer."""
    return _read_uint(r, 4)


def read_u64_big(r: IO[bytes]) -> int:
    """Read an unsigned 64-bit big-endian integer."""
    high = read_u32_big(r)
    low = read_u32_big(r)
    return (high << 32) | low


def write_u32_big(w: IO[bytes], n: int) -> None:
    """Write ``n`` as an unsigned 32-bit big-endian integer."""
    if not 0 <= n <= _U32_MAX:
        raise ValueError(f"value {n} does not fit in 32 bits")
    w.write(n.to_bytes(4, "big"))