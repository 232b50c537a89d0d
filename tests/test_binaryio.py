import io
import struct

import pytest

from prism.meta.binaryio import (
    read_byte,
    read_u16_big,
    read_u32_big,
    read_u64_big,
    write_u32_big,
)


@pytest.mark.parametrize("n", [0, 1, 255, 0x1234, 0xDEADBEEF, 0xFFFFFFFF])
def test_u32_round_trip(n):
    buf = io.BytesIO()
    write_u32_big(buf, n)
    data = buf.getvalue()
    assert len(data) == 4
    assert read_u32_big(io.BytesIO(data)) == n


@pytest.mark.parametrize("n", [0, 7, 0x01020304, 0xFFFFFFFF])
def test_write_u32_is_big_endian(n):
    buf = io.BytesIO()
    write_u32_big(buf, n)
    assert buf.getvalue() == struct.pack(">I", n)


def test_read_u16_big():
    assert read_u16_big(io.BytesIO(bytes([0xAB, 0xCD]))) == 0xABCD


@pytest.mark.parametrize("n", [0, 1, 0x0102030405060708, 0xFFFFFFFFFFFFFFFF])
def test_read_u64_big_matches_struct(n):
    assert read_u64_big(io.BytesIO(struct.pack(">Q", n))) == n


@pytest.mark.parametrize("n", [0, 0xBEEF, 0xFFFF])
def test_read_u16_big_matches_struct(n):
    assert read_u16_big(io.BytesIO(struct.pack(">H", n))) == n


def test_read_byte_sequence_then_eof():
    stream = io.BytesIO(b"\x05\x06")
    assert read_byte(stream) == 5
    assert read_byte(stream) == 6
    with pytest.raises(EOFError, match="EOF"):
        read_byte(stream)


def test_truncated_u32_raises_eof():
    with pytest.raises(EOFError):
        read_u32_big(io.BytesIO(b"\x00\x01\x02"))


def test_truncated_u64_raises_eof():
    with pytest.raises(EOFError):
        read_u64_big(io.BytesIO(b"\x00" * 7))


def test_reading_consumes_only_what_is_needed():
    stream = io.BytesIO(struct.pack(">I", 42) + b"rest")
    assert read_u32_big(stream) == 42
    assert stream.read() == b"rest"


@pytest.mark.parametrize("n", [-1, 0x100000000])
def test_write_u32_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        write_u32_big(io.BytesIO(), n)