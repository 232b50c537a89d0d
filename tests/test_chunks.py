import io

import pytest

from prism.meta.binaryio import write_u32_big
from prism.meta.pngmeta.chunks import (
    CHUNK_TYPE_IHDR,
    ChunkHeader,
    read_chunk_header,
)


def test_reads_written_header():
    buf = io.BytesIO()
    write_u32_big(buf, 13)
    buf.write(CHUNK_TYPE_IHDR)
    buf.write(b"rest")
    buf.seek(0)
    header = read_chunk_header(buf)
    assert header == ChunkHeader(13, b"IHDR")
    assert buf.read() == b"rest"


def test_string_form():
    assert str(ChunkHeader(13, CHUNK_TYPE_IHDR)) == "IHDR(13)"


def test_empty_stream_is_eof():
    with pytest.raises(EOFError):
        read_chunk_header(io.BytesIO(b""))


def test_missing_type_is_eof():
    with pytest.raises(EOFError):
        read_chunk_header(io.BytesIO(b"\x00\x00\x00\x01"))


def test_truncated_type():
    with pytest.raises(ValueError, match="unexpected EOF reading chunk type"):
        read_chunk_header(io.BytesIO(b"\x00\x00\x00\x01ID"))