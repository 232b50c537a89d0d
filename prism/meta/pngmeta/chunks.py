"""PNG chunk headers and the chunk types of interest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from ..binaryio import read_u32_big

CHUNK_TYPE_ICCP = b"iCCP"
CHUNK_TYPE_IDAT = b"IDAT"
CHUNK_TYPE_IEND = b"IEND"
CHUNK_TYPE_IHDR = b"IHDR"


@dataclass(frozen=True)
class ChunkHeader:
    """The length and four-byte type of a PNG chunk."""

    length: int
    chunk_type: bytes

    def __str__(self) -> str:
        return f"{self.chunk_type.decode('latin-1')}({self.length})"


def read_chunk_header(r: IO[bytes]) -> ChunkHeader:
    """Read a chunk header; EOFError is raised at the end of the stream."""
    length = read_u32_big(r)
    chunk_type = r.read(4)
    if not chunk_type:
        raise EOFError("EOF")
    if len(chunk_type) != 4:
        raise ValueError("unexpected EOF reading chunk type")
    return ChunkHeader(length=length, chunk_type=chunk_type)