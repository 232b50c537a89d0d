"""Metadata extraction for PNG images."""

from __future__ import annotations

import zlib
from typing import IO

from ..binaryio import read_byte, read_u32_big
from ..data import Data, ImageFormat, MetadataError, RecordingReader
from .chunks import (
    CHUNK_TYPE_ICCP,
    CHUNK_TYPE_IDAT,
    CHUNK_TYPE_IEND,
    CHUNK_TYPE_IHDR,
    read_chunk_header,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_MAX_PROFILE_NAME = 79


def load(r: IO[bytes]) -> tuple[Data, IO[bytes]]:
    """Load the metadata of a PNG stream.

    Only as much of ``r`` as needed is consumed. The returned stream yields
    the full image data. On failure a MetadataError is raised whose
    ``stream`` attribute likewise yields the full data.
    """
    recorder = RecordingReader(r)
    try:
        md = extract_metadata(recorder)
    except (ValueError, EOFError) as exc:
        raise MetadataError(str(exc), recorder.replay()) from exc
    return md, recorder.replay()


def _skip(r: IO[bytes], count: int) -> None:
    if count > 0 and len(r.read(count)) < count:
        raise EOFError("EOF")


def _read_profile_name(r: IO[bytes]) -> bytes:
    name = bytearray()
    for _ in range(_MAX_PROFILE_NAME + 1):
        b = read_byte(r)
        if b == 0:
            break
        name.append(b)
    if len(name) > _MAX_PROFILE_NAME:
        raise ValueError("null terminator not found reading ICC profile name")
    return bytes(name)


def extract_metadata(r: IO[bytes]) -> Data:
    """Read metadata from a PNG stream, stopping once it has all been found."""
    md = Data(format=ImageFormat.PNG)
    metadata_extracted = False

    def all_extracted() -> bool:
        return metadata_extracted and (
            md.icc_profile_data is not None or md.icc_profile_error is not None
        )

    signature = r.read(len(PNG_SIGNATURE))
    if not signature:
        raise EOFError("EOF")
    if len(signature) != len(PNG_SIGNATURE):
        raise ValueError("unexpected EOF reading PNG header")
    if signature != PNG_SIGNATURE:
        raise ValueError("invalid PNG signature")

    while True:
        try:
            header = read_chunk_header(r)
        except EOFError:
            break

        if header.chunk_type == CHUNK_TYPE_IHDR:
            if header.length < 9:
                raise ValueError("invalid IHDR chunk length")
            md.pixel_width = read_u32_big(r)
            md.pixel_height = read_u32_big(r)
            md.bits_per_component = read_byte(r)
            _skip(r, header.length - 9)
            read_u32_big(r)  # CRC
            metadata_extracted = True
            if all_extracted():
                break

        elif header.chunk_type == CHUNK_TYPE_ICCP:
            name = _read_profile_name(r)
            compression_method = read_byte(r)
            if compression_method != 0:
                raise ValueError(f"unknown compression method ({compression_method})")

            offset = len(name) + 2
            if offset >= header.length:
                raise ValueError("invalid ICC profile chunk length")

            wanted = header.length - offset
            compressed = r.read(wanted)
            if not compressed:
                raise EOFError("EOF")
            if len(compressed) != wanted:
                raise ValueError("unexpected EOF reading ICC profile chunk")
            read_u32_big(r)  # CRC

            try:
                profile = zlib.decompress(compressed)
            except zlib.error as exc:
                md.set_icc_profile_error(exc)
            else:
                md.set_icc_profile_data(profile or None)
                if all_extracted():
                    break

        elif header.chunk_type in (CHUNK_TYPE_IDAT, CHUNK_TYPE_IEND):
            break

        else:
            _skip(r, header.length)
            read_u32_big(r)  # CRC

    if not metadata_extracted:
        raise ValueError("no metadata found")
    return md