"""Metadata extraction for JPEG images."""

from __future__ import annotations

from typing import IO

from ..data import Data, ImageFormat, MetadataError, RecordingReader
from .segments import MarkerType, SegmentReader

_ICC_PROFILE_IDENTIFIER = b"ICC_PROFILE\x00"
_START_OF_FRAME = (
    MarkerType.START_OF_FRAME_BASELINE,
    MarkerType.START_OF_FRAME_PROGRESSIVE,
)


def load(r: IO[bytes]) -> tuple[Data, IO[bytes]]:
    """Load the metadata of a JPEG stream.

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


def extract_metadata(r: IO[bytes]) -> Data:
    """Read metadata from a JPEG stream, stopping once it has all been found."""
    md = Data(format=ImageFormat.JPEG)
    segments = SegmentReader(r)
    metadata_extracted = False
    chunks: list[bytes | None] | None = None
    chunks_extracted = 0
    id_len = len(_ICC_PROFILE_IDENTIFIER)

    def all_extracted() -> bool:
        return (
            metadata_extracted
            and chunks is not None
            and chunks_extracted == len(chunks)
        )

    soi = segments.read_segment()
    if soi.marker.type != MarkerType.START_OF_IMAGE:
        raise ValueError("stream does not begin with start-of-image")

    while True:
        try:
            segment = segments.read_segment()
        except EOFError as exc:
            raise ValueError("unexpected EOF") from exc

        kind = segment.marker.type
        data = segment.data

        if kind in _START_OF_FRAME:
            if len(data) < 5:
                raise ValueError("truncated start-of-frame segment")
            md.bits_per_component = data[0]
            md.pixel_height = (data[1] << 8) | data[2]
            md.pixel_width = (data[3] << 8) | data[4]
            metadata_extracted = True
            if all_extracted():
                break

        elif kind in (MarkerType.START_OF_SCAN, MarkerType.END_OF_IMAGE):
            break

        elif kind == MarkerType.APP_2:
            if len(data) < id_len + 2 or not data.startswith(_ICC_PROFILE_IDENTIFIER):
                continue
            if md.icc_profile_data is not None or md.icc_profile_error is not None:
                continue

            chunk_total = data[id_len + 1]
            if chunks is None:
                chunks = [None] * chunk_total
            elif chunk_total != len(chunks):
                md.set_icc_profile_error(ValueError("inconsistent ICC profile chunk count"))
                continue

            chunk_num = data[id_len]
            if chunk_num == 0 or chunk_num > len(chunks):
                md.set_icc_profile_error(ValueError("invalid ICC profile chunk number"))
                continue
            if chunks[chunk_num - 1] is not None:
                md.set_icc_profile_error(ValueError("duplicated ICC profile chunk"))
                continue

            chunks_extracted += 1
            chunks[chunk_num - 1] = data[id_len + 2 :]
            if all_extracted():
                break

    if not metadata_extracted:
        raise ValueError("no metadata found")

    collected = chunks or []
    if len(collected) != chunks_extracted:
        if md.icc_profile_error is None:
            md.set_icc_profile_error(ValueError("incomplete ICC profile data"))
        return md

    joined = b"".join(chunk for chunk in collected if chunk)
    md.set_icc_profile_data(joined or None)
    return md