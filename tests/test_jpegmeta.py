import io

import pytest

from prism.meta.data import ImageFormat, MetadataError
from prism.meta.jpegmeta.jpegmeta import extract_metadata, load
from prism.meta.jpegmeta.segments import MarkerType

ICC_ID = b"ICC_PROFILE\x00"
SOI = bytes([0xFF, MarkerType.START_OF_IMAGE])
EOI = bytes([0xFF, MarkerType.END_OF_IMAGE])
SOS = bytes([0xFF, MarkerType.START_OF_SCAN, 0x00, 0x02])
SOF_15x16 = bytes([0xFF, MarkerType.START_OF_FRAME_BASELINE, 0x00, 0x07, 0x08, 0x00, 0x10, 0x00, 0x0F])
SOF_EMPTY = bytes([0xFF, MarkerType.START_OF_FRAME_BASELINE, 0x00, 0x07, 0x00, 0x00, 0x00, 0x00, 0x00])


def icc_chunk(num, total, data=b""):
    length = len(ICC_ID) + 4 + len(data)
    return (
        bytes([0xFF, MarkerType.APP_2])
        + length.to_bytes(2, "big")
        + ICC_ID
        + bytes([num, total])
        + data
    )


def assert_icc_error(md, expected):
    assert md.icc_profile_data is None
    assert md.icc_profile_error is not None
    assert str(md.icc_profile_error) == expected
    assert md.pixel_width == 15
    assert md.pixel_height == 16
    assert md.bits_per_component == 8


def test_requires_start_of_image():
    with pytest.raises(ValueError, match="stream does not begin with start-of-image"):
        extract_metadata(io.BytesIO(EOI))


def test_no_start_of_frame():
    with pytest.raises(ValueError, match="no metadata found"):
        extract_metadata(io.BytesIO(SOI + EOI))


def test_unexpected_eof():
    with pytest.raises(ValueError, match="unexpected EOF"):
        extract_metadata(io.BytesIO(SOI))


def test_chunk_number_higher_than_total():
    data = SOI + SOF_15x16 + icc_chunk(2, 1) + SOS
    md = extract_metadata(io.BytesIO(data))
    assert_icc_error(md, "invalid ICC profile chunk number")


def test_inconsistent_chunk_totals():
    data = SOI + SOF_15x16 + icc_chunk(1, 2) + icc_chunk(2, 3) + SOS
    md = extract_metadata(io.BytesIO(data))
    assert_icc_error(md, "inconsistent ICC profile chunk count")


def test_duplicated_chunk():
    data = SOI + SOF_15x16 + icc_chunk(1, 3) + icc_chunk(1, 3) + SOS
    md = extract_metadata(io.BytesIO(data))
    assert_icc_error(md, "duplicated ICC profile chunk")


def test_missing_chunk():
    data = SOI + SOF_15x16 + icc_chunk(1, 2, bytes([0, 1, 2, 3, 4, 5])) + SOS
    md = extract_metadata(io.BytesIO(data))
    assert_icc_error(md, "incomplete ICC profile data")


def test_joins_chunks_in_order():
    part1 = bytes([0, 1, 2, 3, 4, 5])
    part2 = bytes([6, 7, 8, 9, 10, 11])
    data = SOI + SOF_EMPTY + icc_chunk(2, 2, part1) + icc_chunk(1, 2, part2) + SOS
    md = extract_metadata(io.BytesIO(data))
    assert md.icc_profile_error is None
    assert md.icc_profile_data == part2 + part1


def test_stops_after_all_metadata_found():
    stream = io.BytesIO(SOI + SOF_EMPTY + icc_chunk(1, 1, bytes([0, 1, 2, 3, 4, 5])) + SOS)
    extract_metadata(stream)
    assert stream.read(2) == bytes([0xFF, MarkerType.START_OF_SCAN])


def test_stops_at_start_of_scan():
    stream = io.BytesIO(SOI + SOF_EMPTY + SOS + EOI)
    extract_metadata(stream)
    assert stream.read(2) == EOI


def test_load_returns_full_stream():
    data = SOI + SOF_15x16 + SOS + b"\x01\x02" + EOI
    md, stream = load(io.BytesIO(data))
    assert md.format is ImageFormat.JPEG
    assert md.pixel_width == 15
    assert stream.read() == data


def test_load_failure_keeps_stream():
    data = b"not a jpeg at all"
    with pytest.raises(MetadataError) as info:
        load(io.BytesIO(data))
    assert info.value.stream.read() == data