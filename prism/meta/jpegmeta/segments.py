"""JPEG markers and segments, and a reader that walks them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import IO

from ..binaryio import read_byte, read_u16_big


class MarkerType(IntEnum):
    """JPEG marker codes."""

    INVALID = 0x00
    START_OF_FRAME_BASELINE = 0xC0
    START_OF_FRAME_PROGRESSIVE = 0xC2
    DEFINE_HUFFMAN_TABLE = 0xC4
    RESTART_0 = 0xD0
    RESTART_1 = 0xD1
    RESTART_2 = 0xD2
    RESTART_3 = 0xD3
    RESTART_4 = 0xD4
    RESTART_5 = 0xD5
    RESTART_6 = 0xD6
    RESTART_7 = 0xD7
    START_OF_IMAGE = 0xD8
    END_OF_IMAGE = 0xD9
    START_OF_SCAN = 0xDA
    DEFINE_QUANTISATION_TABLE = 0xDB
    DEFINE_RESTART_INTERVAL = 0xDD
    APP_0 = 0xE0
    APP_1 = 0xE1
    APP_2 = 0xE2
    APP_3 = 0xE3
    APP_4 = 0xE4
    APP_5 = 0xE5
    APP_6 = 0xE6
    APP_7 = 0xE7
    APP_8 = 0xE8
    APP_9 = 0xE9
    APP_10 = 0xEA
    APP_11 = 0xEB
    APP_12 = 0xEC
    APP_13 = 0xED
    APP_14 = 0xEE
    APP_15 = 0xEF
    COMMENT = 0xFE

    def __str__(self) -> str:
        label = _MARKER_LABELS.get(int(self))
        return label if label is not None else f"Unknown ({int(self):x})"


_MARKER_LABELS = {
    MarkerType.START_OF_FRAME_BASELINE: "SOF0",
    MarkerType.START_OF_FRAME_PROGRESSIVE: "SOF2",
    MarkerType.DEFINE_HUFFMAN_TABLE: "DHT",
    MarkerType.START_OF_IMAGE: "SOI",
    MarkerType.END_OF_IMAGE: "EOI",
    MarkerType.START_OF_SCAN: "SOS",
    MarkerType.DEFINE_QUANTISATION_TABLE: "DQT",
    MarkerType.DEFINE_RESTART_INTERVAL: "DRI",
    MarkerType.COMMENT: "COM",
    **{MarkerType(0xD0 + n): f"RST{n}" for n in range(8)},
    **{MarkerType(0xE0 + n): f"APP{n}" for n in range(16)},
}

_RESTARTS = frozenset(MarkerType(0xD0 + n) for n in range(8))
_STANDALONE = _RESTARTS | {MarkerType.START_OF_IMAGE, MarkerType.END_OF_IMAGE}
_WITH_LENGTH = frozenset(
    {
        MarkerType.START_OF_FRAME_BASELINE,
        MarkerType.START_OF_FRAME_PROGRESSIVE,
        MarkerType.DEFINE_HUFFMAN_TABLE,
        MarkerType.START_OF_SCAN,
        MarkerType.DEFINE_QUANTISATION_TABLE,
        MarkerType.DEFINE_RESTART_INTERVAL,
        MarkerType.COMMENT,
        *(MarkerType(0xE0 + n) for n in range(16)),
    }
)


@dataclass(frozen=True)
class Marker:
    """A marker and the length of the data that follows it."""

    type: MarkerType = MarkerType.INVALID
    data_length: int = 0


@dataclass(frozen=True)
class Segment:
    """A marker with its data."""

    marker: Marker
    data: bytes = b""


def make_marker(m_type: int, r: IO[bytes]) -> Marker:
    """Build a marker of the given type, reading its length if it has one."""
    if m_type in _STANDALONE:
        length = 2
    elif m_type in _WITH_LENGTH:
        length = read_u16_big(r)
    else:
        raise ValueError(f"unrecognised marker type {m_type:x}")
    return Marker(type=MarkerType(m_type), data_length=length - 2)


def read_marker(r: IO[bytes]) -> Marker:
    """Read a 0xFF-prefixed marker."""
    b = read_byte(r)
    if b != 0xFF:
        raise ValueError(f"invalid marker identifier {b:x}")
    return make_marker(read_byte(r), r)


def make_segment(marker_type: int, r: IO[bytes]) -> Segment:
    """Build a segment for a marker without reading its data."""
    return Segment(marker=make_marker(marker_type, r))


def read_segment(r: IO[bytes]) -> Segment:
    """Read a marker and all of its data."""
    marker = read_marker(r)
    length = max(marker.data_length, 0)
    data = r.read(length) if length else b""
    if len(data) < length:
        raise EOFError("EOF" if not data else "unexpected EOF")
    return Segment(marker=marker, data=data)


class SegmentReader:
    """Reads segments in turn, skipping entropy-coded scan data."""

    def __init__(self, reader: IO[bytes]) -> None:
        self._reader = reader
        self._in_entropy_coded_data = False

    def read_segment(self) -> Segment:
        """Read the next segment."""
        r = self._reader
        if self._in_entropy_coded_data:
            while True:
                if read_byte(r) != 0xFF:
                    continue
                b = read_byte(r)
                if b == 0x00:
                    continue
                seg = make_segment(b, r)
                self._in_entropy_coded_data = (
                    seg.marker.type == MarkerType.START_OF_SCAN
                    or seg.marker.type in _RESTARTS
                )
                return seg

        seg = read_segment(r)
        self._in_entropy_coded_data = seg.marker.type == MarkerType.START_OF_SCAN
        return seg