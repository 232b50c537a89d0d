"""ICC profiles and a reader that parses them from a binary stream."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import IO

from ..binaryio import read_byte, read_u16_big, read_u32_big, read_u64_big
from .header import ColorSpace, DeviceClass, Header, PrimaryPlatform, RenderingIntent, Version
from .signature import PROFILE_FILE_SIGNATURE, Signature
from .tags import TagTable

_TAG_TABLE_OFFSET = 128
_TAG_ENTRY_SIZE = 12
_PROFILE_ID_SIZE = 16
_HEADER_RESERVED_SIZE = 28


@dataclass
class Profile:
    """A parsed ICC profile: its header and raw tag data."""

    header: Header = field(default_factory=Header)
    tag_table: TagTable = field(default_factory=TagTable)

    def description(self) -> str:
        """Return the profile's description text."""
        return self.tag_table.profile_description()


def _make_datetime(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> datetime | None:
    """Build a UTC datetime, carrying out-of-range fields into larger units."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        base = datetime(year, month, 1, tzinfo=timezone.utc)
        return base + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)
    except (ValueError, OverflowError):
        return None


class ProfileReader:
    """Reads an ICC profile from a binary stream."""

    def __init__(self, reader: IO[bytes]) -> None:
        self._reader = reader

    def read_profile(self) -> Profile:
        """Read the header and tag table of a profile."""
        profile = Profile(header=self.read_header())
        self.read_tag_table(profile.tag_table)
        return profile

    def _read_u32(self) -> int:
        return read_u32_big(self._reader)

    def _read_date_time(self) -> datetime | None:
        year, month, day, hour, minute, second = (
            read_u16_big(self._reader) for _ in range(6)
        )
        return _make_datetime(year, month, day, hour, minute, second)

    def read_header(self) -> Header:
        """Read the 128-byte profile header."""
        r = self._reader

        profile_size = self._read_u32()
        preferred_cmm = Signature(self._read_u32())
        major = read_byte(r)
        minor_and_rev = read_byte(r)
        read_byte(r)  # reserved
        read_byte(r)  # reserved
        device_class = DeviceClass(self._read_u32())
        data_color_space = ColorSpace(self._read_u32())
        connection_space = ColorSpace(self._read_u32())
        created_at = self._read_date_time()

        sig = Signature(self._read_u32())
        if sig != PROFILE_FILE_SIGNATURE:
            raise ValueError(f"invalid profile file signature {sig}")

        primary_platform = PrimaryPlatform(self._read_u32())
        flags = self._read_u32()
        device_manufacturer = Signature(self._read_u32())
        device_model = Signature(self._read_u32())
        device_attributes = read_u64_big(r)
        rendering_intent = RenderingIntent(self._read_u32())
        illuminant = (self._read_u32(), self._read_u32(), self._read_u32())
        profile_creator = Signature(self._read_u32())

        profile_id = r.read(_PROFILE_ID_SIZE)
        if not profile_id:
            raise EOFError("EOF")
        if len(profile_id) < _PROFILE_ID_SIZE:
            raise ValueError("unexpected EOF when reading profile ID")

        if len(r.read(_HEADER_RESERVED_SIZE)) < _HEADER_RESERVED_SIZE:
            raise EOFError("EOF")

        return Header(
            profile_size=profile_size,
            preferred_cmm=preferred_cmm,
            version=Version(major, minor_and_rev),
            device_class=device_class,
            data_color_space=data_color_space,
            profile_connection_space=connection_space,
            created_at=created_at,
            primary_platform=primary_platform,
            embedded=(flags >> 31) != 0,
            depends_on_embedded_data=((flags >> 30) & 1) != 0,
            device_manufacturer=device_manufacturer,
            device_model=device_model,
            device_attributes=device_attributes,
            rendering_intent=rendering_intent,
            pcs_illuminant=illuminant,
            profile_creator=profile_creator,
            profile_id=profile_id,
        )

    def read_tag_table(self, tag_table: TagTable) -> None:
        """Read the tag index and tag data into ``tag_table``."""
        tag_count = self._read_u32()

        index: dict[Signature, tuple[int, int]] = {}
        end_of_tag_data = 0
        for _ in range(tag_count):
            sig = Signature(self._read_u32())
            offset = self._read_u32()
            size = self._read_u32()
            end_of_tag_data = max(end_of_tag_data, offset + size)
            index[sig] = (offset, size)

        tag_data_offset = _TAG_TABLE_OFFSET + 4 + tag_count * _TAG_ENTRY_SIZE
        length = end_of_tag_data - tag_data_offset
        if length < 0:
            raise ValueError("tag data ends before the tag table does")

        tag_data = self._reader.read(length) if length else b""
        if length and not tag_data:
            raise EOFError("EOF")
        if len(tag_data) < length:
            raise ValueError(
                f"expected {length} bytes of tag data but only got {len(tag_data)}"
            )

        for sig, (offset, size) in index.items():
            start = offset - tag_data_offset
            if start < 0:
                raise ValueError(f"tag {sig} starts before the tag data")
            tag_table.add(sig, tag_data[start : start + size])