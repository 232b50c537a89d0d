"""Image metadata common to all supported formats."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import IO

from .icc.profile import Profile, ProfileReader


class ImageFormat(str, Enum):
    """The format of an image whose metadata was read."""

    JPEG = "JPEG"
    PNG = "PNG"

    def __str__(self) -> str:
        return self.value


class MetadataError(ValueError):
    """Metadata could not be extracted from an image stream.

    ``stream`` still yields the full image data, including whatever was
    consumed while trying to read the metadata.
    """

    def __init__(self, message: str, stream: IO[bytes]) -> None:
        super().__init__(message)
        self.stream = stream


class _ChainedRaw(io.RawIOBase):
    """Raw stream that yields buffered bytes and then the rest of a source."""

    def __init__(self, head: bytes, tail: IO[bytes]) -> None:
        super().__init__()
        self._head = io.BytesIO(head)
        self._tail = tail

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        count = self._head.readinto(buffer)
        if count:
            return count
        data = self._tail.read(len(buffer))
        if not data:
            return 0
        buffer[: len(data)] = data
        return len(data)


class RecordingReader:
    """Wraps a binary stream, remembering every byte read from it."""

    def __init__(self, source: IO[bytes]) -> None:
        self._source = source
        self._consumed = bytearray()

    def read(self, size: int = -1) -> bytes:
        data = self._source.read(size)
        if data:
            self._consumed.extend(data)
        return data

    def replay(self) -> io.BufferedReader:
        """Return a stream yielding the bytes read so far, then the rest."""
        return io.BufferedReader(_ChainedRaw(bytes(self._consumed), self._source))


@dataclass
class Data:
    """Metadata for an image."""

    format: ImageFormat
    pixel_width: int = 0
    pixel_height: int = 0
    bits_per_component: int = 0
    _icc_profile_data: bytes | None = field(default=None, init=False, repr=False)
    _icc_profile_error: Exception | None = field(default=None, init=False, repr=False)

    @property
    def icc_profile_data(self) -> bytes | None:
        """Raw ICC profile data, or None if none was found or it was invalid."""
        return self._icc_profile_data

    @property
    def icc_profile_error(self) -> Exception | None:
        """The error met while extracting the ICC profile, if any."""
        return self._icc_profile_error

    def icc_profile(self) -> Profile | None:
        """Parse and return the embedded ICC profile.

        Returns None if no profile was found; raises the extraction error if
        the profile could not be extracted, or a parse error.
        """
        if self._icc_profile_data is None:
            if self._icc_profile_error is not None:
                raise self._icc_profile_error
            return None
        return ProfileReader(io.BytesIO(self._icc_profile_data)).read_profile()

    def set_icc_profile_data(self, data: bytes | None) -> None:
        """Store raw ICC profile data, clearing any error."""
        self._icc_profile_data = data
        self._icc_profile_error = None

    def set_icc_profile_error(self, err: Exception) -> None:
        """Record an ICC profile extraction error, clearing any data."""
        self._icc_profile_data = None
        self._icc_profile_error = err