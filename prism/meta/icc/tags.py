"""Tag table and the tag types used for profile descriptions."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from ..binaryio import read_byte, read_u32_big
from .signature import DESC_SIGNATURE, MULTI_LOCALISED_UNICODE_SIGNATURE, Signature

_RECORD_HEADER_SIZE = 12


@dataclass
class MultiLocalisedUnicode:
    """Strings keyed by two-byte language and country codes."""

    entries: dict[bytes, dict[bytes, str]] = field(default_factory=dict)

    def get_any_string(self) -> str:
        """Return the first string stored, or an empty string."""
        return next(
            (text for countries in self.entries.values() for text in countries.values()),
            "",
        )

    def get_string(self, language: bytes, country: bytes) -> str:
        """Return the string for a language and country, or an empty string."""
        return self.entries.get(language, {}).get(country, "")

    def get_string_for_language(self, language: bytes) -> str:
        """Return any string for a language, or an empty string."""
        return next(iter(self.entries.get(language, {}).values()), "")

    def set_string(self, language: bytes, country: bytes, text: str) -> None:
        """Store a string for a language and country."""
        self.entries.setdefault(language, {})[country] = text


def _read_code(reader: io.BytesIO, what: str) -> bytes:
    code = reader.read(2)
    if not code:
        raise EOFError("EOF")
    if len(code) < 2:
        raise ValueError(f"unexpected eof when reading {what} code")
    return code


def _expect_signature(reader: io.BytesIO, expected: Signature) -> None:
    sig = Signature(read_u32_big(reader))
    if sig != expected:
        raise ValueError(f"expected {expected} but got {sig}")


def parse_multi_localised_unicode(data: bytes) -> MultiLocalisedUnicode:
    """Parse the body of an 'mluc' tag."""
    reader = io.BytesIO(data)
    _expect_signature(reader, MULTI_LOCALISED_UNICODE_SIGNATURE)
    read_u32_big(reader)  # reserved

    record_count = read_u32_big(reader)
    record_size = read_u32_big(reader)

    result = MultiLocalisedUnicode()
    for _ in range(record_count):
        language = _read_code(reader, "language")
        country = _read_code(reader, "country")
        length = read_u32_big(reader)
        offset = read_u32_big(reader)

        if offset + length > len(data):
            raise ValueError("record exceeds tag data length")

        raw = data[offset : offset + length - length % 2]
        result.set_string(language, country, raw.decode("utf-16-be", errors="replace"))

        padding = record_size - _RECORD_HEADER_SIZE
        if padding > 0 and len(reader.read(padding)) < padding:
            raise EOFError("EOF")

    return result


@dataclass
class TextDescription:
    """The ASCII part of a 'desc' tag."""

    ascii: str = ""


def parse_text_description(data: bytes) -> TextDescription:
    """Parse the body of a 'desc' tag."""
    reader = io.BytesIO(data)
    _expect_signature(reader, DESC_SIGNATURE)
    read_u32_big(reader)  # reserved

    ascii_count = read_u32_big(reader)
    if ascii_count == 0:
        raise ValueError("invalid ASCII description length")

    raw = reader.read(ascii_count - 1)
    if len(raw) < ascii_count - 1:
        raise EOFError("EOF")
    read_byte(reader)  # terminating null

    return TextDescription(ascii=raw.decode("ascii", errors="replace"))


@dataclass
class TagTable:
    """Raw tag data keyed by tag signature."""

    entries: dict[Signature, bytes] = field(default_factory=dict)

    def add(self, sig: Signature, data: bytes) -> None:
        """Record the data for a tag."""
        self.entries[Signature(sig)] = data

    def profile_description(self) -> str:
        """Return the profile description from the 'desc' tag.

        English text is preferred when the tag is multi-localised.
        """
        data = self.entries.get(DESC_SIGNATURE, b"")
        sig = Signature(read_u32_big(io.BytesIO(data)))

        if sig == DESC_SIGNATURE:
            return parse_text_description(data).ascii
        if sig == MULTI_LOCALISED_UNICODE_SIGNATURE:
            mluc = parse_multi_localised_unicode(data)
            return mluc.get_string_for_language(b"en") or mluc.get_any_string()
        raise ValueError(f"unknown profile description type ({sig})")