"""Four-character signatures used throughout ICC colour profile data."""

from __future__ import annotations


class Signature(int):
    """A 32-bit ICC signature, shown as its four characters."""

    __slots__ = ()

    def __str__(self) -> str:
        raw = (int(self) & 0xFFFFFFFF).to_bytes(4, "big")
        chars = "".join(chr(b) if b else " " for b in raw)
        return f"'{chars}'"

    def __repr__(self) -> str:
        return f"Signature({self})"


PROFILE_FILE_SIGNATURE = Signature(0x61637370)  # 'acsp'
DESC_SIGNATURE = Signature(0x64657363)  # 'desc'
MULTI_LOCALISED_UNICODE_SIGNATURE = Signature(0x6D6C7563)  # 'mluc'