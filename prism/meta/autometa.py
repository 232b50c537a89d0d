"""Metadata loading with automatic detection of the image format."""

from __future__ import annotations

from typing import IO

from .data import Data, MetadataError
from .jpegmeta import jpegmeta
from .pngmeta import pngmeta

_LOADERS = (pngmeta.load, jpegmeta.load)


def load(r: IO[bytes]) -> tuple[Data, IO[bytes]]:
    """Load the metadata of an image stream in any supported format.

    The returned stream yields the full image data. If no format is
    recognised, a MetadataError is raised whose ``stream`` attribute still
    yields the full image data.
    """
    stream = r
    for loader in _LOADERS:
        try:
            return loader(stream)
        except MetadataError as exc:
            stream = exc.stream
    raise MetadataError("unrecognised image format", stream)