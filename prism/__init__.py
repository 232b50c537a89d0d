"""Image metadata extraction for PNG and JPEG streams, with ICC profile parsing."""

__version__ = "0.1.0"