# prism

Reads basic metadata from PNG and JPEG image streams without decoding the
pixel data. It reports the pixel dimensions, the bits per component and any
embedded ICC colour profile. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

## Loading metadata

`prism.meta.autometa.load` detects whether a stream is PNG or JPEG. It reads
only as much of the stream as it needs. It returns a `Data` object and a new
stream. The new stream replays the whole input from the first byte, so you can
pass it straight to an image decoder.

```python
from prism.meta import autometa

with open("photo.jpg", "rb") as f:
    md, stream = autometa.load(f)
    print(md.format, md.pixel_width, md.pixel_height, md.bits_per_component)
    full_image_bytes = stream.read()
```

`md.format` is an `ImageFormat`, either `ImageFormat.PNG` or
`ImageFormat.JPEG`.

If the stream is not a recognised format, `load` raises
`prism.meta.data.MetadataError` with the message
`unrecognised image format`. The error's `stream` attribute still yields the
full input, including the bytes that were read while trying each format:

```python
from prism.meta.data import MetadataError

try:
    md, stream = autometa.load(f)
except MetadataError as exc:
    original_bytes = exc.stream.read()
```

To handle one format only, use `prism.meta.pngmeta.pngmeta.load` or
`prism.meta.jpegmeta.jpegmeta.load`. They work the same way and raise
`MetadataError` on failure. Their `extract_metadata` functions read straight
from a binary stream. They return a `Data` object and raise `ValueError` or
`EOFError` on failure.

## ICC profiles

If extraction of an embedded ICC profile fails, the image's basic metadata is
still returned. The failure is recorded on the `Data` object:

- `md.icc_profile_data` holds the raw profile bytes, or `None`.
- `md.icc_profile_error` holds the exception met while extracting them, or
  `None`. Examples are a corrupt zlib stream in a PNG, or missing, duplicated
  or inconsistent chunks in a JPEG.

`md.icc_profile()` parses the raw data and returns a `Profile`. It returns
`None` when the image has no profile. It raises the stored error when
extraction failed.

```python
profile = md.icc_profile()
if profile is not None:
    print(profile.header.version)       # e.g. 4.3.0
    print(profile.header.device_class)  # e.g. Display
    print(profile.header.created_at)    # a UTC datetime
    print(profile.description())        # e.g. sRGB IEC61966-2.1
```

`Profile.description()` reads the `desc` tag, which may be either of two
types:

- the older `desc` text description;
- the multi-localised `mluc` type. For this type English text is preferred,
  and any other entry is used otherwise.

To read a standalone `.icc` file, use `prism.meta.icc.profile.ProfileReader`:

```python
from prism.meta.icc.profile import ProfileReader

with open("display.icc", "rb") as f:
    profile = ProfileReader(f).read_profile()
```

The header fields live in `prism.meta.icc.header`:

- `ColorSpace`, `DeviceClass`, `PrimaryPlatform` and `RenderingIntent` are
  integer enumerations that print readably.
- They also accept values they do not name, which print as `Unknown (...)`.
- `Version` prints as `major.minor.revision`.

Four-character codes are `prism.meta.icc.signature.Signature` values, which
print as, for example, `'lcms'`.

## Binary helpers

`prism.meta.binaryio` provides functions that read big-endian integers from a
binary stream:

- `read_byte`
- `read_u16_big`
- `read_u32_big`
- `read_u64_big`

These raise `EOFError` at the end of the stream. `write_u32_big` writes a
32-bit big-endian integer.

## What it does not do

The package does not decode pixel data. It does not convert colours between
colour spaces, and it does not apply ICC profiles to images. Only two parts of
a profile are interpreted: the header and the description tag. All other tags
are kept as raw bytes in `profile.tag_table.entries`.