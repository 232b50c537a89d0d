"""ICC profile header fields and their enumerated values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from .signature import Signature


class _OpenIntEnum(IntEnum):
    """An integer enumeration that also accepts values it does not name."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int):
            return None
        pseudo = int.__new__(cls, value)
        pseudo._name_ = None
        pseudo._value_ = value
        return pseudo

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class ColorSpace(_OpenIntEnum):
    """Colour space signature of profile data or its connection space."""

    XYZ = 0x58595A20
    LAB = 0x4C616220
    LUV = 0x4C757620
    YCBCR = 0x59436272
    YXY = 0x59787920
    RGB = 0x52474220
    GRAY = 0x47524159
    HSV = 0x48535620
    HLS = 0x484C5320
    CMYK = 0x434D594B
    CMY = 0x434D5920
    COLOR_2 = 0x32434C52
    COLOR_3 = 0x33434C52
    COLOR_4 = 0x34434C52
    COLOR_5 = 0x35434C52
    COLOR_6 = 0x36434C52
    COLOR_7 = 0x37434C52
    COLOR_8 = 0x38434C52
    COLOR_9 = 0x39434C52
    COLOR_10 = 0x41434C52
    COLOR_11 = 0x42434C52
    COLOR_12 = 0x43434C52
    COLOR_13 = 0x44434C52
    COLOR_14 = 0x45434C52
    COLOR_15 = 0x46434C52

    def __str__(self) -> str:
        label = _COLOR_SPACE_LABELS.get(int(self))
        return label if label is not None else f"Unknown ({Signature(int(self))})"


_COLOR_SPACE_LABELS = {
    ColorSpace.XYZ: "XYZ",
    ColorSpace.LAB: "Lab",
    ColorSpace.LUV: "Luv",
    ColorSpace.YCBCR: "YCbCr",
    ColorSpace.YXY: "Yxy",
    ColorSpace.RGB: "RGB",
    ColorSpace.GRAY: "Gray",
    ColorSpace.HSV: "HSV",
    ColorSpace.HLS: "HLS",
    ColorSpace.CMYK: "CMYK",
    ColorSpace.CMY: "CMY",
    ColorSpace.COLOR_2: "2 color",
    ColorSpace.COLOR_3: "3 color",
    ColorSpace.COLOR_4: "4 color",
    ColorSpace.COLOR_5: "5 color",
    ColorSpace.COLOR_6: "6 color",
    ColorSpace.COLOR_7: "7 color",
    ColorSpace.COLOR_8: "8 color",
    ColorSpace.COLOR_9: "9 color",
    ColorSpace.COLOR_10: "10 color",
    ColorSpace.COLOR_11: "11 color",
    ColorSpace.COLOR_12: "12 color",
    ColorSpace.COLOR_13: "13 color",
    ColorSpace.COLOR_14: "14 color",
    ColorSpace.COLOR_15: "15 color",
}


class DeviceClass(_OpenIntEnum):
    """Profile/device class signature."""

    INPUT = 0x73636E72
    DISPLAY = 0x6D6E7472
    OUTPUT = 0x70727472
    LINK = 0x6C696E6B
    COLOR_SPACE = 0x73706163
    ABSTRACT = 0x61627374
    NAMED_COLOR = 0x6E6D636C

    def __str__(self) -> str:
        label = _DEVICE_CLASS_LABELS.get(int(self))
        return label if label is not None else f"Unknown ({Signature(int(self))})"


_DEVICE_CLASS_LABELS = {
    DeviceClass.INPUT: "Input",
    DeviceClass.DISPLAY: "Display",
    DeviceClass.OUTPUT: "Output",
    DeviceClass.LINK: "Device link",
    DeviceClass.COLOR_SPACE: "Color space",
    DeviceClass.ABSTRACT: "Abstract",
    DeviceClass.NAMED_COLOR: "Named color",
}


class PrimaryPlatform(_OpenIntEnum):
    """Primary platform signature."""

    NONE = 0x00000000
    APPLE = 0x4150504C
    MICROSOFT = 0x4D534654
    SGI = 0x53474920
    SUN = 0x53554E57

    def __str__(self) -> str:
        label = _PRIMARY_PLATFORM_LABELS.get(int(self))
        return label if label is not None else f"Unknown ({int(self)})"


_PRIMARY_PLATFORM_LABELS = {
    PrimaryPlatform.NONE: "None",
    PrimaryPlatform.APPLE: "Apple Computer, Inc.",
    PrimaryPlatform.MICROSOFT: "Microsoft Corporation",
    PrimaryPlatform.SGI: "Silicon Graphics, Inc.",
    PrimaryPlatform.SUN: "Sun Microsystems, Inc.",
}


class RenderingIntent(_OpenIntEnum):
    """Rendering intent recorded in a profile header."""

    PERCEPTUAL = 0
    RELATIVE_COLORIMETRIC = 1
    SATURATION = 2
    ABSOLUTE_COLORIMETRIC = 3

    def __str__(self) -> str:
        label = _RENDERING_INTENT_LABELS.get(int(self))
        return label if label is not None else f"Unknown ({int(self)})"


_RENDERING_INTENT_LABELS = {
    RenderingIntent.PERCEPTUAL: "Perceptual",
    RenderingIntent.RELATIVE_COLORIMETRIC: "Relative colorimetric",
    RenderingIntent.SATURATION: "Saturation",
    RenderingIntent.ABSOLUTE_COLORIMETRIC: "Absolute colorimetric",
}


@dataclass(frozen=True)
class Version:
    """Profile version: a major byte and a packed minor/revision byte."""

    major: int = 0
    minor_and_rev: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor_and_rev >> 4}.{self.minor_and_rev & 3}"


@dataclass
class Header:
    """The fixed 128-byte header of an ICC profile.

    ``created_at`` is None when the stored date cannot be represented.
    """

    profile_size: int = 0
    preferred_cmm: Signature = Signature(0)
    version: Version = Version()
    device_class: DeviceClass = DeviceClass(0)
    data_color_space: ColorSpace = ColorSpace(0)
    profile_connection_space: ColorSpace = ColorSpace(0)
    created_at: datetime | None = None
    primary_platform: PrimaryPlatform = PrimaryPlatform.NONE
    embedded: bool = False
    depends_on_embedded_data: bool = False
    device_manufacturer: Signature = Signature(0)
    device_model: Signature = Signature(0)
    device_attributes: int = 0
    rendering_intent: RenderingIntent = RenderingIntent.PERCEPTUAL
    pcs_illuminant: tuple[int, int, int] = (0, 0, 0)
    profile_creator: Signature = Signature(0)
    profile_id: bytes = bytes(16)