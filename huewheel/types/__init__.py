from .color_types import (
    ColorModel,
    RGB,
    RGBA,
    RGBChannels,
    RGBAChannels,
    HSV,
    HSL,
    HSLA,
    Lab,
    Oklch,
    CMYK,
    StructuralColor,
)
from .format_type import ColorFormat, WCAGLevel, TextSize

__all__ = [
    "ColorModel",
    "RGB",
    "RGBA",
    "RGBChannels",
    "RGBAChannels",
    "HSV",
    "HSL",
    "HSLA",
    "Lab",
    "Oklch",
    "CMYK",
    "StructuralColor",
    "ColorFormat",
    "WCAGLevel",
    "TextSize",
]
