from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    HEX8 = "hex8"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    CSS_RGB = "css_rgb"
    CSS_RGBA = "css_rgba"
    CSS_HSL = "css_hsl"
    CSS_HSLA = "css_hsla"
    LAB = "lab"
    OKLCH = "oklch"
    CMYK = "cmyk"


class WCAGLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"


class TextSize(str, Enum):
    NORMAL = "normal"
    LARGE = "large"
