import math
from typing import Tuple

from ..schemas import validate_hex, validate_model
from ..types.color_types import HSV
from .numbers import normalize_hue, round_half_up
from .rgb import channels_to_hex, split_channels


def rgb_hue(r: float, g: float, b: float) -> float:
    """
    Unrounded hue in degrees of an RGB triple in [0, 1].

    Achromatic colors (r == g == b) get hue 0.
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    if delta == 0:
        return 0.0
    if max_c == r:
        hue = ((g - b) / delta) % 6
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return hue * 60


def round_hue(hue: float) -> int:
    """Round a hue to whole degrees, folding 360 to 0."""
    return round_half_up(hue) % 360


def chroma_to_unit_rgb(h: float, c: float, x: float) -> Tuple[float, float, float]:
    """Place chroma ``c`` and intermediate ``x`` by hue sextant."""
    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r, g, b


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (hue [0, 360), saturation [0, 1], value [0, 1]), unrounded
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    saturation = 0.0 if max_c == 0 else delta / max_c
    return rgb_hue(r, g, b), saturation, max_c


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: hue in degrees, any real (wrapped into [0, 360))
        s: saturation in [0, 1]
        v: value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c
    r, g, b = chroma_to_unit_rgb(h, c, x)
    return r + m, g + m, b + m


def hex_to_hsv(hex_color: str) -> HSV:
    """
    Convert a hex color to HSV with whole-number components.

    >>> hex_to_hsv("#00ff00")
    HSV(h=120.0, s=100.0, v=100.0)
    """
    hex_color = validate_hex(hex_color, "hex_to_hsv")
    r, g, b = (channel / 255 for channel in split_channels(hex_color))
    h, s, v = unit_rgb_to_hsv(r, g, b)
    return HSV(h=round_hue(h), s=round_half_up(s * 100), v=round_half_up(v * 100))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """
    Convert HSV components to a 6-digit hex color.

    Args:
        h: hue 0-360 (360 wraps to 0)
        s: saturation 0-100
        v: value/brightness 0-100

    >>> hsv_to_hex(0, 100, 100)
    '#ff0000'
    """
    hsv = validate_model(HSV, {"h": h, "s": s, "v": v}, "hsv_to_hex")
    r, g, b = hsv_to_unit_rgb(hsv.h, hsv.s / 100, hsv.v / 100)
    return channels_to_hex(r * 255, g * 255, b * 255)
