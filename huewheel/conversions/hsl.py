from __future__ import annotations

from typing import Any, Tuple

from ..schemas import validate_hex, validate_model
from ..types.color_types import HSL, HSLA
from .hsv import chroma_to_unit_rgb, rgb_hue, round_hue
from .numbers import clamp, normalize_hue, round_half_up
from .rgb import alpha_percent, channels_to_hex, split_channels, unit_alpha_to_hex


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (hue [0, 360), saturation [0, 1], lightness [0, 1]), unrounded
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    return rgb_hue(r, g, b), saturation, lightness


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: hue in degrees, any real (wrapped into [0, 360))
        s: saturation in [0, 1]
        l: lightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2
    r, g, b = chroma_to_unit_rgb(h, c, x)
    return r + m, g + m, b + m


def hsl_components_to_hex(h: float, s: float, l: float) -> str:
    """Encode HSL (degrees, percents) without validation; s and l are clamped to 0-100."""
    r, g, b = hsl_to_unit_rgb(h, clamp(s, 0, 100) / 100, clamp(l, 0, 100) / 100)
    return channels_to_hex(r * 255, g * 255, b * 255)


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert a hex color to HSL with whole-number components.

    >>> hex_to_hsl("#ff0000")
    HSL(h=0.0, s=100.0, l=50.0)
    """
    hex_color = validate_hex(hex_color, "hex_to_hsl")
    r, g, b = (channel / 255 for channel in split_channels(hex_color))
    h, s, l = unit_rgb_to_hsl(r, g, b)
    return HSL(h=round_hue(h), s=round_half_up(s * 100), l=round_half_up(l * 100))


def hsl_to_hex(hsl: HSL | dict[str, Any]) -> str:
    """
    Convert HSL to a 6-digit hex color.

    >>> hsl_to_hex({"h": 120, "s": 100, "l": 50})
    '#00ff00'
    """
    hsl = validate_model(HSL, hsl, "hsl_to_hex")
    return hsl_components_to_hex(hsl.h, hsl.s, hsl.l)


def hex_to_hsla(hex_color: str) -> HSLA:
    """
    Convert a hex color to HSLA; a 6-digit hex is fully opaque.

    >>> hex_to_hsla("#ff000080")
    HSLA(h=0.0, s=100.0, l=50.0, a=0.5)
    """
    hex_color = validate_hex(hex_color, "hex_to_hsla")
    hsl = hex_to_hsl(hex_color)
    return HSLA(h=hsl.h, s=hsl.s, l=hsl.l, a=alpha_percent(hex_color) / 100)


def hsla_to_hex(hsla: HSLA | dict[str, Any]) -> str:
    """
    Convert HSLA to an 8-digit hex color.

    >>> hsla_to_hex({"h": 0, "s": 100, "l": 50, "a": 0.5})
    '#ff000080'
    """
    hsla = validate_model(HSLA, hsla, "hsla_to_hex")
    return hsl_components_to_hex(hsla.h, hsla.s, hsla.l) + unit_alpha_to_hex(hsla.a)
