"""
Palette generation in HSL.

Harmony palettes keep the input color as element 0, normalized to its
lowercase 6-digit form.
"""
from __future__ import annotations

from typing import List

from .conversions.hsl import hex_to_hsl, hsl_components_to_hex
from .conversions.numbers import clamp, round_half_up
from .schemas import validate_count, validate_finite, validate_hex


def _base(hex_color: str) -> str:
    return hex_color[:7].lower()


def _hue_offsets(hex_color: str, offsets: List[float]) -> List[str]:
    hsl = hex_to_hsl(hex_color)
    return [_base(hex_color)] + [
        hsl_components_to_hex(hsl.h + offset, hsl.s, hsl.l) for offset in offsets
    ]


def generate_analogous(hex_color: str, count: int = 3, angle: float = 30) -> List[str]:
    """
    ``count`` colors ``angle`` degrees apart, straddling the base hue.

    For an odd count the base sits in the middle; for an even count it is
    just right of the middle.

    >>> generate_analogous("#ff0000")
    ['#ff0080', '#ff0000', '#ff8000']
    """
    hex_color = validate_hex(hex_color, "generate_analogous")
    count = validate_count(count, "generate_analogous")
    angle = validate_finite(angle, "generate_analogous", "Angle")

    hsl = hex_to_hsl(hex_color)
    half = count // 2
    return [
        hsl_components_to_hex(hsl.h + i * angle, hsl.s, hsl.l)
        for i in range(-half, count - half)
    ]


def generate_complementary(hex_color: str) -> List[str]:
    """
    >>> generate_complementary("#ff0000")
    ['#ff0000', '#00ffff']
    """
    hex_color = validate_hex(hex_color, "generate_complementary")
    return _hue_offsets(hex_color, [180])


def generate_split_complementary(hex_color: str, angle: float = 30) -> List[str]:
    """Base color plus the two hues ``angle`` degrees either side of its complement."""
    hex_color = validate_hex(hex_color, "generate_split_complementary")
    angle = validate_finite(angle, "generate_split_complementary", "Angle")
    return _hue_offsets(hex_color, [180 - angle, 180 + angle])


def generate_triadic(hex_color: str) -> List[str]:
    hex_color = validate_hex(hex_color, "generate_triadic")
    return _hue_offsets(hex_color, [120, 240])


def generate_tetradic(hex_color: str) -> List[str]:
    hex_color = validate_hex(hex_color, "generate_tetradic")
    return _hue_offsets(hex_color, [90, 180, 270])


def _shades(hex_color: str, count: int) -> List[str]:
    hsl = hex_to_hsl(hex_color)
    step = hsl.l / count
    return [
        hsl_components_to_hex(hsl.h, hsl.s, round_half_up(clamp(hsl.l - step * i, 0, 100)))
        for i in range(count)
    ]


def _tints(hex_color: str, count: int) -> List[str]:
    hsl = hex_to_hsl(hex_color)
    step = (100 - hsl.l) / count
    return [
        hsl_components_to_hex(hsl.h, hsl.s, round_half_up(clamp(hsl.l + step * i, 0, 100)))
        for i in range(count)
    ]


def generate_shades(hex_color: str, count: int = 5) -> List[str]:
    """
    ``count`` colors from the base lightness down toward black (base included).

    >>> generate_shades("#ff0000", 2)
    ['#ff0000', '#800000']
    """
    hex_color = validate_hex(hex_color, "generate_shades")
    count = validate_count(count, "generate_shades")
    return _shades(hex_color, count)


def generate_tints(hex_color: str, count: int = 5) -> List[str]:
    """``count`` colors from the base lightness up toward white (base included)."""
    hex_color = validate_hex(hex_color, "generate_tints")
    count = validate_count(count, "generate_tints")
    return _tints(hex_color, count)


def generate_scale(hex_color: str, steps: int = 5) -> List[str]:
    """
    Dark-to-light scale: shades (darkest first, base excluded) then tints.

    The result has ``2 * steps - 1`` colors with the base at index ``steps - 1``.
    """
    hex_color = validate_hex(hex_color, "generate_scale")
    steps = validate_count(steps, "generate_scale", "Steps")
    shades = _shades(hex_color, steps)[::-1][:-1]
    return shades + _tints(hex_color, steps)


def generate_monochromatic(hex_color: str, count: int = 5) -> List[str]:
    """
    Same hue, lightness swept 20-80% and saturation peaking at the middle sample.
    """
    hex_color = validate_hex(hex_color, "generate_monochromatic")
    count = validate_count(count, "generate_monochromatic")

    hsl = hex_to_hsl(hex_color)
    colors = []
    for i in range(count):
        t = i / (count - 1 or 1)
        lightness = 20 + t * 60
        saturation = 40 + (1 - abs(t - 0.5) * 2) * 60
        colors.append(
            hsl_components_to_hex(hsl.h, round_half_up(saturation), round_half_up(lightness))
        )
    return colors
