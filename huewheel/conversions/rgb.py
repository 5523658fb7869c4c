"""
HEX <-> RGB / RGBA codecs.

The ``*_to_hex`` encoders all funnel through :func:`channels_to_hex`, which
clamps and rounds each channel so internal float drift always yields a valid
byte. Malformed *input* is rejected earlier by the schemas.
"""
from __future__ import annotations

from typing import Any

from ..constants import ALPHA_MAX
from ..schemas import validate_hex, validate_model
from ..types.color_types import RGB, RGBA, ColorModel, RGBAChannels, RGBChannels
from .numbers import clamp, round_half_up


def channel_to_hex(value: float) -> str:
    return f"{round_half_up(clamp(value, 0, 255)):02x}"


def channels_to_hex(r: float, g: float, b: float) -> str:
    return f"#{channel_to_hex(r)}{channel_to_hex(g)}{channel_to_hex(b)}"


def unit_alpha_to_hex(a: float) -> str:
    """Alpha 0-1 as a two digit byte, out-of-range values clamped."""
    return f"{round_half_up(clamp(a, 0.0, 1.0) * ALPHA_MAX):02x}"


def alpha_percent(hex_color: str) -> int:
    """Alpha of an already validated hex as 0-100; 100 when there are no alpha digits."""
    if len(hex_color) == 9:
        return round_half_up(int(hex_color[7:9], 16) / ALPHA_MAX * 100)
    return 100


def split_channels(hex_color: str) -> tuple[int, int, int]:
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert a hex color to RGB.

    Args:
        hex_color: ``#rrggbb`` or ``#rrggbbaa`` (alpha digits are ignored)

    Returns:
        RGB with channels 0-255

    Raises:
        ColorValidationError: if ``hex_color`` is not a 6 or 8 digit hex color

    >>> hex_to_rgb("#ff0000")
    RGB(r=255, g=0, b=0)
    """
    hex_color = validate_hex(hex_color, "hex_to_rgb")
    r, g, b = split_channels(hex_color)
    return RGB(r=r, g=g, b=b)


def _channel_input(value: Any) -> Any:
    # RGB and RGBA instances are re-read as plain fields
    if isinstance(value, ColorModel):
        return value.model_dump()
    return value


def rgb_to_hex(rgb: RGB | dict[str, Any]) -> str:
    """
    Convert RGB to a 6-digit hex color.

    Channels may be fractional; each is rounded half up to a byte.

    >>> rgb_to_hex({"r": 0, "g": 255, "b": 0})
    '#00ff00'
    >>> rgb_to_hex({"r": 127.6, "g": 0, "b": 0})
    '#800000'
    """
    rgb = validate_model(RGBChannels, _channel_input(rgb), "rgb_to_hex")
    return channels_to_hex(rgb.r, rgb.g, rgb.b)


def hex_to_rgba(hex_color: str) -> RGBA:
    """
    Convert a hex color to RGBA; a 6-digit hex is fully opaque.

    >>> hex_to_rgba("#ff000080")
    RGBA(r=255, g=0, b=0, a=0.5)
    """
    hex_color = validate_hex(hex_color, "hex_to_rgba")
    r, g, b = split_channels(hex_color)
    return RGBA(r=r, g=g, b=b, a=alpha_percent(hex_color) / 100)


def rgba_to_hex(rgba: RGBA | dict[str, Any]) -> str:
    """
    Convert RGBA to an 8-digit hex color.

    >>> rgba_to_hex({"r": 255, "g": 0, "b": 0, "a": 0.5})
    '#ff000080'
    """
    rgba = validate_model(RGBAChannels, _channel_input(rgba), "rgba_to_hex")
    return channels_to_hex(rgba.r, rgba.g, rgba.b) + unit_alpha_to_hex(rgba.a)
