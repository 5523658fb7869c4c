"""
Color string parsing and formatting.

:func:`parse_color` is the single canonicalization entry point: it turns any
supported notation (named color, short/long hex, CSS ``rgb()``/``hsl()`` in
either syntax) into a lowercase ``#rrggbb`` or ``#rrggbbaa`` string. Every
other helper here is built on it.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from .conversions.css import css_hsl_to_hex, css_rgb_to_hex, hex_to_css_hsl, hex_to_css_rgb
from .conversions.hsl import hex_to_hsl, hex_to_hsla
from .conversions.rgb import hex_to_rgb, hex_to_rgba
from .conversions.spaces import hex_to_cmyk, hex_to_lab, hex_to_oklch
from .errors import ColorValidationError
from .schemas import validate_hex
from .types.color_types import CMYK, HSL, HSLA, RGB, RGBA, Lab, Oklch, StructuralColor
from .types.format_type import ColorFormat
from .utils.named_colors import CSS_NAMED_COLORS

logger = logging.getLogger(__name__)

_SHORT_HEX_RE = re.compile(r"#[0-9a-f]{3}")
_SHORT_HEX8_RE = re.compile(r"#[0-9a-f]{4}")
_HEX_RE = re.compile(r"#[0-9a-f]{6}")
_HEX8_RE = re.compile(r"#[0-9a-f]{8}")
_RGB_PREFIX_RE = re.compile(r"rgba?\s*\(")
_HSL_PREFIX_RE = re.compile(r"hsla?\s*\(")
_FOUR_RGB_ARGS_RE = re.compile(r"[\d.]+\s*[,/\s]\s*[\d.]+\s*[,/\s]\s*[\d.]+\s*[,/]\s*[\d.]+")
_FOUR_HSL_ARGS_RE = re.compile(r"[\d.]+\s*[,/\s]\s*[\d.]+%?\s*[,/\s]\s*[\d.]+%?\s*[,/]\s*[\d.]+")

FormattedColor = Union[str, StructuralColor]


class ParsedColor(BaseModel):
    """Every representation of one input color."""

    model_config = ConfigDict(frozen=True)

    hex: str
    hex8: str
    rgb: RGB
    rgba: RGBA
    hsl: HSL
    hsla: HSLA
    css_rgb: str
    css_hsl: str
    lab: Lab
    oklch: Oklch
    cmyk: CMYK
    format: ColorFormat
    original: str


def _expand_short_hex(short: str) -> str:
    return "#" + "".join(digit * 2 for digit in short[1:])


def detect_color_format(color: str) -> Optional[ColorFormat]:
    """
    Detect the notation of a color string, or ``None`` when unrecognized.

    >>> detect_color_format("rgb(255 0 0 / 0.5)")
    <ColorFormat.CSS_RGBA: 'css_rgba'>
    """
    if not isinstance(color, str):
        return None
    text = color.strip().lower()

    named = CSS_NAMED_COLORS.get(text)
    if named is not None:
        return ColorFormat.HEX8 if len(named) == 9 else ColorFormat.HEX

    if _HEX8_RE.fullmatch(text) or _SHORT_HEX8_RE.fullmatch(text):
        return ColorFormat.HEX8
    if _HEX_RE.fullmatch(text) or _SHORT_HEX_RE.fullmatch(text):
        return ColorFormat.HEX

    if _RGB_PREFIX_RE.match(text):
        return ColorFormat.CSS_RGBA if _FOUR_RGB_ARGS_RE.search(text) else ColorFormat.CSS_RGB
    if _HSL_PREFIX_RE.match(text):
        return ColorFormat.CSS_HSLA if _FOUR_HSL_ARGS_RE.search(text) else ColorFormat.CSS_HSL

    return None


def parse_color(color: str) -> str:
    """
    Canonicalize any supported color notation to lowercase hex.

    >>> parse_color("Red")
    '#ff0000'
    >>> parse_color("#f008")
    '#ff000088'
    >>> parse_color("hsl(120 100% 50%)")
    '#00ff00'

    Raises:
        ColorValidationError: for anything that is not a recognized color
    """
    if not isinstance(color, str):
        raise ColorValidationError(
            function_name="parse_color",
            message="Color must be a string",
            received_value=color,
        )
    text = color.strip().lower()

    named = CSS_NAMED_COLORS.get(text)
    if named is not None:
        return named

    if _SHORT_HEX_RE.fullmatch(text) or _SHORT_HEX8_RE.fullmatch(text):
        return _expand_short_hex(text)
    if _HEX_RE.fullmatch(text) or _HEX8_RE.fullmatch(text):
        return text

    if _RGB_PREFIX_RE.match(text):
        return css_rgb_to_hex(text)
    if _HSL_PREFIX_RE.match(text):
        return css_hsl_to_hex(text)

    logger.debug("Unrecognized color format: %r", color)
    raise ColorValidationError(
        function_name="parse_color",
        message="Unrecognized color format",
        received_value=color,
    )


def parse_color_full(color: str) -> ParsedColor:
    """Parse once and return every representation, for UIs that fill several fields."""
    hex_color = parse_color(color)
    hex6 = hex_color[:7]
    has_alpha = len(hex_color) == 9 and hex_color[7:] != "ff"

    return ParsedColor(
        hex=hex6,
        hex8=hex_color if has_alpha else f"{hex6}ff",
        rgb=hex_to_rgb(hex6),
        rgba=hex_to_rgba(hex_color),
        hsl=hex_to_hsl(hex6),
        hsla=hex_to_hsla(hex_color),
        css_rgb=hex_to_css_rgb(hex_color),
        css_hsl=hex_to_css_hsl(hex_color),
        lab=hex_to_lab(hex6),
        oklch=hex_to_oklch(hex6),
        cmyk=hex_to_cmyk(hex6),
        format=detect_color_format(color) or ColorFormat.HEX,
        original=color,
    )


def format_color(color: str, fmt: Union[ColorFormat, str]) -> FormattedColor:
    """
    Parse ``color`` and render it in ``fmt``.

    Hex and CSS formats return strings; the others return structural models.

    >>> format_color("red", "css_hsl")
    'hsl(0, 100%, 50%)'
    """
    try:
        fmt = ColorFormat(fmt)
    except ValueError:
        raise ColorValidationError(
            function_name="format_color",
            message="Unknown color format",
            received_value=fmt,
        ) from None

    hex_color = parse_color(color)
    hex6 = hex_color[:7]

    if fmt is ColorFormat.HEX:
        return hex6
    if fmt is ColorFormat.HEX8:
        return hex_color if len(hex_color) == 9 else f"{hex6}ff"
    if fmt is ColorFormat.RGB:
        return hex_to_rgb(hex6)
    if fmt is ColorFormat.RGBA:
        return hex_to_rgba(hex_color)
    if fmt is ColorFormat.HSL:
        return hex_to_hsl(hex6)
    if fmt is ColorFormat.HSLA:
        return hex_to_hsla(hex_color)
    if fmt in (ColorFormat.CSS_RGB, ColorFormat.CSS_RGBA):
        return hex_to_css_rgb(hex_color)
    if fmt in (ColorFormat.CSS_HSL, ColorFormat.CSS_HSLA):
        return hex_to_css_hsl(hex_color)
    if fmt is ColorFormat.LAB:
        return hex_to_lab(hex6)
    if fmt is ColorFormat.OKLCH:
        return hex_to_oklch(hex6)
    return hex_to_cmyk(hex6)


def is_valid_color(color: str) -> bool:
    try:
        parse_color(color)
    except ColorValidationError:
        return False
    return True


def get_named_color(hex_color: str) -> Optional[str]:
    """
    CSS name of a color, or ``None``. Alpha digits are ignored.

    >>> get_named_color("#FF0000")
    'red'
    """
    hex6 = validate_hex(hex_color, "get_named_color")[:7].lower()
    for name, value in CSS_NAMED_COLORS.items():
        if value == hex6:
            return name
    return None


def get_named_colors() -> Dict[str, str]:
    """A copy of the named color table."""
    return dict(CSS_NAMED_COLORS)
