"""
Huewheel Color Conversions
==========================

Pure, validated codecs between the canonical hex string and the structural
color models. Every ``hex_to_*`` accepts ``#rrggbb`` or ``#rrggbbaa``; every
``*_to_hex`` clamps and rounds at the byte boundary only.

RGB:
    hex_to_rgb(hex) / rgb_to_hex(rgb)
    hex_to_rgba(hex) / rgba_to_hex(rgba)

Alpha:
    alpha_to_hex(alpha) / parse_alpha_from_hex(hex)
    combine_hex_with_alpha(hex, alpha)

HSV / HSL:
    hex_to_hsv(hex) / hsv_to_hex(h, s, v)
    hex_to_hsl(hex) / hsl_to_hex(hsl)
    hex_to_hsla(hex) / hsla_to_hex(hsla)

CSS strings:
    hex_to_css_rgb(hex) / css_rgb_to_hex(css)
    hex_to_css_hsl(hex) / css_hsl_to_hex(css)

Extended spaces:
    hex_to_lab(hex) / lab_to_hex(lab)
    hex_to_oklch(hex) / oklch_to_hex(oklch)
    hex_to_cmyk(hex) / cmyk_to_hex(cmyk)
    get_delta_e(hex1, hex2)

Low-level scalar helpers (no validation, channels in [0, 1]):
    unit_rgb_to_hsv, hsv_to_unit_rgb, unit_rgb_to_hsl, hsl_to_unit_rgb
    srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb

Examples
--------
>>> from huewheel.conversions import hex_to_hsl, hsl_to_hex
>>> hsl = hex_to_hsl("#ff8000")
>>> hsl_to_hex(hsl.model_copy(update={"l": 30}))
'#994d00'
"""

from .rgb import hex_to_rgb, rgb_to_hex, hex_to_rgba, rgba_to_hex
from .alpha import alpha_to_hex, parse_alpha_from_hex, combine_hex_with_alpha
from .hsv import hex_to_hsv, hsv_to_hex, unit_rgb_to_hsv, hsv_to_unit_rgb
from .hsl import (
    hex_to_hsl,
    hsl_to_hex,
    hex_to_hsla,
    hsla_to_hex,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
)
from .css import hex_to_css_rgb, css_rgb_to_hex, hex_to_css_hsl, css_hsl_to_hex
from .spaces import (
    hex_to_lab,
    lab_to_hex,
    hex_to_oklch,
    oklch_to_hex,
    hex_to_cmyk,
    cmyk_to_hex,
    get_delta_e,
)
from .gamma import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb

__all__ = [
    # RGB
    'hex_to_rgb',
    'rgb_to_hex',
    'hex_to_rgba',
    'rgba_to_hex',

    # Alpha
    'alpha_to_hex',
    'parse_alpha_from_hex',
    'combine_hex_with_alpha',

    # HSV / HSL
    'hex_to_hsv',
    'hsv_to_hex',
    'hex_to_hsl',
    'hsl_to_hex',
    'hex_to_hsla',
    'hsla_to_hex',
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',

    # CSS
    'hex_to_css_rgb',
    'css_rgb_to_hex',
    'hex_to_css_hsl',
    'css_hsl_to_hex',

    # Extended spaces
    'hex_to_lab',
    'lab_to_hex',
    'hex_to_oklch',
    'oklch_to_hex',
    'hex_to_cmyk',
    'cmyk_to_hex',
    'get_delta_e',

    # Gamma
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
]
