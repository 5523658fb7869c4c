"""
Extended color spaces: CIE Lab, Oklch and CMYK, plus CIE76 Delta E.

Every conversion pivots through RGB so a single sRGB gamma implementation
(``np_srgb_to_linear`` / ``np_linear_to_srgb``) serves all of them.
"""
from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from ..constants import (
    D65_WHITE,
    LAB_EPSILON,
    LAB_KAPPA,
    LINEAR_SRGB_TO_LMS,
    LMS_TO_LINEAR_SRGB,
    LMS_TO_OKLAB,
    OKLAB_TO_LMS,
    SRGB_TO_XYZ,
    XYZ_TO_SRGB,
)
from ..schemas import validate_hex, validate_model
from ..types.color_types import CMYK, Lab, Oklch
from .gamma import np_linear_to_srgb, np_srgb_to_linear
from .numbers import normalize_hue, round_half_up, round_to
from .rgb import channels_to_hex, split_channels

## Lab


def rgb_to_xyz(rgb: NDArray) -> NDArray:
    """8-bit sRGB channels -> XYZ scaled so that Y of white is 100."""
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255)
    return SRGB_TO_XYZ @ linear * 100


def xyz_to_rgb(xyz: NDArray) -> NDArray:
    """XYZ (Y of white = 100) -> unrounded, unclamped 8-bit sRGB channels."""
    linear = XYZ_TO_SRGB @ (np.asarray(xyz, dtype=float) / 100)
    return np_linear_to_srgb(linear) * 255


def xyz_to_lab(xyz: NDArray) -> NDArray:
    t = np.asarray(xyz, dtype=float) / D65_WHITE
    f = np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)
    fx, fy, fz = f
    return np.array([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)])


def lab_to_xyz(l: float, a: float, b: float) -> NDArray:
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xr = fx ** 3 if fx ** 3 > LAB_EPSILON else (116 * fx - 16) / LAB_KAPPA
    yr = ((l + 16) / 116) ** 3 if l > LAB_KAPPA * LAB_EPSILON else l / LAB_KAPPA
    zr = fz ** 3 if fz ** 3 > LAB_EPSILON else (116 * fz - 16) / LAB_KAPPA

    return np.array([xr, yr, zr]) * D65_WHITE


def hex_to_lab(hex_color: str) -> Lab:
    """
    Convert a hex color to CIE Lab (D65), components rounded to 2 decimals.

    >>> hex_to_lab("#ffffff")
    Lab(l=100.0, a=0.0, b=0.0)
    """
    hex_color = validate_hex(hex_color, "hex_to_lab")
    l, a, b = xyz_to_lab(rgb_to_xyz(split_channels(hex_color)))
    return Lab(l=round_to(float(l), 2), a=round_to(float(a), 2), b=round_to(float(b), 2))


def lab_to_hex(lab: Lab | dict[str, Any]) -> str:
    """Convert CIE Lab to hex; out-of-gamut channels are clamped."""
    lab = validate_model(Lab, lab, "lab_to_hex")
    r, g, b = xyz_to_rgb(lab_to_xyz(lab.l, lab.a, lab.b))
    return channels_to_hex(float(r), float(g), float(b))


## Oklch


def rgb_to_oklab(rgb: NDArray) -> NDArray:
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255)
    lms = np.cbrt(LINEAR_SRGB_TO_LMS @ linear)
    return LMS_TO_OKLAB @ lms


def oklab_to_rgb(oklab: NDArray) -> NDArray:
    lms = (OKLAB_TO_LMS @ np.asarray(oklab, dtype=float)) ** 3
    linear = LMS_TO_LINEAR_SRGB @ lms
    return np_linear_to_srgb(linear) * 255


def hex_to_oklch(hex_color: str) -> Oklch:
    """
    Convert a hex color to Oklch.

    Lightness and chroma are rounded to 3 decimals, hue to 1 decimal. Hue is 0
    whenever the rounded chroma is 0.
    """
    hex_color = validate_hex(hex_color, "hex_to_oklch")
    l, a, b = (float(v) for v in rgb_to_oklab(split_channels(hex_color)))

    c = round_to(math.hypot(a, b), 3)
    h = normalize_hue(round_to(math.degrees(math.atan2(b, a)), 1)) if c > 0 else 0.0
    return Oklch(l=min(round_to(l, 3), 1.0), c=c, h=h)


def oklch_to_hex(oklch: Oklch | dict[str, Any]) -> str:
    """Convert Oklch to hex; out-of-gamut channels are clamped."""
    oklch = validate_model(Oklch, oklch, "oklch_to_hex")
    h_rad = math.radians(oklch.h)
    oklab = np.array([oklch.l, oklch.c * math.cos(h_rad), oklch.c * math.sin(h_rad)])
    r, g, b = oklab_to_rgb(oklab)
    return channels_to_hex(float(r), float(g), float(b))


## CMYK


def hex_to_cmyk(hex_color: str) -> CMYK:
    """
    Convert a hex color to CMYK percentages (whole numbers).

    Pure black is ``CMYK(c=0, m=0, y=0, k=100)``.
    """
    hex_color = validate_hex(hex_color, "hex_to_cmyk")
    r, g, b = (channel / 255 for channel in split_channels(hex_color))

    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(c=0, m=0, y=0, k=100)

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return CMYK(
        c=round_half_up(c * 100),
        m=round_half_up(m * 100),
        y=round_half_up(y * 100),
        k=round_half_up(k * 100),
    )


def cmyk_to_hex(cmyk: CMYK | dict[str, Any]) -> str:
    cmyk = validate_model(CMYK, cmyk, "cmyk_to_hex")
    k = 1 - cmyk.k / 100
    return channels_to_hex(
        255 * (1 - cmyk.c / 100) * k,
        255 * (1 - cmyk.m / 100) * k,
        255 * (1 - cmyk.y / 100) * k,
    )


## Delta E


def get_delta_e(hex1: str, hex2: str) -> float:
    """
    CIE76 color difference: Euclidean distance between the two Lab values.

    Under ~2.3 is generally imperceptible.
    """
    hex1 = validate_hex(hex1, "get_delta_e")
    hex2 = validate_hex(hex2, "get_delta_e")
    lab1 = hex_to_lab(hex1)
    lab2 = hex_to_lab(hex2)
    return math.sqrt(
        (lab1.l - lab2.l) ** 2 + (lab1.a - lab2.a) ** 2 + (lab1.b - lab2.b) ** 2
    )
