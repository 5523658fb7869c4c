"""
Color manipulation.

Every operation decodes, adjusts one component and re-encodes, through HSL for
lightness/saturation/hue and through RGB for mixing and inversion. Results are
6-digit hex except for :func:`set_alpha`.

Amount, ratio and alpha arguments are user-facing parameters: out-of-range
values raise :class:`~huewheel.errors.ColorValidationError` rather than being
clamped.
"""
from .conversions.hsl import hex_to_hsl, hsl_components_to_hex
from .conversions.numbers import clamp, round_half_up
from .conversions.rgb import channels_to_hex, hex_to_rgb, unit_alpha_to_hex
from .schemas import validate_finite, validate_hex, validate_percent, validate_unit


def _adjust_lightness(hex_color: str, delta: float) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_components_to_hex(hsl.h, hsl.s, clamp(hsl.l + delta, 0, 100))


def _adjust_saturation(hex_color: str, delta: float) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_components_to_hex(hsl.h, clamp(hsl.s + delta, 0, 100), hsl.l)


def _shift_hue(hex_color: str, degrees: float) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_components_to_hex(hsl.h + degrees, hsl.s, hsl.l)


def lighten(hex_color: str, amount: float) -> str:
    """
    Raise HSL lightness by ``amount`` percentage points (0-100).

    >>> lighten("#ff0000", 20)
    '#ff6666'
    """
    hex_color = validate_hex(hex_color, "lighten")
    amount = validate_percent(amount, "lighten")
    return _adjust_lightness(hex_color, amount)


def darken(hex_color: str, amount: float) -> str:
    """Lower HSL lightness by ``amount`` percentage points (0-100)."""
    hex_color = validate_hex(hex_color, "darken")
    amount = validate_percent(amount, "darken")
    return _adjust_lightness(hex_color, -amount)


def saturate(hex_color: str, amount: float) -> str:
    hex_color = validate_hex(hex_color, "saturate")
    amount = validate_percent(amount, "saturate")
    return _adjust_saturation(hex_color, amount)


def desaturate(hex_color: str, amount: float) -> str:
    hex_color = validate_hex(hex_color, "desaturate")
    amount = validate_percent(amount, "desaturate")
    return _adjust_saturation(hex_color, -amount)


def mix(hex1: str, hex2: str, ratio: float = 0.5) -> str:
    """
    Linear per-channel RGB interpolation.

    ``ratio`` 0 gives ``hex1`` and 1 gives ``hex2``.

    >>> mix("#000000", "#ffffff")
    '#808080'
    """
    hex1 = validate_hex(hex1, "mix")
    hex2 = validate_hex(hex2, "mix")
    ratio = validate_unit(ratio, "mix")

    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    return channels_to_hex(
        round_half_up(rgb1.r * (1 - ratio) + rgb2.r * ratio),
        round_half_up(rgb1.g * (1 - ratio) + rgb2.g * ratio),
        round_half_up(rgb1.b * (1 - ratio) + rgb2.b * ratio),
    )


def complement(hex_color: str) -> str:
    """Rotate the hue by 180 degrees."""
    hex_color = validate_hex(hex_color, "complement")
    return _shift_hue(hex_color, 180)


def invert(hex_color: str) -> str:
    """
    Channel-wise ``255 - c``.

    >>> invert("#ff0000")
    '#00ffff'
    """
    hex_color = validate_hex(hex_color, "invert")
    rgb = hex_to_rgb(hex_color)
    return channels_to_hex(255 - rgb.r, 255 - rgb.g, 255 - rgb.b)


def grayscale(hex_color: str) -> str:
    """Drop HSL saturation to 0, keeping lightness."""
    hex_color = validate_hex(hex_color, "grayscale")
    hsl = hex_to_hsl(hex_color)
    return hsl_components_to_hex(hsl.h, 0, hsl.l)


def rotate_hue(hex_color: str, degrees: float) -> str:
    """
    Rotate the HSL hue by any number of degrees, positive or negative.

    >>> rotate_hue("#ff0000", 120)
    '#00ff00'
    """
    hex_color = validate_hex(hex_color, "rotate_hue")
    degrees = validate_finite(degrees, "rotate_hue", "Degrees")
    return _shift_hue(hex_color, degrees)


def set_alpha(hex_color: str, alpha: float) -> str:
    """
    Re-encode as ``#rrggbbaa`` with ``alpha`` (0-1), channels unchanged.

    >>> set_alpha("#ff0000", 0.5)
    '#ff000080'
    """
    hex_color = validate_hex(hex_color, "set_alpha")
    alpha = validate_unit(alpha, "set_alpha", "Alpha")
    rgb = hex_to_rgb(hex_color)
    return channels_to_hex(rgb.r, rgb.g, rgb.b) + unit_alpha_to_hex(alpha)
