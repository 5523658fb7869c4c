"""
CSS functional notation: ``rgb()``/``rgba()`` and ``hsl()``/``hsla()``.

Formatting always uses the legacy comma syntax; parsing accepts both the
comma syntax and the modern space/slash syntax (``rgb(255 0 0 / 0.5)``).
"""
import re
import warnings

from ..errors import ColorValidationError
from ..schemas import check, css_hsl_schema, css_rgb_schema, validate_hex
from .hsl import hsl_components_to_hex, hex_to_hsla
from .numbers import format_number, round_to
from .rgb import channels_to_hex, hex_to_rgba, unit_alpha_to_hex

_CSS_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*[,\s]\s*(\d+)\s*[,\s]\s*(\d+)\s*(?:[,/]\s*([\d.]+)\s*)?\)",
    re.IGNORECASE,
)
_CSS_HSL_RE = re.compile(
    r"hsla?\(\s*(\d+)\s*[,\s]\s*(\d+)%?\s*[,\s]\s*(\d+)%?\s*(?:[,/]\s*([\d.]+)\s*)?\)",
    re.IGNORECASE,
)


def _clamped(value: float, limit: float, what: str, function_name: str) -> float:
    if value > limit:
        warnings.warn(
            f"[{function_name}] {what} {format_number(value)} is out of range, clamping to {format_number(limit)}",
            stacklevel=3,
        )
        return limit
    return value


def _parse_alpha(text: str | None, css: str, function_name: str) -> float | None:
    if text is None:
        return None
    try:
        alpha = float(text)
    except ValueError:
        raise ColorValidationError(
            function_name=function_name,
            message="Alpha must be a number",
            received_value=css,
        ) from None
    return _clamped(alpha, 1.0, "alpha", function_name)


def _format_alpha(a: float) -> str:
    return format_number(round_to(a, 2))


def hex_to_css_rgb(hex_color: str) -> str:
    """
    Format a hex color as CSS ``rgb()``, or ``rgba()`` when it is not fully opaque.

    >>> hex_to_css_rgb("#ff0000")
    'rgb(255, 0, 0)'
    >>> hex_to_css_rgb("#ff000080")
    'rgba(255, 0, 0, 0.5)'
    """
    hex_color = validate_hex(hex_color, "hex_to_css_rgb")
    rgba = hex_to_rgba(hex_color)
    if rgba.a == 1:
        return f"rgb({rgba.r}, {rgba.g}, {rgba.b})"
    return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {_format_alpha(rgba.a)})"


def css_rgb_to_hex(css: str) -> str:
    """
    Parse CSS ``rgb()``/``rgba()`` into hex, 8 digits only when alpha is below 1.

    >>> css_rgb_to_hex("rgb(255 0 0 / 0.5)")
    '#ff000080'
    """
    css = check(css_rgb_schema, css, "css_rgb_to_hex", "Must be a valid CSS rgb() or rgba() string")
    match = _CSS_RGB_RE.search(css)
    r, g, b = (
        _clamped(int(match.group(i)), 255, "channel", "css_rgb_to_hex") for i in (1, 2, 3)
    )
    a = _parse_alpha(match.group(4), css, "css_rgb_to_hex")

    if a is not None and a != 1:
        return channels_to_hex(r, g, b) + unit_alpha_to_hex(a)
    return channels_to_hex(r, g, b)


def hex_to_css_hsl(hex_color: str) -> str:
    """
    Format a hex color as CSS ``hsl()``, or ``hsla()`` when it is not fully opaque.

    >>> hex_to_css_hsl("#ff0000")
    'hsl(0, 100%, 50%)'
    """
    hex_color = validate_hex(hex_color, "hex_to_css_hsl")
    hsla = hex_to_hsla(hex_color)
    h, s, l = (format_number(value) for value in (hsla.h, hsla.s, hsla.l))
    if hsla.a == 1:
        return f"hsl({h}, {s}%, {l}%)"
    return f"hsla({h}, {s}%, {l}%, {_format_alpha(hsla.a)})"


def css_hsl_to_hex(css: str) -> str:
    """
    Parse CSS ``hsl()``/``hsla()`` into hex, 8 digits only when alpha is below 1.

    >>> css_hsl_to_hex("hsl(120, 100%, 50%)")
    '#00ff00'
    """
    css = check(css_hsl_schema, css, "css_hsl_to_hex", "Must be a valid CSS hsl() or hsla() string")
    match = _CSS_HSL_RE.search(css)
    h = int(match.group(1))
    s = _clamped(int(match.group(2)), 100, "saturation", "css_hsl_to_hex")
    l = _clamped(int(match.group(3)), 100, "lightness", "css_hsl_to_hex")
    a = _parse_alpha(match.group(4), css, "css_hsl_to_hex")

    hex_color = hsl_components_to_hex(h, s, l)
    if a is not None and a != 1:
        return hex_color + unit_alpha_to_hex(a)
    return hex_color
