"""
WCAG 2.x relative luminance and contrast utilities.
"""
from __future__ import annotations

from typing import Sequence

from .constants import COLOR_BLACK, COLOR_WHITE, LUMINANCE_THRESHOLD, WCAG_THRESHOLDS
from .conversions.gamma import srgb_to_linear
from .conversions.rgb import hex_to_rgb
from .errors import ColorValidationError
from .types.format_type import TextSize, WCAGLevel
from .schemas import validate_hex


def _enum_value(enum_cls, value, function_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ColorValidationError(
            function_name=function_name,
            message=f"Must be one of: {allowed}",
            received_value=value,
        ) from None


def _luminance(hex_color: str) -> float:
    rgb = hex_to_rgb(hex_color)
    r, g, b = (srgb_to_linear(channel / 255) for channel in (rgb.r, rgb.g, rgb.b))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_luminance(hex_color: str) -> float:
    """
    Relative luminance (0 for black, 1 for white).

    https://www.w3.org/TR/WCAG20/#relativeluminancedef
    """
    return _luminance(validate_hex(hex_color, "get_luminance"))


def get_contrast_ratio(hex1: str, hex2: str) -> float:
    """
    WCAG contrast ratio between two colors, from 1 to 21. Symmetric in its arguments.

    >>> round(get_contrast_ratio("#ffffff", "#000000"), 2)
    21.0
    """
    hex1 = validate_hex(hex1, "get_contrast_ratio")
    hex2 = validate_hex(hex2, "get_contrast_ratio")

    l1 = _luminance(hex1)
    l2 = _luminance(hex2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_readable(
    foreground: str,
    background: str,
    level: WCAGLevel | str = WCAGLevel.AA,
    size: TextSize | str = TextSize.NORMAL,
) -> bool:
    """
    Check a text/background pair against the WCAG threshold table.

    Args:
        foreground: text color
        background: background color
        level: "AA" or "AAA"
        size: "normal" or "large" text

    Thresholds: AA 4.5 (large 3), AAA 7 (large 4.5).
    """
    level = _enum_value(WCAGLevel, level, "is_readable")
    size = _enum_value(TextSize, size, "is_readable")
    foreground = validate_hex(foreground, "is_readable")
    background = validate_hex(background, "is_readable")

    ratio = get_contrast_ratio(foreground, background)
    return ratio >= WCAG_THRESHOLDS[level.value][size.value]


def suggest_text_color(background: str) -> str:
    """Black text on light backgrounds, white text on dark ones."""
    background = validate_hex(background, "suggest_text_color")
    return COLOR_BLACK if _luminance(background) > LUMINANCE_THRESHOLD else COLOR_WHITE


def get_best_contrast(background: str, options: Sequence[str]) -> str:
    """
    Pick the candidate with the highest contrast ratio against ``background``.

    Ties keep the earliest candidate.

    Raises:
        ColorValidationError: if ``options`` is empty or any candidate is not a hex color
    """
    background = validate_hex(background, "get_best_contrast")
    options = list(options)
    if not options:
        raise ColorValidationError(
            function_name="get_best_contrast",
            message="Options must not be empty",
            received_value=options,
        )

    best_color = options[0]
    best_ratio = 0.0
    for color in options:
        color = validate_hex(color, "get_best_contrast")
        ratio = get_contrast_ratio(background, color)
        if ratio > best_ratio:
            best_ratio = ratio
            best_color = color

    return best_color


def is_light(hex_color: str) -> bool:
    hex_color = validate_hex(hex_color, "is_light")
    return _luminance(hex_color) > LUMINANCE_THRESHOLD


def is_dark(hex_color: str) -> bool:
    hex_color = validate_hex(hex_color, "is_dark")
    return not _luminance(hex_color) > LUMINANCE_THRESHOLD
