"""Slider value normalizers. Inputs outside ``[0, 1]`` are clamped, not rejected."""
from ..conversions.numbers import clamp, round_half_up, round_to


def ratio_to_percent(ratio: float) -> int:
    return round_half_up(clamp(ratio, 0, 1) * 100)


def ratio_to_hue(ratio: float) -> int:
    """Ratio to whole degrees; 1.0 wraps to 0."""
    return round_half_up(clamp(ratio, 0, 1) * 360) % 360


def normalize_gamma(value: float, min_value: float, max_value: float, step: float) -> float:
    """
    Clamp ``value`` to ``[min_value, max_value]`` and snap it to ``step``.

    The result is rounded to 2 decimals to hide float drift from the snap.
    """
    stepped = round_half_up(clamp(value, min_value, max_value) / step) * step
    return round_to(stepped, 2)


def ratio_to_gamma(ratio: float, min_value: float, max_value: float) -> float:
    return min_value + clamp(ratio, 0, 1) * (max_value - min_value)
