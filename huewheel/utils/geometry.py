"""
Pointer geometry for the hue ring and the saturation/value area.

Both maps are pure: the widget layer passes pointer coordinates in and gets
color components back, without doing any color math itself.
"""
import math
from typing import Tuple

from ..conversions.numbers import clamp, normalize_hue
from ..schemas import validate_finite, validate_positive


def hue_from_position(
    x: float,
    y: float,
    center_x: float,
    center_y: float,
    offset_degrees: float = -90,
) -> float:
    """
    Hue angle of a point on the ring, in ``[0, 360)``.

    The default offset of -90 puts red at 12 o'clock.

    >>> hue_from_position(100, 0, 100, 100)
    0.0
    >>> hue_from_position(200, 100, 100, 100)
    90.0
    """
    x, y, center_x, center_y, offset_degrees = (
        validate_finite(value, "hue_from_position", name)
        for value, name in (
            (x, "x"),
            (y, "y"),
            (center_x, "center_x"),
            (center_y, "center_y"),
            (offset_degrees, "offset_degrees"),
        )
    )
    angle = math.degrees(math.atan2(y - center_y, x - center_x))
    return normalize_hue(angle - offset_degrees)


def saturation_value_from_position(x: float, y: float, area_size: float) -> Tuple[float, float]:
    """
    Saturation and value for a point inside a square area.

    Left edge is saturation 0, top edge is value 100. Both results are
    clamped to ``[0, 100]``.

    Returns:
        ``(s, v)``
    """
    x = validate_finite(x, "saturation_value_from_position", "x")
    y = validate_finite(y, "saturation_value_from_position", "y")
    area_size = validate_positive(area_size, "saturation_value_from_position", "Area size")
    s = clamp(x / area_size * 100, 0, 100)
    v = clamp((1 - y / area_size) * 100, 0, 100)
    return s, v
