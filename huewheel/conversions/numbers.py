import math

RealNumber = int | float


def round_half_up(value: RealNumber) -> int:
    """Round to the nearest integer, ties toward +infinity (``2.5 -> 3``, ``-2.5 -> -2``)."""
    return int(math.floor(value + 0.5))


def round_to(value: RealNumber, digits: int) -> float:
    """Round half up to a fixed number of decimals."""
    factor = 10 ** digits
    return round_half_up(value * factor) / factor


def clamp(value: RealNumber, lo: RealNumber, hi: RealNumber) -> RealNumber:
    return max(lo, min(hi, value))


def normalize_hue(h: RealNumber) -> float:
    """Normalize hue to the [0, 360) range."""
    h = float(h) % 360
    # a tiny negative input wraps to exactly 360.0
    return 0.0 if h >= 360 else h


def format_number(value: RealNumber) -> str:
    """Shortest text for a number, integral floats without the fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
