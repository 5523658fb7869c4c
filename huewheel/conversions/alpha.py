"""Alpha percentage (0-100) <-> hex byte helpers."""
from ..constants import ALPHA_MAX
from ..schemas import validate_hex, validate_hex6, validate_percent
from .numbers import round_half_up
from .rgb import alpha_percent


def alpha_to_hex(alpha: float) -> str:
    """
    Convert alpha 0-100 to a two digit hex byte.

    >>> alpha_to_hex(50)
    '80'
    """
    alpha = validate_percent(alpha, "alpha_to_hex", "Alpha")
    return f"{round_half_up(alpha / 100 * ALPHA_MAX):02x}"


def parse_alpha_from_hex(hex_color: str) -> int:
    """Alpha of ``#rrggbbaa`` as 0-100; 100 for ``#rrggbb``."""
    hex_color = validate_hex(hex_color, "parse_alpha_from_hex")
    return alpha_percent(hex_color)


def combine_hex_with_alpha(hex_color: str, alpha: float) -> str:
    """
    Append the alpha byte to a 6-digit hex, leaving it off at full opacity.

    >>> combine_hex_with_alpha("#ff0000", 100)
    '#ff0000'
    >>> combine_hex_with_alpha("#ff0000", 50)
    '#ff000080'
    """
    hex_color = validate_hex6(hex_color, "combine_hex_with_alpha").lower()
    alpha = validate_percent(alpha, "combine_hex_with_alpha", "Alpha")
    if alpha < 100:
        return hex_color + alpha_to_hex(alpha)
    return hex_color
