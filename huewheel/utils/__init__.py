from .color_names import get_color_name_en
from .geometry import hue_from_position, saturation_value_from_position
from .named_colors import CSS_NAMED_COLORS
from .normalizers import normalize_gamma, ratio_to_gamma, ratio_to_hue, ratio_to_percent

__all__ = [
    "CSS_NAMED_COLORS",
    "get_color_name_en",
    "hue_from_position",
    "saturation_value_from_position",
    "normalize_gamma",
    "ratio_to_gamma",
    "ratio_to_hue",
    "ratio_to_percent",
]
