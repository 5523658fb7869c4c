"""Huewheel: validated color conversions, manipulation, palettes and contrast scoring."""
import logging

from .errors import ColorValidationError
from .types import (
    RGB,
    RGBA,
    HSV,
    HSL,
    HSLA,
    Lab,
    Oklch,
    CMYK,
    ColorFormat,
    WCAGLevel,
    TextSize,
)
from .constants import COLOR_BLACK, COLOR_WHITE, LUMINANCE_THRESHOLD, WCAG_THRESHOLDS
from .schemas import is_valid_hex, is_valid_hex6, normalize_hex
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    hex_to_rgba,
    rgba_to_hex,
    alpha_to_hex,
    parse_alpha_from_hex,
    combine_hex_with_alpha,
    hex_to_hsv,
    hsv_to_hex,
    hex_to_hsl,
    hsl_to_hex,
    hex_to_hsla,
    hsla_to_hex,
    hex_to_css_rgb,
    css_rgb_to_hex,
    hex_to_css_hsl,
    css_hsl_to_hex,
    hex_to_lab,
    lab_to_hex,
    hex_to_oklch,
    oklch_to_hex,
    hex_to_cmyk,
    cmyk_to_hex,
    get_delta_e,
)
from .manipulation import (
    lighten,
    darken,
    saturate,
    desaturate,
    mix,
    complement,
    invert,
    grayscale,
    rotate_hue,
    set_alpha,
)
from .accessibility import (
    get_luminance,
    get_contrast_ratio,
    is_readable,
    suggest_text_color,
    get_best_contrast,
    is_light,
    is_dark,
)
from .palette import (
    generate_analogous,
    generate_complementary,
    generate_split_complementary,
    generate_triadic,
    generate_tetradic,
    generate_shades,
    generate_tints,
    generate_scale,
    generate_monochromatic,
)
from .parser import (
    ParsedColor,
    detect_color_format,
    parse_color,
    parse_color_full,
    format_color,
    is_valid_color,
    get_named_color,
    get_named_colors,
)
from .utils import (
    get_color_name_en,
    hue_from_position,
    saturation_value_from_position,
    ratio_to_percent,
    ratio_to_hue,
    normalize_gamma,
    ratio_to_gamma,
)
from .safe import (
    SafeResult,
    create_safe,
    hex_to_rgb_safe,
    rgb_to_hex_safe,
    hex_to_rgba_safe,
    rgba_to_hex_safe,
    hex_to_hsv_safe,
    hsv_to_hex_safe,
    hex_to_hsl_safe,
    hsl_to_hex_safe,
    hex_to_hsla_safe,
    hsla_to_hex_safe,
    hex_to_css_rgb_safe,
    css_rgb_to_hex_safe,
    hex_to_css_hsl_safe,
    css_hsl_to_hex_safe,
    hex_to_lab_safe,
    lab_to_hex_safe,
    hex_to_oklch_safe,
    oklch_to_hex_safe,
    hex_to_cmyk_safe,
    cmyk_to_hex_safe,
    get_delta_e_safe,
    alpha_to_hex_safe,
    parse_alpha_from_hex_safe,
    combine_hex_with_alpha_safe,
    parse_color_safe,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # errors and results
    "ColorValidationError",
    "SafeResult",
    "create_safe",
    # value types
    "RGB",
    "RGBA",
    "HSV",
    "HSL",
    "HSLA",
    "Lab",
    "Oklch",
    "CMYK",
    "ColorFormat",
    "WCAGLevel",
    "TextSize",
    "ParsedColor",
    # constants
    "COLOR_BLACK",
    "COLOR_WHITE",
    "LUMINANCE_THRESHOLD",
    "WCAG_THRESHOLDS",
    # hex helpers
    "is_valid_hex",
    "is_valid_hex6",
    "normalize_hex",
    # conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_rgba",
    "rgba_to_hex",
    "alpha_to_hex",
    "parse_alpha_from_hex",
    "combine_hex_with_alpha",
    "hex_to_hsv",
    "hsv_to_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "hex_to_hsla",
    "hsla_to_hex",
    "hex_to_css_rgb",
    "css_rgb_to_hex",
    "hex_to_css_hsl",
    "css_hsl_to_hex",
    "hex_to_lab",
    "lab_to_hex",
    "hex_to_oklch",
    "oklch_to_hex",
    "hex_to_cmyk",
    "cmyk_to_hex",
    "get_delta_e",
    # manipulation
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "mix",
    "complement",
    "invert",
    "grayscale",
    "rotate_hue",
    "set_alpha",
    # accessibility
    "get_luminance",
    "get_contrast_ratio",
    "is_readable",
    "suggest_text_color",
    "get_best_contrast",
    "is_light",
    "is_dark",
    # palettes
    "generate_analogous",
    "generate_complementary",
    "generate_split_complementary",
    "generate_triadic",
    "generate_tetradic",
    "generate_shades",
    "generate_tints",
    "generate_scale",
    "generate_monochromatic",
    # parsing
    "detect_color_format",
    "parse_color",
    "parse_color_full",
    "format_color",
    "is_valid_color",
    "get_named_color",
    "get_named_colors",
    # widget helpers
    "get_color_name_en",
    "hue_from_position",
    "saturation_value_from_position",
    "ratio_to_percent",
    "ratio_to_hue",
    "normalize_gamma",
    "ratio_to_gamma",
    # safe forms
    "hex_to_rgb_safe",
    "rgb_to_hex_safe",
    "hex_to_rgba_safe",
    "rgba_to_hex_safe",
    "hex_to_hsv_safe",
    "hsv_to_hex_safe",
    "hex_to_hsl_safe",
    "hsl_to_hex_safe",
    "hex_to_hsla_safe",
    "hsla_to_hex_safe",
    "hex_to_css_rgb_safe",
    "css_rgb_to_hex_safe",
    "hex_to_css_hsl_safe",
    "css_hsl_to_hex_safe",
    "hex_to_lab_safe",
    "lab_to_hex_safe",
    "hex_to_oklch_safe",
    "oklch_to_hex_safe",
    "hex_to_cmyk_safe",
    "cmyk_to_hex_safe",
    "get_delta_e_safe",
    "alpha_to_hex_safe",
    "parse_alpha_from_hex_safe",
    "combine_hex_with_alpha_safe",
    "parse_color_safe",
]
