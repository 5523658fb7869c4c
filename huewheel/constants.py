"""Process-wide immutable constants shared by the conversion engine."""
import numpy as np

# Alpha byte
ALPHA_MAX = 255

# Canonical colors
COLOR_BLACK = "#000000"
COLOR_WHITE = "#ffffff"

# Relative luminance above which a color counts as light (black text on top)
LUMINANCE_THRESHOLD = 0.179

WCAG_THRESHOLDS = {
    "AA": {"normal": 4.5, "large": 3.0},
    "AAA": {"normal": 7.0, "large": 4.5},
}

# sRGB transfer function breakpoints
SRGB_DECODE_BREAK = 0.04045
SRGB_ENCODE_BREAK = 0.0031308

# CIE Lab, D65 reference white
D65_WHITE = np.array([95.047, 100.0, 108.883])
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

# Oklab (Björn Ottosson)
LINEAR_SRGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LINEAR_SRGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])

for _matrix in (
    D65_WHITE,
    SRGB_TO_XYZ,
    XYZ_TO_SRGB,
    LINEAR_SRGB_TO_LMS,
    LMS_TO_OKLAB,
    OKLAB_TO_LMS,
    LMS_TO_LINEAR_SRGB,
):
    _matrix.flags.writeable = False
del _matrix
