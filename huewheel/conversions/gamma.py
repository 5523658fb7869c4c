"""sRGB transfer functions, scalar and vectorized."""
import numpy as np
from numpy import ndarray as NDArray

from ..constants import SRGB_DECODE_BREAK, SRGB_ENCODE_BREAK


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_DECODE_BREAK:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= SRGB_ENCODE_BREAK:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_DECODE_BREAK,
        c / 12.92,
        ((np.maximum(c, 0.0) + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    # np.where evaluates both branches; keep the power branch off negatives
    return np.where(
        c <= SRGB_ENCODE_BREAK,
        12.92 * c,
        1.055 * (np.maximum(c, SRGB_ENCODE_BREAK) ** (1 / 2.4)) - 0.055,
    )
