"""
Result-returning forms of the throwing conversions.

Each ``<name>_safe`` function is ``create_safe(<name>)``: it never raises
:class:`ColorValidationError`, returning a :class:`SafeResult` instead. Any
other exception is a bug and propagates unchanged.

>>> result = hex_to_rgb_safe("#ff0000")
>>> result.success, result.data
(True, RGB(r=255, g=0, b=0))
>>> hex_to_rgb_safe("invalid").error.function_name
'hex_to_rgb'
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .conversions.alpha import alpha_to_hex, combine_hex_with_alpha, parse_alpha_from_hex
from .conversions.css import css_hsl_to_hex, css_rgb_to_hex, hex_to_css_hsl, hex_to_css_rgb
from .conversions.hsl import hex_to_hsl, hex_to_hsla, hsl_to_hex, hsla_to_hex
from .conversions.hsv import hex_to_hsv, hsv_to_hex
from .conversions.rgb import hex_to_rgb, hex_to_rgba, rgb_to_hex, rgba_to_hex
from .conversions.spaces import (
    cmyk_to_hex,
    get_delta_e,
    hex_to_cmyk,
    hex_to_lab,
    hex_to_oklch,
    lab_to_hex,
    oklch_to_hex,
)
from .errors import ColorValidationError
from .parser import parse_color

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SafeResult(Generic[T]):
    """Outcome of a safe call: ``data`` on success, ``error`` otherwise."""

    success: bool
    data: Optional[T] = None
    error: Optional[ColorValidationError] = None

    @classmethod
    def ok(cls, data: T) -> "SafeResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ColorValidationError) -> "SafeResult[T]":
        return cls(success=False, error=error)


def create_safe(fn: Callable[..., T]) -> Callable[..., SafeResult[T]]:
    """Wrap a throwing entry point so validation failures become results."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> SafeResult[T]:
        try:
            return SafeResult.ok(fn(*args, **kwargs))
        except ColorValidationError as exc:
            logger.debug("%s rejected its input: %s", fn.__name__, exc)
            return SafeResult.fail(exc)

    wrapper.__name__ = f"{fn.__name__}_safe"
    wrapper.__qualname__ = wrapper.__name__
    return wrapper


hex_to_rgb_safe = create_safe(hex_to_rgb)
rgb_to_hex_safe = create_safe(rgb_to_hex)
hex_to_rgba_safe = create_safe(hex_to_rgba)
rgba_to_hex_safe = create_safe(rgba_to_hex)
hex_to_hsv_safe = create_safe(hex_to_hsv)
hsv_to_hex_safe = create_safe(hsv_to_hex)
hex_to_hsl_safe = create_safe(hex_to_hsl)
hsl_to_hex_safe = create_safe(hsl_to_hex)
hex_to_hsla_safe = create_safe(hex_to_hsla)
hsla_to_hex_safe = create_safe(hsla_to_hex)
hex_to_css_rgb_safe = create_safe(hex_to_css_rgb)
css_rgb_to_hex_safe = create_safe(css_rgb_to_hex)
hex_to_css_hsl_safe = create_safe(hex_to_css_hsl)
css_hsl_to_hex_safe = create_safe(css_hsl_to_hex)
hex_to_lab_safe = create_safe(hex_to_lab)
lab_to_hex_safe = create_safe(lab_to_hex)
hex_to_oklch_safe = create_safe(hex_to_oklch)
oklch_to_hex_safe = create_safe(oklch_to_hex)
hex_to_cmyk_safe = create_safe(hex_to_cmyk)
cmyk_to_hex_safe = create_safe(cmyk_to_hex)
get_delta_e_safe = create_safe(get_delta_e)
alpha_to_hex_safe = create_safe(alpha_to_hex)
parse_alpha_from_hex_safe = create_safe(parse_alpha_from_hex)
combine_hex_with_alpha_safe = create_safe(combine_hex_with_alpha)
parse_color_safe = create_safe(parse_color)
