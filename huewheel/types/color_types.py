"""
Structural color values.

Every model is frozen: "changing" a color means building a new value, e.g.
``hsl.model_copy(update={"l": 40})``. Field constraints double as the input
schemas checked at every public entry point.
"""
from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class ColorModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, name) for name in type(self).model_fields)


class RGB(ColorModel):
    """8-bit sRGB channels."""

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")


class RGBA(RGB):
    a: float = Field(ge=0.0, le=1.0, description="Alpha (0-1)")


class RGBChannels(ColorModel):
    """Encoder input: fractional channels are accepted and rounded half up."""

    r: float = Field(ge=0, le=255, allow_inf_nan=False)
    g: float = Field(ge=0, le=255, allow_inf_nan=False)
    b: float = Field(ge=0, le=255, allow_inf_nan=False)


class RGBAChannels(RGBChannels):
    a: float = Field(ge=0.0, le=1.0, allow_inf_nan=False)


class HSV(ColorModel):
    h: float = Field(ge=0, le=360, description="Hue in degrees")
    s: float = Field(ge=0, le=100, description="Saturation (0-100)")
    v: float = Field(ge=0, le=100, description="Value/brightness (0-100)")


class HSL(ColorModel):
    h: float = Field(ge=0, le=360, description="Hue in degrees")
    s: float = Field(ge=0, le=100, description="Saturation (0-100)")
    l: float = Field(ge=0, le=100, description="Lightness (0-100)")


class HSLA(HSL):
    a: float = Field(ge=0.0, le=1.0, description="Alpha (0-1)")


class Lab(ColorModel):
    """CIE 1976 L*a*b* under the D65 illuminant."""

    l: float = Field(ge=0, le=100, description="Lightness (0-100)")
    a: float = Field(ge=-128, le=127, description="Green-red axis")
    b: float = Field(ge=-128, le=127, description="Blue-yellow axis")


class Oklch(ColorModel):
    l: float = Field(ge=0, le=1, description="Perceptual lightness (0-1)")
    c: float = Field(ge=0, le=0.5, description="Chroma")
    h: float = Field(ge=0, le=360, description="Hue in degrees")


class CMYK(ColorModel):
    c: float = Field(ge=0, le=100)
    m: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)
    k: float = Field(ge=0, le=100)


StructuralColor = Union[RGB, RGBA, HSV, HSL, HSLA, Lab, Oklch, CMYK]
