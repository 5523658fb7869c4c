"""
Input schemas and the validation helpers every public entry point goes through.

Each helper validates one field shape and either returns the validated value
or raises :class:`~huewheel.errors.ColorValidationError` naming the caller.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Annotated, Any, Type, TypeVar

from pydantic import Field, StringConstraints, TypeAdapter, ValidationError

from .errors import ColorValidationError
from .types.color_types import ColorModel

M = TypeVar("M", bound=ColorModel)

HEX_PATTERN = r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$"
HEX6_PATTERN = r"^#[0-9a-fA-F]{6}$"
# Legacy comma syntax and modern space/slash syntax
CSS_RGB_PATTERN = (
    r"(?i)^rgba?\(\s*\d{1,3}\s*[,\s]\s*\d{1,3}\s*[,\s]\s*\d{1,3}\s*(?:[,/]\s*[\d.]+\s*)?\)$"
)
CSS_HSL_PATTERN = (
    r"(?i)^hsla?\(\s*\d{1,3}\s*[,\s]\s*\d{1,3}%?\s*[,\s]\s*\d{1,3}%?\s*(?:[,/]\s*[\d.]+\s*)?\)$"
)

HexString = Annotated[str, StringConstraints(strict=True, pattern=HEX_PATTERN)]
Hex6String = Annotated[str, StringConstraints(strict=True, pattern=HEX6_PATTERN)]
CssRgbString = Annotated[str, StringConstraints(strict=True, pattern=CSS_RGB_PATTERN)]
CssHslString = Annotated[str, StringConstraints(strict=True, pattern=CSS_HSL_PATTERN)]
Percent = Annotated[float, Field(strict=True, ge=0, le=100)]
UnitInterval = Annotated[float, Field(strict=True, ge=0, le=1)]
Finite = Annotated[float, Field(strict=True, allow_inf_nan=False)]
Positive = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]
Count = Annotated[int, Field(strict=True, ge=1)]

hex_schema = TypeAdapter(HexString)
hex6_schema = TypeAdapter(Hex6String)
css_rgb_schema = TypeAdapter(CssRgbString)
css_hsl_schema = TypeAdapter(CssHslString)
percent_schema = TypeAdapter(Percent)
unit_schema = TypeAdapter(UnitInterval)
finite_schema = TypeAdapter(Finite)
positive_schema = TypeAdapter(Positive)
count_schema = TypeAdapter(Count)

_HEX_RE = re.compile(HEX_PATTERN)
_HEX6_RE = re.compile(HEX6_PATTERN)


@lru_cache(maxsize=None)
def model_schema(model: Type[M]) -> TypeAdapter:
    return TypeAdapter(model)


def describe(issues: list) -> str:
    if not issues:
        return "Invalid value"
    first = issues[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def check(schema: TypeAdapter, value: Any, function_name: str, message: str | None = None) -> Any:
    """Validate ``value`` against ``schema`` on behalf of ``function_name``."""
    try:
        return schema.validate_python(value)
    except ValidationError as exc:
        issues = exc.errors(include_url=False)
        raise ColorValidationError(
            function_name=function_name,
            message=message or describe(issues),
            received_value=value,
            issues=issues,
        ) from exc


def validate_hex(value: Any, function_name: str) -> str:
    return check(hex_schema, value, function_name, "Must be a valid hex color (6 or 8 digits)")


def validate_hex6(value: Any, function_name: str) -> str:
    return check(hex6_schema, value, function_name, 'Must be a valid 6-digit hex color (e.g., "#ff0000")')


def validate_model(model: Type[M], value: Any, function_name: str) -> M:
    return check(model_schema(model), value, function_name)


def validate_percent(value: Any, function_name: str, name: str = "Amount") -> float:
    return check(percent_schema, value, function_name, f"{name} must be between 0 and 100")


def validate_unit(value: Any, function_name: str, name: str = "Ratio") -> float:
    return check(unit_schema, value, function_name, f"{name} must be between 0 and 1")


def validate_finite(value: Any, function_name: str, name: str = "Value") -> float:
    return check(finite_schema, value, function_name, f"{name} must be a finite number")


def validate_positive(value: Any, function_name: str, name: str = "Value") -> float:
    return check(positive_schema, value, function_name, f"{name} must be a positive number")


def validate_count(value: Any, function_name: str, name: str = "Count") -> int:
    return check(count_schema, value, function_name, f"{name} must be at least 1")


def is_valid_hex(value: str) -> bool:
    """Check for a 6 or 8 digit hex color (``#rrggbb`` or ``#rrggbbaa``)."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def is_valid_hex6(value: str) -> bool:
    return isinstance(value, str) and _HEX6_RE.fullmatch(value) is not None


def normalize_hex(value: str) -> str:
    """Trim, add a missing ``#`` prefix and lowercase."""
    normalized = value.strip()
    if not normalized.startswith("#"):
        normalized = "#" + normalized
    return normalized.lower()
