import numpy as np
import pytest
from pydantic import ValidationError

from huewheel import ColorValidationError, RGB, RGBA, HSL, is_valid_hex, is_valid_hex6, normalize_hex
from huewheel.constants import SRGB_TO_XYZ, D65_WHITE
from huewheel.schemas import validate_count, validate_percent, validate_unit, validate_model


def test_is_valid_hex():
    for good in ["#ff0000", "#FF0000", "#ff000080", "#aBcDeF"]:
        assert is_valid_hex(good)
    for bad in ["#fff", "#ffff", "ff0000", "#ff0000\n", "#ff00000", "#gg0000", None, 123]:
        assert not is_valid_hex(bad)


def test_is_valid_hex6():
    assert is_valid_hex6("#ff0000")
    assert not is_valid_hex6("#ff000080")


def test_normalize_hex():
    assert normalize_hex(" FF0000 ") == "#ff0000"
    assert normalize_hex("#ABCDEF") == "#abcdef"


def test_validators_name_the_caller():
    with pytest.raises(ColorValidationError) as exc_info:
        validate_count(0, "generate_tints")
    assert exc_info.value.function_name == "generate_tints"
    assert exc_info.value.message == "Count must be at least 1"

    with pytest.raises(ColorValidationError) as exc_info:
        validate_percent(100.5, "lighten")
    assert exc_info.value.message == "Amount must be between 0 and 100"

    with pytest.raises(ColorValidationError):
        validate_unit("0.5", "mix")

    assert validate_unit(1, "mix") == 1
    assert validate_percent(12.5, "lighten") == 12.5


def test_validate_model_accepts_instances_and_mappings():
    rgb = RGB(r=1, g=2, b=3)
    assert validate_model(RGB, rgb, "rgb_to_hex") == rgb
    assert validate_model(RGB, {"r": 1, "g": 2, "b": 3}, "rgb_to_hex") == rgb
    # extra keys are ignored
    assert validate_model(RGB, {"r": 1, "g": 2, "b": 3, "a": 0.5}, "rgb_to_hex") == rgb


def test_models_are_frozen():
    rgb = RGB(r=1, g=2, b=3)
    with pytest.raises(ValidationError):
        rgb.r = 5
    hsl = HSL(h=0, s=50, l=50)
    assert hsl.model_copy(update={"l": 40}).l == 40
    assert hsl.l == 50


def test_models_are_strict():
    with pytest.raises(ValidationError):
        RGB(r="1", g=2, b=3)
    with pytest.raises(ValidationError):
        RGB(r=1.5, g=2, b=3)
    with pytest.raises(ValidationError):
        RGBA(r=1, g=2, b=3, a=1.01)


def test_as_tuple():
    assert RGB(r=1, g=2, b=3).as_tuple() == (1, 2, 3)
    assert RGBA(r=1, g=2, b=3, a=0.5).as_tuple() == (1, 2, 3, 0.5)


def test_constants_are_read_only():
    with pytest.raises(ValueError):
        SRGB_TO_XYZ[0, 0] = 1.0
    with pytest.raises(ValueError):
        D65_WHITE[0] = 1.0
    assert np.allclose(D65_WHITE, [95.047, 100.0, 108.883])
