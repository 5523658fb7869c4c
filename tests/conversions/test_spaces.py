import numpy as np
import pytest

from huewheel import ColorValidationError, CMYK, Lab, Oklch
from huewheel.conversions import (
    hex_to_lab,
    lab_to_hex,
    hex_to_oklch,
    oklch_to_hex,
    hex_to_cmyk,
    cmyk_to_hex,
    get_delta_e,
    hex_to_rgb,
)
from huewheel.conversions.spaces import rgb_to_xyz, xyz_to_lab
from ..samples import samples_hex_lab, samples_hex_oklch, samples_hex_cmyk, sample_hexes

lab_tolerance = 0.05


def test_hex_to_lab():
    for hex_color, expected in samples_hex_lab.items():
        lab = hex_to_lab(hex_color)
        assert isinstance(lab, Lab)
        assert lab.as_tuple() == pytest.approx(expected, abs=lab_tolerance)


def test_hex_to_lab_rounds_to_two_decimals():
    lab = hex_to_lab("#336699")
    for value in lab.as_tuple():
        assert round(value, 2) == value


def test_rgb_to_xyz_white_point():
    xyz = rgb_to_xyz([255, 255, 255])
    assert np.allclose(xyz, [95.047, 100.0, 108.883], atol=1e-3)
    assert np.allclose(xyz_to_lab(xyz), [100.0, 0.0, 0.0], atol=1e-3)


def test_lab_round_trip():
    for hex_color in samples_hex_lab:
        assert lab_to_hex(hex_to_lab(hex_color)) == hex_color


def test_lab_to_hex_clamps_out_of_gamut():
    # Highly saturated Lab outside sRGB still yields a valid hex
    hex_color = lab_to_hex({"l": 50, "a": 127, "b": -128})
    assert len(hex_color) == 7


def test_lab_to_hex_invalid():
    with pytest.raises(ColorValidationError) as exc_info:
        lab_to_hex({"l": 101, "a": 0, "b": 0})
    assert exc_info.value.function_name == "lab_to_hex"


def test_hex_to_oklch():
    for hex_color, (l, c, h) in samples_hex_oklch.items():
        oklch = hex_to_oklch(hex_color)
        assert isinstance(oklch, Oklch)
        assert oklch.l == pytest.approx(l, abs=0.002)
        assert oklch.c == pytest.approx(c, abs=0.002)
        assert oklch.h == pytest.approx(h, abs=0.2)


def test_hex_to_oklch_achromatic_hue_is_zero():
    for hex_color in ["#ffffff", "#000000", "#808080", "#333333"]:
        oklch = hex_to_oklch(hex_color)
        if oklch.c == 0:
            assert oklch.h == 0


def test_oklch_round_trip():
    for hex_color in sample_hexes:
        original = hex_to_rgb(hex_color)
        restored = hex_to_rgb(oklch_to_hex(hex_to_oklch(hex_color)))
        assert abs(original.r - restored.r) <= 2
        assert abs(original.g - restored.g) <= 2
        assert abs(original.b - restored.b) <= 2


def test_oklch_to_hex_invalid():
    with pytest.raises(ColorValidationError) as exc_info:
        oklch_to_hex({"l": 0.5, "c": 0.6, "h": 0})
    assert exc_info.value.function_name == "oklch_to_hex"


def test_hex_to_cmyk():
    for hex_color, expected in samples_hex_cmyk.items():
        cmyk = hex_to_cmyk(hex_color)
        assert isinstance(cmyk, CMYK)
        assert cmyk.as_tuple() == expected


def test_cmyk_to_hex():
    assert cmyk_to_hex({"c": 0, "m": 100, "y": 100, "k": 0}) == "#ff0000"
    assert cmyk_to_hex(CMYK(c=0, m=0, y=0, k=100)) == "#000000"
    assert cmyk_to_hex(CMYK(c=0, m=0, y=0, k=0)) == "#ffffff"
    # c/m/y are irrelevant once k is 100
    assert cmyk_to_hex({"c": 30, "m": 60, "y": 90, "k": 100}) == "#000000"


def test_cmyk_to_hex_invalid():
    with pytest.raises(ColorValidationError) as exc_info:
        cmyk_to_hex({"c": 0, "m": 0, "y": 0, "k": 120})
    assert exc_info.value.function_name == "cmyk_to_hex"


def test_delta_e():
    assert get_delta_e("#ff0000", "#ff0000") == 0
    assert get_delta_e("#ffffff", "#000000") == pytest.approx(100, abs=lab_tolerance)
    # a one step change is imperceptible
    assert get_delta_e("#336699", "#33669a") < 2.3


def test_delta_e_symmetry():
    for a in sample_hexes:
        for b in sample_hexes:
            assert get_delta_e(a, b) == get_delta_e(b, a)


def test_delta_e_invalid():
    with pytest.raises(ColorValidationError) as exc_info:
        get_delta_e("#ff0000", "red")
    assert exc_info.value.function_name == "get_delta_e"
    assert exc_info.value.received_value == "red"
