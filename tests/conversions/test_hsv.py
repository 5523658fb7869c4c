import pytest

from huewheel import ColorValidationError, HSV
from huewheel.conversions import hex_to_hsv, hsv_to_hex, unit_rgb_to_hsv, hsv_to_unit_rgb
from ..samples import samples_hex_hsv


def test_hex_to_hsv():
    for hex_color, expected in samples_hex_hsv.items():
        hsv = hex_to_hsv(hex_color)
        assert isinstance(hsv, HSV)
        assert hsv.as_tuple() == expected


def test_hsv_to_hex():
    for hex_color, (h, s, v) in samples_hex_hsv.items():
        if hex_color == "#336699":
            # 67% saturation is not exactly representable
            continue
        assert hsv_to_hex(h, s, v) == hex_color


def test_hsv_to_hex_boundaries():
    assert hsv_to_hex(0, 100, 100) == "#ff0000"
    assert hsv_to_hex(0, 0, 100) == "#ffffff"
    assert hsv_to_hex(0, 0, 0) == "#000000"
    assert hsv_to_hex(360, 100, 100) == "#ff0000"
    assert hsv_to_hex(120, 100, 100) == "#00ff00"


def test_hsv_to_hex_accepts_fractions():
    assert hsv_to_hex(60.0, 50.5, 100) == "#ffff7e"


def test_hsv_to_hex_out_of_range():
    for h, s, v in [(361, 50, 50), (-1, 50, 50), (0, 101, 50), (0, 50, -0.5)]:
        with pytest.raises(ColorValidationError) as exc_info:
            hsv_to_hex(h, s, v)
        assert exc_info.value.function_name == "hsv_to_hex"
        assert exc_info.value.received_value == {"h": h, "s": s, "v": v}


def test_unit_rgb_to_hsv():
    h, s, v = unit_rgb_to_hsv(1.0, 0.0, 0.0)
    assert (h, s, v) == (0.0, 1.0, 1.0)

    h, s, v = unit_rgb_to_hsv(0.5, 0.5, 0.5)
    assert h == 0.0
    assert s == 0.0
    assert v == 0.5

    h, s, v = unit_rgb_to_hsv(0.0, 0.0, 0.0)
    assert (h, s, v) == (0.0, 0.0, 0.0)


def test_hsv_to_unit_rgb_wraps_hue():
    for base in (0, 60, 200):
        r1, g1, b1 = hsv_to_unit_rgb(base, 0.7, 0.9)
        r2, g2, b2 = hsv_to_unit_rgb(base + 360, 0.7, 0.9)
        r3, g3, b3 = hsv_to_unit_rgb(base - 360, 0.7, 0.9)
        assert (r1, g1, b1) == pytest.approx((r2, g2, b2))
        assert (r1, g1, b1) == pytest.approx((r3, g3, b3))
