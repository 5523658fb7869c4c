from huewheel.conversions import (
    hex_to_rgb,
    rgb_to_hex,
    hex_to_hsv,
    hsv_to_hex,
    hex_to_hsl,
    hsl_to_hex,
    hex_to_rgba,
    rgba_to_hex,
)
from huewheel import RGB
from ..samples import sample_hexes

hue_tolerance = 1
percent_tolerance = 1


def hue_distance(a, b):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def test_round_trip_rgb():
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                rgb = RGB(r=r, g=g, b=b)
                assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


def test_round_trip_hex_rgb():
    for hex_color in sample_hexes:
        assert rgb_to_hex(hex_to_rgb(hex_color)) == hex_color
        assert rgba_to_hex(hex_to_rgba(hex_color)) == hex_color + "ff"


def test_round_trip_hsv_saturation_sweep():
    for h in range(0, 360, 15):
        for s in (20, 40, 60, 80, 100):
            hsv = hex_to_hsv(hsv_to_hex(h, s, 100))
            assert hue_distance(hsv.h, h) <= hue_tolerance
            assert abs(hsv.s - s) <= percent_tolerance
            assert abs(hsv.v - 100) <= percent_tolerance


def test_round_trip_hsv_value_sweep():
    for h in range(0, 360, 15):
        for v in (20, 40, 60, 80, 100):
            hsv = hex_to_hsv(hsv_to_hex(h, 100, v))
            assert hue_distance(hsv.h, h) <= hue_tolerance
            assert abs(hsv.s - 100) <= percent_tolerance
            assert abs(hsv.v - v) <= percent_tolerance


def test_round_trip_hex_hsl_hex():
    # whole-percent HSL cannot address every 8-bit color, so allow one step per channel
    for hex_color in sample_hexes:
        original = hex_to_rgb(hex_color)
        restored = hex_to_rgb(hsl_to_hex(hex_to_hsl(hex_color)))
        assert abs(original.r - restored.r) <= 3
        assert abs(original.g - restored.g) <= 3
        assert abs(original.b - restored.b) <= 3


def test_round_trip_hex_hsv_hex():
    for hex_color in sample_hexes:
        hsv = hex_to_hsv(hex_color)
        original = hex_to_rgb(hex_color)
        restored = hex_to_rgb(hsv_to_hex(hsv.h, hsv.s, hsv.v))
        assert abs(original.r - restored.r) <= 3
        assert abs(original.g - restored.g) <= 3
        assert abs(original.b - restored.b) <= 3
