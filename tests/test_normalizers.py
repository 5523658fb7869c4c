import pytest

from huewheel import ratio_to_percent, ratio_to_hue, normalize_gamma, ratio_to_gamma, get_color_name_en


def test_ratio_to_percent():
    assert ratio_to_percent(0) == 0
    assert ratio_to_percent(1) == 100
    assert ratio_to_percent(0.5) == 50
    assert ratio_to_percent(0.333) == 33
    assert ratio_to_percent(0.666) == 67
    assert ratio_to_percent(0.999) == 100
    assert ratio_to_percent(-0.5) == 0
    assert ratio_to_percent(1.5) == 100


def test_ratio_to_hue():
    assert ratio_to_hue(0) == 0
    assert ratio_to_hue(1) == 0
    assert ratio_to_hue(0.5) == 180
    assert ratio_to_hue(0.25) == 90
    assert ratio_to_hue(0.75) == 270
    assert ratio_to_hue(0.999) == 0
    assert ratio_to_hue(-0.5) == 0
    assert ratio_to_hue(1.5) == 0


def test_normalize_gamma():
    assert normalize_gamma(1.5, 0.5, 2.5, 0.1) == 1.5
    assert normalize_gamma(0.3, 0.5, 2.5, 0.1) == 0.5
    assert normalize_gamma(3.0, 0.5, 2.5, 0.1) == 2.5
    assert normalize_gamma(1.54, 0.5, 2.5, 0.1) == 1.5
    assert normalize_gamma(1.56, 0.5, 2.5, 0.1) == 1.6
    assert normalize_gamma(1.554, 0.5, 2.5, 0.01) == 1.55
    assert normalize_gamma(1.333, 0.5, 2.5, 0.1) == 1.3


def test_ratio_to_gamma():
    assert ratio_to_gamma(0, 0.5, 2.5) == 0.5
    assert ratio_to_gamma(1, 0.5, 2.5) == 2.5
    assert ratio_to_gamma(0.5, 0.5, 2.5) == 1.5
    assert ratio_to_gamma(0.5, 1.0, 3.0) == 2.0
    assert ratio_to_gamma(0.25, 0, 4) == 1
    assert ratio_to_gamma(-0.5, 0.5, 2.5) == 0.5
    assert ratio_to_gamma(1.5, 0.5, 2.5) == 2.5


@pytest.mark.parametrize(
    "hue, name",
    [
        (0, "red"),
        (30, "orange"),
        (60, "yellow"),
        (90, "yellow-green"),
        (120, "green"),
        (150, "teal"),
        (180, "cyan"),
        (210, "blue"),
        (240, "indigo"),
        (270, "purple"),
        (300, "magenta"),
        (330, "pink"),
        (350, "red"),
        (360, "red"),
    ],
)
def test_get_color_name_en(hue, name):
    assert get_color_name_en(hue) == name
