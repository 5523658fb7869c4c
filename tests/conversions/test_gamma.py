import numpy as np
import pytest

from huewheel.conversions import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb

samples_unit = [0.0, 0.01, 0.05, 0.2, 0.5, 0.8, 1.0]


def test_srgb_to_linear_endpoints():
    assert srgb_to_linear(0.0) == 0.0
    assert srgb_to_linear(1.0) == pytest.approx(1.0)
    assert srgb_to_linear(0.5) == pytest.approx(0.214041, abs=1e-6)


def test_scalar_round_trip():
    for c in samples_unit:
        assert linear_to_srgb(srgb_to_linear(c)) == pytest.approx(c, abs=1e-9)


def test_round_trip_at_breakpoint():
    # the linear and power segments meet only approximately at 0.04045
    assert linear_to_srgb(srgb_to_linear(0.04045)) == pytest.approx(0.04045, abs=1e-6)


def test_numpy_matches_scalar():
    values = np.array(samples_unit)
    expected = np.array([srgb_to_linear(c) for c in samples_unit])
    assert np.allclose(np_srgb_to_linear(values), expected)

    linear = np_srgb_to_linear(values)
    assert np.allclose(np_linear_to_srgb(linear), values)


def test_numpy_negative_input_stays_finite():
    result = np_linear_to_srgb(np.array([-0.1, 0.0, 1.2]))
    assert np.all(np.isfinite(result))
    assert result[0] < 0
