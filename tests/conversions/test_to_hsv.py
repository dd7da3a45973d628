from itertools import product

import numpy as np
import pytest

from chromaselect.conversions.numbers import BoundedUnit, WrappedAngle
from chromaselect.conversions.to_hsv import (
    hsl_to_hsv,
    np_hsl_to_hsv,
    np_unit_rgb_to_hsv,
    unit_rgb_to_hsv,
    unit_rgb_to_hsvl,
)
from chromaselect.errors import OutOfRangeError
from ..samples import samples_hsl_hsv, samples_rgb_hsv


def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert isinstance(h_out, WrappedAngle)
        assert isinstance(s_out, BoundedUnit)
        assert isinstance(v_out, BoundedUnit)
        assert h_out == h_exp
        assert abs(float(s_out) - s_exp) < 1e-9
        assert abs(float(v_out) - v_exp) < 1e-9


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()), dtype=float)
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    hsv = np_unit_rgb_to_hsv(r, g, b)

    assert hsv.shape == (len(samples_rgb_hsv), 3)
    assert np.array_equal(hsv[..., 0], expected[..., 0])
    assert np.allclose(hsv[..., 1:], expected[..., 1:], atol=1e-9)


def test_unit_rgb_to_hsv_selection():
    for flags in product((False, True), repeat=3):
        out = unit_rgb_to_hsv(0.2, 0.4, 0.6, *flags)
        for slot, wanted in zip(out, flags):
            assert (slot is not None) == wanted


def test_unit_rgb_to_hsv_partial_values_match_full():
    full = unit_rgb_to_hsv(0.2, 0.4, 0.6)
    assert unit_rgb_to_hsv(0.2, 0.4, 0.6, True, False, False)[0] == full[0]
    assert unit_rgb_to_hsv(0.2, 0.4, 0.6, False, True, False)[1] == full[1]
    assert unit_rgb_to_hsv(0.2, 0.4, 0.6, False, False, True)[2] == full[2]


def test_hue_rounds_to_whole_degrees():
    # (1, 0.01, 0) sits at 0.6 degrees
    h, _, _ = unit_rgb_to_hsv(1.0, 0.01, 0.0, True, False, False)
    assert h == 1
    # Just below red on the negative side wraps to 359/360
    h, _, _ = unit_rgb_to_hsv(1.0, 0.0, 0.01, True, False, False)
    assert h == 359
    h, _, _ = unit_rgb_to_hsv(1.0, 0.0, 0.001, True, False, False)
    assert h == 0


def test_unit_rgb_to_hsvl_switches_third_channel():
    h, s, l = unit_rgb_to_hsvl(1.0, 0.0, 0.0, luminosity=True)
    assert (h, float(s), float(l)) == (0, 1.0, 0.5)
    h, s, v = unit_rgb_to_hsvl(1.0, 0.0, 0.0, luminosity=False)
    assert (h, float(s), float(v)) == (0, 1.0, 1.0)


def test_hsl_to_hsv():
    for (h, s, l), (h_exp, s_exp, v_exp) in samples_hsl_hsv.items():
        h_out, s_out, v_out = hsl_to_hsv(WrappedAngle(h), BoundedUnit(s), BoundedUnit(l))

        assert h_out == h_exp
        assert abs(float(s_out) - s_exp) < 1e-9
        assert abs(float(v_out) - v_exp) < 1e-9


def test_hsl_to_hsv_saturation_only():
    h, s, v = hsl_to_hsv(WrappedAngle(210), BoundedUnit(0.5), BoundedUnit(0.4), False, True, False)
    assert h is None and v is None
    assert abs(float(s) - 2 / 3) < 1e-9


def test_hsl_to_hsv_numpy():
    the_matrix = np.array(list(samples_hsl_hsv.keys()), dtype=float)
    expected = np.array(list(samples_hsl_hsv.values()), dtype=float)
    result = np_hsl_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-9)


def test_numpy_rejects_out_of_range():
    with pytest.raises(OutOfRangeError):
        np_unit_rgb_to_hsv(np.array([1.2]), np.array([0.0]), np.array([0.0]))
    with pytest.raises(OutOfRangeError):
        np_hsl_to_hsv(np.array([0.0]), np.array([-0.5]), np.array([0.5]))


def test_numpy_broadcasts_scalars():
    hsv = np_unit_rgb_to_hsv(np.array([1.0, 0.0]), 0.0, 0.0)
    assert np.allclose(hsv, [[0, 1, 1], [0, 0, 0]])
