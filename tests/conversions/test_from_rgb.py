import numpy as np
import pytest

from colorkit.conversions import (
    np_unit_rgb_hue,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    unit_rgb_hue,
    unit_rgb_to_cmyk,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hwb,
)

samples_rgb_hsv = {
    (1, 0, 0): (0, 1, 1),
    (0, 1, 0): (120, 1, 1),
    (0, 0, 1): (240, 1, 1),
    (1, 0.5, 0): (30, 1, 1),
    (0.5, 0.5, 0.5): (0, 0, 0.5),
    (0, 0, 0): (0, 0, 0),
}

samples_rgb_hsl = {
    (1, 0, 0): (0, 1, 0.5),
    (0, 0.5, 0): (120, 1, 0.25),
    (0.25, 0.5, 0.75): (210, 0.5, 0.5),
    (1, 1, 1): (0, 0, 1),
}


@pytest.mark.parametrize("rgb, hue", [
    ((1, 0, 1), 300),   # red and blue tie: red wins
    ((1, 1, 0), 60),    # red and green tie: red wins
    ((0, 1, 1), 180),   # green and blue tie: green wins
    ((0.2, 0.2, 0.2), 0),
])
def test_hue_tie_break(rgb, hue):
    assert unit_rgb_hue(*rgb) == pytest.approx(hue)


def test_hue_is_in_range():
    for rgb in [(1, 0, 0.01), (0.3, 0.1, 0.2), (0.9, 0.95, 0.1)]:
        assert 0 <= unit_rgb_hue(*rgb) < 360


def test_unit_rgb_to_hsv():
    for (r, g, b), expected in samples_rgb_hsv.items():
        assert unit_rgb_to_hsv(r, g, b) == pytest.approx(expected)


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()), dtype=float)
    expected = np.array(list(samples_rgb_hsv.values()), dtype=float)
    result = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected)


def test_unit_rgb_to_hsl():
    for (r, g, b), expected in samples_rgb_hsl.items():
        assert unit_rgb_to_hsl(r, g, b) == pytest.approx(expected)


def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()), dtype=float)
    expected = np.array(list(samples_rgb_hsl.values()), dtype=float)
    result = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected)


def test_np_hue_matches_scalar():
    rgb = np.array([(1, 0, 1), (1, 1, 0), (0, 1, 1), (0.3, 0.1, 0.2), (0.5, 0.5, 0.5)], dtype=float)
    expected = [unit_rgb_hue(*row) for row in rgb]
    assert np.allclose(np_unit_rgb_hue(rgb[:, 0], rgb[:, 1], rgb[:, 2]), expected)


def test_unit_rgb_to_hwb():
    assert unit_rgb_to_hwb(0.7, 0.2, 0.2) == pytest.approx((0, 0.2, 0.3))
    assert unit_rgb_to_hwb(1, 1, 1) == pytest.approx((0, 1, 0))


def test_unit_rgb_to_cmyk():
    assert unit_rgb_to_cmyk(0.25, 0.5, 0.5) == pytest.approx((0.5, 0, 0, 0.5))
    assert unit_rgb_to_cmyk(1, 1, 1) == pytest.approx((0, 0, 0, 0))
    assert unit_rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 1.0)
