import numpy as np
import pytest

from colorkit import Color, ColorSpace

samples_rgb = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (88, 225, 127),
    (100, 81, 81),
    (41, 209, 69),
    (76, 19, 98),
    (152, 251, 152),
]


def sample_colors():
    rng = np.random.default_rng(11)
    colors = [Color.from_rgb(r, g, b) for r, g, b in samples_rgb]
    colors += [Color.from_rgb(r, g, b, a / 255) for r, g, b, a in rng.integers(0, 256, size=(12, 4))]
    return colors


@pytest.mark.parametrize("color", sample_colors())
def test_hex_round_trip_is_exact(color):
    assert Color.from_string(color.to_string()) == color


@pytest.mark.parametrize("space", [
    ColorSpace.RGB,
    ColorSpace.HSV,
    ColorSpace.HSL,
    ColorSpace.HWB,
    ColorSpace.CMYK,
])
@pytest.mark.parametrize("color", sample_colors())
def test_round_trip_is_close(color, space):
    parsed = Color.from_string(color.to_string(space))
    assert np.allclose(parsed.rgb, color.rgb, atol=1 / 255)


@pytest.mark.parametrize("color", sample_colors())
def test_hex_output_is_stable(color):
    text = color.to_string()
    assert Color.from_string(text).to_string() == text
