import numpy as np
import pytest

from colorkit import Color, RangeError, linear_to_srgb

red = Color(1, 0, 0)
green = Color(0, 1, 0)
blue = Color(0, 0, 1)
white = Color(1, 1, 1)
black = Color(0, 0, 0)


def test_mix_interpolates_channels():
    assert red.mix(blue).rgb == pytest.approx((0.5, 0, 0.5, 1))
    assert red.mix(blue, 0.25).rgb == pytest.approx((0.75, 0, 0.25, 1))


def test_mix_weight_extremes():
    assert red.mix(blue, 0).rgb == pytest.approx(red.rgb)
    assert red.mix(blue, 1).rgb == pytest.approx(blue.rgb)


@pytest.mark.parametrize("weight", [-0.1, 1.5])
def test_mix_rejects_weight_out_of_range(weight):
    with pytest.raises(RangeError):
        red.mix(blue, weight)


def test_mix_compounds_alpha():
    half = Color(0, 0, 0, 0.5)
    assert half.mix(half).alpha.value == pytest.approx(0.5)
    assert Color(0, 0, 0, 0.2).mix(Color(0, 0, 0, 0.8), 0).alpha.value == pytest.approx(0.2)
    assert red.mix(blue).alpha == 1


def test_mix_all_is_the_mean():
    mixed = Color.mix_all([red, green, blue])
    assert mixed.rgb == pytest.approx((1 / 3, 1 / 3, 1 / 3, 1))


def test_mix_all_differs_from_pairwise_folding():
    folded = red.mix(green).mix(blue)
    assert folded.rgb == pytest.approx((0.25, 0.25, 0.5, 1))
    assert folded != Color.mix_all([red, green, blue])


def test_mix_all_alpha():
    half = Color(0, 0, 0, 0.5)
    assert Color.mix_all([half, half]).alpha.value == pytest.approx(0.75)
    assert Color.mix_all([half]).alpha.value == pytest.approx(0.5)
    assert Color.mix_all(c for c in [red, blue]).alpha == 1


def test_mix_all_alpha_stays_in_range():
    rng = np.random.default_rng(3)
    for _ in range(10):
        colors = [Color(*rng.random(4)) for _ in range(rng.integers(1, 6))]
        assert 0 <= Color.mix_all(colors).alpha.value <= 1


def test_mix_all_requires_colors():
    with pytest.raises(ValueError):
        Color.mix_all([])
    with pytest.raises(ValueError):
        Color.blur_all([])


def test_blur_is_brighter_than_mix():
    blurred = red.blur(green)
    mixed = red.mix(green)
    assert blurred.rgb == pytest.approx((linear_to_srgb(0.5), linear_to_srgb(0.5), 0, 1))
    assert blurred.red > mixed.red
    assert blurred.relative_luminance() > mixed.relative_luminance()


def test_blur_weight_extremes():
    assert red.blur(blue, 0).rgb == pytest.approx(red.rgb)
    assert red.blur(blue, 1).rgb == pytest.approx(blue.rgb)
    with pytest.raises(RangeError):
        red.blur(blue, 2)


def test_blur_all():
    blurred = Color.blur_all([white, black])
    expected = linear_to_srgb(0.5)
    assert blurred.rgb == pytest.approx((expected, expected, expected, 1))
    assert Color.blur_all([red, green, blue]).red.value == pytest.approx(linear_to_srgb(1 / 3))


def test_blur_all_matches_blur_for_two_opaque_colors():
    assert Color.blur_all([red, blue]).rgb == pytest.approx(red.blur(blue).rgb)
