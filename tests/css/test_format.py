import pytest

from colorkit import Color, ColorSpace, format_color
from colorkit.css import format_function, format_hex, format_hue


def test_format_hex():
    assert format_hex(1, 0, 0) == "#ff0000"
    assert format_hex(1, 0, 0, 0.5) == "#ff000080"
    assert format_hex(0.25, 0.5, 1) == "#4080ff"
    assert format_hex(76.5 / 255, 0, 0) == "#4d0000"


def test_format_hue():
    assert format_hue(210) == "210deg"
    assert format_hue(33.333) == "33.3deg"


def test_format_function():
    assert format_function("rgb", ["1", "2", "3"]) == "rgb(1 2 3)"
    assert format_function("rgb", ["1", "2", "3"], 0.5) == "rgb(1 2 3 / 0.5)"
    assert format_function("rgb", ["1", "2", "3"], 1 / 3) == "rgb(1 2 3 / 0.333)"


@pytest.mark.parametrize("color, space, expected", [
    (Color(1, 0, 0), ColorSpace.HEX, "#ff0000"),
    (Color(1, 0, 0), ColorSpace.RGB, "rgb(255 0 0)"),
    (Color(0, 0, 1, 0.5), ColorSpace.RGB, "rgb(0 0 255 / 0.5)"),
    (Color(1, 0, 0), ColorSpace.HSL, "hsl(0deg 100% 50%)"),
    (Color(0.25, 0.5, 0.75), ColorSpace.HSV, "hsv(210deg 66.7% 75%)"),
    (Color(0.25, 0.5, 0.75), ColorSpace.HSL, "hsl(210deg 50% 50%)"),
    (Color(0.7, 0.2, 0.2), ColorSpace.HWB, "hwb(0deg 20% 30%)"),
    (Color(0.25, 0.5, 0.5), ColorSpace.CMYK, "cmyk(50% 0% 0% 50%)"),
    (Color(0, 0, 0, 0.25), ColorSpace.CMYK, "cmyk(0% 0% 0% 100% / 0.25)"),
    (Color(), ColorSpace.HEX, "#00000000"),
])
def test_format_color(color, space, expected):
    assert format_color(color, space) == expected
    assert color.to_string(space) == expected


def test_space_can_be_a_string():
    assert format_color(Color(1, 0, 0), "hsl") == "hsl(0deg 100% 50%)"


def test_unknown_space():
    with pytest.raises(ValueError):
        format_color(Color(1, 0, 0), "lab")


def test_hex_rounds_half_up():
    assert Color.from_rgb(76.5, 127.5, 0).to_string() == "#4d8000"
    assert Color(0.5, 0.5, 0.5, 0.5).to_string() == "#80808080"
