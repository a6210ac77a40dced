from __future__ import annotations

# No dependencies
from enum import Enum
from typing import Tuple


class ColorSpace(str, Enum):
    """String representations a Color can be rendered in (and parsed from)."""
    HEX = "hex"    # #rrggbb / #rrggbbaa / #rgb / #rgba
    RGB = "rgb"    # rgb(r g b [/ a])
    HSV = "hsv"    # hsv(h s v [/ a])
    HSL = "hsl"    # hsl(h s l [/ a])
    HWB = "hwb"    # hwb(h w b [/ a])
    CMYK = "cmyk"  # cmyk(c m y k [/ a])


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL, ColorSpace.HWB}

# Number of channels (without alpha) each functional notation takes.
num_channels = {
    ColorSpace.RGB: 3,
    ColorSpace.HSV: 3,
    ColorSpace.HSL: 3,
    ColorSpace.HWB: 3,
    ColorSpace.CMYK: 4,
}

UnitRGB = Tuple[float, float, float]
UnitRGBA = Tuple[float, float, float, float]


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space is a hue-based space (HSV, HSL or HWB).

    Args:
        color_space: ColorSpace member or its string value
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace(color_space) in HUE_SPACES
