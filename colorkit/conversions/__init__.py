"""
Colorkit Color Space Conversions
================================

Pure float conversions between unit RGB and the HSV, HSL, HWB and CMYK
color spaces, the sRGB transfer function, and opacity compounding. Most
functions come as a scalar version and a vectorized (numpy) ``np_*`` twin.

Hues are in degrees ``[0, 360)``; every other channel is in ``[0, 1]``.

Conversion Functions
-------------------

RGB → hue / HSV / HSL / HWB / CMYK:
    unit_rgb_hue(r, g, b), np_unit_rgb_hue(r, g, b)
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hwb(r, g, b)
    unit_rgb_to_cmyk(r, g, b)

HSV / HSL / HWB / CMYK → RGB:
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)
    hwb_to_unit_rgb(h, w, b)
    cmyk_to_unit_rgb(c, m, y, k)

Gamma & opacity:
    srgb_to_linear(c), np_srgb_to_linear(c)
    linear_to_srgb(c), np_linear_to_srgb(c)
    relative_luminance(r, g, b), contrast_ratio(l1, l2)
    compound_opacity(*alphas), weighted_compound_opacity(a1, a2, weight)

Examples
--------
>>> from colorkit.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(120, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

# RGB → other spaces
from .from_rgb import (
    unit_rgb_hue,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    unit_rgb_to_hwb,
    unit_rgb_to_cmyk,
    np_unit_rgb_hue,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
)

# other spaces → RGB
from .to_rgb import (
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hwb_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
)

# Gamma & opacity
from .gamma import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    relative_luminance,
    contrast_ratio,
    compound_opacity,
    weighted_compound_opacity,
)

__all__ = [
    # RGB → other spaces
    'unit_rgb_hue',
    'unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hwb',
    'unit_rgb_to_cmyk',
    'np_unit_rgb_hue',
    'np_unit_rgb_to_hsv',
    'np_unit_rgb_to_hsl',

    # other spaces → RGB
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hwb_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # Gamma & opacity
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'relative_luminance',
    'contrast_ratio',
    'compound_opacity',
    'weighted_compound_opacity',
]
