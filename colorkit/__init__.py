"""Colorkit: immutable colors, angles and fractions with CSS color strings."""

from .errors import ColorkitError, FormatError, NameNotFoundError, RangeError
from .types import ColorSpace
from .numbers import Angle, AngleUnit, Fraction
from .colors import Color, NAMED_COLORS
from .css import format_color, parse_color
from .conversions import (
    unit_rgb_hue,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    unit_rgb_to_hwb,
    unit_rgb_to_cmyk,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hwb_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    compound_opacity,
)

__all__ = [
    # Errors
    "ColorkitError",
    "FormatError",
    "NameNotFoundError",
    "RangeError",
    # Values
    "Color",
    "ColorSpace",
    "Angle",
    "AngleUnit",
    "Fraction",
    "NAMED_COLORS",
    # Strings
    "format_color",
    "parse_color",
    # Conversions
    "unit_rgb_hue",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hwb",
    "unit_rgb_to_cmyk",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "hwb_to_unit_rgb",
    "cmyk_to_unit_rgb",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_hsl",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "srgb_to_linear",
    "linear_to_srgb",
    "np_srgb_to_linear",
    "np_linear_to_srgb",
    "compound_opacity",
]
