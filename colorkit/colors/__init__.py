"""
Colorkit Color Classes
======================

The immutable :class:`Color` value object and the CSS named-color table.

Features
--------
- Immutable color instances (frozen after initialization)
- Channel values clamped to ``[0, 1]`` on construction
- Factories from RGB (0-255), HSV, HSL, HWB, CMYK and color strings
- Hue rotation, saturation/lightness/alpha adjustment, inversion
- Mixing in sRGB (``mix``) and in linear light (``blur``)
- WCAG relative luminance and contrast ratio
- Named-color lookup in both directions

Usage
-----
>>> from colorkit.colors import Color

>>> red = Color.from_rgb(255, 0, 0)
>>> red.rotate(120).to_string()
'#00ff00'
>>> Color.from_string("palegreen").to_string("hsl")
'hsl(120deg 92.5% 79%)'
>>> Color.from_string("#fa8072").name()
'salmon'
"""

from .color import Color
from .names import COLOR_NAMES, NAMED_COLORS, hex_for_name, name_for_hex

__all__ = [
    'Color',
    'COLOR_NAMES',
    'NAMED_COLORS',
    'hex_for_name',
    'name_for_hex',
]
