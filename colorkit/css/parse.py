"""
Color string parsing.

Accepted forms::

    ""                                  transparent black
    #rgb  #rgba  #rrggbb  #rrggbbaa     hex, case-insensitive
    rgb(20% 30 40% / .5)                modern syntax
    rgb(20%, 30, 40%, .5)               legacy comma syntax (deprecated)
    hsl(20grad 30% 40%)                 hue as <number> (degrees) or <angle>
    hwb(...)  hsv(...)  cmyk(...)
    rgba(...) hsla(...) ...             alpha aliases (deprecated)
    palegreen                           CSS color names
"""
from __future__ import annotations

import re
import warnings
from typing import List, Optional, Tuple

from ..colors.names import hex_for_name
from ..conversions import cmyk_to_unit_rgb, hsl_to_unit_rgb, hsv_to_unit_rgb, hwb_to_unit_rgb
from ..errors import FormatError
from ..numbers.angle import Angle
from ..numbers.percentage import (
    NUMBER_RE,
    parse_number,
    parse_number_or_percentage,
    parse_percentage,
)
from ..types.color_types import ColorSpace, UnitRGBA, num_channels
from ..utils.num_utils import clamp

TRANSPARENT: UnitRGBA = (0.0, 0.0, 0.0, 0.0)

HEX_RE = re.compile(r"^#([0-9a-fA-F]*)$")
FUNCTION_RE = re.compile(r"^([a-z]+)\((.*)\)$", re.IGNORECASE | re.DOTALL)

# Deprecated function names that carry an explicit alpha
ALPHA_ALIASES = {
    "rgba": ColorSpace.RGB,
    "hsva": ColorSpace.HSV,
    "hsla": ColorSpace.HSL,
    "hwba": ColorSpace.HWB,
    "cmyka": ColorSpace.CMYK,
}

HUE_CONVERTERS = {
    ColorSpace.HSV: hsv_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.HWB: hwb_to_unit_rgb,
}


def parse_color(text: str, stacklevel: int = 2) -> UnitRGBA:
    """
    Parse a color string into unclamped unit RGBA floats.

    Deprecated syntax parses, but emits one ``DeprecationWarning``.
    ``stacklevel`` is handed to ``warnings.warn``; wrappers add one per
    frame so the warning points at their caller.

    Raises:
        FormatError: if the text matches no color syntax
        NameNotFoundError: if the text is a bare name missing from the table
    """
    text = text.strip()
    if not text:
        return TRANSPARENT
    if text.startswith("#"):
        return parse_hex(text)
    if "(" not in text:
        return parse_hex(hex_for_name(text))
    rgba = parse_function(text)
    notes = deprecated_syntax(text)
    if notes:
        warnings.warn(" ".join(notes), DeprecationWarning, stacklevel=stacklevel)
    return rgba


def deprecated_syntax(text: str) -> List[str]:
    """Describe each deprecated form used by a functional color string."""
    match = FUNCTION_RE.match(text.strip())
    if match is None:
        return []
    name, body = match.groups()
    name = name.lower()
    notes = []
    if name in ALPHA_ALIASES:
        notes.append(f"{name}() is deprecated. Use {ALPHA_ALIASES[name].value}() with '/ alpha' instead.")
    if "," in body:
        notes.append("Comma-separated color syntax is deprecated. Use spaces and '/ alpha' instead.")
    return notes


def parse_hex(text: str) -> UnitRGBA:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
    match = HEX_RE.match(text.strip())
    if match is None:
        raise FormatError(f"Invalid hex color: {text!r}")
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) not in (6, 8):
        raise FormatError(f"Hex color must have 3, 4, 6 or 8 digits: {text!r}")
    channels = [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    r, g, b, a = channels
    return r, g, b, a


def _resolve_space(name: str) -> ColorSpace:
    name = name.lower()
    if name in ALPHA_ALIASES:
        return ALPHA_ALIASES[name]
    try:
        space = ColorSpace(name)
    except ValueError:
        raise FormatError(f"Unknown color function: {name}()") from None
    if space is ColorSpace.HEX:
        raise FormatError("hex() is not a color function")
    return space


def split_arguments(body: str, space: ColorSpace) -> Tuple[List[str], Optional[str]]:
    """
    Split a function body into channel terms and an optional alpha term.

    Legacy bodies are comma separated with alpha as the last term; modern
    bodies are whitespace separated with alpha after a single ``/``.
    """
    expected = num_channels[space]
    if "," in body:
        if "/" in body:
            raise FormatError(f"Cannot mix ',' and '/' in {space.value}({body})")
        terms = [term.strip() for term in body.split(",")]
        if any(not term for term in terms):
            raise FormatError(f"Empty argument in {space.value}({body})")
        if len(terms) == expected:
            return terms, None
        if len(terms) == expected + 1:
            return terms[:-1], terms[-1]
        raise FormatError(
            f"{space.value}() takes {expected} or {expected + 1} arguments, got {len(terms)}"
        )

    channels_text, slash, alpha = body.partition("/")
    if slash:
        alpha = alpha.strip()
        if not alpha or "/" in alpha:
            raise FormatError(f"Invalid alpha in {space.value}({body})")
    terms = channels_text.split()
    if len(terms) != expected:
        raise FormatError(f"{space.value}() takes {expected} channels, got {len(terms)}")
    return terms, alpha if slash else None


def parse_hue(term: str) -> float:
    """A hue term in degrees: a bare number, or an angle with a unit."""
    if NUMBER_RE.match(term):
        return parse_number(term)
    return Angle.from_string(term).degrees


def parse_alpha(term: Optional[str]) -> float:
    if term is None:
        return 1.0
    return parse_number_or_percentage(term)


def parse_function(text: str) -> UnitRGBA:
    """Parse ``name(args)`` functional notation."""
    match = FUNCTION_RE.match(text.strip())
    if match is None:
        raise FormatError(f"Invalid color format: {text!r}")
    space = _resolve_space(match.group(1))
    terms, alpha_term = split_arguments(match.group(2), space)
    alpha = parse_alpha(alpha_term)

    if space is ColorSpace.RGB:
        r, g, b = (parse_number_or_percentage(term, 255) for term in terms)
        return r, g, b, alpha

    if space is ColorSpace.CMYK:
        c, m, y, k = (clamp(parse_number_or_percentage(term)) for term in terms)
        r, g, b = cmyk_to_unit_rgb(c, m, y, k)
        return r, g, b, alpha

    hue = parse_hue(terms[0])
    first, second = (clamp(parse_percentage(term)) for term in terms[1:])
    r, g, b = HUE_CONVERTERS[space](hue, first, second)
    return r, g, b, alpha
