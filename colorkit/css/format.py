from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..numbers.percentage import format_percentage
from ..types.color_types import ColorSpace, is_hue_space
from ..utils.num_utils import format_number, round_to_int

if TYPE_CHECKING:
    from ..colors.color import Color

# Decimal places used when rendering each kind of channel
HUE_DIGITS = 1
PERCENT_DIGITS = 1
ALPHA_DIGITS = 3


def _byte(channel: float) -> int:
    return max(0, min(round_to_int(channel * 255), 255))


def format_hex(red: float, green: float, blue: float, alpha: float = 1.0) -> str:
    """``#rrggbb``, or ``#rrggbbaa`` when alpha is below 1."""
    channels = [red, green, blue] if alpha >= 1 else [red, green, blue, alpha]
    return "#" + "".join(f"{_byte(ch):02x}" for ch in channels)


def format_hue(degrees: float) -> str:
    return f"{format_number(degrees, HUE_DIGITS)}deg"


def format_function(name: str, terms: Iterable[str], alpha: float = 1.0) -> str:
    """``name(t1 t2 t3)``, with `` / alpha`` appended when alpha is below 1."""
    body = " ".join(terms)
    if alpha < 1:
        body += f" / {format_number(alpha, ALPHA_DIGITS)}"
    return f"{name}({body})"


def format_color(color: Color, space: ColorSpace = ColorSpace.HEX) -> str:
    """
    Render a Color in the given color space.

    >>> format_color(Color(1, 0, 0), ColorSpace.HSL)
    'hsl(0deg 100% 50%)'
    >>> format_color(Color(0, 0, 1, 0.5), ColorSpace.RGB)
    'rgb(0 0 255 / 0.5)'
    """
    space = ColorSpace(space)
    red, green, blue, alpha = color.rgb

    if space is ColorSpace.HEX:
        return format_hex(red, green, blue, alpha)

    if is_hue_space(space):
        # color.hsv / color.hsl / color.hwb
        hue, first, second, _ = getattr(color, space.value)
        terms = [
            format_hue(hue),
            format_percentage(first, PERCENT_DIGITS),
            format_percentage(second, PERCENT_DIGITS),
        ]
    elif space is ColorSpace.CMYK:
        terms = [format_percentage(ch, PERCENT_DIGITS) for ch in color.cmyk[:4]]
    else:
        terms = [str(_byte(ch)) for ch in (red, green, blue)]
    return format_function(space.value, terms, alpha)
