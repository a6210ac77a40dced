from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

import numpy as np

from ..conversions import (
    cmyk_to_unit_rgb,
    compound_opacity,
    contrast_ratio,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    hwb_to_unit_rgb,
    linear_to_srgb,
    np_linear_to_srgb,
    np_srgb_to_linear,
    relative_luminance,
    srgb_to_linear,
    unit_rgb_hue,
    unit_rgb_to_cmyk,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hwb,
    weighted_compound_opacity,
)
from ..css import format as css_format
from ..css import parse as css_parse
from ..errors import RangeError
from ..numbers.angle import Angle, AngleLike, AngleUnit, as_angle
from ..numbers.fraction import Fraction, FractionLike
from ..types.color_types import ColorSpace
from ..types.frozen import Frozen
from ..utils.num_utils import clamp, round_to_int
from .names import COLOR_NAMES, name_for_hex

_MISSING = object()

_rng = np.random.default_rng()


def _unit(value: FractionLike) -> float:
    return Fraction.clamped(value).value


def _hue(value: AngleLike) -> float:
    """Hue in degrees; raw numbers are read as degrees."""
    return as_angle(value, AngleUnit.DEG).degrees


class Color(Frozen):
    """
    Immutable sRGB color with an alpha channel.

    Red, green, blue and alpha are stored as :class:`Fraction` values in
    ``[0, 1]``; out-of-range input is clamped. HSV, HSL, HWB and CMYK views
    are derived from RGB on each access. Every transform returns a new Color.

    Hue arguments accept an :class:`Angle` or a number of degrees.

    >>> Color(0.25, 0.5, 1).to_string()
    '#4080ff'
    >>> Color.from_string("#f00").rgb
    (1.0, 0.0, 0.0, 1.0)
    >>> Color()  # no arguments: fully transparent black
    Color(0.0, 0.0, 0.0, 0.0)
    """
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_max', '_min', '_chroma')

    def __init__(
        self,
        red: FractionLike = _MISSING,
        green: FractionLike = _MISSING,
        blue: FractionLike = _MISSING,
        alpha: FractionLike = _MISSING,
    ) -> None:
        if all(arg is _MISSING for arg in (red, green, blue, alpha)):
            alpha = 0.0
        red, green, blue = (0.0 if ch is _MISSING else ch for ch in (red, green, blue))
        if alpha is _MISSING:
            alpha = 1.0

        self._red = Fraction.clamped(red)
        self._green = Fraction.clamped(green)
        self._blue = Fraction.clamped(blue)
        self._alpha = Fraction.clamped(alpha)

        r, g, b = self._red.value, self._green.value, self._blue.value
        self._max = max(r, g, b)
        self._min = min(r, g, b)
        self._chroma = self._max - self._min
        self._freeze()

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: FractionLike = 1.0) -> Color:
        """
        Build from 0-255 channels; values are clamped, then rounded.

        Raises:
            RangeError: if a channel is NaN
        """
        channels = [float(ch) for ch in (r, g, b)]
        if any(math.isnan(ch) for ch in channels):
            raise RangeError(f"RGB channels must be numbers, got {tuple(channels)}")
        red, green, blue = (round_to_int(clamp(ch, 0, 255)) / 255 for ch in channels)
        return cls(red, green, blue, a)

    @classmethod
    def from_hsv(cls, h: AngleLike, s: FractionLike, v: FractionLike, a: FractionLike = 1.0) -> Color:
        r, g, b = hsv_to_unit_rgb(_hue(h), _unit(s), _unit(v))
        return cls(r, g, b, a)

    @classmethod
    def from_hsl(cls, h: AngleLike, s: FractionLike, l: FractionLike, a: FractionLike = 1.0) -> Color:
        r, g, b = hsl_to_unit_rgb(_hue(h), _unit(s), _unit(l))
        return cls(r, g, b, a)

    @classmethod
    def from_hwb(cls, h: AngleLike, w: FractionLike, b: FractionLike, a: FractionLike = 1.0) -> Color:
        red, green, blue = hwb_to_unit_rgb(_hue(h), _unit(w), _unit(b))
        return cls(red, green, blue, a)

    @classmethod
    def from_cmyk(
        cls,
        c: FractionLike,
        m: FractionLike,
        y: FractionLike,
        k: FractionLike,
        a: FractionLike = 1.0,
    ) -> Color:
        r, g, b = cmyk_to_unit_rgb(_unit(c), _unit(m), _unit(y), _unit(k))
        return cls(r, g, b, a)

    @classmethod
    def from_string(cls, text: str) -> Color:
        """
        Parse a hex, functional or named color string.

        Raises:
            FormatError: if the text matches no color syntax
            NameNotFoundError: if a bare name is not a known color
        """
        r, g, b, a = css_parse.parse_color(text, stacklevel=3)
        return cls(r, g, b, a)

    @classmethod
    def random(cls, include_alpha: bool = True) -> Color:
        r, g, b, a = _rng.random(4)
        return cls(float(r), float(g), float(b), float(a) if include_alpha else 1.0)

    @classmethod
    def random_name(cls) -> Color:
        """A random color from the named-color table."""
        return cls.from_string(COLOR_NAMES[_rng.integers(len(COLOR_NAMES))])

    # ------------------ RGB ------------------
    @property
    def red(self) -> Fraction:
        return self._red

    @property
    def green(self) -> Fraction:
        return self._green

    @property
    def blue(self) -> Fraction:
        return self._blue

    @property
    def alpha(self) -> Fraction:
        return self._alpha

    @property
    def rgb(self) -> Tuple[float, float, float, float]:
        """``(red, green, blue, alpha)`` as floats in ``[0, 1]``."""
        return self._red.value, self._green.value, self._blue.value, self._alpha.value

    @property
    def _unit_rgb(self) -> Tuple[float, float, float]:
        return self._red.value, self._green.value, self._blue.value

    # ------------------ DERIVED SPACES ------------------
    @property
    def _hue_angle(self) -> Angle:
        return Angle(unit_rgb_hue(*self._unit_rgb), AngleUnit.DEG)

    @property
    def hsv_hue(self) -> Angle:
        return self._hue_angle

    @property
    def hsv_saturation(self) -> Fraction:
        if self._chroma == 0:
            return Fraction.ZERO
        return Fraction.clamped(self._chroma / self._max)

    @property
    def hsv_value(self) -> Fraction:
        return Fraction(self._max)

    @property
    def hsl_hue(self) -> Angle:
        return self._hue_angle

    @property
    def hsl_saturation(self) -> Fraction:
        if self._chroma == 0:
            return Fraction.ZERO
        return Fraction.clamped(self._chroma / (1 - abs(2 * self.hsl_lightness.value - 1)))

    @property
    def hsl_lightness(self) -> Fraction:
        return Fraction.clamped((self._max + self._min) / 2)

    @property
    def hwb_hue(self) -> Angle:
        return self._hue_angle

    @property
    def hwb_white(self) -> Fraction:
        return Fraction(self._min)

    @property
    def hwb_black(self) -> Fraction:
        return Fraction(self._max).conjugate

    @property
    def cmyk_cyan(self) -> Fraction:
        return Fraction.clamped(unit_rgb_to_cmyk(*self._unit_rgb)[0])

    @property
    def cmyk_magenta(self) -> Fraction:
        return Fraction.clamped(unit_rgb_to_cmyk(*self._unit_rgb)[1])

    @property
    def cmyk_yellow(self) -> Fraction:
        return Fraction.clamped(unit_rgb_to_cmyk(*self._unit_rgb)[2])

    @property
    def cmyk_black(self) -> Fraction:
        return Fraction(self._max).conjugate

    # Tuple views: hue in degrees, everything else in [0, 1], alpha last.
    @property
    def hsv(self) -> Tuple[float, float, float, float]:
        return (*unit_rgb_to_hsv(*self._unit_rgb), self._alpha.value)

    @property
    def hsl(self) -> Tuple[float, float, float, float]:
        return (*unit_rgb_to_hsl(*self._unit_rgb), self._alpha.value)

    @property
    def hwb(self) -> Tuple[float, float, float, float]:
        return (*unit_rgb_to_hwb(*self._unit_rgb), self._alpha.value)

    @property
    def cmyk(self) -> Tuple[float, float, float, float, float]:
        return (*unit_rgb_to_cmyk(*self._unit_rgb), self._alpha.value)

    # ------------------ TRANSFORMS ------------------
    def invert(self) -> Color:
        """Complement every RGB channel; alpha is kept."""
        return Color(self._red.conjugate, self._green.conjugate, self._blue.conjugate, self._alpha)

    def rotate(self, angle: AngleLike) -> Color:
        """Rotate the HSV hue; raw numbers are degrees."""
        hue = self.hsv_hue.plus(as_angle(angle, AngleUnit.DEG))
        return Color.from_hsv(hue, self.hsv_saturation, self.hsv_value, self._alpha)

    def complement(self) -> Color:
        return self.rotate(Angle.STRAIGHT)

    def saturate(self, amount: float, relative: bool = False) -> Color:
        """
        Increase HSL saturation by ``amount``, or by ``amount`` times the
        current saturation when ``relative``. Saturates at 0 and 1.
        """
        saturation = self.hsl_saturation
        delta = amount * saturation.value if relative else amount
        return Color.from_hsl(self.hsl_hue, saturation.plus_clamp(delta), self.hsl_lightness, self._alpha)

    def desaturate(self, amount: float, relative: bool = False) -> Color:
        return self.saturate(-amount, relative)

    def lighten(self, amount: float, relative: bool = False) -> Color:
        lightness = self.hsl_lightness
        delta = amount * lightness.value if relative else amount
        return Color.from_hsl(self.hsl_hue, self.hsl_saturation, lightness.plus_clamp(delta), self._alpha)

    def darken(self, amount: float, relative: bool = False) -> Color:
        return self.lighten(-amount, relative)

    def fade_in(self, amount: float, relative: bool = False) -> Color:
        delta = amount * self._alpha.value if relative else amount
        return Color(self._red, self._green, self._blue, self._alpha.plus_clamp(delta))

    def fade_out(self, amount: float, relative: bool = False) -> Color:
        return self.fade_in(-amount, relative)

    def negate(self) -> Color:
        """Complement the alpha channel; RGB is kept."""
        return Color(self._red, self._green, self._blue, self._alpha.conjugate)

    # ------------------ MIXING ------------------
    def mix(self, other: Color, weight: FractionLike = 0.5) -> Color:
        """
        Linearly interpolate RGB toward ``other`` by ``weight``.

        Alpha is compounded: ``1 - (1 - a1)^(1 - w) * (1 - a2)^w``.

        Raises:
            RangeError: if ``weight`` is outside ``[0, 1]``
        """
        w = Fraction(weight).value
        r, g, b = (
            c1 * (1 - w) + c2 * w for c1, c2 in zip(self._unit_rgb, other._unit_rgb)
        )
        alpha = weighted_compound_opacity(self._alpha.value, other._alpha.value, w)
        return Color(r, g, b, alpha)

    def blur(self, other: Color, weight: FractionLike = 0.5) -> Color:
        """Like :meth:`mix`, but interpolate RGB in linear light."""
        w = Fraction(weight).value
        r, g, b = (
            linear_to_srgb(srgb_to_linear(c1) * (1 - w) + srgb_to_linear(c2) * w)
            for c1, c2 in zip(self._unit_rgb, other._unit_rgb)
        )
        alpha = weighted_compound_opacity(self._alpha.value, other._alpha.value, w)
        return Color(r, g, b, alpha)

    @staticmethod
    def _stack(colors: Iterable[Color]) -> np.ndarray:
        arr = np.array([color.rgb for color in colors], dtype=float)
        if arr.size == 0:
            raise ValueError("No colors provided.")
        return arr

    @classmethod
    def mix_all(cls, colors: Iterable[Color]) -> Color:
        """
        Average many colors at once.

        RGB is the arithmetic mean; alpha is ``1 - prod(1 - a)``. Folding
        :meth:`mix` pairwise weights earlier colors less than this does.
        """
        arr = cls._stack(colors)
        r, g, b = arr[:, :3].mean(axis=0)
        return cls(float(r), float(g), float(b), compound_opacity(*arr[:, 3]))

    @classmethod
    def blur_all(cls, colors: Iterable[Color]) -> Color:
        """Like :meth:`mix_all`, but average RGB in linear light."""
        arr = cls._stack(colors)
        r, g, b = np_linear_to_srgb(np_srgb_to_linear(arr[:, :3]).mean(axis=0))
        return cls(float(r), float(g), float(b), compound_opacity(*arr[:, 3]))

    # ------------------ LUMINANCE ------------------
    def relative_luminance(self) -> float:
        """WCAG relative luminance; alpha is ignored."""
        return relative_luminance(*self._unit_rgb)

    def contrast_ratio(self, other: Color) -> float:
        """WCAG contrast ratio, from 1 (none) to 21 (black on white)."""
        return contrast_ratio(self.relative_luminance(), other.relative_luminance())

    # ------------------ COMPARISON ------------------
    def equals(self, other: Color) -> bool:
        """Fully transparent colors are all equal; otherwise compare RGBA exactly."""
        if self._alpha.value == 0 and other._alpha.value == 0:
            return True
        return self.rgb == other.rgb

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self._alpha.value == 0:
            return hash((0.0, 0.0, 0.0, 0.0))
        return hash(self.rgb)

    # ------------------ NAMES & STRINGS ------------------
    def name(self) -> Optional[str]:
        """The first CSS color name whose hex value matches this color, or None."""
        return name_for_hex(self.to_string())

    def to_string(self, space: ColorSpace = ColorSpace.HEX) -> str:
        return css_format.format_color(self, space)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        r, g, b, a = self.rgb
        return f"Color({r}, {g}, {b}, {a})"
