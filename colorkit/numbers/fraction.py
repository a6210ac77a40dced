from __future__ import annotations

import math
from typing import ClassVar, Union

from ..errors import RangeError
from ..types.frozen import Frozen


class Fraction(Frozen):
    """
    A bounded ratio: a finite number constrained to an inclusive interval.

    The interval defaults to ``[0, 1]``, where ``0`` is none of a value and
    ``1`` is the whole of it. Constructing a Fraction outside its bounds is
    an error; use :meth:`Fraction.clamped` for the saturating path.

    Fractions in ``[0, 1]`` are closed under multiplication, with ``1`` as
    the identity and ``0`` as the absorber. Equality is exact.

    >>> Fraction(0.25).conjugate
    Fraction(0.75)
    >>> Fraction(0.75).plus_clamp(0.5)
    Fraction(1.0)
    """
    __slots__ = ('_value', '_lo', '_hi')

    ZERO: ClassVar[Fraction]
    FULL: ClassVar[Fraction]

    def __init__(self, value: FractionLike = 0.0, lo: float = 0.0, hi: float = 1.0) -> None:
        if isinstance(value, Fraction):
            value = value.value
        value = float(value)
        if not math.isfinite(value):
            raise RangeError(f"{value} must be a finite number")
        if lo > hi:
            raise RangeError(f"Lower bound {lo} is greater than upper bound {hi}")
        if not lo <= value <= hi:
            raise RangeError(f"{value} must be between {lo} and {hi}, inclusive")
        self._value = value
        self._lo = float(lo)
        self._hi = float(hi)
        self._freeze()

    @classmethod
    def clamped(cls, value: FractionLike, lo: float = 0.0, hi: float = 1.0) -> Fraction:
        """Construct a Fraction, saturating out-of-range values at the bounds."""
        value = float(value)
        if math.isnan(value):
            raise RangeError("NaN cannot be clamped into a Fraction")
        return cls(max(lo, min(value, hi)), lo, hi)

    @classmethod
    def max(cls, *fractions: Fraction) -> Fraction:
        if not fractions:
            raise ValueError("No arguments provided.")
        return max(fractions, key=lambda f: f.value)

    @classmethod
    def min(cls, *fractions: Fraction) -> Fraction:
        if not fractions:
            raise ValueError("No arguments provided.")
        return min(fractions, key=lambda f: f.value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> float:
        return self._value

    @property
    def lo(self) -> float:
        return self._lo

    @property
    def hi(self) -> float:
        return self._hi

    @property
    def conjugate(self) -> Fraction:
        """The remaining amount needed to reach the upper bound, ``hi - (v - lo)``."""
        return self._new(self._hi - (self._value - self._lo))

    # ------------------ ARITHMETIC ------------------
    def _new(self, value: float) -> Fraction:
        return Fraction(value, self._lo, self._hi)

    def plus(self, addend: FractionLike = 0.0) -> Fraction:
        """
        Add a number to this Fraction.

        Raises:
            RangeError: if the sum leaves ``[lo, hi]``
        """
        addend = float(addend)
        if addend == 0:
            return self
        result = self._value + addend
        if result < self._lo:
            raise RangeError(f"Cannot add {addend} to {self._value}: result is less than {self._lo}")
        if result > self._hi:
            raise RangeError(f"Cannot add {addend} to {self._value}: result is greater than {self._hi}")
        return self._new(result)

    def plus_clamp(self, addend: FractionLike = 0.0) -> Fraction:
        """
        Like :meth:`plus`, but return the boundary instead of raising.

        Raises:
            RangeError: if ``addend`` is not finite
        """
        if not math.isfinite(float(addend)):
            raise RangeError(f"{addend} must be a finite number")
        try:
            return self.plus(addend)
        except RangeError:
            return self._new(self._hi if float(addend) > 0 else self._lo)

    def minus(self, subtrahend: FractionLike = 0.0) -> Fraction:
        return self.plus(-float(subtrahend))

    def minus_clamp(self, subtrahend: FractionLike = 0.0) -> Fraction:
        return self.plus_clamp(-float(subtrahend))

    def times(self, multiplier: FractionLike = 1.0) -> Fraction:
        multiplier = float(multiplier)
        if multiplier == 1:
            return self
        return self._new(self._value * multiplier)

    def of(self, x: float) -> float:
        """Return ``x`` scaled by this Fraction."""
        return self._value * x

    def clamp(self, lo: FractionLike = 0.0, hi: FractionLike = 1.0) -> Fraction:
        """
        Return this Fraction clamped between two bounds.

        If ``lo > hi`` the bounds are swapped.
        """
        lo, hi = float(lo), float(hi)
        if lo > hi:
            return self.clamp(hi, lo)
        return self._new(max(lo, min(self._value, hi)))

    # ------------------ COMPARISON ------------------
    def equals(self, other: FractionLike) -> bool:
        return self._value == float(other)

    def less_than(self, other: FractionLike) -> bool:
        return self._value < float(other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Fraction, int, float)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: FractionLike) -> bool:
        return self.less_than(other)

    def __le__(self, other: FractionLike) -> bool:
        return self._value <= float(other)

    def __gt__(self, other: FractionLike) -> bool:
        return self._value > float(other)

    def __ge__(self, other: FractionLike) -> bool:
        return self._value >= float(other)

    __add__ = plus
    __sub__ = minus
    __mul__ = times

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        if (self._lo, self._hi) == (0.0, 1.0):
            return f"Fraction({self._value})"
        return f"Fraction({self._value}, lo={self._lo}, hi={self._hi})"


FractionLike = Union[Fraction, float, int]

Fraction.ZERO = Fraction(0.0)
Fraction.FULL = Fraction(1.0)


def as_fraction(value: FractionLike) -> Fraction:
    """Coerce a raw number into a strict ``[0, 1]`` Fraction."""
    return value if isinstance(value, Fraction) else Fraction(value)
