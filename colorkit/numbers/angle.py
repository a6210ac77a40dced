from __future__ import annotations

import math
import re
from enum import Enum
from typing import ClassVar, Union

from ..errors import FormatError, RangeError
from ..types.frozen import Frozen
from ..utils.num_utils import format_number
from .percentage import NUMBER


class AngleUnit(str, Enum):
    """Angle units, as in CSS ``<angle>`` values."""
    DEG = "deg"    # 360 in a full circle
    GRAD = "grad"  # 400 in a full circle
    RAD = "rad"    # 2π in a full circle
    TURN = "turn"  # 1 in a full circle


# Number of units in one full circle.
CONVERSION = {
    AngleUnit.DEG: 360.0,
    AngleUnit.GRAD: 400.0,
    AngleUnit.RAD: 2 * math.pi,
    AngleUnit.TURN: 1.0,
}

# Tolerance for angle equality, in turns.
EPSILON = 1e-12

ANGLE_RE = re.compile(rf"^({NUMBER})(deg|grad|rad|turn)$", re.IGNORECASE)


def normalize_turns(value: float) -> float:
    """Floor-modulo into ``[0, 1)``."""
    turns = value % 1.0
    # -1e-20 % 1.0 rounds up to exactly 1.0
    return 0.0 if turns >= 1.0 else turns


class Angle(Frozen):
    """
    A one-dimensional angular measurement.

    An Angle is stored as a number of turns in ``[0, 1)`` and can be
    expressed in degrees, gradians, radians or turns. Every operation
    re-normalizes, so angles wrap around the circle:

    >>> Angle(450, AngleUnit.DEG).to_string(AngleUnit.DEG)
    '90deg'
    >>> Angle(-0.25).turns
    0.75

    Equality is approximate (within ``EPSILON`` along the circle), so
    angles are not hashable.
    """
    __slots__ = ('_value',)

    ZERO: ClassVar[Angle]
    RIGHT: ClassVar[Angle]
    STRAIGHT: ClassVar[Angle]
    FULL: ClassVar[Angle]

    def __init__(self, value: AngleLike = 0.0, unit: AngleUnit = AngleUnit.TURN) -> None:
        if isinstance(value, Angle):
            value, unit = value.turns, AngleUnit.TURN
        value = float(value)
        if not math.isfinite(value):
            raise RangeError(f"{value} must be a finite number")
        # reduce in the source unit first so 370deg and 10deg store the same turns
        ratio = CONVERSION[AngleUnit(unit)]
        self._value = normalize_turns((value % ratio) / ratio)
        self._freeze()

    @classmethod
    def from_string(cls, text: str) -> Angle:
        """
        Parse ``<number><unit>``, e.g. ``"90deg"``, ``"0.25turn"``, ``"-20grad"``.

        Raises:
            FormatError: if the string is not a number followed by a unit
        """
        match = ANGLE_RE.match(text.strip())
        if match is None:
            raise FormatError(f"Invalid angle format: {text!r}")
        number, unit = match.groups()
        value = float(number)
        if not math.isfinite(value):
            raise FormatError(f"Angle out of range: {text!r}")
        return cls(value, AngleUnit(unit.lower()))

    @classmethod
    def max(cls, *angles: Angle) -> Angle:
        if not angles:
            raise ValueError("No arguments provided.")
        return max(angles, key=lambda a: a.turns)

    @classmethod
    def min(cls, *angles: Angle) -> Angle:
        if not angles:
            raise ValueError("No arguments provided.")
        return min(angles, key=lambda a: a.turns)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def turns(self) -> float:
        return self._value

    @property
    def degrees(self) -> float:
        return self.convert(AngleUnit.DEG)

    @property
    def gradians(self) -> float:
        return self.convert(AngleUnit.GRAD)

    @property
    def radians(self) -> float:
        return self.convert(AngleUnit.RAD)

    def convert(self, unit: AngleUnit) -> float:
        """Return this Angle's measure in the given unit."""
        return self._value * CONVERSION[AngleUnit(unit)]

    # complementary angles add to 0.25turn, supplementary to 0.5turn, conjugate to 1turn
    @property
    def complement(self) -> Angle:
        return Angle.RIGHT.minus(self)

    @property
    def supplement(self) -> Angle:
        return Angle.STRAIGHT.minus(self)

    @property
    def conjugate(self) -> Angle:
        return Angle.FULL.minus(self)

    @property
    def invert(self) -> Angle:
        """This angle rotated by half a turn."""
        return self.plus(Angle.STRAIGHT)

    @property
    def is_acute(self) -> bool:
        return self.less_than(Angle.RIGHT)

    @property
    def is_obtuse(self) -> bool:
        return Angle.RIGHT.less_than(self) and self.less_than(Angle.STRAIGHT)

    @property
    def is_reflex(self) -> bool:
        return Angle.STRAIGHT.less_than(self)

    # ------------------ TRIGONOMETRY ------------------
    @property
    def sin(self) -> float:
        return math.sin(self.radians)

    @property
    def cos(self) -> float:
        return math.cos(self.radians)

    @property
    def tan(self) -> float:
        return math.tan(self.radians)

    @property
    def csc(self) -> float:
        return 1 / self.sin

    @property
    def sec(self) -> float:
        return 1 / self.cos

    @property
    def cot(self) -> float:
        return 1 / self.tan

    # ------------------ ARITHMETIC ------------------
    def plus(self, addend: AngleLike) -> Angle:
        addend = as_angle(addend)
        if addend.turns == 0:
            return self
        return Angle(self._value + addend.turns)

    def minus(self, subtrahend: AngleLike) -> Angle:
        subtrahend = as_angle(subtrahend)
        if subtrahend.turns == 0:
            return self
        return Angle(self._value - subtrahend.turns)

    def scale(self, scalar: float = 1.0) -> Angle:
        return Angle(self._value * float(scalar))

    def clamp(self, lo: Angle, hi: Angle) -> Angle:
        """
        Return this Angle clamped between two bounds.

        If ``lo`` is greater than ``hi`` the bounds are swapped.
        """
        if hi.less_than(lo):
            return self.clamp(hi, lo)
        return Angle.min(Angle.max(lo, self), hi)

    # ------------------ COMPARISON ------------------
    def equals(self, other: AngleLike) -> bool:
        diff = abs(self._value - as_angle(other).turns)
        return min(diff, 1.0 - diff) < EPSILON

    def less_than(self, other: AngleLike) -> bool:
        other = as_angle(other)
        return not self.equals(other) and self._value < other.turns

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Angle, int, float)):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: AngleLike) -> bool:
        return self.less_than(other)

    def __gt__(self, other: AngleLike) -> bool:
        return as_angle(other).less_than(self)

    __add__ = plus
    __sub__ = minus
    __mul__ = scale

    def __float__(self) -> float:
        return self._value

    def to_string(self, unit: AngleUnit = AngleUnit.TURN) -> str:
        unit = AngleUnit(unit)
        return f"{format_number(self.convert(unit))}{unit.value}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Angle({self._value})"


AngleLike = Union[Angle, float, int]

Angle.ZERO = Angle(0.0)
Angle.RIGHT = Angle(0.25)
Angle.STRAIGHT = Angle(0.5)
Angle.FULL = Angle(1.0)


def as_angle(value: AngleLike, unit: AngleUnit = AngleUnit.TURN) -> Angle:
    """Coerce a raw number, measured in ``unit``, into an Angle."""
    return value if isinstance(value, Angle) else Angle(value, unit)
