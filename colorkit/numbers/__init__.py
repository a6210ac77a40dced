from .angle import CONVERSION, Angle, AngleLike, AngleUnit, as_angle, normalize_turns
from .fraction import Fraction, FractionLike, as_fraction
from .percentage import (
    format_percentage,
    is_percentage,
    parse_number,
    parse_number_or_percentage,
    parse_percentage,
)

__all__ = [
    "Angle",
    "AngleLike",
    "AngleUnit",
    "CONVERSION",
    "as_angle",
    "normalize_turns",
    "Fraction",
    "FractionLike",
    "as_fraction",
    "format_percentage",
    "is_percentage",
    "parse_number",
    "parse_number_or_percentage",
    "parse_percentage",
]
