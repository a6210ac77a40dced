import math
import re

from ..errors import FormatError
from ..utils.num_utils import format_number

NUMBER = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
PERCENT_RE = re.compile(rf"^({NUMBER})%$")
NUMBER_RE = re.compile(rf"^{NUMBER}$")


def is_percentage(text: str) -> bool:
    return PERCENT_RE.match(text.strip()) is not None


def parse_percentage(text: str) -> float:
    """
    Parse ``"<number>%"`` into a ratio, e.g. ``"40%" -> 0.4``.

    The percent sign is required; a bare number is a FormatError.
    The result is not clamped.
    """
    match = PERCENT_RE.match(text.strip())
    if match is None:
        raise FormatError(f"Invalid percentage format: {text!r}")
    return float(match.group(1)) / 100


def parse_number(text: str) -> float:
    """Parse a bare CSS ``<number>``; ``inf``/``nan`` spellings are rejected."""
    text = text.strip()
    if NUMBER_RE.match(text) is None:
        raise FormatError(f"Invalid number format: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise FormatError(f"Number out of range: {text!r}")
    return value


def parse_number_or_percentage(text: str, scale: float = 1.0) -> float:
    """
    Parse either a percentage or a bare number divided by ``scale``.

    >>> parse_number_or_percentage("50%")
    0.5
    >>> parse_number_or_percentage("51", 255)
    0.2
    """
    if is_percentage(text):
        return parse_percentage(text)
    return parse_number(text) / scale


def format_percentage(ratio: float, ndigits: int = 1) -> str:
    """Render a ratio as a percentage string: ``0.5 -> "50%"``."""
    return f"{format_number(ratio * 100, ndigits)}%"
