from __future__ import annotations

import math


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp a scalar between lo and hi."""
    return max(lo, min(value, hi))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round to ``ndigits`` decimals, with ties going up.

    Unlike ``round``, ties never go to even: ``round_half_up(76.5) == 77.0``
    while ``round(76.5) == 76``.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    return int(round_half_up(value))


def format_number(value: float, ndigits: int | None = None) -> str:
    """
    Render a number without a trailing ``.0``.

    Args:
        value: Number to render
        ndigits: Decimal places to round (half-up) to before rendering.
            ``None`` keeps the shortest repr of the float.

    Returns:
        ``"50"``, ``"0.5"``, ``"359.9"`` ...
    """
    if ndigits is None:
        if is_close_to_int(value, 0.0):
            return str(int(value))
        return repr(float(value))
    rounded = round_half_up(value, ndigits)
    text = f"{rounded:.{ndigits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
