import numpy as np
from numpy import ndarray as NDArray
# No dependencies

# sRGB transfer-function breakpoints (WCAG 2.x relative luminance)
SRGB_THRESHOLD = 0.03928
LINEAR_THRESHOLD = 0.00304

# Rec. 709 luma coefficients
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= LINEAR_THRESHOLD:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_THRESHOLD,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= LINEAR_THRESHOLD,
        12.92 * c,
        1.055 * (np.maximum(c, 0.0) ** (1 / 2.4)) - 0.055
    )


def relative_luminance(r: float, g: float, b: float) -> float:
    """Relative luminance of an sRGB triple, in [0, 1]."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * srgb_to_linear(r) + wg * srgb_to_linear(g) + wb * srgb_to_linear(b)


def contrast_ratio(l1: float, l2: float) -> float:
    """Contrast ratio of two relative luminances, in [1, 21]."""
    hi, lo = max(l1, l2), min(l1, l2)
    return (hi + 0.05) / (lo + 0.05)


def compound_opacity(*alphas: float) -> float:
    """
    Combined opacity of translucent layers stacked evenly.

    ``1 - (1 - a1)(1 - a2)...(1 - an)``
    """
    if not alphas:
        return 0.0
    return float(1 - np.prod(1 - np.asarray(alphas, dtype=float)))


def weighted_compound_opacity(a1: float, a2: float, weight: float = 0.5) -> float:
    """
    Compound opacity of two layers, with ``weight`` favoring ``a2``.

    ``1 - (1 - a1)^(1 - weight) * (1 - a2)^weight``
    """
    return 1 - (1 - a1) ** (1 - weight) * (1 - a2) ** weight
