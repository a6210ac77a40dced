from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees [0, 360) of a unit RGB triple.

    Achromatic colors have hue 0. When two channels share the maximum,
    red wins over green and green over blue.
    """
    max_ = max(r, g, b)
    chroma = max_ - min(r, g, b)
    if chroma == 0:
        return 0.0
    if r == max_:
        sextant = ((g - b) / chroma + 6) % 6
    elif g == max_:
        sextant = (b - r) / chroma + 2
    else:
        sextant = (r - g) / chroma + 4
    return sextant * 60.0


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """RGB [0, 1] to HSV: hue in degrees, saturation and value in [0, 1]."""
    max_ = max(r, g, b)
    chroma = max_ - min(r, g, b)
    s = 0.0 if chroma == 0 else chroma / max_
    return unit_rgb_hue(r, g, b), s, max_


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """RGB [0, 1] to HSL: hue in degrees, saturation and lightness in [0, 1]."""
    max_ = max(r, g, b)
    min_ = min(r, g, b)
    chroma = max_ - min_
    l = (max_ + min_) / 2
    s = 0.0 if chroma == 0 else chroma / (1 - abs(2 * l - 1))
    return unit_rgb_hue(r, g, b), min(s, 1.0), l


def unit_rgb_to_hwb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """RGB [0, 1] to HWB: hue in degrees, whiteness and blackness in [0, 1]."""
    return unit_rgb_hue(r, g, b), min(r, g, b), 1 - max(r, g, b)


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """RGB [0, 1] to CMYK, all in [0, 1]. Pure black has zero cyan, magenta and yellow."""
    k = 1 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, 1.0
    c, m, y = ((1 - ch - k) / (1 - k) for ch in (r, g, b))
    return c, m, y, k


def np_unit_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_hue`, with the same tie-break order."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    max_ = np.maximum.reduce([r, g, b])
    chroma = max_ - np.minimum.reduce([r, g, b])
    safe = np.where(chroma == 0, 1.0, chroma)
    sextant = np.select(
        [r == max_, g == max_],
        [((g - b) / safe + 6) % 6, (b - r) / safe + 2],
        (r - g) / safe + 4,
    )
    return np.where(chroma == 0, 0.0, sextant * 60.0)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    V = np.maximum.reduce([r, g, b])
    delta = V - np.minimum.reduce([r, g, b])
    S = np.zeros_like(V)
    mask = delta > 0
    S[mask] = delta[mask] / V[mask]
    return np.stack([np_unit_rgb_hue(r, g, b), S, V], axis=-1)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized RGB to HSL; returns an array of shape (..., 3)."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    max_ = np.maximum.reduce([r, g, b])
    min_ = np.minimum.reduce([r, g, b])
    delta = max_ - min_
    L = (max_ + min_) / 2
    S = np.zeros_like(L)
    mask = delta > 0
    S[mask] = delta[mask] / (1 - np.abs(2 * L[mask] - 1))
    return np.stack([np_unit_rgb_hue(r, g, b), np.minimum(S, 1.0), L], axis=-1)
