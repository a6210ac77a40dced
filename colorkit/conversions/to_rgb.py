import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitRGB


def _hue_sector(deg: float, c: float, x: float) -> UnitRGB:
    """Place chroma ``c`` and intermediate ``x`` by 60° sector of the hue."""
    sector = min(int(deg // 60), 5)
    if sector == 0:
        return c, x, 0.0
    elif sector == 1:
        return x, c, 0.0
    elif sector == 2:
        return 0.0, c, x
    elif sector == 3:
        return 0.0, x, c
    elif sector == 4:
        return x, 0.0, c
    return c, 0.0, x


def _intermediate(deg: float, c: float) -> float:
    return c * (1 - abs((deg / 60) % 2 - 1))


def hsv_to_unit_rgb(h: float, s: float, v: float) -> UnitRGB:
    """
    Convert HSV to RGB.

    Args:
        h: hue in degrees, [0, 360)
        s, v: saturation and value, [0, 1]

    Returns:
        r, g, b in [0, 1]
    """
    h = h % 360.0
    c = s * v
    m = v - c
    r, g, b = _hue_sector(h, c, _intermediate(h, c))
    return min(r + m, 1.0), min(g + m, 1.0), min(b + m, 1.0)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitRGB:
    """
    Convert HSL to RGB.

    Args:
        h: hue in degrees, [0, 360)
        s, l: saturation and lightness, [0, 1]

    Returns:
        r, g, b in [0, 1]
    """
    h = h % 360.0
    c = s * (1 - abs(2 * l - 1))
    m = l - c / 2
    r, g, b = _hue_sector(h, c, _intermediate(h, c))
    return min(r + m, 1.0), min(g + m, 1.0), min(b + m, 1.0)


def hwb_to_unit_rgb(h: float, w: float, b: float) -> UnitRGB:
    """Convert HWB to RGB by tinting the pure hue with white and black."""
    pure = hsl_to_unit_rgb(h, 1.0, 0.5)
    scale = 1 - w - b
    red, green, blue = (min(ch * scale + w, 1.0) for ch in pure)
    return red, green, blue


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> UnitRGB:
    """Convert CMYK to RGB: ``channel = 1 - min(1, ink * (1 - k) + k)``."""
    return tuple(1 - min(1.0, ink * (1 - k) + k) for ink in (c, m, y))


def _np_hue_sector(h: NDArray, c: NDArray, x: NDArray) -> NDArray:
    zero = np.zeros_like(c)
    sector = np.minimum(np.floor_divide(h, 60), 5).astype(int)
    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [c, x, zero, zero, x, c])
    g = np.select(conditions, [x, c, c, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, c, c, x])
    return np.stack([r, g, b], axis=-1)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB.

    Args:
        h: hue in degrees, array-like
        s, v: array-like, [0, 1]

    Returns:
        rgb: array of shape (..., 3)
    """
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float) % 360.0,
        np.asarray(s, dtype=float),
        np.asarray(v, dtype=float),
    )
    c = s * v
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = (v - c)[..., np.newaxis]
    return np.minimum(_np_hue_sector(h, c, x) + m, 1.0)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL to RGB; returns an array of shape (..., 3)."""
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float) % 360.0,
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )
    c = s * (1 - np.abs(2 * l - 1))
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = (l - c / 2)[..., np.newaxis]
    return np.minimum(_np_hue_sector(h, c, x) + m, 1.0)
