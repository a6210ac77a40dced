from .color_types import ColorSpace, HUE_SPACES, UnitRGB, UnitRGBA, is_hue_space, num_channels
from .frozen import Frozen

__all__ = [
    "ColorSpace",
    "HUE_SPACES",
    "UnitRGB",
    "UnitRGBA",
    "is_hue_space",
    "num_channels",
    "Frozen",
]
