from .format_type import FormatType, max_non_hue, BYTE_MAX, HUE_360
from .color_types import Scalar, RGBTuple, RGBATuple, HSLTuple, ColorArray, ColorLike

__all__ = [
    "FormatType",
    "max_non_hue",
    "BYTE_MAX",
    "HUE_360",
    "Scalar",
    "RGBTuple",
    "RGBATuple",
    "HSLTuple",
    "ColorArray",
    "ColorLike",
]
