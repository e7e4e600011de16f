"""Chromavalue: immutable sRGB/HSL colors with CSS parsing and WCAG accessibility math."""

from .colors.color import Color
from .conversions import (
    Byte,
    Fraction,
    to_byte,
    normalize_hue,
    normalize_hex,
    hex_to_bytes,
    bytes_to_hex,
    CSS_COLOR_NAMES,
    is_valid_name,
    name_to_hex,
    name_to_bytes,
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    gamma,
    relative_luminance,
    np_relative_luminance,
    perceived_lightness,
    contrast_ratio,
    wcag_levels,
)
from .exceptions import (
    ColorError,
    InvalidComponent,
    InvalidHex,
    InvalidName,
    InvalidColorString,
    EmptyInput,
)
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # core color type
    "Color",
    # normalization
    "Byte",
    "Fraction",
    "FormatType",
    "to_byte",
    "normalize_hue",
    # hex and names
    "normalize_hex",
    "hex_to_bytes",
    "bytes_to_hex",
    "CSS_COLOR_NAMES",
    "is_valid_name",
    "name_to_hex",
    "name_to_bytes",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    # accessibility
    "gamma",
    "relative_luminance",
    "np_relative_luminance",
    "perceived_lightness",
    "contrast_ratio",
    "wcag_levels",
    # errors
    "ColorError",
    "InvalidComponent",
    "InvalidHex",
    "InvalidName",
    "InvalidColorString",
    "EmptyInput",
    # Version
    "__version__",
]
