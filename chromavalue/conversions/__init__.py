"""
Chromavalue Conversions
=======================

Pure numeric building blocks behind :class:`chromavalue.Color`, with scalar
and vectorized (numpy) implementations where batches make sense.

Features
--------
- Channel normalization: bytes (0-255), unit fractions (0.0-1.0), percentages
- CSS hex parsing and formatting (3/4/6/8 digits)
- CSS color keyword lookup (148 keywords plus ``transparent``)
- Bidirectional RGB ↔ HSL conversion, exact on byte round-trips
- WCAG relative luminance, contrast ratio, CIE perceived lightness

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Scalar byte RGB to float HSL
    np_rgb_to_hsl(r, g, b)
        Vectorized RGB to HSL conversion

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Scalar float HSL to byte RGB
    np_hsl_to_rgb(h, s, l)
        Vectorized HSL to RGB conversion

Accessibility:
    gamma(byte), relative_luminance(r, g, b), np_relative_luminance(rgb)
    perceived_lightness(luminance), contrast_ratio(l1, l2), wcag_levels(ratio)

Examples
--------
>>> from chromavalue.conversions import rgb_to_hsl, hsl_to_rgb, normalize_hex
>>> h, s, l = rgb_to_hsl(255, 128, 64)
>>> hsl_to_rgb(h, s, l)
(255, 128, 64)
>>> normalize_hex("#F80")
'ff8800ff'
"""

from .numbers import (
    Byte,
    Fraction,
    format_of,
    to_byte,
    to_unit,
    normalize_hue,
)
from .hex_codec import (
    normalize_hex,
    is_valid_hex,
    hex_to_bytes,
    bytes_to_hex,
)
from .names import (
    CSS_COLOR_NAMES,
    is_valid_name,
    name_to_hex,
    name_to_bytes,
    bytes_to_name,
)
from .hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)
from .luminance import (
    gamma,
    relative_luminance,
    np_relative_luminance,
    perceived_lightness,
    contrast_ratio,
    wcag_levels,
)

from ..types.format_type import FormatType

__all__ = [
    # Normalization
    'Byte',
    'Fraction',
    'format_of',
    'to_byte',
    'to_unit',
    'normalize_hue',

    # Hex
    'normalize_hex',
    'is_valid_hex',
    'hex_to_bytes',
    'bytes_to_hex',

    # Names
    'CSS_COLOR_NAMES',
    'is_valid_name',
    'name_to_hex',
    'name_to_bytes',
    'bytes_to_name',

    # RGB ↔ HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',

    # Accessibility
    'gamma',
    'relative_luminance',
    'np_relative_luminance',
    'perceived_lightness',
    'contrast_ratio',
    'wcag_levels',

    # Types
    'FormatType',
]
