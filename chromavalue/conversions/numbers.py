"""Channel normalization: bytes, unit fractions and hues."""
from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..exceptions import InvalidComponent
from ..types.format_type import FormatType, max_non_hue, BYTE_MAX, HUE_360


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _is_real(value) -> bool:
    return _is_int(value) or isinstance(value, (float, np.floating))


class Byte(int):
    """An integer channel value in the inclusive range ``[0, 255]``."""

    def __new__(cls, value: int):
        if not _is_int(value) or not 0 <= value <= BYTE_MAX:
            raise InvalidComponent(f"Byte expects an integer in [0, {BYTE_MAX}], got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Byte({int(self)})"


class Fraction(float):
    """A floating-point channel value in the inclusive range ``[0, 1]``."""

    def __new__(cls, value: float):
        if not _is_real(value) or not 0.0 <= value <= 1.0:
            raise InvalidComponent(f"Fraction expects a number in [0, 1], got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Fraction({float(self)})"


def format_of(value) -> FormatType:
    """
    Infer the representation of a raw channel value from its Python type.

    ``int`` (and numpy integers) is a byte, ``float`` (and numpy floats) is a
    unit fraction. ``Byte`` and ``Fraction`` wrappers carry their own tag.
    """
    if isinstance(value, Byte):
        return FormatType.INT
    if isinstance(value, Fraction):
        return FormatType.FLOAT
    if _is_int(value):
        return FormatType.INT
    if isinstance(value, (float, np.floating)):
        return FormatType.FLOAT
    raise InvalidComponent(f"Expected a byte or a fraction, got {value!r}")


def to_byte(value, format_type: Optional[FormatType] = None, name: str = "component") -> int:
    """
    Convert a channel value to a byte.

    Args:
        value: Byte in [0, 255], fraction in [0.0, 1.0] or percentage in [0, 100]
        format_type: Representation of ``value``; inferred from its type when omitted
        name: Channel name used in error messages

    Returns:
        int in [0, 255]

    Raises:
        InvalidComponent: ``value`` is outside the range of its representation
    """
    if format_type is None:
        format_type = format_of(value)
    format_type = FormatType(format_type)

    if format_type == FormatType.INT:
        if not _is_int(value) or not 0 <= value <= BYTE_MAX:
            raise InvalidComponent(f"{name} must be an integer in [0, {BYTE_MAX}], got {value!r}")
        return int(value)

    maximum = max_non_hue[format_type]
    if not _is_real(value) or not 0 <= value <= maximum:
        raise InvalidComponent(f"{name} must be a number in [0, {maximum}], got {value!r}")
    return int(round(float(value) / maximum * BYTE_MAX))


def to_unit(value, name: str = "value") -> float:
    """Validate a fraction in [0, 1] and return it as a float."""
    if not _is_real(value) or not 0.0 <= value <= 1.0:
        raise InvalidComponent(f"{name} must be a number in [0, 1], got {value!r}")
    return float(value)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    if not _is_real(h) or not math.isfinite(h):
        raise InvalidComponent(f"hue must be a finite number, got {h!r}")
    h = float(h) % HUE_360
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if h == HUE_360 else h
