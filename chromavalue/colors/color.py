from __future__ import annotations

import warnings
from typing import Optional, Union

import numpy as np

from ..conversions import (
    bytes_to_hex,
    bytes_to_name,
    contrast_ratio,
    hex_to_bytes,
    hsl_to_rgb,
    name_to_bytes,
    perceived_lightness,
    relative_luminance,
    rgb_to_hsl,
    to_byte,
    to_unit,
    wcag_levels,
)
from ..exceptions import EmptyInput, InvalidColorString, InvalidHex, InvalidName
from ..types.color_types import ColorArray, ColorLike, HSLTuple, RGBATuple, Scalar
from ..types.format_type import BYTE_MAX, FormatType, max_non_hue


def _format_number(value: float) -> str:
    """Shortest text for a number: ``1.0`` → ``1``, ``0.5`` → ``0.5``."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class Color:
    """
    Immutable sRGB color with an alpha channel.

    The four RGBA bytes are the only stored state. Hue, saturation, lightness,
    relative luminance and perceived lightness are derived on first access and
    cached; since the bytes never change, the caches never go stale.

    >>> c = Color("#ff8040")
    >>> c.red, c.green, c.blue, c.alpha
    (255, 128, 64, 255)
    >>> Color.from_hsla(120, 1.0, 0.5).to_hex()
    '#00ff00ff'
    """

    __slots__ = ('_rgba', '_hsl', '_luminance', '_perceived', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[str, Color]) -> None:
        if isinstance(value, Color):
            rgba = value._rgba
        elif isinstance(value, str):
            rgba = self._parse(value)
        else:
            raise TypeError(f"Color expects a string or a Color, got {type(value).__name__}")
        self._set_bytes(rgba)

    @staticmethod
    def _parse(text: str) -> RGBATuple:
        try:
            return hex_to_bytes(text)
        except InvalidHex:
            pass
        try:
            return name_to_bytes(text)
        except InvalidName:
            raise InvalidColorString(f"Not a hex color or color name: {text!r}") from None

    def _set_bytes(self, rgba: RGBATuple) -> None:
        self._rgba = tuple(int(c) for c in rgba)
        self._hsl = None
        self._luminance = None
        self._perceived = None

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _cache(self, name: str, value):
        # derived values only; the bytes stay frozen
        object.__setattr__(self, name, value)
        return value

    @classmethod
    def _from_bytes(cls, rgba: RGBATuple) -> Color:
        color = cls.__new__(cls)
        color._set_bytes(rgba)
        return color

    @classmethod
    def _coerce(cls, value: Union[str, Color]) -> Color:
        return value if isinstance(value, Color) else cls(value)

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_rgba(cls, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = BYTE_MAX) -> Color:
        """
        Build a color from channel values.

        Each channel is a byte when given as ``int`` and a fraction in [0, 1]
        when given as ``float``; wrap in ``Byte`` / ``Fraction`` to be explicit.

        Raises:
            InvalidComponent: a channel is outside its range
        """
        return cls._from_bytes((
            to_byte(red, name="red"),
            to_byte(green, name="green"),
            to_byte(blue, name="blue"),
            to_byte(alpha, name="alpha"),
        ))

    @classmethod
    def from_hsla(cls, hue: float, saturation: float, lightness: float, alpha: Scalar = BYTE_MAX) -> Color:
        """Build a color from hue (degrees, wrapped), saturation and lightness in [0, 1]."""
        r, g, b = hsl_to_rgb(hue, saturation, lightness)
        return cls._from_bytes((r, g, b, to_byte(alpha, name="alpha")))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        return cls._from_bytes(hex_to_bytes(text))

    @classmethod
    def from_name(cls, name: str) -> Color:
        return cls._from_bytes(name_to_bytes(name))

    @classmethod
    def average(cls, *colors: Union[str, Color]) -> Color:
        """
        Channel-wise mean of the given colors, rounded to the nearest byte.

        Raises:
            EmptyInput: no colors were given
        """
        if not colors:
            raise EmptyInput("average() needs at least one color")
        stacked = np.array([cls._coerce(c)._rgba for c in colors], dtype=float)
        return cls._from_bytes(tuple(np.round(stacked.mean(axis=0)).astype(int)))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._rgba[0]

    @property
    def green(self) -> int:
        return self._rgba[1]

    @property
    def blue(self) -> int:
        return self._rgba[2]

    @property
    def alpha(self) -> int:
        return self._rgba[3]

    @property
    def rgba(self) -> RGBATuple:
        return self._rgba

    def _hsl_values(self) -> HSLTuple:
        if self._hsl is None:
            return self._cache('_hsl', rgb_to_hsl(*self._rgba[:3]))
        return self._hsl

    @property
    def hue(self) -> float:
        """Hue in degrees, [0, 360)."""
        return self._hsl_values()[0]

    @property
    def saturation(self) -> float:
        return self._hsl_values()[1]

    @property
    def lightness(self) -> float:
        return self._hsl_values()[2]

    @property
    def relative_luminance(self) -> float:
        """WCAG relative luminance in [0, 1]; alpha is ignored."""
        if self._luminance is None:
            return self._cache('_luminance', relative_luminance(*self._rgba[:3]))
        return self._luminance

    @property
    def perceived_lightness(self) -> float:
        """CIE L* of the relative luminance, scaled to [0, 1]."""
        if self._perceived is None:
            return self._cache('_perceived', perceived_lightness(self.relative_luminance))
        return self._perceived

    @property
    def luminance(self) -> float:
        """Deprecated: use relative_luminance instead."""
        warnings.warn(
            "Color.luminance is deprecated. Use Color.relative_luminance instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.relative_luminance

    # ------------------ TRANSFORMATIONS ------------------
    def _with_channel(self, index: int, value: Scalar, name: str) -> Color:
        rgba = list(self._rgba)
        rgba[index] = to_byte(value, name=name)
        return self._from_bytes(tuple(rgba))

    def with_red(self, red: Scalar) -> Color:
        return self._with_channel(0, red, "red")

    def with_green(self, green: Scalar) -> Color:
        return self._with_channel(1, green, "green")

    def with_blue(self, blue: Scalar) -> Color:
        return self._with_channel(2, blue, "blue")

    def with_alpha(self, alpha: Scalar) -> Color:
        return self._with_channel(3, alpha, "alpha")

    def with_hue(self, hue: float) -> Color:
        return self.from_hsla(hue, self.saturation, self.lightness, self.alpha)

    def with_saturation(self, saturation: float) -> Color:
        return self.from_hsla(self.hue, saturation, self.lightness, self.alpha)

    def with_lightness(self, lightness: float) -> Color:
        return self.from_hsla(self.hue, self.saturation, lightness, self.alpha)

    def mix(self, other: ColorLike, frac: float = 0.5) -> Color:
        """
        Linear blend towards ``other``, channel by channel (alpha included).

        Args:
            other: Color or color string to blend with
            frac: 0 returns self, 1 returns other

        Raises:
            InvalidComponent: ``frac`` outside [0, 1]
        """
        frac = to_unit(frac, "frac")
        other = self._coerce(other)
        a = np.array(self._rgba, dtype=float)
        b = np.array(other._rgba, dtype=float)
        return self._from_bytes(tuple(np.round(a * (1 - frac) + b * frac).astype(int)))

    def complement(self) -> Color:
        """Rotate the hue by 180 degrees, keeping saturation, lightness and alpha."""
        return self.with_hue(self.hue + 180)

    # ------------------ ACCESSIBILITY ------------------
    def contrast_ratio(self, other: ColorLike) -> float:
        """WCAG contrast ratio against ``other``, in [1, 21]."""
        return contrast_ratio(self.relative_luminance, self._coerce(other).relative_luminance)

    def wcag_levels(self, other: ColorLike, large_text: bool = False) -> dict[str, bool]:
        return wcag_levels(self.contrast_ratio(other), large_text)

    def best_text_color(self, light: ColorLike = "white", dark: ColorLike = "black") -> Color:
        """
        Pick the text color with the higher contrast against this background.

        ``light`` and ``dark`` are color names or Color values. Equal ratios
        resolve to ``dark``.

        Raises:
            InvalidName: ``light`` or ``dark`` is an unknown color name
        """
        light = light if isinstance(light, Color) else self.from_name(light)
        dark = dark if isinstance(dark, Color) else self.from_name(dark)
        if self.contrast_ratio(dark) >= self.contrast_ratio(light):
            return dark
        return light

    # ------------------ COMPARISON ------------------
    def equal(self, other: Color) -> bool:
        """True iff all four bytes match."""
        return self._rgba == other._rgba

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self._rgba)

    # ------------------ OUTPUT ------------------
    def to_hex(self, include_alpha: bool = True, include_hash: bool = True, upper_case: bool = False) -> str:
        return bytes_to_hex(self._rgba, include_alpha, include_hash, upper_case)

    def to_name(self) -> Optional[str]:
        """CSS keyword with exactly these bytes, or None."""
        return bytes_to_name(self._rgba)

    def _alpha_fraction(self) -> float:
        return self.alpha / BYTE_MAX

    def to_rgb_string(self) -> str:
        """Modern CSS form, e.g. ``rgb(255 128 64 / 1)``."""
        r, g, b, _ = self._rgba
        return f"rgb({r} {g} {b} / {_format_number(self._alpha_fraction())})"

    def to_hsl_string(self) -> str:
        """Modern CSS form, e.g. ``hsl(120deg 100% 50% / 1)``."""
        h, s, l = self._hsl_values()
        percent = max_non_hue[FormatType.PERCENTAGE]
        return (
            f"hsl({_format_number(h)}deg {_format_number(s * percent)}% "
            f"{_format_number(l * percent)}% / {_format_number(self._alpha_fraction())})"
        )

    def to_rgba_array(self) -> RGBATuple:
        return self._rgba

    def to_hsl_array(self) -> HSLTuple:
        return self._hsl_values()

    def to_array(self) -> ColorArray:
        """(red, green, blue, alpha, hue, saturation, lightness)."""
        return self._rgba + self._hsl_values()

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_hex()!r})"

    def __reduce__(self):
        return (self.__class__.from_hex, (self.to_hex(),))
