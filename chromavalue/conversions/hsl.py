from __future__ import annotations

import numpy as np
from boundednumbers import clamp
from numpy import ndarray as NDArray

from ..exceptions import InvalidComponent
from ..types.color_types import HSLTuple, RGBTuple
from ..types.format_type import BYTE_MAX, HUE_360, FormatType
from .numbers import normalize_hue, to_byte, to_unit

## RGB to HSL conversions

def rgb_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """
    Convert RGB bytes to HSL.

    Args:
        r: Red byte in [0, 255]
        g: Green byte in [0, 255]
        b: Blue byte in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = (to_byte(c, FormatType.INT, name) for c, name in zip((r, g, b), "rgb"))
    r_, g_, b_ = r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX

    max_c = max(r_, g_, b_)
    min_c = min(r_, g_, b_)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Achromatic
    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = float(clamp(delta / (1 - abs(2 * lightness - 1)), 0.0, 1.0))

    if max_c == r_:
        hue = 60 * (((g_ - b_) / delta) % 6)
    elif max_c == g_:
        hue = 60 * (((b_ - r_) / delta) + 2)
    else:
        hue = 60 * (((r_ - g_) / delta) + 4)

    return normalize_hue(hue), saturation, lightness


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB bytes to HSL.

    Args:
        r, g, b: array-like or scalar, bytes in [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = _np_channels(r, g, b)
    if np.any((r < 0) | (r > BYTE_MAX) | (g < 0) | (g > BYTE_MAX) | (b < 0) | (b > BYTE_MAX)):
        raise InvalidComponent(f"RGB bytes must lie in [0, {BYTE_MAX}]")
    r, g, b = r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    chromatic = delta > 0

    lightness = (max_c + min_c) / 2.0

    safe_delta = np.where(chromatic, delta, 1.0)
    denominator = np.where(chromatic, 1 - np.abs(2 * lightness - 1), 1.0)
    saturation = np.where(chromatic, np.clip(delta / denominator, 0.0, 1.0), 0.0)

    # np.select takes the first matching condition, same priority as the scalar path
    hue = np.select(
        [max_c == r, max_c == g],
        [
            60 * (((g - b) / safe_delta) % 6),
            60 * (((b - r) / safe_delta) + 2),
        ],
        60 * (((r - g) / safe_delta) + 4),
    )
    hue = np.where(chromatic, hue % HUE_360, 0.0)
    hue = np.where(hue == HUE_360, 0.0, hue)

    return np.stack([hue, saturation, lightness], axis=-1)

## HSL to RGB conversions

def _hsl_sector(h: float, c: float, x: float) -> tuple[float, float, float]:
    sector = int(h // 60)
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


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGBTuple:
    """
    Convert HSL to RGB bytes.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        hue: Hue in degrees, any real (wrapped into [0, 360))
        saturation: Saturation in [0, 1]
        lightness: Lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h = normalize_hue(hue)
    s = to_unit(saturation, "saturation")
    l = to_unit(lightness, "lightness")

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    r, g, b = _hsl_sector(h, c, x)
    return _to_byte_channel(r + m), _to_byte_channel(g + m), _to_byte_channel(b + m)


def _to_byte_channel(unit: float) -> int:
    return int(clamp(round(unit * BYTE_MAX), 0, BYTE_MAX))


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB bytes.

    Args:
        h: array-like or scalar, hue in degrees (wrapped into [0, 360))
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: int array of shape (..., 3) in [0, 255]
    """
    h, s, l = _np_channels(h, s, l)
    if not np.all(np.isfinite(h)):
        raise InvalidComponent("hue must be finite")
    if np.any((s < 0) | (s > 1) | (l < 0) | (l > 1)) or np.any(np.isnan(s) | np.isnan(l)):
        raise InvalidComponent("saturation and lightness must lie in [0, 1]")
    h = h % HUE_360
    h = np.where(h == HUE_360, 0.0, h)

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = l - c / 2
    zero = np.zeros_like(c)

    sector = np.clip(np.floor(h / 60), 0, 5).astype(int)
    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [c, x, zero, zero, x, c])
    g = np.select(conditions, [x, c, c, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, c, c, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1)
    return np.clip(np.round(rgb * BYTE_MAX), 0, BYTE_MAX).astype(int)


def _np_channels(a: NDArray, b: NDArray, c: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    c = np.asarray(c, dtype=float)

    out_shape = np.broadcast(a, b, c).shape
    return (
        np.broadcast_to(a, out_shape),
        np.broadcast_to(b, out_shape),
        np.broadcast_to(c, out_shape),
    )
