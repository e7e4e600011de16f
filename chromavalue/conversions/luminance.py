"""
WCAG relative luminance, contrast ratio and CIE perceived lightness.

Source: Web Content Accessibility Guidelines (WCAG) 2.1
https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
"""
from __future__ import annotations

import numpy as np
from boundednumbers import clamp
from numpy import ndarray as NDArray

from ..exceptions import InvalidComponent
from ..types.format_type import BYTE_MAX, FormatType
from ..types.wcag import (
    CIE_EPSILON,
    CIE_KAPPA,
    CONTRAST_MAX,
    CONTRAST_MIN,
    LUMINANCE_WEIGHTS,
    SRGB_GAMMA,
    SRGB_LINEAR_SCALE,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    WCAG_AA,
    WCAG_AAA,
    WCAG_LUMINANCE_OFFSET,
)
from .numbers import to_byte, to_unit


def gamma(byte: int) -> float:
    """sRGB transfer function: byte → linear light in [0, 1]."""
    c = to_byte(byte, FormatType.INT) / BYTE_MAX
    if c <= SRGB_LINEAR_THRESHOLD:
        return c / SRGB_LINEAR_SCALE
    return ((c + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA


def relative_luminance(r: int, g: int, b: int) -> float:
    wr, wg, wb = LUMINANCE_WEIGHTS
    return float(clamp(wr * gamma(r) + wg * gamma(g) + wb * gamma(b), 0.0, 1.0))


def np_relative_luminance(rgb: NDArray) -> NDArray:
    """
    Vectorized relative luminance.

    Args:
        rgb: array of shape (..., 3) or (..., 4) of bytes; alpha is ignored

    Returns:
        array of shape (...) in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=float)[..., :3]
    if np.any((rgb < 0) | (rgb > BYTE_MAX)):
        raise InvalidComponent(f"RGB bytes must lie in [0, {BYTE_MAX}]")
    c = rgb / BYTE_MAX
    linear = np.where(
        c <= SRGB_LINEAR_THRESHOLD,
        c / SRGB_LINEAR_SCALE,
        ((c + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA,
    )
    return np.clip(linear @ np.asarray(LUMINANCE_WEIGHTS), 0.0, 1.0)


def perceived_lightness(luminance: float) -> float:
    """CIE L* of a relative luminance, scaled to [0, 1]."""
    luminance = to_unit(luminance, "luminance")
    if luminance <= CIE_EPSILON:
        return luminance * CIE_KAPPA / 100
    return float(clamp(1.16 * luminance ** (1 / 3) - 0.16, 0.0, 1.0))


def contrast_ratio(luminance_a: float, luminance_b: float) -> float:
    """
    WCAG contrast ratio between two relative luminances.

    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter of the two.
    """
    l1 = max(luminance_a, luminance_b)
    l2 = min(luminance_a, luminance_b)
    ratio = (l1 + WCAG_LUMINANCE_OFFSET) / (l2 + WCAG_LUMINANCE_OFFSET)
    return float(clamp(ratio, CONTRAST_MIN, CONTRAST_MAX))


def wcag_levels(ratio: float, large_text: bool = False) -> dict[str, bool]:
    index = 1 if large_text else 0
    return {
        "AA": ratio >= WCAG_AA[index],
        "AAA": ratio >= WCAG_AAA[index],
    }
