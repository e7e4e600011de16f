from __future__ import annotations

from typing import Sequence

from ..exceptions import InvalidComponent, InvalidHex
from ..types.color_types import RGBATuple
from ..types.format_type import BYTE_MAX

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_VALID_LENGTHS = (3, 4, 6, 8)
OPAQUE_HEX = "ff"


def normalize_hex(text: str) -> str:
    """
    Normalize a CSS hex color to 8 lowercase digits without the ``#``.

    Accepts ``rgb``, ``rgba``, ``rrggbb`` and ``rrggbbaa`` with an optional
    leading ``#``. Short forms have each digit doubled; a missing alpha
    becomes ``ff``.

    Raises:
        InvalidHex: bad length or a non-hex character
    """
    if not isinstance(text, str):
        raise InvalidHex(f"Hex color must be a string, got {text!r}")
    digits = text[1:] if text.startswith("#") else text
    if len(digits) not in _VALID_LENGTHS or not all(c in _HEX_DIGITS for c in digits):
        raise InvalidHex(f"Invalid hex color: {text!r}")

    digits = digits.lower()
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += OPAQUE_HEX
    return digits


def is_valid_hex(text: str) -> bool:
    try:
        normalize_hex(text)
    except InvalidHex:
        return False
    return True


def hex_to_bytes(text: str) -> RGBATuple:
    digits = normalize_hex(text)
    r, g, b, a = (int(digits[i:i + 2], 16) for i in (0, 2, 4, 6))
    return r, g, b, a


def bytes_to_hex(
    rgba: Sequence[int],
    include_alpha: bool = True,
    include_hash: bool = True,
    upper_case: bool = False,
) -> str:
    """
    Format RGBA bytes as a hex string.

    Args:
        rgba: (r, g, b, a) bytes; a 3-item sequence is treated as opaque
        include_alpha: append the alpha pair
        include_hash: prefix with ``#``
        upper_case: use ``A-F`` instead of ``a-f``
    """
    if len(rgba) == 3:
        rgba = (*rgba, BYTE_MAX)
    if len(rgba) != 4:
        raise InvalidComponent(f"Expected 3 or 4 channels, got {len(rgba)}")
    for channel in rgba:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= BYTE_MAX:
            raise InvalidComponent(f"Channel must be an integer in [0, {BYTE_MAX}], got {channel!r}")

    channels = rgba if include_alpha else rgba[:3]
    digits = "".join(f"{c:02X}" if upper_case else f"{c:02x}" for c in channels)
    return f"#{digits}" if include_hash else digits
