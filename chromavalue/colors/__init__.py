"""
Chromavalue Color Class
=======================

:class:`Color` is an immutable sRGB value with an alpha channel.

Features
--------
- Immutable instances (frozen after initialization)
- Construction from CSS hex (3/4/6/8 digits), CSS keywords, RGBA and HSLA
- Lazily derived, cached HSL and WCAG luminance values
- ``with_*`` transformations returning new instances
- Mixing, averaging and hue complement
- WCAG contrast ratio and best text color selection

Usage
-----
>>> from chromavalue.colors import Color
>>>
>>> accent = Color("#336699")
>>> round(accent.hue), round(accent.saturation, 3), round(accent.lightness, 3)
(210, 0.5, 0.4)
>>> accent.best_text_color() == Color("white")
True
>>> accent.with_alpha(0.5).to_hex()
'#33669980'
>>> accent.mix("white", 0.5).to_rgb_string()
'rgb(153 178 204 / 1)'
"""

from .color import Color


__all__ = ['Color']
