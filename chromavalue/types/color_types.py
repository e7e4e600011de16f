from __future__ import annotations
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from ..colors.color import Color

Scalar = int | float
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HSLTuple = Tuple[float, float, float]
ColorArray = Tuple[Scalar, ...]
ColorLike = Union[str, "Color"]
