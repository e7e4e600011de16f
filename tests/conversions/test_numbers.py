import numpy as np
import pytest

from chromavalue.conversions.numbers import Byte, Fraction, format_of, to_byte, to_unit, normalize_hue
from chromavalue.exceptions import InvalidComponent
from chromavalue.types.format_type import FormatType


def test_int_is_byte():
    assert to_byte(0) == 0
    assert to_byte(1) == 1
    assert to_byte(128) == 128
    assert to_byte(255) == 255


def test_float_is_fraction():
    assert to_byte(0.0) == 0
    assert to_byte(1.0) == 255
    assert to_byte(0.5) == 128
    assert to_byte(0.25) == 64


def test_type_tag_not_magnitude_decides():
    # 1 is a byte, 1.0 is a full channel
    assert to_byte(1) == 1
    assert to_byte(1.0) == 255
    assert to_byte(Byte(1)) == 1
    assert to_byte(Fraction(1)) == 255


def test_explicit_format_type():
    assert to_byte(1, FormatType.FLOAT) == 255
    assert to_byte(50.0, FormatType.PERCENTAGE) == 128
    assert to_byte(100, "percentage") == 255
    with pytest.raises(InvalidComponent):
        to_byte(0.5, FormatType.INT)


def test_numpy_scalars():
    assert to_byte(np.uint8(200)) == 200
    assert to_byte(np.float32(1.0)) == 255
    assert format_of(np.int64(3)) == FormatType.INT
    assert format_of(np.float64(0.3)) == FormatType.FLOAT


@pytest.mark.parametrize("value", [-1, 256, 1000, -0.1, 1.01, float("nan"), float("inf")])
def test_out_of_range(value):
    with pytest.raises(InvalidComponent):
        to_byte(value)


@pytest.mark.parametrize("value", [True, False, "12", None, (1,)])
def test_not_a_number(value):
    with pytest.raises(InvalidComponent):
        to_byte(value)


def test_wrappers_validate_on_construction():
    with pytest.raises(InvalidComponent):
        Byte(256)
    with pytest.raises(InvalidComponent):
        Byte(0.5)
    with pytest.raises(InvalidComponent):
        Fraction(2.0)
    assert repr(Byte(7)) == "Byte(7)"
    assert repr(Fraction(0.5)) == "Fraction(0.5)"


def test_invalid_component_is_value_error():
    with pytest.raises(ValueError):
        to_byte(300)


def test_to_unit():
    assert to_unit(0) == 0.0
    assert to_unit(1) == 1.0
    assert to_unit(0.3) == 0.3
    with pytest.raises(InvalidComponent):
        to_unit(1.5)
    with pytest.raises(InvalidComponent):
        to_unit(-0.5)


def test_normalize_hue():
    assert normalize_hue(0) == 0.0
    assert normalize_hue(360) == 0.0
    assert normalize_hue(370) == 10.0
    assert normalize_hue(-90) == 270.0
    assert normalize_hue(720.5) == 0.5
    assert normalize_hue(-1e-20) == 0.0
    with pytest.raises(InvalidComponent):
        normalize_hue(float("nan"))
    with pytest.raises(InvalidComponent):
        normalize_hue(float("inf"))
