"""Tests for Rectangle and Square value objects."""

import dataclasses
import math

import numpy as np
import pytest

from quadra_shapes import HasArea, InvalidDimensionError, Rectangle, Square


@pytest.mark.parametrize("width, length", [(3.0, 4.0), (0.5, 0.25), (1e-3, 2e3), (7, 3)])
def test_rectangle_area_is_width_times_length(width, length):
    assert Rectangle(width, length).area() == width * length


@pytest.mark.parametrize("side", [1.0, 2.5, 5.0, 1e-4, 12])
def test_square_area_matches_rectangle(side):
    assert Square(side).area() == side * side
    assert Square(side).area() == Rectangle(side, side).area()


def test_concrete_areas():
    assert Rectangle(3.0, 4.0).area() == 12.0
    assert Square(5.0).area() == 25.0


def test_dimensions_are_stored_as_float():
    rect = Rectangle(3, 4)
    assert isinstance(rect.width, float)
    assert isinstance(rect.length, float)
    assert Rectangle(np.float64(2.0), np.int64(3)).area() == 6.0


def test_square_is_rectangle_with_equal_sides():
    square = Square(2.0)
    assert isinstance(square, Rectangle)
    assert square.width == square.length == square.side == 2.0


def test_shapes_are_immutable():
    rect = Rectangle(3.0, 4.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.width = 10.0

    square = Square(2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        square.length = 3.0


def test_value_equality_and_hashing():
    assert Rectangle(3.0, 4.0) == Rectangle(3, 4)
    assert Square(2.0) == Square(2.0)
    assert Square(2.0) != Rectangle(2.0, 2.0)
    assert len({Square(2.0), Square(2.0), Rectangle(2.0, 2.0)}) == 2


def test_square_repr():
    assert repr(Square(2.0)) == "Square(side=2.0)"
    assert repr(Rectangle(3.0, 4.0)) == "Rectangle(width=3.0, length=4.0)"


def test_shapes_satisfy_has_area():
    assert isinstance(Rectangle(1.0, 2.0), HasArea)
    assert isinstance(Square(1.0), HasArea)
    assert not isinstance(object(), HasArea)


@pytest.mark.parametrize("bad", [0, 0.0, -1.0, math.nan, math.inf, -math.inf])
def test_rectangle_rejects_invalid_dimensions(bad):
    with pytest.raises(InvalidDimensionError) as exc_info:
        Rectangle(bad, 1.0)
    assert exc_info.value.name == "width"

    with pytest.raises(InvalidDimensionError) as exc_info:
        Rectangle(1.0, bad)
    assert exc_info.value.name == "length"


@pytest.mark.parametrize("bad", [0, -2.0, math.nan, math.inf])
def test_square_rejects_invalid_side(bad):
    with pytest.raises(InvalidDimensionError) as exc_info:
        Square(bad)
    assert exc_info.value.name == "side"


def test_invalid_dimension_error_is_value_error():
    with pytest.raises(ValueError, match="width must be a positive finite number"):
        Rectangle(-1.0, 2.0)


def test_area_overflow_is_rejected():
    with pytest.raises(InvalidDimensionError) as exc_info:
        Rectangle(1e200, 1e200)
    assert exc_info.value.name == "area"


def test_area_underflow_is_rejected():
    with pytest.raises(InvalidDimensionError, match="underflows") as exc_info:
        Rectangle(1e-200, 1e-200)
    assert exc_info.value.name == "area"

    with pytest.raises(InvalidDimensionError):
        Square(1e-200)


def test_tiny_but_representable_areas_stay_ordered():
    assert Square(1e-100).compare_to(Square(1e-101)) == 1


@pytest.mark.parametrize("bad", ["3", None, True, [1.0], 1 + 2j])
def test_non_real_dimensions_raise_type_error(bad):
    with pytest.raises(TypeError):
        Rectangle(bad, 1.0)
    with pytest.raises(TypeError):
        Square(bad)


def test_is_square_is_deprecated_but_true():
    with pytest.warns(DeprecationWarning, match="is_square"):
        assert Square(5.0).is_square() is True


def test_rectangle_has_no_is_square():
    assert not hasattr(Rectangle(1.0, 2.0), "is_square")
