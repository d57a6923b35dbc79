"""Tests for ScaleneTriangle"""

import math
import pytest
from unittest import mock
from trigon.core import (
    InvalidSideError,
    DegenerateTriangleError,
    ShapeMismatchError,
    TriangleVariant,
    AngleType,
)
from trigon.components.triangles import ScaleneTriangle


class TestScaleneTriangle:

    def test_construction(self):
        triangle = ScaleneTriangle(7, 8, 9)
        assert triangle.sides == (7.0, 8.0, 9.0)
        assert triangle.variant == TriangleVariant.SCALENE

    def test_heron_area(self):
        assert ScaleneTriangle(7, 8, 9).area() == pytest.approx(math.sqrt(720))
        assert ScaleneTriangle(3, 4, 5).area() == pytest.approx(6.0)

    def test_acute(self):
        triangle = ScaleneTriangle(7, 8, 9)
        assert triangle.is_acute() is True
        assert triangle.is_obtuse() is False
        assert triangle.angle_type() == AngleType.ACUTE

    def test_obtuse(self):
        triangle = ScaleneTriangle(2, 3, 4)
        assert triangle.is_acute() is False
        assert triangle.is_obtuse() is True
        assert triangle.angle_type() == AngleType.OBTUSE

    def test_right_by_angle(self):
        triangle = ScaleneTriangle(3, 4, 5)
        assert triangle.is_acute() is False
        assert triangle.is_obtuse() is False
        assert triangle.angle_type() == AngleType.RIGHT

    @pytest.mark.parametrize("sides, pair", [
        ((5, 5, 8), "a and b"),
        ((5, 8, 5), "a and c"),
        ((8, 5, 5), "b and c"),
        ((5, 5, 5), "a and b"),
    ])
    def test_equal_sides_rejected(self, sides, pair):
        with pytest.raises(ShapeMismatchError) as exc_info:
            ScaleneTriangle(*sides)
        assert pair in str(exc_info.value)
        assert exc_info.value.variant == TriangleVariant.SCALENE

    def test_degenerate(self):
        with pytest.raises(DegenerateTriangleError):
            ScaleneTriangle(1, 2, 10)

    def test_invalid_side(self):
        with pytest.raises(InvalidSideError) as exc_info:
            ScaleneTriangle(3, 4, 0)
        assert exc_info.value.parameter_name == "c"

    def test_area_is_memoized(self):
        triangle = ScaleneTriangle(6, 7, 8)
        with mock.patch.object(
            ScaleneTriangle, "_compute_area", autospec=True, return_value=1.5
        ) as compute:
            first = triangle.area()
            second = triangle.area()

        assert first == second == 1.5
        compute.assert_called_once()

    def test_area_is_bit_identical(self):
        triangle = ScaleneTriangle(6, 7, 8)
        assert triangle.area().hex() == triangle.area().hex()
