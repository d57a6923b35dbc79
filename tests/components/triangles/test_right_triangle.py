"""Tests for RightTriangle"""

import math
import pytest
from trigon.core import InvalidSideError, TriangleVariant
from trigon.components.triangles import RightTriangle


class TestRightTriangle:

    @pytest.fixture
    def triangle(self):
        return RightTriangle(3, 4)

    def test_hypotenuse(self, triangle):
        assert triangle.hypotenuse == pytest.approx(5.0, abs=1e-9)
        assert triangle.side_c == triangle.hypotenuse

    def test_legs(self, triangle):
        assert triangle.leg1 == 3.0
        assert triangle.leg2 == 4.0
        assert triangle.sides[:2] == (3.0, 4.0)

    def test_exactly_one_right_angle(self, triangle):
        assert triangle.angle_gamma == 90.0
        assert [angle == 90.0 for angle in triangle.angles].count(True) == 1

    def test_other_angles(self, triangle):
        assert triangle.angle_alpha == pytest.approx(36.8698976458)
        assert triangle.angle_beta == pytest.approx(53.1301023542)
        assert sum(triangle.angles) == pytest.approx(180.0, abs=1e-6)

    def test_variant(self, triangle):
        assert triangle.variant == TriangleVariant.RIGHT

    def test_area_and_perimeter(self, triangle):
        assert triangle.area() == 6.0
        assert triangle.perimeter() == pytest.approx(12.0)

    @pytest.mark.parametrize("p, q", [(3, 4), (1, 1), (0.1, 0.7), (1e-3, 1e5), (2.5, 13.75)])
    def test_area_is_exact_product(self, p, q):
        triangle = RightTriangle(p, q)
        assert triangle.area() == p * q / 2

    @pytest.mark.parametrize("p, q", [(1, 1), (0.1, 0.7), (5, 12), (1e-3, 1e5)])
    def test_right_angle_exact_for_any_legs(self, p, q):
        triangle = RightTriangle(p, q)
        assert triangle.angle_gamma == 90.0
        assert triangle.hypotenuse == pytest.approx(math.sqrt(p * p + q * q))

    @pytest.mark.parametrize("legs, name", [((0, 4), "leg1"), ((3, -1), "leg2"), ((3, 1e-11), "leg2")])
    def test_invalid_leg(self, legs, name):
        with pytest.raises(InvalidSideError) as exc_info:
            RightTriangle(*legs)
        assert exc_info.value.parameter_name == name

    def test_immutable(self, triangle):
        with pytest.raises(AttributeError):
            triangle.side_a = 10
        with pytest.raises(AttributeError):
            triangle.hypotenuse = 10

    @pytest.mark.parametrize("p, q", [(1e-3, 1e5), (1e-4, 1e4), (1e4, 1e-4)])
    def test_thin_triangle_keeps_acute_angles(self, p, q):
        """The hypotenuse rounds to the long leg, yet only gamma is right"""
        triangle = RightTriangle(p, q)

        assert [angle == 90.0 for angle in triangle.angles].count(True) == 1
        assert triangle.angle_gamma == 90.0
        assert all(0.0 < angle < 180.0 for angle in triangle.angles)
        assert sum(triangle.angles) == pytest.approx(180.0)

    def test_thin_triangle_small_angle_faces_short_leg(self):
        triangle = RightTriangle(1e-4, 1e4)

        assert triangle.angle_alpha == pytest.approx(math.degrees(1e-8))
        assert triangle.angle_beta < 90.0

    @pytest.mark.parametrize("legs, name", [
        ((math.inf, 1), "leg1"),
        ((1, math.nan), "leg2"),
        ((-math.inf, 1), "leg1"),
    ])
    def test_non_finite_leg(self, legs, name):
        with pytest.raises(InvalidSideError) as exc_info:
            RightTriangle(*legs)
        assert exc_info.value.parameter_name == name
