"""Invariants that hold for every constructed triangle"""

import itertools
import pytest
import trigon

VALID_TRIPLES = [
    (3, 4, 5),
    (5, 5, 5),
    (5, 5, 8),
    (8, 5, 5),
    (7, 8, 9),
    (2, 3, 4),
    (6, 7, 8),
    (1, 1, 1.999),
    (0.3, 0.4, 0.2),
    (1000, 999, 2),
    (12.5, 3.25, 10.1),
]


def _all_triangles():
    for sides in VALID_TRIPLES:
        yield trigon.classify(*sides)
    for legs in [(3, 4), (1, 1), (0.2, 9)]:
        yield trigon.make_right(*legs)
    for base, leg in [(8, 5), (6, 5), (1, 10)]:
        yield trigon.make_isosceles(base, leg)
    yield trigon.make_equilateral(7)


ALL_TRIANGLES = list(_all_triangles())


@pytest.mark.parametrize("triangle", ALL_TRIANGLES, ids=repr)
class TestTriangleInvariants:

    def test_angle_sum(self, triangle):
        assert sum(triangle.angles) == pytest.approx(180.0, abs=1e-6)

    def test_angles_in_open_range(self, triangle):
        assert all(0.0 < angle < 180.0 for angle in triangle.angles)

    def test_sides_positive(self, triangle):
        assert all(side > trigon.TOLERANCE.EPSILON for side in triangle.sides)

    def test_larger_side_has_larger_angle(self, triangle):
        pairs = zip(triangle.sides, triangle.angles)
        for (side1, angle1), (side2, angle2) in itertools.combinations(pairs, 2):
            if side1 > side2 + 1e-9:
                assert angle1 > angle2
            elif side2 > side1 + 1e-9:
                assert angle2 > angle1

    def test_perimeter(self, triangle):
        assert triangle.perimeter() == pytest.approx(sum(triangle.sides))

    def test_area_positive_and_stable(self, triangle):
        first = triangle.area()
        assert first > 0
        assert triangle.area().hex() == first.hex()

    def test_variant_matches_class(self, triangle):
        assert triangle.variant == type(triangle).VARIANT


@pytest.mark.parametrize("sides", VALID_TRIPLES)
def test_classify_is_deterministic(sides):
    first = trigon.classify(*sides)
    second = trigon.classify(*sides)

    assert type(first) is type(second)
    assert first.sides == second.sides
    assert first.angles == second.angles
