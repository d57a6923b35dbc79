from itertools import combinations
from trigon.core import TOLERANCE, TriangleVariant, AngleType, ShapeMismatchError, DEFAULT_SIDE_NAMES
from trigon.components.angle_solver import AngleSolver
from trigon.components.triangles.base import Triangle
from trigon.validation import SideValidator


class ScaleneTriangle(Triangle):
    """
    Triangle with three mutually distinct sides

    Area uses Heron's formula from the base class. Classification by angle
    is derived: a triangle that is neither acute nor obtuse is reported as
    right-angled.
    """

    VARIANT = TriangleVariant.SCALENE

    def __init__(self, a: float, b: float, c: float):
        """
        Initialize scalene triangle

        Args:
            a, b, c: Side lengths

        Raises:
            InvalidSideError: If a side is not strictly positive
            DegenerateTriangleError: If the triangle inequality is violated
            ShapeMismatchError: If two sides are equal within tolerance
        """
        SideValidator.ensure_valid(a, b, c)

        sides = (a, b, c)
        for (i, first), (j, second) in combinations(enumerate(sides), 2):
            if TOLERANCE.is_equal(first, second):
                raise ShapeMismatchError(
                    variant=TriangleVariant.SCALENE,
                    sides=sides,
                    details=f"sides {DEFAULT_SIDE_NAMES[i]} and {DEFAULT_SIDE_NAMES[j]} are equal"
                )

        super().__init__(sides, AngleSolver.solve(a, b, c))

    def is_acute(self) -> bool:
        """Check if all angles are below 90° by more than the tolerance"""
        limit = TOLERANCE.RIGHT_ANGLE_DEG - TOLERANCE.EPSILON
        return all(angle < limit for angle in self.angles)

    def is_obtuse(self) -> bool:
        """Check if any angle exceeds 90° by more than the tolerance"""
        return any(TOLERANCE.exceeds(angle, TOLERANCE.RIGHT_ANGLE_DEG) for angle in self.angles)

    def angle_type(self) -> AngleType:
        if self.is_acute():
            return AngleType.ACUTE
        if self.is_obtuse():
            return AngleType.OBTUSE
        return AngleType.RIGHT
