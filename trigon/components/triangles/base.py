import math
from abc import ABC
from functools import cached_property
from typing import Iterable, Tuple
from trigon.core import TriangleVariant


class Triangle(ABC):
    """
    Base class for all triangle variants

    Holds three sides and the three angles opposite to them:
    - side_a is opposite angle_alpha
    - side_b is opposite angle_beta
    - side_c is opposite angle_gamma

    Instances are fully built by the subclass constructor and never change
    afterwards. Angles are in degrees.
    """

    VARIANT: TriangleVariant

    def __init__(self, sides: Iterable[float], angles: Iterable[float]):
        """
        Initialize triangle from already validated sides and solved angles

        Args:
            sides: (side_a, side_b, side_c)
            angles: (angle_alpha, angle_beta, angle_gamma) in degrees
        """
        self._sides: Tuple[float, float, float] = tuple(float(side) for side in sides)
        self._angles: Tuple[float, float, float] = tuple(float(angle) for angle in angles)

    @property
    def variant(self) -> TriangleVariant:
        """Get the variant tag fixed at construction"""
        return self.VARIANT

    @property
    def side_a(self) -> float:
        return self._sides[0]

    @property
    def side_b(self) -> float:
        return self._sides[1]

    @property
    def side_c(self) -> float:
        return self._sides[2]

    @property
    def angle_alpha(self) -> float:
        """Get angle opposite side_a in degrees"""
        return self._angles[0]

    @property
    def angle_beta(self) -> float:
        """Get angle opposite side_b in degrees"""
        return self._angles[1]

    @property
    def angle_gamma(self) -> float:
        """Get angle opposite side_c in degrees"""
        return self._angles[2]

    @property
    def sides(self) -> Tuple[float, float, float]:
        return self._sides

    @property
    def angles(self) -> Tuple[float, float, float]:
        return self._angles

    def perimeter(self) -> float:
        """Calculate the perimeter (sum of the three sides)"""
        return self.side_a + self.side_b + self.side_c

    def area(self) -> float:
        """
        Get the triangle area

        Computed on first access and cached; the instance is immutable so
        the cached value never goes stale.
        """
        return self._area

    @cached_property
    def _area(self) -> float:
        return self._compute_area()

    def _compute_area(self) -> float:
        # Heron's formula
        s = self.perimeter() / 2
        return math.sqrt(s * (s - self.side_a) * (s - self.side_b) * (s - self.side_c))

    def __repr__(self) -> str:
        a, b, c = self._sides
        return f"{type(self).__name__}(sides=({a:g}, {b:g}, {c:g}))"
