"""
Tolerance Constants for Triangle Geometry

Centralized location for the numeric margin used by every floating-point
comparison in the package: positivity of sides, equality of sides, the
strict triangle inequality and the 90° boundary.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceConstants:
    """
    Immutable tolerance policy (Immutable Object Pattern)

    A single epsilon is applied uniformly, so two comparisons of the same
    quantities can never disagree about what "equal" means.
    """

    EPSILON: float = 1e-10
    RIGHT_ANGLE_DEG: float = 90.0

    @classmethod
    def is_positive(cls, value: float) -> bool:
        """Check that value is strictly greater than epsilon"""
        return value > cls.EPSILON

    @classmethod
    def is_equal(cls, first: float, second: float) -> bool:
        """
        Check if two lengths are equal within epsilon

        Args:
            first: First value
            second: Second value

        Returns:
            True if |first - second| < epsilon
        """
        return abs(first - second) < cls.EPSILON

    @classmethod
    def exceeds(cls, value: float, bound: float) -> bool:
        """Check that value is greater than bound by more than epsilon"""
        return value > bound + cls.EPSILON

    @classmethod
    def is_near_zero(cls, value):
        """Check that |value| is below epsilon (scalars or numpy arrays)"""
        return abs(value) < cls.EPSILON


# Singleton instance for easy access
TOLERANCE = ToleranceConstants()
