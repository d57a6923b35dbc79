import logging
import math
from functools import cached_property
from trigon.core import TOLERANCE, TriangleVariant, GeometryError
from trigon.components.angle_solver import AngleSolver
from trigon.components.triangles.base import Triangle
from trigon.validation import SideValidator

logger = logging.getLogger(__name__)


class IsoscelesTriangle(Triangle):
    """
    Isosceles triangle built from its base and leg

    Sides are assigned as (base, leg, leg), so angle_alpha is the apex
    angle and angle_beta == angle_gamma are the base angles.
    """

    VARIANT = TriangleVariant.ISOSCELES

    def __init__(self, base: float, leg: float):
        """
        Initialize isosceles triangle

        Args:
            base: Length of the base (the unequal side)
            leg: Length of each of the two equal sides

        Raises:
            InvalidSideError: If base or leg is not strictly positive
            DegenerateTriangleError: If 2 * leg does not exceed the base
        """
        SideValidator.ensure_positive((base, leg), ("base", "leg"))
        SideValidator.ensure_legs_meet(base, leg)

        super().__init__((base, leg, leg), AngleSolver.solve(base, leg, leg))

    @property
    def base(self) -> float:
        return self.side_a

    @property
    def leg(self) -> float:
        return self.side_b

    @property
    def apex_angle(self) -> float:
        """Get the angle between the legs (opposite the base)"""
        return self.angle_alpha

    def is_apex_angle_obtuse(self) -> bool:
        """Check if the apex angle exceeds 90° by more than the tolerance"""
        return TOLERANCE.exceeds(self.apex_angle, TOLERANCE.RIGHT_ANGLE_DEG)

    def height_to_base(self) -> float:
        """
        Get the height dropped from the apex onto the base

        Returns:
            sqrt(leg² - (base/2)²)

        Raises:
            GeometryError: If the radicand is negative beyond tolerance
        """
        return self._height

    @cached_property
    def _height(self) -> float:
        half_base = self.base / 2
        radicand = self.leg * self.leg - half_base * half_base

        if radicand < -TOLERANCE.EPSILON:
            raise GeometryError(
                quantity="height to base",
                value=radicand,
                details=f"leg² - (base/2)² = {radicand} for base {self.base}, leg {self.leg}"
            )
        if radicand < 0:
            logger.debug(f"Clamped height radicand {radicand:.3e} to zero")

        return math.sqrt(max(0.0, radicand))

    def _compute_area(self) -> float:
        return self.base * self.height_to_base() / 2
