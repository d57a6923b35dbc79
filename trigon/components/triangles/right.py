import logging
import math
from trigon.core import TOLERANCE, TriangleVariant
from trigon.components.angle_solver import AngleSolver
from trigon.components.triangles.base import Triangle
from trigon.validation import SideValidator

logger = logging.getLogger(__name__)

HYPOTENUSE_INDEX = 2


class RightTriangle(Triangle):
    """
    Right triangle built from its two legs

    side_a and side_b are the legs, side_c is the hypotenuse, so
    angle_gamma is the right angle.
    """

    VARIANT = TriangleVariant.RIGHT

    def __init__(self, leg1: float, leg2: float):
        """
        Initialize right triangle

        Args:
            leg1: First leg length
            leg2: Second leg length

        Raises:
            InvalidSideError: If a leg is not a finite positive length
        """
        SideValidator.ensure_positive((leg1, leg2), ("leg1", "leg2"))

        hypotenuse = math.sqrt(leg1 * leg1 + leg2 * leg2)
        sides = (leg1, leg2, hypotenuse)
        angles = list(AngleSolver.solve(*sides))

        # Right angle sits opposite the hypotenuse, never looked up by length
        drift = angles[HYPOTENUSE_INDEX] - TOLERANCE.RIGHT_ANGLE_DEG
        if drift != 0.0:
            logger.debug(f"Corrected right angle drift of {drift:.3e}° for legs ({leg1}, {leg2})")
        angles[HYPOTENUSE_INDEX] = TOLERANCE.RIGHT_ANGLE_DEG

        # Acute angles are complementary, the smaller one taken from the leg ratio
        short_index, long_index = (0, 1) if leg1 <= leg2 else (1, 0)
        smaller = math.degrees(math.atan2(sides[short_index], sides[long_index]))
        angles[short_index] = smaller
        angles[long_index] = TOLERANCE.RIGHT_ANGLE_DEG - smaller

        super().__init__(sides, angles)

    @property
    def leg1(self) -> float:
        return self.side_a

    @property
    def leg2(self) -> float:
        return self.side_b

    @property
    def hypotenuse(self) -> float:
        return self.side_c

    def _compute_area(self) -> float:
        return self.side_a * self.side_b / 2
