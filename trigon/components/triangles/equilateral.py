import math
from functools import cached_property
from trigon.core import TriangleVariant
from trigon.components.triangles.base import Triangle
from trigon.validation import SideValidator

EQUILATERAL_ANGLE_DEG = 60.0


class EquilateralTriangle(Triangle):
    """Equilateral triangle; all angles are exactly 60° without solving"""

    VARIANT = TriangleVariant.EQUILATERAL

    def __init__(self, side: float):
        """
        Initialize equilateral triangle

        Args:
            side: Length shared by all three sides

        Raises:
            InvalidSideError: If side is not strictly positive
        """
        SideValidator.ensure_positive((side,), ("side",))

        super().__init__(
            (side, side, side),
            (EQUILATERAL_ANGLE_DEG, EQUILATERAL_ANGLE_DEG, EQUILATERAL_ANGLE_DEG)
        )

    @property
    def side(self) -> float:
        return self.side_a

    def height(self) -> float:
        """Get the height: (√3 / 2) * side"""
        return self._height

    @cached_property
    def _height(self) -> float:
        return (math.sqrt(3) / 2) * self.side

    def _compute_area(self) -> float:
        return (math.sqrt(3) / 4) * self.side * self.side
